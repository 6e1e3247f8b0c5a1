"""Scoring of pre-aggregated point rows."""

from collections.abc import Mapping

from rankpoll.models import PointRow, coerce_points
from rankpoll.scoring.base import TallySource


class PointRowTally(TallySource):
    """Sums rows that already carry their points, grouped by option.

    Used when the store pre-scores each ballot into one
    ``(poll_id, option, points)`` row per option. Accepts ``PointRow``
    instances or plain mappings with ``option`` and ``points`` keys.
    """

    @property
    def name(self) -> str:
        return "points"

    def add(self, totals, weights, record) -> None:
        if isinstance(record, PointRow):
            option, points = record.option, coerce_points(record.points)
        elif isinstance(record, Mapping):
            option, points = record.get("option"), coerce_points(record.get("points"))
        else:
            return
        if isinstance(option, str) and option in totals:
            totals[option] += points
