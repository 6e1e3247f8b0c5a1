"""Abstract base class for tally sources and the shared ranking step."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any

from rankpoll.errors import ConfigurationError
from rankpoll.models import ResultRow


def check_scheme(options: Sequence[str], weights: Sequence[int | float]) -> None:
    """Fail fast if the point scheme cannot belong to this option set."""
    if options and not weights:
        raise ConfigurationError(
            f"Poll has {len(options)} options but an empty point scheme"
        )
    if len(weights) != len(options):
        raise ConfigurationError(
            f"Point scheme has {len(weights)} weights for {len(options)} options"
        )


def rank_totals(totals: dict[str, int | float]) -> list[ResultRow]:
    """Order per-option totals into leaderboard rows.

    Sorted by points (highest first), then by option string so that equal
    scores still come out in a fixed order.
    """
    ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return ResultRow.build_rows(ordered)


class TallySource(ABC):
    """Abstract base class for turning stored votes into per-option totals.

    The store can hand back votes in different shapes. Each subclass knows
    how to fold one shape into a totals dict; ranking, tie-breaking and tie
    flags are always done by :func:`rank_totals` so every shape follows the
    same rules.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for this input shape."""
        pass

    @abstractmethod
    def add(self, totals: dict[str, int | float], weights: Sequence[int | float], record: Any) -> None:
        """Fold one record into the running totals.

        Records that reference unknown options must be skipped rather than
        raising: one corrupt row never blanks out a whole room's results.
        """
        pass

    def tally(
        self,
        options: Sequence[str],
        weights: Sequence[int | float],
        records: Iterable[Any],
    ) -> dict[str, int | float]:
        """Sum every record into a totals dict keyed by option, in option order."""
        check_scheme(options, weights)
        totals: dict[str, int | float] = {option: 0 for option in options}
        for record in records:
            self.add(totals, weights, record)
        return totals

    def aggregate(
        self,
        options: Sequence[str],
        weights: Sequence[int | float],
        records: Iterable[Any],
    ) -> list[ResultRow]:
        """Tally the records and return ranked leaderboard rows."""
        check_scheme(options, weights)
        if not options:
            return []
        return rank_totals(self.tally(options, weights, records))
