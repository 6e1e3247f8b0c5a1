"""Points-based aggregation of ranked-choice ballots."""

import math
from collections.abc import Iterable, Sequence
from typing import Any

from rankpoll.models import Ballot, ResultRow
from rankpoll.scoring.base import TallySource, check_scheme, rank_totals
from rankpoll.scoring.points import PointRowTally
from rankpoll.scoring.ranked import RankedBallotTally

__all__ = [
    "PointRowTally",
    "RankedBallotTally",
    "TallySource",
    "aggregate",
    "aggregate_points",
    "ballot_count",
    "check_scheme",
    "default_point_scheme",
    "rank_totals",
]


def default_point_scheme(n: int) -> list[int]:
    """Points per rank for an n-option poll: 2n for first, down to 2 for last."""
    return [2 * (n - i) for i in range(max(n, 0))]


def aggregate(
    options: Sequence[str],
    weights: Sequence[int | float],
    ballots: Iterable[Ballot],
) -> list[ResultRow]:
    """Score raw ballots and return the ranked leaderboard.

    Args:
        options: The poll's option set, in host order
        weights: Points per rank position, same length as options
        ballots: Rankings, best to worst

    Returns:
        One ResultRow per option, sorted by points then option string

    Raises:
        ConfigurationError: If weights do not match the option set
    """
    return RankedBallotTally().aggregate(options, weights, ballots)


def aggregate_points(
    options: Sequence[str],
    weights: Sequence[int | float],
    rows: Iterable[Any],
) -> list[ResultRow]:
    """Sum pre-scored point rows and return the ranked leaderboard."""
    return PointRowTally().aggregate(options, weights, rows)


def ballot_count(rows: Iterable[ResultRow], weights: Sequence[int | float]) -> int:
    """Recover how many ballots produced these totals.

    Every complete ballot hands out exactly sum(weights) points, so the
    count is total points divided by that sum. This is only accurate while
    every stored ballot ranked every option under the current point scheme;
    if the scheme or the option list changed after votes were cast the
    result drifts.
    """
    weight_sum = sum(weights)
    if not weight_sum:
        return 0
    total = sum(r.points for r in rows)
    # Half rounds up, not to even
    return math.floor(total / weight_sum + 0.5)
