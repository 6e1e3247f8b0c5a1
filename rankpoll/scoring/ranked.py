"""Scoring of raw ranked ballots."""

from collections.abc import Sequence

from rankpoll.scoring.base import TallySource


class RankedBallotTally(TallySource):
    """Scores complete rankings directly from rank position.

    The option at position i of a ballot receives weights[i]. Entries that
    are not option strings of this poll are dropped, and positions past the end of the point scheme
    score nothing, so short, long or partly corrupt ballots still count for
    whatever they validly contain.
    """

    @property
    def name(self) -> str:
        return "ballots"

    def add(self, totals, weights: Sequence[int | float], record) -> None:
        if isinstance(record, str) or not isinstance(record, Sequence):
            return
        for position, option in enumerate(record[:len(weights)]):
            if isinstance(option, str) and option in totals:
                totals[option] += weights[position]
