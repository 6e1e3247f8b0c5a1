"""Orchestrator: load a poll and compute its live leaderboard."""

import logging

from rankpoll.errors import PollError
from rankpoll.models import PollResults
from rankpoll.polls import normalize_code
from rankpoll.scoring import PointRowTally, RankedBallotTally, ballot_count
from rankpoll.store import PollStore

logger = logging.getLogger(__name__)


class ResultsError(Exception):
    """Error while loading or scoring a poll's results."""
    pass


def load_results(store: PollStore, code: str, raw_ballots: bool = False) -> PollResults:
    """Fetch a poll by room code and score it.

    Args:
        store: Connected poll store
        code: Room code (case-insensitive)
        raw_ballots: Score the stored rankings directly instead of the
            store's pre-scored rows

    Returns:
        PollResults with ranked rows and the derived ballot count

    Raises:
        ResultsError: If the poll does not exist, the store fails, or the
            poll's point scheme does not fit its options
    """
    code = normalize_code(code)
    if not code:
        raise ResultsError("Missing room code")

    try:
        poll = store.get_poll(code)
    except PollError as e:
        raise ResultsError(f"Could not load poll {code}: {e}") from e
    if poll is None:
        raise ResultsError(f"No poll found with code {code}")

    tally = RankedBallotTally() if raw_ballots else PointRowTally()
    try:
        if raw_ballots:
            records = store.get_ballots(poll.id)
        else:
            records = store.get_result_rows(poll.id)
        rows = tally.aggregate(poll.options, poll.point_scheme, records)
    except PollError as e:
        raise ResultsError(f"Could not score poll {code}: {e}") from e
    count = len(records) if raw_ballots else ballot_count(rows, poll.point_scheme)

    logger.debug("Scored poll %s: %d options, %d ballots", code, len(rows), count)
    return PollResults(
        poll=poll,
        rows=rows,
        ballots=count,
        details={
            "source": tally.name,
            "max_possible": (poll.point_scheme[0] if poll.point_scheme else 0) * count,
        },
    )

