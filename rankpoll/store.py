"""Thin client for the hosted poll database (PostgREST API)."""

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from rankpoll.config import StoreConfig
from rankpoll.errors import StoreError
from rankpoll.models import CollectPoll, Poll, PointRow

logger = logging.getLogger(__name__)


class PollStore:
    """Reads and writes polls, votes and collect rooms.

    All validation that matters (unique options, PIN checks, closing times)
    happens inside the database; this class only shapes requests and turns
    failures into StoreError.

    Example:
        >>> with PollStore(StoreConfig.from_env()) as store:  # doctest: +SKIP
        ...     poll = store.get_poll("7RUVKS")
    """

    def __init__(self, config: StoreConfig, client: httpx.Client | None = None):
        self.config = config
        self._client = client or httpx.Client(
            base_url=config.url,
            timeout=config.timeout,
            follow_redirects=True,
        )
        self._client.headers.update({
            "apikey": config.anon_key,
            "Authorization": f"Bearer {config.anon_key}",
        })

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("%s %s failed with HTTP %s", method, path, e.response.status_code)
            raise StoreError(f"Store returned HTTP {e.response.status_code} for {path}") from e
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise StoreError(f"Error contacting store: {e}") from e

        if not response.content:
            return None
        return response.json()

    def _select(self, table: str, **filters: str) -> list[dict[str, Any]]:
        params = {"select": "*"}
        params.update({column: f"eq.{value}" for column, value in filters.items()})
        data = self._request("GET", f"/rest/v1/{table}", params=params)
        return data if isinstance(data, list) else []

    def _rpc(self, function: str, args: dict[str, Any]) -> Any:
        return self._request("POST", f"/rest/v1/rpc/{function}", json=args)

    # ----- Voting flow -----

    def get_poll(self, code: str) -> Poll | None:
        rows = self._select("polls", code=code)
        return Poll.from_row(rows[0]) if rows else None

    def get_result_rows(self, poll_id: str) -> list[PointRow]:
        """Pre-scored (poll_id, option, points) rows for a poll."""
        return [PointRow.from_row(r) for r in self._select("poll_results", poll_id=poll_id)]

    def get_ballots(self, poll_id: str) -> list[list[str]]:
        """Raw rankings for a poll, skipping rows without a usable ranks list."""
        ballots = []
        for row in self._select("votes", poll_id=poll_id):
            ranks = row.get("ranks")
            if isinstance(ranks, list):
                ballots.append([str(r) for r in ranks])
        return ballots

    def submit_ballot(self, poll_id: str, ranks: Sequence[str]) -> None:
        logger.info("Submitting ballot for poll %s", poll_id)
        self._request(
            "POST",
            "/rest/v1/votes",
            json={"poll_id": poll_id, "ranks": list(ranks)},
            headers={"Prefer": "return=minimal"},
        )

    # ----- Collect flow -----

    def get_collect_poll(self, code: str) -> CollectPoll | None:
        rows = self._select("collect_polls", code=code)
        return CollectPoll.from_row(rows[0]) if rows else None

    def add_collect_options(self, code: str, texts: Sequence[str | None], client_id: str) -> CollectPoll:
        """Add a participant's suggestions to a collect room.

        Blank entries are dropped; the database rejects duplicates and
        enforces max_per_user per client id.

        Raises:
            StoreError: If the room does not exist or the store rejects the options
        """
        poll = self.get_collect_poll(code)
        if poll is None:
            raise StoreError(f"No collect room with code {code}")
        clean = [t.strip() for t in texts if t and t.strip()]
        self._rpc("collect_add_options", {
            "_poll_id": poll.id,
            "_client": client_id,
            "_options": clean,
        })
        return poll

    def verify_pin(self, code: str, pin: str) -> bool:
        return bool(self._rpc("collect_verify_pin", {"_code": code, "_pin": pin}))

    def finalize_collect(self, code: str, pin: str | None = None) -> Any:
        """Close option collection and open the room for voting."""
        logger.info("Finalizing collect room %s", code)
        return self._rpc("collect_finalize_to_voting", {"_code": code, "_pin": pin or None})
