"""Core data models for polls, ballots and results."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Self

# A ballot is one voter's complete ranking of the options, best to worst.
Ballot = list[str]


def _parse_timestamp(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        # PostgREST emits "2025-01-01T12:00:00+00:00" or a trailing "Z"
        dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def coerce_points(value: Any) -> int | float:
    """Numeric value of a stored points cell; anything unusable counts as 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if not math.isfinite(number):
        return 0
    if isinstance(value, float):
        return value
    return int(number) if number.is_integer() else number


@dataclass
class Poll:
    """A poll open for ranked voting.

    Attributes:
        id: Store identifier (UUID string)
        code: Six-character room code shared with voters
        title: Question shown to voters
        options: Display strings in the host's order
        point_scheme: Points per rank position (index 0 = first choice)
        closes_at: When voting stops
        expires_at: When the room disappears entirely
    """
    id: str
    code: str
    title: str
    options: list[str]
    point_scheme: list[int]
    closes_at: datetime | None = None
    expires_at: datetime | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Self:
        """Build a Poll from a ``polls`` row returned by the store."""
        options = row.get("options")
        scheme = row.get("point_scheme")
        return cls(
            id=str(row["id"]),
            code=str(row.get("code") or "").upper(),
            title=row.get("title") or "",
            options=[str(o) for o in options] if isinstance(options, list) else [],
            point_scheme=[coerce_points(n) for n in scheme] if isinstance(scheme, list) else [],
            closes_at=_parse_timestamp(row.get("closes_at")),
            expires_at=_parse_timestamp(row.get("expires_at")),
        )

    def status(self, now: datetime | None = None) -> str:
        """Return "open", "closed" or "expired" at the given moment."""
        now = now or datetime.now(timezone.utc)
        if self.expires_at is not None and now >= self.expires_at:
            return "expired"
        if self.closes_at is not None and now >= self.closes_at:
            return "closed"
        return "open"

    def time_left(self, now: datetime | None = None) -> timedelta:
        """Time until voting closes, never negative."""
        if self.closes_at is None:
            return timedelta(0)
        now = now or datetime.now(timezone.utc)
        return max(timedelta(0), self.closes_at - now)


@dataclass
class CollectPoll:
    """A room in the collect-options phase, before voting opens."""
    id: str
    code: str
    title: str
    max_per_user: int = 3

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Self:
        try:
            max_per_user = int(row.get("max_per_user") or 3)
        except (TypeError, ValueError):
            max_per_user = 3
        return cls(
            id=str(row["id"]),
            code=str(row.get("code") or "").upper(),
            title=row.get("title") or "",
            max_per_user=min(max(max_per_user, 1), 10),
        )


@dataclass
class PointRow:
    """A pre-scored ballot contribution, as stored in ``poll_results``."""
    poll_id: str
    option: str
    points: int | float

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Self:
        return cls(
            poll_id=str(row.get("poll_id", "")),
            option=str(row.get("option", "")),
            points=coerce_points(row.get("points")),
        )


@dataclass
class ResultRow:
    """One option's line on the leaderboard.

    Attributes:
        option: Option display string
        points: Total points awarded across all ballots
        rank: 1-indexed placement (equal points share the same rank)
        tied: Whether another option has exactly the same points
    """
    option: str
    points: int | float
    rank: int
    tied: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "option": self.option,
            "points": self.points,
            "rank": self.rank,
            "tied": self.tied,
        }

    @classmethod
    def build_rows(cls, ordered: list[tuple[str, int | float]]) -> list[Self]:
        """Build ranked rows from (option, points) pairs already in final order.

        A row whose points equal its predecessor's shares the predecessor's
        rank; otherwise its rank is its 1-indexed position. Every member of
        an equal-points block is flagged as tied.
        """
        rows: list[Self] = []
        for index, (option, points) in enumerate(ordered):
            if rows and points == rows[-1].points:
                rows[-1].tied = True
                rows.append(cls(option=option, points=points, rank=rows[-1].rank, tied=True))
            else:
                rows.append(cls(option=option, points=points, rank=index + 1, tied=False))
        return rows


@dataclass
class PollResults:
    """Everything the results page shows for one poll."""
    poll: Poll
    rows: list[ResultRow]
    ballots: int
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def total_points(self) -> int | float:
        return sum(r.points for r in self.rows)

    def to_dict(self, now: datetime | None = None) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "code": self.poll.code,
            "title": self.poll.title,
            "status": self.poll.status(now),
            "options": self.poll.options,
            "point_scheme": self.poll.point_scheme,
            "ballots": self.ballots,
            "total_points": self.total_points,
            "results": [r.to_dict() for r in self.rows],
            "details": self.details,
        }
