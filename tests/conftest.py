"""Shared test helpers."""

from rankpoll.models import ResultRow


class FixedSource:
    """Random source that replays a fixed list of values, cycling if needed."""

    def __init__(self, values: list[float]):
        self.values = values
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


def result_table(rows: list[ResultRow]) -> list[tuple[str, int, int, bool]]:
    """Flatten result rows into (option, points, rank, tied) tuples."""
    return [(r.option, r.points, r.rank, r.tied) for r in rows]


def ranking_options(rows: list[ResultRow]) -> list[str]:
    """Option names in leaderboard order."""
    return [r.option for r in rows]
