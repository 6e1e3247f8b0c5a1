"""Shared fixtures for scoring tests."""

import pytest
from rankpoll.models import PointRow


@pytest.fixture
def three_way():
    """Three options, default scheme (6, 4, 2), three ballots.

             B1  B2  B3
    A         1   1   2
    B         2   3   1
    C         3   2   3

    Points: A = 6+6+4 = 16, B = 4+2+6 = 12, C = 2+4+2 = 8
    """
    options = ["A", "B", "C"]
    weights = [6, 4, 2]
    ballots = [
        ["A", "B", "C"],
        ["A", "C", "B"],
        ["B", "A", "C"],
    ]
    return options, weights, ballots


@pytest.fixture
def split_pair():
    """Two options, two opposite ballots: both end on 6 points."""
    return ["A", "B"], [4, 2], [["A", "B"], ["B", "A"]]


@pytest.fixture
def tie_blocks():
    """Pre-scored rows totalling A=10, B=10, C=8, D=8, E=8, F=5."""
    totals = {"A": 10, "B": 10, "C": 8, "D": 8, "E": 8, "F": 5}
    rows = []
    for option, points in totals.items():
        # Split each total across two rows to exercise grouping
        rows.append(PointRow(poll_id="p1", option=option, points=points - 1))
        rows.append(PointRow(poll_id="p1", option=option, points=1))
    return list(totals), [12, 10, 8, 6, 4, 2], rows
