"""Tests for scoring raw ranked ballots."""

import pytest
from tests.conftest import ranking_options, result_table

from rankpoll.errors import ConfigurationError
from rankpoll.scoring import RankedBallotTally, aggregate


class TestAggregate:
    def test_three_way(self, three_way):
        rows = aggregate(*three_way)
        assert result_table(rows) == [
            ("A", 16, 1, False),
            ("B", 12, 2, False),
            ("C", 8, 3, False),
        ]

    def test_split_pair_ties(self, split_pair):
        """A gets 4+2, B gets 2+4: both rank 1, tied."""
        rows = aggregate(*split_pair)
        assert result_table(rows) == [
            ("A", 6, 1, True),
            ("B", 6, 1, True),
        ]

    def test_zero_ballots(self):
        rows = aggregate(["A", "B", "C"], [6, 4, 2], [])
        assert result_table(rows) == [
            ("A", 0, 1, True),
            ("B", 0, 1, True),
            ("C", 0, 1, True),
        ]

    def test_option_order_tiebreak(self):
        """Equal points sort by option string, whatever the input order."""
        options = ["Banana", "Apple"]
        ballots = [["Banana", "Apple"], ["Apple", "Banana"]]
        assert ranking_options(aggregate(options, [4, 2], ballots)) == ["Apple", "Banana"]
        assert ranking_options(aggregate(options[::-1], [4, 2], ballots[::-1])) == ["Apple", "Banana"]

    def test_tiebreak_is_case_sensitive(self):
        """Ordinal comparison: upper-case letters sort before lower-case."""
        rows = aggregate(["apple", "Banana"], [2, 2], [["apple", "Banana"]])
        assert ranking_options(rows) == ["Banana", "apple"]

    def test_unreferenced_option_scores_zero(self):
        rows = aggregate(["A", "B", "C"], [6, 4, 2], [["A", "B"]])
        assert result_table(rows)[-1] == ("C", 0, 3, False)

    def test_weights_need_not_decrease(self):
        rows = aggregate(["A", "B"], [1, 5], [["A", "B"]])
        assert ranking_options(rows) == ["B", "A"]

    def test_tuple_ballots(self, three_way):
        options, weights, ballots = three_way
        rows = aggregate(options, weights, (tuple(b) for b in ballots))
        assert [r.points for r in rows] == [16, 12, 8]

    def test_ballots_not_modified(self, three_way):
        options, weights, ballots = three_way
        before = [list(b) for b in ballots]
        aggregate(options, weights, ballots)
        assert ballots == before


class TestMalformedBallots:
    def test_unknown_option_dropped(self):
        rows = aggregate(["A", "B", "C"], [6, 4, 2], [["A", "Z", "B"]])
        assert result_table(rows) == [
            ("A", 6, 1, False),
            ("B", 2, 2, False),
            ("C", 0, 3, False),
        ]

    def test_unknown_option_keeps_other_ballots(self, three_way):
        options, weights, ballots = three_way
        rows = aggregate(options, weights, ballots + [["Q", "R", "S"]])
        assert [r.points for r in rows] == [16, 12, 8]

    def test_long_ballot_truncated(self):
        rows = aggregate(["A", "B", "C"], [6, 4, 2], [["A", "B", "C", "A"]])
        assert [r.points for r in rows] == [6, 4, 2]

    def test_short_ballot_scores_what_it_has(self):
        rows = aggregate(["A", "B", "C"], [6, 4, 2], [["C"]])
        assert result_table(rows) == [
            ("C", 6, 1, False),
            ("A", 0, 2, True),
            ("B", 0, 2, True),
        ]

    def test_non_sequence_records_skipped(self, three_way):
        options, weights, ballots = three_way
        rows = aggregate(options, weights, ballots + [None, 42, "ABC"])
        assert [r.points for r in rows] == [16, 12, 8]

    def test_unhashable_entries_skipped(self):
        """A list or dict inside a ballot is dropped, the rest still scores."""
        rows = aggregate(["A", "B"], [4, 2], [["A", "B"], [["A"], "B"], [{"A": 1}, "A"]])
        assert result_table(rows) == [
            ("A", 6, 1, False),
            ("B", 4, 2, False),
        ]

    def test_non_string_entries_skipped(self):
        rows = aggregate(["A", "B"], [4, 2], [[None, "A"], [1, 2]])
        assert [(r.option, r.points) for r in rows] == [("A", 2), ("B", 0)]


class TestConfiguration:
    def test_empty_options(self):
        assert aggregate([], [], [["A"]]) == []

    def test_weights_without_options(self):
        with pytest.raises(ConfigurationError):
            aggregate([], [4, 2], [])

    def test_empty_weights(self):
        with pytest.raises(ConfigurationError, match="empty point scheme"):
            aggregate(["A", "B"], [], [["A", "B"]])

    def test_length_mismatch(self):
        with pytest.raises(ConfigurationError, match="3 weights for 2 options"):
            aggregate(["A", "B"], [6, 4, 2], [])

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            aggregate(["A"], [], [])


class TestRankedBallotTally:
    def setup_method(self):
        self.tally = RankedBallotTally()

    def test_name(self):
        assert self.tally.name == "ballots"

    def test_totals_keep_option_order(self, three_way):
        totals = self.tally.tally(*three_way)
        assert list(totals.items()) == [("A", 16), ("B", 12), ("C", 8)]
