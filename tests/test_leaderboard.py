"""Tests for top-N leaderboard selection."""

from builders import make_entries
from roundcast.leaderboard import top_n


class TestTopN:
    def test_truncates_in_order(self):
        entries = make_entries(5)
        assert top_n(entries, 3) == list(entries[:3])

    def test_short_list_not_padded(self):
        entries = make_entries(1)
        assert top_n(entries, 3) == [entries[0]]

    def test_empty(self):
        assert top_n([], 3) == []

    def test_default_n(self):
        assert len(top_n(make_entries(10))) == 3

    def test_never_resorts(self):
        entries = tuple(reversed(make_entries(4)))
        assert top_n(entries, 2) == list(entries[:2])

    def test_non_positive_n(self):
        assert top_n(make_entries(3), 0) == []
        assert top_n(make_entries(3), -1) == []
