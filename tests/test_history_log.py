"""Pruebas del historial de operaciones."""

import pytest

from history_log import HistoryLog, format_history_entry
from operations import Operator


class TestFormatHistoryEntry:
    def test_plain_values(self):
        assert format_history_entry(7.0, Operator.ADD, 3.0, 10.0) == "7 + 3 = 10"

    def test_unlocalized_values(self):
        entry = format_history_entry(1234.5, "*", 2.0, 2469.0)
        assert entry == "1234.5 * 2 = 2469"

    def test_non_finite_result(self):
        assert format_history_entry(1.0, "/", 0.0, float("inf")) == "1 / 0 = Infinity"


class TestHistoryLog:
    def test_starts_empty(self):
        history = HistoryLog()
        assert len(history) == 0
        assert history.entries == ()

    def test_newest_first(self):
        history = HistoryLog()
        history.record("1 + 1 = 2")
        history.record("2 * 3 = 6")
        assert history.entries == ("2 * 3 = 6", "1 + 1 = 2")
        assert history[0] == "2 * 3 = 6"
        assert list(history) == ["2 * 3 = 6", "1 + 1 = 2"]

    def test_entries_snapshot_is_read_only(self):
        history = HistoryLog()
        history.record("1 + 1 = 2")
        snapshot = history.entries
        history.record("2 + 2 = 4")
        assert snapshot == ("1 + 1 = 2",)
