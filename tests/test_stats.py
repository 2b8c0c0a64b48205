"""Tests for totals and streak statistics."""

from __future__ import annotations

from datetime import date

from ccheatmap.models import DayActivity, Metric
from ccheatmap.models.activity import ActivityIndex
from ccheatmap.services.stats import compute_stats


def _index(*days: str, tokens: int = 10) -> ActivityIndex:
    return {
        day: DayActivity(session_ids={"p/s"}, interaction_count=1, token_total=tokens)
        for day in days
    }


class TestStreaks:
    def test_gap_breaks_streak(self) -> None:
        index = _index("2024-01-01", "2024-01-02", "2024-01-03", "2024-01-05")
        stats = compute_stats(index, Metric.SESSIONS, today=date(2024, 1, 5))
        assert stats.longest_streak == 3
        assert stats.current_streak == 1

    def test_streak_ending_yesterday_is_current(self) -> None:
        index = _index("2024-01-01", "2024-01-02", "2024-01-03")
        stats = compute_stats(index, Metric.SESSIONS, today=date(2024, 1, 4))
        assert stats.current_streak == 3
        assert stats.longest_streak == 3

    def test_stale_streak_is_not_current(self) -> None:
        index = _index("2024-01-01", "2024-01-02")
        stats = compute_stats(index, Metric.SESSIONS, today=date(2024, 1, 4))
        assert stats.current_streak == 0
        assert stats.longest_streak == 2

    def test_future_days_do_not_hide_current_streak(self) -> None:
        index = _index("2024-01-04", "2024-01-05", "2024-01-06")
        stats = compute_stats(index, Metric.SESSIONS, today=date(2024, 1, 5))
        assert stats.current_streak == 2
        assert stats.longest_streak == 3
        assert stats.active_days == 3

    def test_only_future_activity_is_not_current(self) -> None:
        index = _index("2024-01-07", "2024-01-08")
        stats = compute_stats(index, Metric.SESSIONS, today=date(2024, 1, 5))
        assert stats.current_streak == 0
        assert stats.longest_streak == 2

    def test_streak_spans_month_and_leap_day(self) -> None:
        index = _index("2024-02-28", "2024-02-29", "2024-03-01")
        stats = compute_stats(index, Metric.SESSIONS, today=date(2024, 3, 1))
        assert stats.longest_streak == 3
        assert stats.current_streak == 3

    def test_zero_value_days_break_streak(self) -> None:
        index = _index("2024-01-01", "2024-01-03")
        index["2024-01-02"] = DayActivity(session_ids={"p/s"}, interaction_count=1, token_total=0)
        tokens = compute_stats(index, Metric.TOKENS, today=date(2024, 1, 3))
        sessions = compute_stats(index, Metric.SESSIONS, today=date(2024, 1, 3))
        assert tokens.longest_streak == 1
        assert tokens.active_days == 2
        assert sessions.longest_streak == 3
        assert sessions.active_days == 3


class TestTotals:
    def test_totals_and_max(self) -> None:
        index = {
            "2024-01-01": DayActivity(
                session_ids={"a/1", "a/2"}, interaction_count=4, token_total=500
            ),
            "2024-01-02": DayActivity(session_ids={"a/1"}, interaction_count=9, token_total=100),
        }
        stats = compute_stats(index, Metric.INTERACTIONS, today=date(2024, 1, 2))
        assert stats.active_days == 2
        assert stats.total_value == 13
        assert stats.max_value == 9

        tokens = compute_stats(index, Metric.TOKENS, today=date(2024, 1, 2))
        assert tokens.total_value == 600
        assert tokens.max_value == 500

    def test_empty_index(self) -> None:
        stats = compute_stats({}, Metric.SESSIONS, today=date(2024, 1, 1))
        assert stats.model_dump() == {
            "active_days": 0,
            "current_streak": 0,
            "longest_streak": 0,
            "total_value": 0,
            "max_value": 0,
        }
