"""Totals and streaks for the selected metric."""

from __future__ import annotations

from datetime import date, timedelta

from ccheatmap.data.aggregator import utc_today
from ccheatmap.models.activity import ActivityIndex, Metric
from ccheatmap.models.heatmap import HeatmapStats


def compute_stats(
    index: ActivityIndex,
    metric: Metric,
    *,
    today: date | None = None,
) -> HeatmapStats:
    """Compute active days, totals and streaks over ``index``.

    A streak is a run of calendar-consecutive active days. The run holding
    the latest active day up to ``today`` is current if that day is today or
    yesterday. Days after ``today`` are counted in totals but not in it.
    """
    today = today or utc_today()
    stats = HeatmapStats()
    active: list[date] = []

    for key in sorted(index):
        value = index[key].value(metric)
        if value <= 0:
            continue
        stats.active_days += 1
        stats.total_value += value
        stats.max_value = max(stats.max_value, value)
        active.append(date.fromisoformat(key))

    run = current_run = 0
    previous: date | None = None
    current_end: date | None = None
    for day in active:
        if previous is not None and day - previous == timedelta(days=1):
            run += 1
        else:
            run = 1
        stats.longest_streak = max(stats.longest_streak, run)
        # Future-dated activity never extends the current streak.
        if day <= today:
            current_run, current_end = run, day
        previous = day

    if current_end is not None and current_end >= today - timedelta(days=1):
        stats.current_streak = current_run
    return stats
