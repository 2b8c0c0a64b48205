"""Calendar grid construction and quartile-based intensity levels."""

from __future__ import annotations

from datetime import date, timedelta

from ccheatmap.data.aggregator import utc_today
from ccheatmap.models.activity import ActivityIndex, Metric
from ccheatmap.models.heatmap import OUTSIDE, Cell, Grid

# "    Sun " precedes the first column; every week adds a glyph and a space.
LABEL_WIDTH = 8
CELL_WIDTH = 2


def columns_for_width(width: int) -> int:
    """Number of week columns that fit in a terminal ``width`` characters wide."""
    return max(1, (width - LABEL_WIDTH + 1) // CELL_WIDTH)


def start_of_week(day: date) -> date:
    """Sunday on or before ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def build_grid(
    index: ActivityIndex,
    days: int,
    metric: Metric,
    columns: int,
    *,
    today: date | None = None,
) -> Grid:
    """Lay out the last ``days`` days as whole Sunday-start weeks.

    Padding before the window and days after ``today`` are marked ``OUTSIDE``.
    When more weeks exist than ``columns`` allows, the oldest are dropped.
    """
    end = today or utc_today()
    start = end - timedelta(days=days - 1)
    last = start_of_week(end) + timedelta(days=6)

    weeks: Grid = []
    week_start = start_of_week(start)
    while week_start <= last:
        week: list[Cell] = []
        for offset in range(7):
            day = week_start + timedelta(days=offset)
            if day > end or day < start:
                week.append(Cell(date=day, value=0, intensity=OUTSIDE))
                continue
            activity = index.get(day.isoformat())
            value = activity.value(metric) if activity is not None else 0
            week.append(Cell(date=day, value=value))
        weeks.append(week)
        week_start += timedelta(days=7)

    if len(weeks) > columns:
        weeks = weeks[len(weeks) - columns :]
    return weeks


def quartiles(values: list[int]) -> tuple[int, int, int]:
    """Floor-indexed 25th/50th/75th percentile values of a non-empty list."""
    ordered = sorted(values)
    n = len(ordered)
    return ordered[int(n * 0.25)], ordered[int(n * 0.5)], ordered[int(n * 0.75)]


def intensity_for(value: int, breaks: tuple[int, int, int]) -> int:
    if value <= 0:
        return 0
    q1, q2, q3 = breaks
    if value <= q1:
        return 1
    if value <= q2:
        return 2
    if value <= q3:
        return 3
    return 4


def classify(grid: Grid) -> None:
    """Assign intensity levels 0-4 in place to every renderable cell."""
    values = [cell.value for week in grid for cell in week if cell.renderable and cell.value > 0]
    if not values:
        return

    breaks = quartiles(values)
    for week in grid:
        for cell in week:
            if cell.renderable:
                cell.intensity = intensity_for(cell.value, breaks)
