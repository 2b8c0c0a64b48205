"""Render the calendar grid, legend and statistics as styled terminal text."""

from __future__ import annotations

from collections import Counter
from datetime import date

from rich.text import Text

from ccheatmap.models.activity import Metric
from ccheatmap.models.heatmap import Grid, HeatmapStats
from ccheatmap.services.grid import CELL_WIDTH
from ccheatmap.ui.theme import (
    BLANK,
    CELL_GLYPH,
    DAY_LABELS,
    INDENT,
    INTENSITY_STYLES,
    STYLES,
    format_number,
)

# A week only gets a month label once that month covers most of it.
_MONTH_MIN_DAYS = 4


def render_title(metric: Metric) -> Text:
    return Text(f"{INDENT}Claude Code Activity - {metric.label}", style=STYLES["title"])


def render_month_labels(grid: Grid) -> Text:
    """The dominant month's number above the first week it covers.

    Each label starts over its own week column; two-digit months spill into
    the spacer after it.
    """
    line = [BLANK] * (CELL_WIDTH * len(grid) - 1)
    last_month = 0
    for column, week in enumerate(grid):
        counts = Counter(cell.date.month for cell in week if cell.renderable)
        if not counts:
            continue
        month, count = counts.most_common(1)[0]
        if month == last_month or count < _MONTH_MIN_DAYS:
            continue
        start = CELL_WIDTH * column
        label = str(month)
        line[start : start + len(label)] = label
        last_month = month
    return Text(INDENT + "".join(line))


def render_grid(grid: Grid, today: date) -> Text:
    """Seven rows, Sunday first, one glyph per week."""
    text = Text()
    for row, label in enumerate(DAY_LABELS):
        if row:
            text.append("\n")
        text.append("    ")
        text.append(label, style=STYLES["label"])
        for week in grid:
            cell = week[row]
            text.append(" ")
            if not cell.renderable:
                text.append(BLANK)
                continue
            style = INTENSITY_STYLES[cell.intensity]
            if cell.date == today:
                style = f"{style} {STYLES['today']}"
            text.append(CELL_GLYPH, style=style)
    return text


def render_legend() -> Text:
    text = Text(f"{INDENT}Less ")
    for style in INTENSITY_STYLES:
        text.append(" ")
        text.append(CELL_GLYPH, style=style)
    text.append("  More")
    return text


def render_stats(stats: HeatmapStats, metric: Metric) -> Text:
    unit = metric.label.lower()
    text = Text(INDENT)
    text.append("Statistics:", style=STYLES["heading"])
    text.append(f"\n{INDENT}")
    text.append("Active:", style=STYLES["key"])
    text.append(f" {stats.active_days} days  ")
    text.append("Streak:", style=STYLES["key"])
    text.append(f" {stats.current_streak}/{stats.longest_streak} days")
    text.append(f"\n{INDENT}")
    text.append(f"Total {unit}:", style=STYLES["key"])
    text.append(f" {format_number(stats.total_value)}  ")
    text.append("Max:", style=STYLES["key"])
    text.append(f" {format_number(stats.max_value)} {unit}/day")
    return text


def render_heatmap(
    grid: Grid,
    stats: HeatmapStats,
    metric: Metric,
    *,
    today: date,
    show_months: bool = True,
    show_legend: bool = True,
    show_stats: bool = True,
) -> Text:
    """Assemble title, month labels, grid, legend and stats into one block."""
    parts: list[Text] = [Text(), render_title(metric), Text()]
    if show_months:
        parts.append(render_month_labels(grid))
    parts.append(render_grid(grid, today))
    if show_legend:
        parts.extend([Text(), render_legend()])
    if show_stats:
        parts.extend([Text(), render_stats(stats, metric)])
    return Text("\n").join(parts)
