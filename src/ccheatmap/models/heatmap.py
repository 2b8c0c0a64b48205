"""Grid and statistics models for the rendered heatmap."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TypeAlias

from pydantic import BaseModel

from ccheatmap.models.activity import Metric

OUTSIDE = -1


@dataclass(slots=True)
class Cell:
    """One day in the heatmap grid."""

    date: date
    value: int = 0
    intensity: int = 0

    @property
    def renderable(self) -> bool:
        return self.intensity != OUTSIDE


# Each week holds seven cells, Sunday first.
Grid: TypeAlias = list[list[Cell]]


@dataclass(frozen=True, slots=True)
class HeatmapOptions:
    """What to draw and how much of it."""

    metric: Metric = Metric.SESSIONS
    days: int = 365
    columns: int = 36
    show_legend: bool = True
    show_stats: bool = True
    show_months: bool = True


class HeatmapStats(BaseModel):
    """Summary statistics for the selected metric."""

    active_days: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    total_value: int = 0
    max_value: int = 0
