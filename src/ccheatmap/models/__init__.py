"""Pydantic models for ccheatmap."""

from ccheatmap.models.activity import (
    ActivityIndex,
    AggregationResult,
    DayActivity,
    Metric,
    UsageRecord,
    merge_index,
)
from ccheatmap.models.heatmap import (
    OUTSIDE,
    Cell,
    Grid,
    HeatmapOptions,
    HeatmapStats,
)

__all__ = [
    "ActivityIndex",
    "AggregationResult",
    "Cell",
    "DayActivity",
    "Grid",
    "HeatmapOptions",
    "HeatmapStats",
    "Metric",
    "UsageRecord",
    "OUTSIDE",
    "merge_index",
]
