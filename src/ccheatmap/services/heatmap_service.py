"""Heatmap service — scan, lay out, classify and render."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from result import Err, Ok, Result
from rich.text import Text

from ccheatmap.data.aggregator import aggregate, utc_today
from ccheatmap.models.activity import ActivityIndex, AggregationResult
from ccheatmap.models.heatmap import HeatmapOptions
from ccheatmap.services.export_service import export_activity_json
from ccheatmap.services.grid import build_grid, classify, columns_for_width
from ccheatmap.services.stats import compute_stats
from ccheatmap.ui.heatmap import render_heatmap

if TYPE_CHECKING:
    from ccheatmap.config import Config

logger = logging.getLogger(__name__)

NO_DATA = "No Claude Code usage data found."


class HeatmapService:
    """Runs the scan-to-text pipeline for one configuration."""

    def __init__(self, config: Config, *, today: date | None = None) -> None:
        self._config = config
        self._today = today or utc_today()

    @property
    def options(self) -> HeatmapOptions:
        return HeatmapOptions(
            metric=self._config.metric,
            days=self._config.days,
            columns=columns_for_width(self._config.width),
            show_legend=self._config.show_legend,
            show_stats=self._config.show_stats,
            show_months=self._config.show_months,
        )

    def load(self) -> AggregationResult:
        """Scan every configured projects directory."""
        roots = self._config.projects_dirs
        logger.debug("Scanning projects directories: %s", ", ".join(map(str, roots)))
        return aggregate(roots, self._config.days, today=self._today, workers=self._config.workers)

    def render(self, index: ActivityIndex) -> Result[Text, str]:
        """Render the heatmap for ``index``; an empty index is an error."""
        if not index:
            return Err(NO_DATA)

        options = self.options
        grid = build_grid(index, options.days, options.metric, options.columns, today=self._today)
        classify(grid)
        stats = compute_stats(index, options.metric, today=self._today)
        return Ok(
            render_heatmap(
                grid,
                stats,
                options.metric,
                today=self._today,
                show_months=options.show_months,
                show_legend=options.show_legend,
                show_stats=options.show_stats,
            )
        )

    def export_json(self, index: ActivityIndex) -> Result[str, str]:
        if not index:
            return Err(NO_DATA)
        return export_activity_json(index)
