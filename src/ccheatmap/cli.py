"""Typer CLI for ccheatmap."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Annotated

import typer
from result import Err
from rich.console import Console

from ccheatmap import __version__
from ccheatmap.config import Config, discover_claude_dirs
from ccheatmap.models.activity import Metric
from ccheatmap.services.heatmap_service import NO_DATA, HeatmapService
from ccheatmap.ui.theme import STYLES

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ccheatmap",
    help="Terminal-based GitHub-style contribution heatmap for Claude Code usage.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ccheatmap {__version__}")
        raise typer.Exit()


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    logging.getLogger().setLevel(logging.DEBUG if debug else logging.WARNING)


@app.command()
def main(
    metric: Annotated[
        Metric,
        typer.Option("--metric", "-m", help="Metric to visualize", case_sensitive=False),
    ] = Metric.SESSIONS,
    days: Annotated[int, typer.Option("--days", "-d", min=1, help="Number of days to show")] = 365,
    legend: Annotated[bool, typer.Option("--legend/--no-legend", help="Show the legend")] = True,
    stats: Annotated[bool, typer.Option("--stats/--no-stats", help="Show statistics")] = True,
    months: Annotated[bool, typer.Option("--months/--no-months", help="Show month labels")] = True,
    as_json: Annotated[bool, typer.Option("--json", help="Output raw data as JSON")] = False,
    claude_dir: Annotated[
        list[Path] | None,
        typer.Option("--claude-dir", help="Claude data directory (repeatable)"),
    ] = None,
    width: Annotated[
        int | None,
        typer.Option("--width", min=1, help="Terminal width (default: detected)"),
    ] = None,
    workers: Annotated[int, typer.Option("--workers", min=1, help="Parallel file readers")] = 1,
    color: Annotated[bool, typer.Option("--color/--no-color", help="Colorize output")] = True,
    debug: Annotated[
        bool, typer.Option("--debug", envvar="DEBUG", help="Debug logging")
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True),
    ] = None,
) -> None:
    """Render a contribution heatmap of local Claude Code sessions."""
    _configure_logging(debug)
    config = Config(
        claude_dirs=tuple(claude_dir) if claude_dir else discover_claude_dirs(),
        days=days,
        metric=metric,
        width=width or shutil.get_terminal_size().columns,
        show_legend=legend,
        show_stats=stats,
        show_months=months,
        workers=workers,
    )
    logger.debug("Claude directories: %s", config.claude_dirs)

    service = HeatmapService(config)
    aggregation = service.load()
    logger.debug(
        "Scanned %d projects: %d files read, %d failed, %d directories skipped",
        aggregation.projects_scanned,
        aggregation.files_read,
        aggregation.files_failed,
        aggregation.dirs_failed,
    )

    console = Console(no_color=not color, highlight=False, width=config.width)
    if aggregation.is_empty:
        console.print()
        console.print(NO_DATA, style=STYLES["warning"])
        console.print("Make sure Claude Code is installed and has been used.", style=STYLES["hint"])
        console.print(
            "Data is typically stored in ~/.config/claude/projects/ or ~/.claude/projects/",
            style=STYLES["hint"],
        )
        return

    if as_json:
        exported = service.export_json(aggregation.index)
        if isinstance(exported, Err):
            typer.echo(exported.err_value, err=True)
            raise typer.Exit(1)
        typer.echo(exported.ok_value)
        return

    rendered = service.render(aggregation.index)
    if isinstance(rendered, Err):
        typer.echo(rendered.err_value, err=True)
        raise typer.Exit(1)
    console.print(rendered.ok_value)
