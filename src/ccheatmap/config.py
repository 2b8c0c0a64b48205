"""Configuration for ccheatmap."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ccheatmap.models.activity import Metric

CONFIG_DIR_ENV = "CLAUDE_CONFIG_DIR"


def discover_claude_dirs(
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> tuple[Path, ...]:
    """Find Claude data directories that contain a ``projects/`` folder.

    Entries from ``CLAUDE_CONFIG_DIR`` (comma separated) come first, followed by
    ``~/.config/claude`` and ``~/.claude``.
    """
    env = os.environ if environ is None else environ
    home_dir = home or Path.home()

    candidates: list[Path] = []
    for raw in env.get(CONFIG_DIR_ENV, "").split(","):
        raw = raw.strip()
        if raw:
            candidates.append(Path(raw).expanduser())
    candidates.append(home_dir / ".config" / "claude")
    candidates.append(home_dir / ".claude")

    found: list[Path] = []
    for candidate in candidates:
        if candidate in found:
            continue
        if (candidate / "projects").is_dir():
            found.append(candidate)
    return tuple(found)


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    claude_dirs: tuple[Path, ...] = field(default_factory=discover_claude_dirs)
    days: int = 365
    metric: Metric = Metric.SESSIONS
    width: int = 80
    show_legend: bool = True
    show_stats: bool = True
    show_months: bool = True
    workers: int = 1

    @property
    def projects_dirs(self) -> tuple[Path, ...]:
        return tuple(claude_dir / "projects" for claude_dir in self.claude_dirs)
