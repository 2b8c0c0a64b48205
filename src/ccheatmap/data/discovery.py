"""Discover per-project session logs under Claude ``projects/`` roots."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from result import Err, Ok, Result

logger = logging.getLogger(__name__)

LOG_SUFFIX = ".jsonl"


@dataclass(frozen=True, slots=True)
class SessionLog:
    """A session log file and the project directory it belongs to."""

    project: str
    session_id: str
    path: Path

    @property
    def session_key(self) -> str:
        return f"{self.project}/{self.session_id}"


@dataclass(slots=True)
class DiscoveryStats:
    projects_scanned: int = 0
    dirs_failed: int = 0


def list_projects(root: Path) -> Result[list[Path], str]:
    """List the project directories directly below ``root``."""
    try:
        return Ok(sorted(entry for entry in root.iterdir() if entry.is_dir()))
    except OSError as exc:
        return Err(f"cannot list {root}: {exc}")


def list_session_files(project_dir: Path) -> Result[list[Path], str]:
    """List session log files inside one project directory."""
    try:
        return Ok(
            sorted(
                entry
                for entry in project_dir.iterdir()
                if entry.name.endswith(LOG_SUFFIX) and entry.is_file()
            )
        )
    except OSError as exc:
        return Err(f"cannot list {project_dir}: {exc}")


def _session_id(path: Path) -> str:
    return path.name.removesuffix(LOG_SUFFIX)


def discover_session_logs(
    roots: list[Path] | tuple[Path, ...],
    stats: DiscoveryStats | None = None,
) -> Iterator[SessionLog]:
    """Yield every session log under ``roots``, skipping unlistable directories."""
    stats = stats if stats is not None else DiscoveryStats()

    for root in roots:
        projects = list_projects(root)
        if isinstance(projects, Err):
            logger.debug("Skipping root: %s", projects.err_value)
            stats.dirs_failed += 1
            continue

        for project_dir in projects.ok_value:
            files = list_session_files(project_dir)
            if isinstance(files, Err):
                logger.debug("Skipping project: %s", files.err_value)
                stats.dirs_failed += 1
                continue

            stats.projects_scanned += 1
            logger.debug("Project %s: %d session logs", project_dir.name, len(files.ok_value))
            for path in files.ok_value:
                yield SessionLog(project=project_dir.name, session_id=_session_id(path), path=path)
