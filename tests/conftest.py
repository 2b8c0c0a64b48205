"""Shared fixtures for ccheatmap tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import TypeAlias

import pytest

from ccheatmap.config import Config

TODAY = date(2024, 3, 31)

LogWriter: TypeAlias = Callable[..., Path]


def record(timestamp: str, session_id: str = "s", **usage: int) -> dict[str, object]:
    """Build one Claude Code log record."""
    entry: dict[str, object] = {"timestamp": timestamp, "sessionId": session_id, "type": "user"}
    if usage:
        entry["type"] = "assistant"
        entry["message"] = {"role": "assistant", "usage": usage}
    return entry


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def claude_dir(tmp_path: Path) -> Path:
    """An empty Claude data directory with a ``projects/`` folder."""
    path = tmp_path / ".claude"
    (path / "projects").mkdir(parents=True)
    return path


@pytest.fixture
def projects_root(claude_dir: Path) -> Path:
    return claude_dir / "projects"


@pytest.fixture
def write_log(projects_root: Path) -> LogWriter:
    """Write a session log ``<project>/<session>.jsonl`` from records or raw lines."""

    def _write(
        project: str,
        session: str,
        records: list[dict[str, object] | str],
        root: Path | None = None,
    ) -> Path:
        project_dir = (root or projects_root) / project
        project_dir.mkdir(parents=True, exist_ok=True)
        path = project_dir / f"{session}.jsonl"
        lines = [r if isinstance(r, str) else json.dumps(r) for r in records]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_logs(write_log: LogWriter) -> Path:
    """Two projects, three sessions, spread over the last week of March 2024."""
    write_log(
        "-Users-test-alpha",
        "session-a",
        [
            record("2024-03-29T09:00:00Z", "session-a", input_tokens=100, output_tokens=50),
            record("2024-03-29T09:05:00Z", "session-a"),
            record("2024-03-30T10:00:00Z", "session-a", cache_read_input_tokens=25),
        ],
    )
    write_log(
        "-Users-test-alpha",
        "session-b",
        [record("2024-03-30T11:00:00Z", "session-b", input_tokens=10)],
    )
    path = write_log(
        "-Users-test-beta",
        "session-c",
        [
            record("2024-03-31T08:00:00Z", "session-c", output_tokens=1000),
            record("2023-12-01T08:00:00Z", "session-c", output_tokens=999),
        ],
    )
    return path.parent.parent


@pytest.fixture
def test_config(claude_dir: Path) -> Config:
    """Config pointing at the temporary Claude directory."""
    return Config(claude_dirs=(claude_dir,), days=30, width=80)
