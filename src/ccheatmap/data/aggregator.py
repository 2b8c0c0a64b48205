"""Fold session logs into a per-day activity index."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time, timedelta
from pathlib import Path

from result import Err

from ccheatmap.data.discovery import DiscoveryStats, SessionLog, discover_session_logs
from ccheatmap.data.parser import parse_record, read_log_lines
from ccheatmap.models.activity import ActivityIndex, AggregationResult, DayActivity, merge_index

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _FileFold:
    """Partial result for a single session log."""

    index: ActivityIndex = field(default_factory=dict)
    failed: bool = False
    counted: int = 0
    skipped: int = 0
    invalid: int = 0


def utc_today() -> date:
    return datetime.now(UTC).date()


def cutoff_for(days: int, today: date | None = None) -> datetime:
    """Earliest instant still inside a ``days``-long window ending ``today``."""
    start = (today or utc_today()) - timedelta(days=days)
    return datetime.combine(start, time.min, tzinfo=UTC)


def fold_session_log(log: SessionLog, cutoff: datetime) -> _FileFold:
    """Fold one session log into its own partial index."""
    fold = _FileFold()
    lines = read_log_lines(log.path)
    if isinstance(lines, Err):
        logger.debug("Skipping file: %s", lines.err_value)
        fold.failed = True
        return fold

    for line_num, line in enumerate(lines.ok_value, 1):
        parsed = parse_record(line)
        if isinstance(parsed, Err):
            logger.debug("Skipping %s:%d: %s", log.path, line_num, parsed.err_value)
            fold.invalid += 1
            continue

        record = parsed.ok_value
        if record.timestamp < cutoff:
            fold.skipped += 1
            continue

        activity = fold.index.get(record.day)
        if activity is None:
            activity = fold.index[record.day] = DayActivity()
        activity.record(log.session_key, record.tokens)
        fold.counted += 1

    return fold


def aggregate(
    roots: list[Path] | tuple[Path, ...],
    days: int,
    *,
    today: date | None = None,
    workers: int = 1,
) -> AggregationResult:
    """Scan every session log under ``roots`` and build the activity index.

    Records older than ``today - days`` (UTC midnight) are ignored. Directories
    and files that cannot be read are counted and skipped.
    """
    cutoff = cutoff_for(days, today)
    logger.debug("Aggregating %d roots since %s", len(roots), cutoff.isoformat())

    discovery = DiscoveryStats()
    logs = list(discover_session_logs(roots, discovery))

    if workers > 1 and len(logs) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            folds = list(pool.map(lambda log: fold_session_log(log, cutoff), logs))
    else:
        folds = [fold_session_log(log, cutoff) for log in logs]

    result = AggregationResult(
        projects_scanned=discovery.projects_scanned,
        dirs_failed=discovery.dirs_failed,
    )
    for fold in folds:
        if fold.failed:
            result.files_failed += 1
            continue
        result.files_read += 1
        result.records_counted += fold.counted
        result.records_skipped += fold.skipped
        result.lines_invalid += fold.invalid
        merge_index(result.index, fold.index)

    logger.debug(
        "Aggregated %d days from %d files (%d failed, %d invalid lines)",
        len(result.index),
        result.files_read,
        result.files_failed,
        result.lines_invalid,
    )
    return result
