"""Parse session log lines into usage records."""

from __future__ import annotations

import json
import logging
import math
from datetime import UTC, datetime
from pathlib import Path

from result import Err, Ok, Result

from ccheatmap.models.activity import UsageRecord

logger = logging.getLogger(__name__)

TOKEN_FIELDS = (
    "input_tokens",
    "output_tokens",
    "cache_creation_input_tokens",
    "cache_read_input_tokens",
)


def read_log_lines(path: Path) -> Result[list[str], str]:
    """Read a session log and return its non-empty lines."""
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        return Err(f"cannot read {path}: {exc}")
    return Ok([line for line in (raw.strip() for raw in text.splitlines()) if line])


def parse_record(line: str) -> Result[UsageRecord, str]:
    """Parse one JSON line into a :class:`UsageRecord`."""
    try:
        raw = json.loads(line)
    except json.JSONDecodeError as exc:
        return Err(f"invalid JSON: {exc.msg}")
    if not isinstance(raw, dict):
        return Err("record is not an object")

    timestamp = parse_timestamp(raw.get("timestamp"))
    if timestamp is None:
        return Err(f"unparseable timestamp: {raw.get('timestamp')!r}")

    return Ok(UsageRecord(timestamp=timestamp, tokens=usage_tokens(raw.get("message"))))


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Naive timestamps are taken to be UTC already.
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def usage_tokens(message: object) -> int:
    """Sum the four token counters of ``message.usage``; missing ones count as 0."""
    if not isinstance(message, dict):
        return 0
    usage = message.get("usage")
    if not isinstance(usage, dict):
        return 0
    return sum(_int(usage.get(name)) for name in TOKEN_FIELDS)


def _int(val: object) -> int:
    if isinstance(val, bool):
        return 0
    if isinstance(val, int):
        return max(val, 0)
    if isinstance(val, float):
        return max(int(val), 0) if math.isfinite(val) else 0
    return 0
