"""Per-day activity models built by the log aggregator."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import TypeAlias

from pydantic import BaseModel, Field


class Metric(StrEnum):
    """Value plotted on the heatmap."""

    SESSIONS = "sessions"
    TOKENS = "tokens"
    INTERACTIONS = "interactions"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class UsageRecord(BaseModel):
    """A single qualifying line from a session log."""

    timestamp: datetime
    tokens: int = 0

    @property
    def day(self) -> str:
        """ISO date of the record's UTC calendar day."""
        return self.timestamp.date().isoformat()


class DayActivity(BaseModel):
    """Activity accumulated for one calendar day."""

    session_ids: set[str] = Field(default_factory=set)
    interaction_count: int = Field(default=0, ge=0)
    token_total: int = Field(default=0, ge=0)

    def record(self, session_key: str, tokens: int = 0) -> None:
        self.session_ids.add(session_key)
        self.interaction_count += 1
        self.token_total += tokens

    def merge(self, other: DayActivity) -> None:
        self.session_ids |= other.session_ids
        self.interaction_count += other.interaction_count
        self.token_total += other.token_total

    def value(self, metric: Metric) -> int:
        match metric:
            case Metric.TOKENS:
                return self.token_total
            case Metric.INTERACTIONS:
                return self.interaction_count
            case _:
                return len(self.session_ids)


ActivityIndex: TypeAlias = dict[str, DayActivity]


def merge_index(target: ActivityIndex, partial: ActivityIndex) -> None:
    """Fold ``partial`` into ``target`` by date key."""
    for day, activity in partial.items():
        existing = target.get(day)
        if existing is None:
            target[day] = activity.model_copy(deep=True)
        else:
            existing.merge(activity)


@dataclass(slots=True)
class AggregationResult:
    """Activity index plus counters for everything skipped along the way."""

    index: ActivityIndex = field(default_factory=dict)
    projects_scanned: int = 0
    files_read: int = 0
    files_failed: int = 0
    dirs_failed: int = 0
    records_counted: int = 0
    records_skipped: int = 0
    lines_invalid: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.index
