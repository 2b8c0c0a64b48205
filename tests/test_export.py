"""Tests for the JSON export."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

from result import Ok

from ccheatmap.data.aggregator import aggregate
from ccheatmap.models import DayActivity
from ccheatmap.services.export_service import activity_to_dict, export_activity_json


def test_export_shape() -> None:
    index = {
        "2024-01-02": DayActivity(session_ids={"p/b", "p/a"}, interaction_count=3, token_total=42),
        "2024-01-01": DayActivity(session_ids={"q/c"}, interaction_count=1, token_total=0),
    }
    exported = export_activity_json(index)
    assert isinstance(exported, Ok)
    payload = json.loads(exported.ok_value)
    assert list(payload) == ["2024-01-01", "2024-01-02"]
    assert payload["2024-01-02"] == {"sessions": ["p/a", "p/b"], "interactions": 3, "tokens": 42}


def test_export_empty_index() -> None:
    exported = export_activity_json({})
    assert isinstance(exported, Ok)
    assert json.loads(exported.ok_value) == {}


def test_export_matches_aggregation(sample_logs: Path, today: date) -> None:
    index = aggregate([sample_logs], 30, today=today).index
    payload = activity_to_dict(index)
    assert payload["2024-03-31"] == {
        "sessions": ["-Users-test-beta/session-c"],
        "interactions": 1,
        "tokens": 1000,
    }
