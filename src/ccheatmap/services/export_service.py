"""Export service — JSON dump of the activity index."""

from __future__ import annotations

import json

from result import Ok, Result

from ccheatmap.models.activity import ActivityIndex


def activity_to_dict(index: ActivityIndex) -> dict[str, dict[str, object]]:
    """Serializable view of ``index``, dates ascending, sessions sorted."""
    return {
        day: {
            "sessions": sorted(index[day].session_ids),
            "interactions": index[day].interaction_count,
            "tokens": index[day].token_total,
        }
        for day in sorted(index)
    }


def export_activity_json(index: ActivityIndex) -> Result[str, str]:
    """Export the activity index as indented JSON keyed by ISO date."""
    return Ok(json.dumps(activity_to_dict(index), indent=2))
