"""Terminal rendering for the activity heatmap."""
