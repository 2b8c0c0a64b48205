"""Terminal contribution heatmap for Claude Code usage logs."""

__version__ = "1.0.0"
