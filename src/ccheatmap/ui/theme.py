"""Terminal palette, glyphs and display formatting utilities."""

from __future__ import annotations

# ── GitHub dark-theme contribution palette: empty, then greens darkest to brightest ──

INTENSITY_STYLES = [
    "#2D333B",
    "#0E4429",
    "#006D32",
    "#26A641",
    "#39D353",
]

CELL_GLYPH = "■"
BLANK = " "

STYLES = {
    "title": "bold cyan",
    "label": "bright_black",
    "heading": "bold",
    "key": "cyan",
    "today": "reverse",
    "warning": "yellow",
    "hint": "bright_black",
}

DAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
INDENT = " " * 8


def format_number(count: int) -> str:
    """Format a count with K/M suffixes for readability."""
    if count < 1000:
        return str(count)
    if count < 1_000_000:
        return f"{count / 1000:.1f}K"
    return f"{count / 1_000_000:.1f}M"
