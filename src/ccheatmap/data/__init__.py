"""Filesystem scanning and log parsing."""

from ccheatmap.data.aggregator import aggregate

__all__ = ["aggregate"]
