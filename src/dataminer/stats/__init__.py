# src/dataminer/stats/__init__.py
# -----------------------------------------------------------------------------
# Public surface of the stats package.
# - compute_stats      : per-column descriptive statistics (StatsReport)
# - format_stats       : StatsReport -> one-row-per-column DataFrame
# - correlation_matrix : pairwise/complete-case correlation of numeric columns
# -----------------------------------------------------------------------------
from __future__ import annotations

from .correlation import correlation_matrix, numeric_columns
from .descriptive import StatsReport, column_stats, compute_stats
from .formatting import format_stats

__all__ = [
    "StatsReport",
    "column_stats",
    "compute_stats",
    "format_stats",
    "correlation_matrix",
    "numeric_columns",
]
