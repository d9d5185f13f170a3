# src/dataminer/__init__.py
# -----------------------------------------------------------------------------
# DataMiner – small exploratory-data-analysis helpers for pandas DataFrames.
#
# Public API (re-exported):
# - compute_stats / format_stats           : descriptive statistics per column
# - correlation_matrix                     : pairwise or complete-case correlations
# - render_distribution / render_correlation : diagnostic matplotlib figures
# - make_sample_dataset                    : random demo table
# -----------------------------------------------------------------------------
from __future__ import annotations

from .common.contracts import STAT_FIELDS, ColumnStats
from .errors import (
    ColumnNotFoundError,
    ConfigError,
    DataMinerError,
    InsufficientDataError,
    InvalidInputError,
)
from .plots import render_correlation, render_distribution
from .sample import make_sample_dataset
from .stats import StatsReport, compute_stats, correlation_matrix, format_stats

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "STAT_FIELDS",
    "ColumnStats",
    "StatsReport",
    "compute_stats",
    "format_stats",
    "correlation_matrix",
    "render_distribution",
    "render_correlation",
    "make_sample_dataset",
    "DataMinerError",
    "InvalidInputError",
    "ColumnNotFoundError",
    "InsufficientDataError",
    "ConfigError",
]
