# src/dataminer/stats/descriptive.py
# -----------------------------------------------------------------------------
# Descriptive statistics per numeric column.
#
# For each selected column:
#   n        = row count (missing included)
#   na_count = missing entries
#   mean, median, sd (ddof=1), min, max, q25, q75 over non-missing values;
#   quantiles use linear interpolation between order statistics (pandas default,
#   "type 7").
# An all-missing column yields NaN aggregates rather than an error.
# -----------------------------------------------------------------------------
from __future__ import annotations

import math
from collections.abc import Iterator, Mapping, Sequence

import pandas as pd

from dataminer.common.contracts import COUNT_FIELDS, STAT_FIELDS, ColumnStats
from dataminer.common.schema import (
    NumericPredicate,
    ensure_table,
    is_numeric_column,
    select_columns,
)

__all__ = ["StatsReport", "compute_stats", "column_stats"]

_AGGREGATES: tuple[str, ...] = tuple(f for f in STAT_FIELDS if f not in COUNT_FIELDS)


class StatsReport(Mapping[str, ColumnStats]):
    """Read-only mapping column name -> ColumnStats, in selection order."""

    __slots__ = ("_data",)

    def __init__(self, items: Mapping[str, ColumnStats] | None = None) -> None:
        self._data: dict[str, ColumnStats] = dict(items or {})

    def __getitem__(self, key: str) -> ColumnStats:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"StatsReport(columns={list(self._data)})"

    def to_dict(self) -> dict[str, dict[str, float | int]]:
        return {k: v.as_row() for k, v in self._data.items()}


def _as_float(x: object) -> float:
    if x is None or x is pd.NA:
        return math.nan
    return float(x)  # type: ignore[arg-type]


def column_stats(series: pd.Series) -> ColumnStats:
    """Statistics for a single numeric series."""
    n = int(len(series))
    na_count = int(series.isna().sum())
    vals = series.dropna().astype("float64")

    if vals.empty:
        undefined = dict.fromkeys(_AGGREGATES, math.nan)
        return ColumnStats(n=n, na_count=na_count, **undefined)

    q25, q75 = vals.quantile([0.25, 0.75], interpolation="linear").to_numpy(dtype=float)
    return ColumnStats(
        n=n,
        mean=_as_float(vals.mean()),
        median=_as_float(vals.median()),
        sd=_as_float(vals.std(ddof=1)),
        min=_as_float(vals.min()),
        max=_as_float(vals.max()),
        na_count=na_count,
        q25=float(q25),
        q75=float(q75),
    )


def compute_stats(
    df: pd.DataFrame,
    columns: Sequence[str] | None = None,
    *,
    numeric: NumericPredicate = is_numeric_column,
) -> StatsReport:
    """
    Compute descriptive statistics for the selected columns of `df`.

    Parameters
    ----------
    df      : table to analyse (never mutated).
    columns : names to analyse; None/empty selects every column accepted by
              `numeric`, in DataFrame order.
    numeric : predicate deciding which columns are numeric.

    Raises
    ------
    InvalidInputError
        `df` is not a DataFrame, a selected column label is not a string, or an
        explicitly requested column is not numeric.
    ColumnNotFoundError
        Any requested column is absent (all missing names are reported).
    """
    ensure_table(df)
    cols = select_columns(df, columns, numeric=numeric)
    return StatsReport({c: column_stats(df[c]) for c in cols})
