# src/dataminer/common/schema.py
# -----------------------------------------------------------------------------
# Table validation and column selection.
#  - is_numeric_column: default predicate deciding which columns count as numeric,
#  - ensure_table / ensure_required_columns: fail-fast input checks,
#  - select_columns: resolve an explicit or default column selection.
#
# Numeric dispatch is an explicit predicate; callers with their own typing rules
# pass one in rather than relying on dtype reflection.
# -----------------------------------------------------------------------------
from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

import pandas as pd
from pandas.api.types import is_bool_dtype, is_numeric_dtype

from dataminer.errors import ColumnNotFoundError, InvalidInputError

NumericPredicate = Callable[[pd.Series], bool]


def is_numeric_column(series: pd.Series) -> bool:
    """True for integer/float dtypes (nullable included); booleans are not numeric."""
    return is_numeric_dtype(series.dtype) and not is_bool_dtype(series.dtype)


def has_numeric_values(series: pd.Series, numeric: NumericPredicate = is_numeric_column) -> bool:
    """Numeric and not entirely missing."""
    return bool(numeric(series)) and bool(series.notna().any())


def ensure_table(df: object, what: str = "Input") -> pd.DataFrame:
    if not isinstance(df, pd.DataFrame):
        raise InvalidInputError(f"{what} must be a pandas DataFrame, got {type(df).__name__}")
    return df


def ensure_required_columns(df: pd.DataFrame, required: Iterable[str]) -> None:
    """Raise ColumnNotFoundError naming every missing column, in request order."""
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ColumnNotFoundError(missing)


def numeric_column_names(
    df: pd.DataFrame, numeric: NumericPredicate = is_numeric_column
) -> list[str]:
    return [c for c in df.columns if numeric(df[c])]


def _string_labels(labels: list[str]) -> list[str]:
    bad = [c for c in labels if not isinstance(c, str)]
    if bad:
        raise InvalidInputError(f"Column labels must be strings, got: {bad!r}")
    return labels


def select_columns(
    df: pd.DataFrame,
    columns: Sequence[str] | None = None,
    *,
    numeric: NumericPredicate = is_numeric_column,
) -> list[str]:
    """
    Resolve the columns to analyse.

    - None/empty: every numeric column, in DataFrame order.
    - Explicit: must all exist (ColumnNotFoundError) and be numeric
      (InvalidInputError); duplicates collapse to their first occurrence.
    - Selected labels must be strings (InvalidInputError).
    """
    if isinstance(columns, str):
        columns = [columns]
    if not columns:
        return _string_labels(numeric_column_names(df, numeric))

    wanted = list(dict.fromkeys(columns))
    ensure_required_columns(df, wanted)
    _string_labels(wanted)

    non_numeric = [c for c in wanted if not numeric(df[c])]
    if non_numeric:
        raise InvalidInputError(f"Columns are not numeric: {', '.join(map(str, non_numeric))}")
    return wanted
