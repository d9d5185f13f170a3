# src/dataminer/stats/correlation.py
# -----------------------------------------------------------------------------
# Correlation matrix over the numeric columns of a table.
#
# Missing-value policy is explicit:
#   use="pairwise" (default): each pair uses the rows complete for that pair.
#   use="complete"          : rows with any missing numeric value are dropped
#                             before correlating (case-wise deletion).
# Kendall's tau is delegated to scipy through pandas.
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Literal, get_args

import pandas as pd

from dataminer.common.schema import (
    NumericPredicate,
    ensure_table,
    is_numeric_column,
    numeric_column_names,
)
from dataminer.errors import InsufficientDataError, InvalidInputError

__all__ = ["CorrMethod", "MissingPolicy", "numeric_columns", "correlation_matrix"]

CorrMethod = Literal["pearson", "kendall", "spearman"]
MissingPolicy = Literal["pairwise", "complete"]

CORR_METHODS: tuple[str, ...] = get_args(CorrMethod)
MISSING_POLICIES: tuple[str, ...] = get_args(MissingPolicy)


def numeric_columns(
    df: pd.DataFrame, numeric: NumericPredicate = is_numeric_column
) -> pd.DataFrame:
    """Sub-frame of the numeric columns, in DataFrame order."""
    ensure_table(df)
    return df.loc[:, numeric_column_names(df, numeric)]


def correlation_matrix(
    df: pd.DataFrame,
    method: CorrMethod = "pearson",
    *,
    use: MissingPolicy = "pairwise",
    numeric: NumericPredicate = is_numeric_column,
) -> pd.DataFrame:
    """
    Square correlation matrix indexed by numeric column name on both axes.

    Raises
    ------
    InvalidInputError
        `df` is not a DataFrame, or `method`/`use` is not recognised.
    InsufficientDataError
        Fewer than 2 numeric columns.
    """
    if method not in CORR_METHODS:
        raise InvalidInputError(
            f"Unknown correlation method '{method}'. Use one of: {', '.join(CORR_METHODS)}"
        )
    if use not in MISSING_POLICIES:
        raise InvalidInputError(
            f"Unknown missing-value policy '{use}'. Use one of: {', '.join(MISSING_POLICIES)}"
        )

    num = numeric_columns(df, numeric)
    if num.shape[1] < 2:
        raise InsufficientDataError(
            f"Need at least 2 numeric columns, found {num.shape[1]}"
        )

    work = num.astype("float64")
    if use == "complete":
        work = work.dropna(how="any")
    return work.corr(method=method)
