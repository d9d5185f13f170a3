# src/dataminer/common/contracts.py
# -----------------------------------------------------------------------------
# Pydantic model for the per-column summary record.
# Strict integer counts fail early on malformed input; float fields accept NaN,
# which is the sentinel for aggregates of an all-missing column.
# -----------------------------------------------------------------------------
from __future__ import annotations

import math
from typing import Any

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator, model_validator

# Field order of a ColumnStats record and of the formatted report columns.
STAT_FIELDS: tuple[str, ...] = (
    "n",
    "mean",
    "median",
    "sd",
    "min",
    "max",
    "na_count",
    "q25",
    "q75",
)

COUNT_FIELDS: tuple[str, ...] = ("n", "na_count")


class ColumnStats(BaseModel):
    """
    Nine summary statistics for one column.

    `n` counts every row (missing included); `na_count` counts the missing ones.
    The remaining fields are computed over non-missing values only and are NaN
    when there is nothing to aggregate.
    """

    model_config = ConfigDict(frozen=True)

    n: StrictInt = Field(..., ge=0, description="Row count, missing included")
    mean: float
    median: float
    sd: float = Field(..., description="Sample standard deviation (N-1)")
    min: float
    max: float
    na_count: StrictInt = Field(..., ge=0, description="Missing entries")
    q25: float
    q75: float

    @field_validator("mean", "median", "sd", "min", "max", "q25", "q75", mode="before")
    @classmethod
    def _na_to_nan(cls, v: Any) -> Any:
        if v is None or v is pd.NA:
            return math.nan
        return v

    @model_validator(mode="after")
    def _counts_consistent(self) -> ColumnStats:
        if self.na_count > self.n:
            raise ValueError(f"na_count ({self.na_count}) exceeds n ({self.n})")
        return self

    @property
    def n_valid(self) -> int:
        """Count of non-missing values the aggregates were computed over."""
        return self.n - self.na_count

    def as_row(self) -> dict[str, float | int]:
        return {f: getattr(self, f) for f in STAT_FIELDS}
