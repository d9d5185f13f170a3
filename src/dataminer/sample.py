# src/dataminer/sample.py
# -----------------------------------------------------------------------------
# Demo table factory. Nothing is generated at import time: demos and tests call
# make_sample_dataset() and get a fresh frame each time.
# -----------------------------------------------------------------------------
from __future__ import annotations

import numpy as np
import pandas as pd
from pandas.api.types import CategoricalDtype

from dataminer.errors import InvalidInputError

SAMPLE_CATEGORIES: tuple[str, ...] = ("A", "B", "C")


def make_sample_dataset(n_rows: int = 100, seed: int | None = None) -> pd.DataFrame:
    """
    Random demo table with columns:
      id       : 1..n_rows
      value    : standard normal draws
      category : uniform over A/B/C (categorical)

    `seed=None` draws fresh entropy; pass an int for a reproducible table.
    """
    if isinstance(n_rows, bool) or not isinstance(n_rows, (int, np.integer)) or n_rows < 0:
        raise InvalidInputError(f"n_rows must be a non-negative integer, got {n_rows!r}")

    rng = np.random.default_rng(seed)
    n = int(n_rows)
    category = pd.Series(
        rng.choice(SAMPLE_CATEGORIES, size=n, replace=True),
        dtype=CategoricalDtype(categories=list(SAMPLE_CATEGORIES)),
    )
    return pd.DataFrame(
        {
            "id": np.arange(1, n + 1, dtype="int64"),
            "value": rng.normal(0.0, 1.0, size=n),
            "category": category,
        }
    )
