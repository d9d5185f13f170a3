from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

# Ensure src/ is on sys.path for test runtime
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Repository root (one level above tests/)."""
    return ROOT


@pytest.fixture()
def mixed_df() -> pd.DataFrame:
    """Numeric + categorical + boolean columns with a few gaps."""
    return pd.DataFrame(
        {
            "num": [1.0, 2.0, 3.0, np.nan],
            "char": ["a", "b", "c", "d"],
            "ints": [4, 8, 15, 16],
            "flag": [True, False, True, True],
        }
    )


@pytest.fixture()
def wide_df() -> pd.DataFrame:
    rng = np.random.default_rng(7)
    x = rng.normal(0.0, 1.0, 200)
    return pd.DataFrame(
        {
            "x": x,
            "y": 2.0 * x + rng.normal(0.0, 0.5, 200),
            "z": rng.uniform(0.0, 1.0, 200),
            "label": rng.choice(["A", "B"], size=200),
        }
    )
