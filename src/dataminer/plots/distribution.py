# src/dataminer/plots/distribution.py
from __future__ import annotations

from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.figure import Figure
from scipy.stats import gaussian_kde

from dataminer.common.schema import (
    NumericPredicate,
    ensure_required_columns,
    ensure_table,
    has_numeric_values,
    is_numeric_column,
)
from dataminer.errors import InsufficientDataError, InvalidInputError

matplotlib.use("Agg")

_DPI: int = 120
_FIGSIZE: tuple[float, float] = (10.0, 4.0)
_KDE_POINTS: int = 512


def _rc() -> dict[str, object]:
    return {
        "figure.dpi": _DPI,
        "savefig.dpi": _DPI,
        "axes.grid": True,
        "grid.alpha": 0.3,
        "font.size": 10,
    }


def _ensure_parent(out_path: Path | None) -> None:
    if out_path is not None:
        out_path.parent.mkdir(parents=True, exist_ok=True)


def _density_curve(vals: np.ndarray) -> tuple[np.ndarray, np.ndarray] | None:
    # KDE is singular for fewer than two distinct values
    if np.unique(vals).size < 2:
        return None
    kde = gaussian_kde(vals)
    pad = 3.0 * float(np.std(vals, ddof=1)) * kde.factor
    xs = np.linspace(float(vals.min()) - pad, float(vals.max()) + pad, _KDE_POINTS)
    return xs, kde(xs)


def render_distribution(
    df: pd.DataFrame,
    column: str,
    bins: int = 30,
    out_path: Path | None = None,
    *,
    numeric: NumericPredicate = is_numeric_column,
) -> Figure:
    """
    Histogram (density scale) with a KDE overlay next to a boxplot of `column`.

    Missing and non-finite values are dropped. Raises ColumnNotFoundError if
    `column` is absent and InsufficientDataError if no finite numeric value is
    left to draw.
    """
    ensure_table(df)
    if isinstance(bins, bool) or not isinstance(bins, (int, np.integer)) or bins < 1:
        raise InvalidInputError(f"bins must be a positive integer, got {bins!r}")
    ensure_required_columns(df, [column])

    s = df[column]
    if not has_numeric_values(s, numeric):
        raise InsufficientDataError(f"Column '{column}' has no numeric values to plot")
    vals = s.dropna().to_numpy(dtype=float)
    vals = vals[np.isfinite(vals)]
    if vals.size == 0:
        raise InsufficientDataError(f"Column '{column}' has no finite values to plot")

    with plt.rc_context(_rc()):
        fig, (ax_hist, ax_box) = plt.subplots(nrows=1, ncols=2, figsize=_FIGSIZE)

        ax_hist.hist(vals, bins=int(bins), density=True, color="lightblue", edgecolor="white")
        curve = _density_curve(vals)
        if curve is not None:
            ax_hist.plot(curve[0], curve[1], color="red", linewidth=2)
        ax_hist.set_title(f"Histogram of {column}")
        ax_hist.set_xlabel(str(column))
        ax_hist.set_ylabel("Density")

        ax_box.boxplot(
            vals,
            patch_artist=True,
            boxprops={"facecolor": "lightgreen"},
            flierprops={"marker": "o", "markerfacecolor": "red", "markeredgecolor": "red"},
        )
        ax_box.set_title(f"Boxplot of {column}")
        ax_box.set_ylabel(str(column))
        ax_box.set_xticks([])

    fig.tight_layout()
    if out_path is not None:
        _ensure_parent(out_path)
        fig.savefig(str(out_path))
    return fig
