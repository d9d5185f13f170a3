# src/dataminer/plots/correlation.py
from __future__ import annotations

from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.colors import LinearSegmentedColormap
from matplotlib.figure import Figure

from dataminer.stats.correlation import CorrMethod, MissingPolicy, correlation_matrix

matplotlib.use("Agg")

_DPI: int = 120
_CMAP = LinearSegmentedColormap.from_list("blue_white_red", ["blue", "white", "red"], N=20)


def _rc() -> dict[str, object]:
    return {
        "figure.dpi": _DPI,
        "savefig.dpi": _DPI,
        "axes.grid": False,
        "font.size": 10,
    }


def _ensure_parent(out_path: Path | None) -> None:
    if out_path is not None:
        out_path.parent.mkdir(parents=True, exist_ok=True)


def _figsize(n: int) -> tuple[float, float]:
    side = float(min(12.0, max(5.0, 0.6 * n + 3.0)))
    return (side + 1.0, side)


def render_correlation(
    df: pd.DataFrame,
    method: CorrMethod = "pearson",
    out_path: Path | None = None,
    *,
    use: MissingPolicy = "pairwise",
) -> Figure:
    """Heatmap of the numeric-column correlation matrix on a fixed [-1, 1] scale."""
    corr = correlation_matrix(df, method, use=use)
    labels = [str(c) for c in corr.columns]
    n = len(labels)

    with plt.rc_context(_rc()):
        fig, ax = plt.subplots(figsize=_figsize(n))
        im = ax.imshow(corr.to_numpy(dtype=float), cmap=_CMAP, vmin=-1.0, vmax=1.0)
        ax.set_xticks(np.arange(n))
        ax.set_yticks(np.arange(n))
        ax.set_xticklabels(labels, rotation=45, ha="right")
        ax.set_yticklabels(labels)
        ax.set_title(f"Correlation Matrix ({method})")
        fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    fig.tight_layout()
    if out_path is not None:
        _ensure_parent(out_path)
        fig.savefig(str(out_path))
    return fig
