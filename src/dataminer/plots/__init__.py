# src/dataminer/plots/__init__.py
# -----------------------------------------------------------------------------
# Diagnostic plots. Each renderer returns a matplotlib Figure (Agg backend) and
# saves it when `out_path` is given; closing the figure is the caller's job.
# -----------------------------------------------------------------------------
from __future__ import annotations

from .correlation import render_correlation
from .distribution import render_distribution

__all__ = ["render_distribution", "render_correlation"]
