# src/dataminer/report.py
# -----------------------------------------------------------------------------
# Report runner: table in, artifacts out.
#
#   <output_dir>/<YYYYMMDD_HHMMSS>/
#       stats.csv              formatted report (one row per column)
#       stats.json             {column: {stat: value}}, NaN written as null
#       plots/dist_<col>.png   one per analysed column with plottable data
#                              (_2, _3, ... when sanitised names collide)
#       plots/correlation.png  when at least two numeric columns exist
#
# Plots that cannot be drawn for lack of data are skipped and logged; every
# other error propagates.
# -----------------------------------------------------------------------------
from __future__ import annotations

import json
import math
import os
from datetime import datetime
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import pandas as pd

from dataminer.common.logging import Timed, log_stdout
from dataminer.config import DEFAULTS, ReportConfig, validate_config
from dataminer.errors import InsufficientDataError, InvalidInputError
from dataminer.plots import render_correlation, render_distribution
from dataminer.stats import StatsReport, compute_stats, format_stats

_READERS = {".csv": pd.read_csv, ".parquet": pd.read_parquet}


def read_table(path: str | os.PathLike[str]) -> pd.DataFrame:
    p = Path(path)
    reader = _READERS.get(p.suffix.lower())
    if reader is None:
        raise InvalidInputError(f"Unsupported table format '{p.suffix}' (use .csv or .parquet)")
    if not p.exists():
        raise FileNotFoundError(f"Table not found: {p}")
    return reader(p)


def write_table(df: pd.DataFrame, path: str | os.PathLike[str], *, index: bool = False) -> Path:
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix not in _READERS:
        raise InvalidInputError(f"Unsupported table format '{p.suffix}' (use .csv or .parquet)")
    p.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        df.to_csv(p, index=index)
    else:
        df.to_parquet(p, index=index)
    return p


def ensure_run_dir(base_out: str | os.PathLike[str]) -> Path:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    run = Path(base_out) / ts
    (run / "plots").mkdir(parents=True, exist_ok=True)
    return run


def _json_safe(v: float | int) -> float | int | None:
    if isinstance(v, float) and math.isnan(v):
        return None
    return v


def write_stats_json(report: StatsReport, path: Path) -> Path:
    payload = {
        col: {k: _json_safe(v) for k, v in row.items()} for col, row in report.to_dict().items()
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


def _safe_name(col: str) -> str:
    return "".join(ch if ch.isalnum() or ch in "-_." else "_" for ch in col)


def _plot_names(columns: list[str]) -> dict[str, str]:
    """Map each column to a distinct file stem; sanitised collisions get _2, _3, ..."""
    names: dict[str, str] = {}
    taken: set[str] = set()
    for col in columns:
        base = f"dist_{_safe_name(col)}"
        stem, i = base, 1
        while stem.lower() in taken:
            i += 1
            stem = f"{base}_{i}"
        taken.add(stem.lower())
        names[col] = stem
    return names


def _render_plots(
    df: pd.DataFrame, report: StatsReport, cfg: ReportConfig, plots_dir: Path
) -> list[Path]:
    written: list[Path] = []
    stems = _plot_names(list(report))
    for col in report:
        out = plots_dir / f"{stems[col]}.png"
        try:
            fig = render_distribution(df, col, bins=cfg["bins"], out_path=out)
        except InsufficientDataError as e:
            log_stdout(f"skipped distribution plot: {e}", tag="report")
            continue
        plt.close(fig)
        written.append(out)

    out = plots_dir / "correlation.png"
    try:
        fig = render_correlation(
            df, cfg["correlation_method"], out_path=out, use=cfg["correlation_use"]
        )
    except InsufficientDataError as e:
        log_stdout(f"skipped correlation plot: {e}", tag="report")
    else:
        plt.close(fig)
        written.append(out)
    return written


def run_report(cfg: ReportConfig | dict[str, Any]) -> Path:
    """
    Compute stats (and plots) for the table named in `cfg`; return the run dir.

    `cfg` is validated again here so dict literals from tests/notebooks get the
    same checks as YAML files.
    """
    conf = validate_config({**DEFAULTS, **cfg})
    with Timed() as t:
        df = read_table(conf["input_path"])
        log_stdout(f"loaded {conf['input_path']} rows={len(df)} cols={df.shape[1]}", tag="report")

        report = compute_stats(df, conf["columns"] or None)
        run_dir = ensure_run_dir(conf["output_dir"])
        write_table(format_stats(report), run_dir / "stats.csv", index=True)
        write_stats_json(report, run_dir / "stats.json")
        log_stdout(f"stats for {len(report)} columns -> {run_dir}", tag="report")

        if conf["plots"]:
            written = _render_plots(df, report, conf, run_dir / "plots")
            log_stdout(f"plots written: {len(written)}", tag="report")

    log_stdout(f"done in {t.elapsed or 0.0:.2f}s", tag="report")
    return run_dir
