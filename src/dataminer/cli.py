# src/dataminer/cli.py
# -----------------------------------------------------------------------------
# DataMiner – Command Line Interface (Typer)
#
#   stats         descriptive statistics table for a CSV/Parquet file
#   distribution  histogram + density + boxplot for one column
#   correlations  correlation heatmap of the numeric columns
#   sample        write the random demo table
#   report        YAML-configured run writing stats + plots to reports/<ts>/
#
# Library errors are reported as "[<command>] failed: <message>" with exit code 1.
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt
import pandas as pd
import typer
from matplotlib.figure import Figure

from dataminer.common.logging import log_stdout
from dataminer.config import load_config
from dataminer.errors import DataMinerError
from dataminer.plots import render_correlation, render_distribution
from dataminer.report import read_table, run_report, write_table
from dataminer.sample import make_sample_dataset
from dataminer.stats import compute_stats, format_stats

# Typer application entry-point. We disable the default shell completion for stability in CI.
app = typer.Typer(add_completion=False, no_args_is_help=True)


# ------------------------------ helpers ---------------------------------
@contextmanager
def _fail_fast(cmd: str) -> Iterator[None]:
    """Turn library/file errors into a one-line message and exit code 1."""
    try:
        yield
    except (DataMinerError, FileNotFoundError) as e:
        typer.echo(f"[{cmd}] failed: {e}", err=True)
        raise typer.Exit(code=1) from e


def _save_and_close(render: Callable[[], Figure], out_p: Path, cmd: str) -> None:
    fig = render()
    plt.close(fig)
    log_stdout(f"written: {out_p}", tag=cmd)


# ------------------------------- stats ----------------------------------
@app.command()
def stats(
    path: Path = typer.Argument(..., help="CSV or Parquet table"),
    col: Optional[List[str]] = typer.Option(
        None, "--col", help="Column to analyse (repeatable; default: all numeric)"
    ),
    out: Optional[Path] = typer.Option(None, help="Also write the table to CSV/Parquet"),
) -> None:
    """Print descriptive statistics, one row per column."""
    with _fail_fast("stats"):
        df = read_table(path)
        table = format_stats(compute_stats(df, col or None))
        with pd.option_context("display.max_columns", None, "display.width", 120):
            typer.echo(table.to_string())
        if out is not None:
            write_table(table, out, index=True)
            log_stdout(f"written: {out}", tag="stats")


# ---------------------------- distribution ------------------------------
@app.command()
def distribution(
    path: Path = typer.Argument(..., help="CSV or Parquet table"),
    column: str = typer.Argument(..., help="Numeric column to plot"),
    bins: int = typer.Option(30, min=1, help="Histogram bins"),
    out: Path = typer.Option(..., help="Output image (png/pdf/svg)"),
) -> None:
    """Histogram with density overlay next to a boxplot."""
    with _fail_fast("distribution"):
        df = read_table(path)
        _save_and_close(
            lambda: render_distribution(df, column, bins=bins, out_path=out), out, "distribution"
        )


# ---------------------------- correlations ------------------------------
@app.command()
def correlations(
    path: Path = typer.Argument(..., help="CSV or Parquet table"),
    method: str = typer.Option("pearson", help="pearson | kendall | spearman"),
    use: str = typer.Option("pairwise", help="Missing values: pairwise | complete"),
    out: Path = typer.Option(..., help="Output image (png/pdf/svg)"),
) -> None:
    """Correlation heatmap of all numeric columns."""
    with _fail_fast("correlations"):
        df = read_table(path)
        _save_and_close(
            lambda: render_correlation(df, method, out_path=out, use=use),  # type: ignore[arg-type]
            out,
            "correlations",
        )


# ------------------------------- sample ---------------------------------
@app.command()
def sample(
    out: Path = typer.Option(..., help="Output CSV/Parquet"),
    rows: int = typer.Option(100, min=0, help="Number of rows"),
    seed: Optional[int] = typer.Option(None, help="RNG seed (omit for a fresh draw)"),
) -> None:
    """Write the random demo table (id, value, category)."""
    with _fail_fast("sample"):
        write_table(make_sample_dataset(rows, seed=seed), out)
        log_stdout(f"written: {out} rows={rows}", tag="sample")


# ------------------------------- report ---------------------------------
@app.command()
def report(
    config: Path = typer.Option(..., help="Path to report YAML"),
) -> None:
    """Run the YAML-configured report (stats.csv, stats.json, plots/)."""
    with _fail_fast("report"):
        run_dir = run_report(load_config(config))
        typer.echo(f"[report] run dir: {run_dir}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
