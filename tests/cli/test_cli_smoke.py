from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
import yaml
from typer.testing import CliRunner

from dataminer.cli import app

runner = CliRunner()


def test_cli_sample_stats_and_plots(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    res = runner.invoke(app, ["sample", "--out", "data/sample.csv", "--rows", "80", "--seed", "5"])
    assert res.exit_code == 0, res.output
    assert Path("data/sample.csv").exists()

    res = runner.invoke(app, ["stats", "data/sample.csv", "--out", "out/stats.csv"])
    assert res.exit_code == 0, res.output
    assert "value" in res.stdout and "na_count" in res.stdout
    stats = pd.read_csv("out/stats.csv", index_col="column")
    assert list(stats.index) == ["id", "value"]

    res = runner.invoke(app, ["stats", "data/sample.csv", "--col", "value"])
    assert res.exit_code == 0, res.output

    res = runner.invoke(
        app, ["distribution", "data/sample.csv", "value", "--bins", "12", "--out", "out/d.png"]
    )
    assert res.exit_code == 0, res.output
    assert Path("out/d.png").exists()

    res = runner.invoke(
        app, ["correlations", "data/sample.csv", "--method", "spearman", "--out", "out/c.png"]
    )
    assert res.exit_code == 0, res.output
    assert Path("out/c.png").exists()


def test_cli_errors_exit_one(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    pd.DataFrame({"x": [1.0, 2.0, 3.0], "s": ["a", "b", "c"]}).to_csv("t.csv", index=False)

    res = runner.invoke(app, ["stats", "t.csv", "--col", "x", "--col", "nope", "--col", "gone"])
    assert res.exit_code == 1
    assert "Columns not found: nope, gone" in res.output

    res = runner.invoke(app, ["correlations", "t.csv", "--out", "c.png"])
    assert res.exit_code == 1
    assert "at least 2 numeric columns" in res.output

    res = runner.invoke(app, ["stats", "missing.csv"])
    assert res.exit_code == 1


def test_cli_report(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert runner.invoke(app, ["sample", "--out", "t.parquet", "--seed", "1"]).exit_code == 0
    Path("report.yaml").write_text(
        yaml.safe_dump({"input_path": "t.parquet", "output_dir": "reports", "bins": 10}),
        encoding="utf-8",
    )

    res = runner.invoke(app, ["report", "--config", "report.yaml"])
    assert res.exit_code == 0, res.output
    runs = list(Path("reports").iterdir())
    assert len(runs) == 1
    assert (runs[0] / "stats.csv").exists()
    assert (runs[0] / "plots" / "correlation.png").exists()

    Path("bad.yaml").write_text(yaml.safe_dump({"bins": 10}), encoding="utf-8")
    res = runner.invoke(app, ["report", "--config", "bad.yaml"])
    assert res.exit_code == 1
    assert "input_path" in res.output
