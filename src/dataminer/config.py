# src/dataminer/config.py
# -----------------------------------------------------------------------------
# YAML-backed configuration for the report runner.
#
# Validation is strict: unknown keys, a missing input_path and wrongly typed
# values raise ConfigError so a typo never silently falls back to a default.
# -----------------------------------------------------------------------------
from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypedDict, cast

import yaml

from dataminer.errors import ConfigError
from dataminer.stats.correlation import CORR_METHODS, MISSING_POLICIES


class ReportConfig(TypedDict, total=False):
    """
    Config shape for `run_report`.

    Required:
      input_path: str                 # CSV or Parquet table

    Optional:
      columns: list[str]              # default: all numeric columns
      bins: int                       # histogram bins (default 30)
      correlation_method: str         # pearson | kendall | spearman
      correlation_use: str            # pairwise | complete
      output_dir: str                 # runs land in <output_dir>/<timestamp>/
      plots: bool                     # render plots (default true)
    """

    input_path: str
    columns: list[str]
    bins: int
    correlation_method: str
    correlation_use: str
    output_dir: str
    plots: bool


DEFAULTS: ReportConfig = {
    "columns": [],
    "bins": 30,
    "correlation_method": "pearson",
    "correlation_use": "pairwise",
    "output_dir": "reports",
    "plots": True,
}

_KNOWN_KEYS: frozenset[str] = frozenset(ReportConfig.__annotations__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from `path` (empty docs return {})."""
    with Path(path).open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top-level YAML must be a mapping")
    return cast(dict[str, Any], data)


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigError(msg)


def validate_config(raw: Mapping[str, Any]) -> ReportConfig:
    """Merge `raw` over DEFAULTS and check every value."""
    unknown = sorted(set(raw) - _KNOWN_KEYS)
    _expect(not unknown, f"Unknown config keys: {unknown}")
    _expect("input_path" in raw, "Missing required config key: input_path")

    cfg = cast(ReportConfig, {**DEFAULTS, **raw})

    _expect(
        isinstance(cfg["input_path"], str) and bool(cfg["input_path"].strip()),
        "input_path must be a non-empty string",
    )
    cols = cfg.get("columns") or []
    _expect(
        isinstance(cols, list) and all(isinstance(c, str) for c in cols),
        "columns must be a list of strings",
    )
    cfg["columns"] = list(cols)
    bins = cfg["bins"]
    _expect(
        isinstance(bins, int) and not isinstance(bins, bool) and bins > 0,
        f"bins must be a positive integer, got {bins!r}",
    )
    _expect(
        cfg["correlation_method"] in CORR_METHODS,
        f"correlation_method must be one of {list(CORR_METHODS)}",
    )
    _expect(
        cfg["correlation_use"] in MISSING_POLICIES,
        f"correlation_use must be one of {list(MISSING_POLICIES)}",
    )
    _expect(isinstance(cfg["output_dir"], str), "output_dir must be a string")
    _expect(isinstance(cfg["plots"], bool), "plots must be true or false")
    return cfg


def load_config(path: str | Path) -> ReportConfig:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    return validate_config(_load_yaml(p))
