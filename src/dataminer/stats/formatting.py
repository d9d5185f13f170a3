# src/dataminer/stats/formatting.py
# -----------------------------------------------------------------------------
# Flatten a StatsReport into one row per analysed column.
# -----------------------------------------------------------------------------
from __future__ import annotations

from collections.abc import Mapping

import pandas as pd
from pydantic import ValidationError

from dataminer.common.contracts import COUNT_FIELDS, STAT_FIELDS, ColumnStats
from dataminer.errors import InvalidInputError

__all__ = ["format_stats"]


def _coerce_entry(name: str, entry: object) -> ColumnStats:
    if isinstance(entry, ColumnStats):
        return entry
    if isinstance(entry, Mapping):
        try:
            return ColumnStats.model_validate(dict(entry))
        except ValidationError as e:
            raise InvalidInputError(f"Entry '{name}' is not a valid stats record: {e}") from e
    raise InvalidInputError(
        f"Entry '{name}' must be ColumnStats or a mapping, got {type(entry).__name__}"
    )


def format_stats(report: Mapping[str, ColumnStats]) -> pd.DataFrame:
    """
    One row per report entry (row order = report order, index named 'column'),
    one column per statistic: n, mean, median, sd, min, max, na_count, q25, q75.

    Plain dicts carrying the nine fields are accepted and validated.
    """
    if not isinstance(report, Mapping):
        raise InvalidInputError(
            f"Input must be a stats report mapping, got {type(report).__name__}"
        )

    rows = [_coerce_entry(str(name), entry).as_row() for name, entry in report.items()]
    index = pd.Index([str(k) for k in report.keys()], name="column", dtype="object")
    out = pd.DataFrame(rows, index=index, columns=list(STAT_FIELDS))

    dtypes = {f: ("int64" if f in COUNT_FIELDS else "float64") for f in STAT_FIELDS}
    return out.astype(dtypes)
