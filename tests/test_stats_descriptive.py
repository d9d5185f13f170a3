from __future__ import annotations

import math

import numpy as np
import pandas as pd
import pytest

from dataminer.common.contracts import ColumnStats
from dataminer.errors import ColumnNotFoundError, InvalidInputError
from dataminer.stats import StatsReport, compute_stats


def test_default_selection_skips_non_numeric() -> None:
    df = pd.DataFrame({"num": [1, 2, 3, np.nan], "char": ["a", "b", "c", "d"]})
    result = compute_stats(df)
    assert list(result) == ["num"]
    assert result["num"].na_count == 1
    assert result["num"].n == 4


def test_default_selection_order_and_bool_excluded(mixed_df: pd.DataFrame) -> None:
    result = compute_stats(mixed_df)
    assert list(result) == ["num", "ints"]


def test_explicit_selection_keeps_requested_order(mixed_df: pd.DataFrame) -> None:
    result = compute_stats(mixed_df, ["ints", "num"])
    assert list(result) == ["ints", "num"]
    # duplicates collapse to first occurrence
    assert list(compute_stats(mixed_df, ["ints", "num", "ints"])) == ["ints", "num"]


def test_empty_selection_means_default(mixed_df: pd.DataFrame) -> None:
    assert list(compute_stats(mixed_df, [])) == list(compute_stats(mixed_df))


def test_values_match_direct_computation() -> None:
    x = np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
    st = compute_stats(pd.DataFrame({"x": x}))["x"]
    assert st.n == 8 and st.na_count == 0
    assert st.mean == pytest.approx(x.mean())
    assert st.median == pytest.approx(np.median(x))
    assert st.sd == pytest.approx(x.std(ddof=1))
    assert st.min == 2.0 and st.max == 9.0
    assert st.q25 == pytest.approx(np.quantile(x, 0.25))
    assert st.q75 == pytest.approx(np.quantile(x, 0.75))


def test_type7_quantiles() -> None:
    # 1..4: type-7 q25 = 1.75, q75 = 3.25
    st = compute_stats(pd.DataFrame({"v": [4, 1, 3, 2]}))["v"]
    assert st.q25 == pytest.approx(1.75)
    assert st.q75 == pytest.approx(3.25)
    assert st.median == pytest.approx(2.5)


def test_missing_values_are_ignored_by_aggregates() -> None:
    st = compute_stats(pd.DataFrame({"v": [1.0, np.nan, 3.0, np.nan, 5.0]}))["v"]
    assert st.n == 5
    assert st.na_count == 2
    assert st.na_count + st.n_valid == st.n
    assert st.mean == pytest.approx(3.0)
    assert st.sd == pytest.approx(2.0)
    assert (st.min, st.max) == (1.0, 5.0)


def test_all_missing_column_gives_nan() -> None:
    df = pd.DataFrame({"gone": [np.nan, np.nan, np.nan]})
    st = compute_stats(df)["gone"]
    assert st.n == 3 and st.na_count == 3
    for field in ("mean", "median", "sd", "min", "max", "q25", "q75"):
        assert math.isnan(getattr(st, field))


def test_nullable_int_column() -> None:
    df = pd.DataFrame(
        {
            "i": pd.array([1, None, 3], dtype="Int64"),
            "e": pd.array([None, None, None], dtype="Int64"),
        }
    )
    result = compute_stats(df)
    assert result["i"].mean == pytest.approx(2.0)
    assert result["i"].na_count == 1
    assert math.isnan(result["e"].mean)
    assert isinstance(result["i"].mean, float)


def test_single_value_has_nan_sd() -> None:
    st = compute_stats(pd.DataFrame({"v": [np.nan, 42.0]}))["v"]
    assert st.mean == 42.0 and st.q25 == 42.0 and st.q75 == 42.0
    assert math.isnan(st.sd)


def test_missing_columns_all_reported(mixed_df: pd.DataFrame) -> None:
    with pytest.raises(ColumnNotFoundError) as exc:
        compute_stats(mixed_df, ["num", "nope", "ints", "gone"])
    assert exc.value.missing == ["nope", "gone"]
    assert str(exc.value) == "Columns not found: nope, gone"
    # also a KeyError for callers that only know builtins
    assert isinstance(exc.value, KeyError)


def test_non_dataframe_rejected() -> None:
    with pytest.raises(InvalidInputError):
        compute_stats({"num": [1, 2, 3]})  # type: ignore[arg-type]
    with pytest.raises(InvalidInputError):
        compute_stats([1, 2, 3])  # type: ignore[arg-type]


def test_explicit_non_numeric_column_rejected(mixed_df: pd.DataFrame) -> None:
    with pytest.raises(InvalidInputError, match="char"):
        compute_stats(mixed_df, ["num", "char"])


def test_custom_numeric_predicate(mixed_df: pd.DataFrame) -> None:
    only_floats = lambda s: pd.api.types.is_float_dtype(s.dtype)  # noqa: E731
    assert list(compute_stats(mixed_df, numeric=only_floats)) == ["num"]


def test_report_is_read_only_and_input_untouched(mixed_df: pd.DataFrame) -> None:
    before = mixed_df.copy()
    result = compute_stats(mixed_df)
    pd.testing.assert_frame_equal(mixed_df, before)

    assert isinstance(result, StatsReport)
    with pytest.raises(TypeError):
        result["num"] = result["ints"]  # type: ignore[index]
    with pytest.raises(Exception):
        result["num"].mean = 0.0  # frozen model
    assert isinstance(result["num"], ColumnStats)


def test_fresh_report_per_call(mixed_df: pd.DataFrame) -> None:
    assert compute_stats(mixed_df) is not compute_stats(mixed_df)


def test_non_string_labels_rejected() -> None:
    df = pd.DataFrame({0: [1.0, 2.0], 1: [3.0, 4.0]})
    with pytest.raises(InvalidInputError, match="strings"):
        compute_stats(df)
    with pytest.raises(InvalidInputError, match="strings"):
        compute_stats(df, [0])  # type: ignore[list-item]


def test_report_keys_are_original_labels(mixed_df: pd.DataFrame) -> None:
    result = compute_stats(mixed_df)
    assert all(c in mixed_df.columns for c in result)
    assert "num" in result
