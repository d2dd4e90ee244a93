import sys
import os
from unittest.mock import patch

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from src.keyedsiphash.siphash import siphash, siphash_2_4
from src.keyedsiphash.vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

KEY = bytes(range(16))
VALUES = [b"", b"alpha", "beta", b"0123456789"]
EXPECTED = [
    siphash_2_4(v if isinstance(v, bytes) else v.encode("utf-8"), KEY) for v in VALUES
]


def test_hash_pandas_series():
    pd = pytest.importorskip("pandas")
    series = pd.Series(VALUES, index=[10, 20, 30, 40], dtype=object)
    result = hash_pandas_series(series, key=KEY)
    assert str(result.dtype) == "uint64"
    assert list(result.index) == [10, 20, 30, 40]
    assert [int(v) for v in result] == EXPECTED


def test_hash_pandas_series_with_params():
    pd = pytest.importorskip("pandas")
    result = hash_pandas_series(pd.Series([b"abc"]), key=KEY, params="1-3")
    assert int(result.iloc[0]) == siphash(b"abc", KEY, 1, 3)


def test_hash_pandas_series_rejects_missing_values():
    pd = pytest.importorskip("pandas")
    with pytest.raises(TypeError):
        hash_pandas_series(pd.Series([b"abc", None]), key=KEY)


def test_hash_arrow_array():
    pa = pytest.importorskip("pyarrow")
    result = hash_arrow_array(pa.array([b"", b"alpha", b"beta", b"0123456789"]), key=KEY)
    assert result.type == pa.uint64()
    assert result.to_pylist() == EXPECTED


def test_hash_arrow_array_from_list():
    pytest.importorskip("pyarrow")
    result = hash_arrow_array(["alpha", "beta"], key=KEY)
    assert result.to_pylist() == EXPECTED[1:3]


def test_hash_polars_series():
    pl = pytest.importorskip("polars")
    result = hash_polars_series(pl.Series("names", ["", "alpha", "beta", "0123456789"]), key=KEY)
    assert result.dtype == pl.UInt64
    assert result.name == "names"
    assert result.to_list() == EXPECTED


def test_vectorized_rejects_bad_key():
    pd = pytest.importorskip("pandas")
    with pytest.raises(ValueError):
        hash_pandas_series(pd.Series([b"abc"]), key=b"short")


def test_hash_arrow_array_rejects_missing_values():
    pa = pytest.importorskip("pyarrow")
    with pytest.raises(TypeError):
        hash_arrow_array(pa.array([b"a", None]), key=KEY)


def test_hash_polars_series_rejects_missing_values():
    pl = pytest.importorskip("polars")
    with pytest.raises(TypeError):
        hash_polars_series(pl.Series("x", ["a", None]), key=KEY)


@pytest.mark.parametrize(
    "func,module",
    [
        (hash_pandas_series, "pandas"),
        (hash_arrow_array, "pyarrow"),
        (hash_polars_series, "polars"),
    ],
)
def test_missing_optional_dependency(func, module):
    # A None entry in sys.modules makes the import fail with ModuleNotFoundError.
    with patch.dict(sys.modules, {module: None}):
        with pytest.raises(ImportError, match=f"pip install {module}"):
            func([b"abc"], key=KEY)
