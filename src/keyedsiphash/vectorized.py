from __future__ import annotations

import logging
from typing import Any, List

from .params import SIPHASH_2_4
from .siphash import SipHash

logger = logging.getLogger(__name__)


def _as_message(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"Cannot hash column value of type {type(value)!r}; expected bytes or str")


def _hash_values(values, key: bytes, params) -> List[int]:
    hasher = SipHash(key, params)
    hashes = [hasher.hash(_as_message(val)) for val in values]
    logger.debug("hashed %d values with %s", len(hashes), hasher.params.name)
    return hashes


def hash_pandas_series(series: Any, key: bytes, params=SIPHASH_2_4):
    """
    Hash a pandas Series of bytes or str into a uint64 Series.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    hashes = _hash_values(series, key, params)
    return pd.Series(hashes, index=getattr(series, "index", None), dtype="uint64")


def hash_arrow_array(array: Any, key: bytes, params=SIPHASH_2_4):
    """
    Hash a pyarrow Array (or values coercible to one) into a uint64 Array.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    hashes = _hash_values(
        (val.as_py() if hasattr(val, "as_py") else val for val in arr), key, params
    )
    return pa.array(hashes, type=pa.uint64())


def hash_polars_series(series: Any, key: bytes, params=SIPHASH_2_4):
    """
    Hash a polars Series of bytes or str into a UInt64 Series.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    hashes = _hash_values(ser, key, params)
    name = getattr(ser, "name", None) or "hash"
    return pl.Series(name=name, values=hashes, dtype=pl.UInt64)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
