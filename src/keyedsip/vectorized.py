from __future__ import annotations

import importlib
import logging
from typing import Any, Iterable, List

from .digest import select_hasher
from .siphash import load_key

logger = logging.getLogger(__name__)


def _require(module: str, caller: str):
    try:
        return importlib.import_module(module)
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            f"Install {module} to use {caller}: pip install {module}"
        ) from exc


def _coerce_value(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"Cannot hash value of type {type(value)!r}; expected bytes or str")


def _hash_values(values: Iterable[Any], key: bytes, algo: str) -> List[int]:
    hasher = select_hasher(algo)
    # Validate the key up front so empty columns still reject a bad key.
    load_key(key)
    hashes = [hasher.sum64(key, _coerce_value(val)) for val in values]
    logger.debug("Hashed %d values with %s", len(hashes), hasher.name)
    return hashes


def hash_pandas_series(series: Any, key: bytes, algo: str = "siphash24"):
    """Hash a pandas Series of bytes/str into a uint64 Series with the same index."""
    pd = _require("pandas", "hash_pandas_series")
    return pd.Series(
        _hash_values(series, key, algo),
        index=getattr(series, "index", None),
        dtype="uint64",
    )


def hash_arrow_array(array: Any, key: bytes, algo: str = "siphash24"):
    """Hash a pyarrow Array (or a plain sequence) of bytes/str into a uint64 Array."""
    pa = _require("pyarrow", "hash_arrow_array")
    values = array.to_pylist() if hasattr(array, "to_pylist") else array
    return pa.array(_hash_values(values, key, algo), type=pa.uint64())


def hash_polars_series(series: Any, key: bytes, algo: str = "siphash24"):
    """Hash a polars Series (or a plain sequence) of bytes/str into a UInt64 Series."""
    pl = _require("polars", "hash_polars_series")
    ser = series if hasattr(series, "dtype") else pl.Series(series)
    return pl.Series(
        name=ser.name or "hash", values=_hash_values(ser, key, algo), dtype=pl.UInt64
    )


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
