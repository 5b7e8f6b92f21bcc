import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

import pytest

from keyedsip import KeyLengthError, sum64
from keyedsip.vectorized import _coerce_value, _hash_values

KEY = bytes(range(16))
VALUES = [b"", b"alpha", "beta", bytearray(b"gamma")]


def _expected(values):
    return [sum64(KEY, _coerce_value(val)) for val in values]


def test_coerce_value_encodes_str_as_utf8():
    assert _coerce_value("é") == "é".encode("utf-8")
    assert _coerce_value(memoryview(b"abc")) == b"abc"


@pytest.mark.parametrize("value", [None, 1, 1.5, ["a"]])
def test_coerce_value_rejects_non_bytes(value):
    with pytest.raises(TypeError):
        _coerce_value(value)


def test_hash_values_validates_key_for_empty_input():
    with pytest.raises(KeyLengthError):
        _hash_values([], b"short", "siphash24")


def test_hash_values_rejects_unknown_algo():
    with pytest.raises(ValueError):
        _hash_values([b"x"], KEY, "md5")


def test_hash_pandas_series():
    pd = pytest.importorskip("pandas")
    from keyedsip import hash_pandas_series

    series = pd.Series(VALUES, index=[10, 11, 12, 13])
    result = hash_pandas_series(series, KEY)
    assert str(result.dtype) == "uint64"
    assert list(result.index) == [10, 11, 12, 13]
    assert [int(v) for v in result] == _expected(VALUES)


def test_hash_arrow_array():
    pa = pytest.importorskip("pyarrow")
    from keyedsip import hash_arrow_array

    values = [b"", b"alpha", b"beta"]
    result = hash_arrow_array(pa.array(values, type=pa.binary()), KEY)
    assert result.type == pa.uint64()
    assert result.to_pylist() == _expected(values)

    from_list = hash_arrow_array(["x", "y"], KEY)
    assert from_list.to_pylist() == _expected(["x", "y"])


def test_hash_polars_series():
    pl = pytest.importorskip("polars")
    from keyedsip import hash_polars_series

    values = [b"", b"alpha", b"beta"]
    result = hash_polars_series(pl.Series("payload", values), KEY)
    assert result.dtype == pl.UInt64
    assert result.name == "payload"
    assert result.to_list() == _expected(values)


def test_hash_polars_series_from_list_gets_default_name():
    pl = pytest.importorskip("polars")
    from keyedsip import hash_polars_series

    result = hash_polars_series(["a", "b"], KEY)
    assert result.name == "hash"
    assert result.to_list() == _expected(["a", "b"])


def test_missing_library_raises_import_error_with_hint(monkeypatch):
    import importlib

    from keyedsip import hash_polars_series

    def fail_import(name, *args, **kwargs):
        raise ModuleNotFoundError(name)

    monkeypatch.setattr(importlib, "import_module", fail_import)
    with pytest.raises(ImportError) as excinfo:
        hash_polars_series([b"a"], KEY)
    assert "pip install polars" in str(excinfo.value)
