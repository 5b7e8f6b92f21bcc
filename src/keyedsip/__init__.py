"""
Keyed SipHash digests for byte strings and columnar data.
"""

import logging

from .digest import SipDigest, available_algorithms, keyed_digest, select_hasher
from .errors import InvalidKeyLength, KeyLengthError
from .siphash import SIPHASH24, SipHash, digest, hexdigest, sip_round, sum64
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidKeyLength",
    "KeyLengthError",
    "SIPHASH24",
    "SipDigest",
    "SipHash",
    "available_algorithms",
    "digest",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
    "hexdigest",
    "keyed_digest",
    "select_hasher",
    "sip_round",
    "sum64",
]
