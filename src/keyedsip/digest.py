from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Dict, List

from .siphash import SIPHASH24, SipHash

logger = logging.getLogger(__name__)

_PRESETS: Dict[str, SipHash] = {
    "siphash24": SIPHASH24,
    "siphash13": SipHash(1, 3),
    "siphash48": SipHash(4, 8),
}


def _normalize_algo(algo: str) -> str:
    return algo.lower().replace("-", "").replace("_", "")


def select_hasher(algo: str) -> SipHash:
    """Look up a SipHash preset by name, e.g. ``"siphash24"`` or ``"SipHash-1-3"``."""
    hasher = _PRESETS.get(_normalize_algo(algo))
    if hasher is None:
        logger.debug("Rejecting unknown algorithm %r", algo)
        raise ValueError(f"Unsupported algorithm: {algo}")
    return hasher


def available_algorithms() -> List[str]:
    return sorted(_PRESETS)


@dataclass(frozen=True)
class SipDigest:
    _value: int

    def digest(self) -> bytes:
        return struct.pack("<Q", self._value)

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        return self._value


def keyed_digest(key: bytes, data: bytes, algo: str = "siphash24") -> SipDigest:
    """
    Hash a byte string with a keyed SipHash preset.

    Args:
        key: 16-byte key
        data: Bytes-like message, any length
        algo: Preset name (default: "siphash24")

    Returns:
        SipDigest object with digest(), hexdigest(), and intdigest() methods.

    Raises:
        ValueError: If algo is unsupported
        KeyLengthError: If key is not exactly 16 bytes
        TypeError: If key or data is not bytes-like
    """
    hasher = select_hasher(algo)
    return SipDigest(hasher.sum64(key, data))


__all__ = ["SipDigest", "available_algorithms", "keyed_digest", "select_hasher"]
