from __future__ import annotations

import struct
from typing import Tuple

from .errors import KeyLengthError

_MASK_64 = 0xFFFFFFFFFFFFFFFF

# "somepseu", "dorandom", "lygenera", "tedbytes" as little-endian words.
_INIT_V0 = 0x736F6D6570736575
_INIT_V1 = 0x646F72616E646F6D
_INIT_V2 = 0x6C7967656E657261
_INIT_V3 = 0x7465646279746573

_BYTES_LIKE = (bytes, bytearray, memoryview)

State = Tuple[int, int, int, int]


def _rotl(x: int, b: int) -> int:
    """Rotate left for 64-bit values."""
    return ((x << b) | (x >> (64 - b))) & _MASK_64


def sip_round(v0: int, v1: int, v2: int, v3: int) -> State:
    """Apply one SipRound to the four state words and return the new state."""
    v0 = (v0 + v1) & _MASK_64
    v2 = (v2 + v3) & _MASK_64
    v1 = _rotl(v1, 13)
    v3 = _rotl(v3, 16)
    v1 ^= v0
    v3 ^= v2
    v0 = _rotl(v0, 32)

    v2 = (v2 + v1) & _MASK_64
    v0 = (v0 + v3) & _MASK_64
    v1 = _rotl(v1, 17)
    v3 = _rotl(v3, 21)
    v1 ^= v2
    v3 ^= v0
    v2 = _rotl(v2, 32)

    return v0, v1, v2, v3


def _as_bytes(value, name: str) -> bytes:
    if not isinstance(value, _BYTES_LIKE):
        raise TypeError(f"{name} must be bytes-like")
    return value if isinstance(value, bytes) else bytes(value)


def load_key(key: bytes) -> Tuple[int, int]:
    """
    Split a 16-byte key into its two little-endian words ``(k0, k1)``.

    Raises:
        TypeError: If key is not bytes-like
        KeyLengthError: If key is not exactly 16 bytes
    """
    key_bytes = _as_bytes(key, "key")
    if len(key_bytes) != 16:
        raise KeyLengthError()
    return struct.unpack("<QQ", key_bytes)


def _tail_word(data: bytes, head: int) -> int:
    # Length byte in bits 56-63, leftover bytes below it, lowest first.
    return ((len(data) & 0xFF) << 56) | int.from_bytes(data[head:], "little")


class SipHash:
    """
    Pure-Python SipHash-c-d with a single-shot API.

    Instances only carry the round counts, so one object can be shared freely
    and reused for any number of ``(key, data)`` pairs.
    """

    __slots__ = ("_c_rounds", "_d_rounds")

    def __init__(self, c_rounds: int = 2, d_rounds: int = 4):
        for name, rounds in (("c_rounds", c_rounds), ("d_rounds", d_rounds)):
            if isinstance(rounds, bool) or not isinstance(rounds, int):
                raise TypeError(f"{name} must be an int")
            if rounds < 1:
                raise ValueError(f"{name} must be at least 1, got {rounds}")
        self._c_rounds = c_rounds
        self._d_rounds = d_rounds

    @property
    def c_rounds(self) -> int:
        return self._c_rounds

    @property
    def d_rounds(self) -> int:
        return self._d_rounds

    @property
    def name(self) -> str:
        return f"siphash{self._c_rounds}{self._d_rounds}"

    def __repr__(self) -> str:
        return f"SipHash(c_rounds={self._c_rounds}, d_rounds={self._d_rounds})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, SipHash):
            return NotImplemented
        return (self._c_rounds, self._d_rounds) == (other._c_rounds, other._d_rounds)

    def __hash__(self) -> int:
        return hash((self._c_rounds, self._d_rounds))

    def sum64(self, key: bytes, data: bytes) -> int:
        """
        Compute the 64-bit SipHash digest of ``data`` under ``key``.

        Args:
            key: 16-byte secret key
            data: Message bytes of any length, including empty

        Returns:
            The digest as an unsigned 64-bit integer.

        Raises:
            KeyLengthError: If key is not exactly 16 bytes
            TypeError: If key or data is not bytes-like
        """
        k0, k1 = load_key(key)
        raw = _as_bytes(data, "data")

        state = (_INIT_V0 ^ k0, _INIT_V1 ^ k1, _INIT_V2 ^ k0, _INIT_V3 ^ k1)

        head = len(raw) - (len(raw) % 8)
        for (m,) in struct.iter_unpack("<Q", raw[:head]):
            state = self._compress(state, m)

        state = self._compress(state, _tail_word(raw, head))
        return self._finalize(state)

    def digest(self, key: bytes, data: bytes) -> bytes:
        """Return the digest as 8 little-endian bytes."""
        return struct.pack("<Q", self.sum64(key, data))

    def hexdigest(self, key: bytes, data: bytes) -> str:
        return self.digest(key, data).hex()

    # Internal helpers -------------------------------------------------
    def _compress(self, state: State, m: int) -> State:
        v0, v1, v2, v3 = state
        v3 ^= m
        for _ in range(self._c_rounds):
            v0, v1, v2, v3 = sip_round(v0, v1, v2, v3)
        v0 ^= m
        return v0, v1, v2, v3

    def _finalize(self, state: State) -> int:
        v0, v1, v2, v3 = state
        v2 ^= 0xFF
        for _ in range(self._d_rounds):
            v0, v1, v2, v3 = sip_round(v0, v1, v2, v3)
        return v0 ^ v1 ^ v2 ^ v3


SIPHASH24 = SipHash(2, 4)


def sum64(key: bytes, data: bytes) -> int:
    """SipHash-2-4 digest of ``data`` as an unsigned 64-bit integer."""
    return SIPHASH24.sum64(key, data)


def digest(key: bytes, data: bytes) -> bytes:
    """SipHash-2-4 digest of ``data`` as 8 little-endian bytes."""
    return SIPHASH24.digest(key, data)


def hexdigest(key: bytes, data: bytes) -> str:
    return SIPHASH24.hexdigest(key, data)


__all__ = [
    "SIPHASH24",
    "SipHash",
    "digest",
    "hexdigest",
    "load_key",
    "sip_round",
    "sum64",
]
