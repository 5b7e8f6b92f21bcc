from __future__ import annotations


class KeyLengthError(ValueError):
    """Raised when a SipHash key is not exactly 16 bytes long."""

    def __init__(self) -> None:
        super().__init__("sip: len(key) != 16")


InvalidKeyLength = KeyLengthError

__all__ = ["KeyLengthError", "InvalidKeyLength"]
