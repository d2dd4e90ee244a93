from __future__ import annotations


class SipHashError(Exception):
    """Base class for errors raised by keyedsiphash."""


class InvalidKeyLength(SipHashError, ValueError):
    def __init__(self, length: int):
        super().__init__(f"SipHash key must be exactly 16 bytes, got {length}")
        self.length = length


class InvalidRoundCount(SipHashError, ValueError):
    def __init__(self, name: str, value: int):
        super().__init__(f"SipHash round count {name} must be positive, got {value}")
        self.name = name
        self.value = value


class InternalExtractionFailure(SipHashError, RuntimeError):
    """
    Raised when a word read falls outside the message buffer.

    Public entry points compute every offset themselves, so this signals a
    bug in the block arithmetic rather than bad input.
    """


__all__ = [
    "SipHashError",
    "InvalidKeyLength",
    "InvalidRoundCount",
    "InternalExtractionFailure",
]
