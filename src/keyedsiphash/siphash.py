from __future__ import annotations

import struct
from typing import Tuple, Union

from .errors import InvalidKeyLength
from .params import (
    SIPHASH_1_3,
    SIPHASH_2_4,
    SipHashParams,
    check_round_count,
    resolve_params,
)
from .words import MASK_64, read_u64_le, rotl64

BytesLike = Union[bytes, bytearray, memoryview]
State = Tuple[int, int, int, int]

# "somepseudorandomlygeneratedbytes", split into four little-endian words.
_INIT_V0 = 0x736F6D6570736575
_INIT_V1 = 0x646F72616E646F6D
_INIT_V2 = 0x6C7967656E657261
_INIT_V3 = 0x7465646279746573

_FINAL_XOR = 0xFF


def _as_bytes(value, what: str) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes-like")
    return bytes(value)


def _split_key(key: BytesLike) -> Tuple[int, int]:
    key_bytes = _as_bytes(key, "key")
    if len(key_bytes) != 16:
        raise InvalidKeyLength(len(key_bytes))
    return read_u64_le(key_bytes, 0), read_u64_le(key_bytes, 8)


def sip_round(v0: int, v1: int, v2: int, v3: int) -> State:
    """Apply one SipRound to the four state words and return the new state."""
    v0 = (v0 + v1) & MASK_64
    v1 = rotl64(v1, 13)
    v1 ^= v0
    v0 = rotl64(v0, 32)

    v2 = (v2 + v3) & MASK_64
    v3 = rotl64(v3, 16)
    v3 ^= v2

    v2 = (v2 + v1) & MASK_64
    v1 = rotl64(v1, 17)
    v1 ^= v2
    v2 = rotl64(v2, 32)

    v0 = (v0 + v3) & MASK_64
    v3 = rotl64(v3, 21)
    v3 ^= v0

    return v0, v1, v2, v3


def _initial_state(k0: int, k1: int) -> State:
    return k0 ^ _INIT_V0, k1 ^ _INIT_V1, k0 ^ _INIT_V2, k1 ^ _INIT_V3


def _compress(state: State, m: int, rounds: int) -> State:
    v0, v1, v2, v3 = state
    v3 ^= m
    for _ in range(rounds):
        v0, v1, v2, v3 = sip_round(v0, v1, v2, v3)
    v0 ^= m
    return v0, v1, v2, v3


def _compress_blocks(state: State, message: bytes, c: int) -> State:
    offset_limit = len(message) - (len(message) % 8)
    for offset in range(0, offset_limit, 8):
        state = _compress(state, read_u64_le(message, offset), c)
    return state


def _finalize(state: State, message: bytes, c: int, d: int) -> int:
    # Final block: leftover bytes + message length in the last byte.
    tail_len = len(message) % 8
    b = ((len(message) & 0xFF) << 56) | read_u64_le(
        message, len(message) - tail_len, tail_len
    )

    v0, v1, v2, v3 = _compress(state, b, c)
    v2 ^= _FINAL_XOR
    for _ in range(d):
        v0, v1, v2, v3 = sip_round(v0, v1, v2, v3)

    return v0 ^ v1 ^ v2 ^ v3


def _siphash(message: bytes, k0: int, k1: int, c: int, d: int) -> int:
    state = _compress_blocks(_initial_state(k0, k1), message, c)
    return _finalize(state, message, c, d)


def siphash(message: BytesLike, key: BytesLike, c: int, d: int) -> int:
    """
    Compute SipHash-c-d of ``message`` under a 16-byte ``key``.

    Args:
        message: Bytes-like message of any length
        key: 16-byte key; the first 8 bytes form k0, the last 8 bytes k1
        c: Compression rounds per 8-byte block (must be positive)
        d: Finalization rounds (must be positive)

    Returns:
        The 64-bit hash as an unsigned integer.

    Raises:
        InvalidKeyLength: If key is not exactly 16 bytes
        InvalidRoundCount: If c or d is not positive
        TypeError: If key or message is not bytes-like, or a round count is not an integer
    """
    k0, k1 = _split_key(key)
    c = check_round_count("c", c)
    d = check_round_count("d", d)
    return _siphash(_as_bytes(message, "message"), k0, k1, c, d)


def siphash_2_4(message: BytesLike, key: BytesLike) -> int:
    """SipHash-2-4, the standard parameterization."""
    return siphash(message, key, SIPHASH_2_4.c, SIPHASH_2_4.d)


def siphash_1_3(message: BytesLike, key: BytesLike) -> int:
    return siphash(message, key, SIPHASH_1_3.c, SIPHASH_1_3.d)


def siphash_digest(message: BytesLike, key: BytesLike, c: int = 2, d: int = 4) -> bytes:
    """Return the hash as 8 little-endian bytes."""
    return struct.pack("<Q", siphash(message, key, c, d))


class SipHash:
    """
    Keyed SipHash-c-d hasher for complete messages.

    The key is validated and split once at construction; every call takes a
    whole message, there is no incremental ``update``.
    """

    def __init__(self, key: BytesLike, params: Union[SipHashParams, str] = SIPHASH_2_4):
        self._k0, self._k1 = _split_key(key)
        self.params = resolve_params(params)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(params={self.params!r})"

    def hash(self, message: BytesLike) -> int:
        return _siphash(
            _as_bytes(message, "message"), self._k0, self._k1, self.params.c, self.params.d
        )

    def digest(self, message: BytesLike) -> bytes:
        return struct.pack("<Q", self.hash(message))

    def hexdigest(self, message: BytesLike) -> str:
        return self.digest(message).hex()


__all__ = [
    "SipHash",
    "sip_round",
    "siphash",
    "siphash_1_3",
    "siphash_2_4",
    "siphash_digest",
]
