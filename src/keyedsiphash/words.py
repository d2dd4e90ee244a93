from __future__ import annotations

import struct

from .errors import InternalExtractionFailure

MASK_64 = 0xFFFFFFFFFFFFFFFF

_U64_LE = struct.Struct("<Q")


def rotl64(x: int, b: int) -> int:
    """Rotate left for 64-bit values."""
    return ((x << b) | (x >> (64 - b))) & MASK_64


def read_u64_le(data, offset: int, count: int = 8) -> int:
    """
    Read up to 8 bytes at ``offset`` as a little-endian unsigned integer.

    Bytes beyond ``count`` are treated as zero, so a short read yields the
    zero-padded word. The read never goes past the end of ``data``.

    Raises:
        InternalExtractionFailure: If the requested range is not inside ``data``
    """
    if not 0 <= count <= 8:
        raise InternalExtractionFailure(f"cannot read {count} bytes into a 64-bit word")
    if offset < 0 or offset + count > len(data):
        raise InternalExtractionFailure(
            f"read of {count} bytes at offset {offset} overruns buffer of {len(data)} bytes"
        )

    if count == 8:
        return _U64_LE.unpack_from(data, offset)[0]

    word = 0
    for idx in range(count):
        word |= data[offset + idx] << (8 * idx)
    return word


__all__ = ["MASK_64", "read_u64_le", "rotl64"]
