"""Explicit byte-order helpers.

Key material arrives big-endian (network order) while the CAPI container wants
little-endian; the canonical proof message is big-endian throughout. Keeping
the conversions here means every flip is one tested call instead of an inline
slice.
"""
from __future__ import annotations

import struct

INT32_MAX = 2**31 - 1


def be_to_le(data: bytes) -> bytes:
    """Reverse an unsigned big-endian byte string into little-endian order."""
    return bytes(reversed(data))


def uint32_le(value: int) -> bytes:
    return struct.pack("<I", value)


def int32_be(value: int) -> bytes:
    return struct.pack(">i", value)


def int64_be(value: int) -> bytes:
    return struct.pack(">q", value)


def int_to_be_bytes(value: int) -> bytes:
    """Minimal-length unsigned big-endian encoding (at least one byte)."""
    if value < 0:
        raise ValueError("negative integers have no unsigned encoding")
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")


__all__ = ["INT32_MAX", "be_to_le", "uint32_le", "int32_be", "int64_be", "int_to_be_bytes"]
