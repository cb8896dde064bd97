"""Packing of small integers into dense little-endian bit streams."""

from __future__ import annotations

from collections.abc import Iterable


def packed_int3_array_size(size: int) -> int:
    """Return the number of bytes holding ``size`` 3-bit values."""
    return (size * 3 + 7) // 8


def packed_int5_array_size(size: int) -> int:
    """Return the number of bytes holding ``size`` 5-bit values."""
    return (size * 5 + 7) // 8


def unpacked_int3_array_size(size: int) -> int:
    """Return the number of 3-bit values read from ``size`` bytes."""
    return size * 8 // 3


def unpacked_int5_array_size(size: int) -> int:
    """Return the number of 5-bit values read from ``size`` bytes."""
    return size * 8 // 5


def _pack(values: Iterable[int], bits: int) -> bytes:
    # Every 8 values fill exactly `bits` bytes, so work in groups of 8.
    items = list(values)
    mask = (1 << bits) - 1
    out = bytearray()
    for start in range(0, len(items), 8):
        group = 0
        for offset, value in enumerate(items[start:start + 8]):
            group |= (value & mask) << (offset * bits)
        out += group.to_bytes(bits, "little")
    return bytes(out[: (len(items) * bits + 7) // 8])


def _unpack(data: bytes | bytearray | memoryview, bits: int) -> list[int]:
    raw = bytes(data)
    mask = (1 << bits) - 1
    values: list[int] = []
    for start in range(0, len(raw), bits):
        group = int.from_bytes(raw[start:start + bits], "little")
        values.extend((group >> (offset * bits)) & mask for offset in range(8))
    return values[: len(raw) * 8 // bits]


def pack_int3_array(values: Iterable[int]) -> bytes:
    """Pack the low 3 bits of each value, least significant bit first."""
    return _pack(values, 3)


def pack_int5_array(values: Iterable[int]) -> bytes:
    """Pack the low 5 bits of each value, least significant bit first."""
    return _pack(values, 5)


def unpack_int3_array(data: bytes | bytearray | memoryview) -> list[int]:
    """Read consecutive 3-bit values from a packed byte string."""
    return _unpack(data, 3)


def unpack_int5_array(data: bytes | bytearray | memoryview) -> list[int]:
    """Read consecutive 5-bit values from a packed byte string."""
    return _unpack(data, 5)