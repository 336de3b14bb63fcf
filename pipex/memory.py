"""Byte-buffer helpers with the bounded semantics of the C memory routines.

Buffers are ``bytes`` for reading and ``bytearray`` for writing. A size
larger than a buffer it refers to raises ``ValueError`` instead of
reading or writing past the end.
"""

from __future__ import annotations

from typing import Optional, Union

SIZE_MAX = 2**64 - 1

ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_size(size: int, *buffers: ReadableBuffer) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    for buffer in buffers:
        if size > len(buffer):
            raise ValueError(f"size {size} exceeds a buffer of {len(buffer)} bytes")


def mem_find(data: ReadableBuffer, value: int, size: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` in ``data[:size]``, or ``None``."""
    _check_size(size, data)
    index = bytes(data[:size]).find(value & 0xFF)
    return index if index >= 0 else None


def mem_compare(first: ReadableBuffer, second: ReadableBuffer, size: int) -> int:
    """Difference of the first differing bytes within ``size``; 0 if none differ."""
    _check_size(size, first, second)
    for a, b in zip(first[:size], second[:size]):
        if a != b:
            return a - b
    return 0


def mem_copy(dest: bytearray, src: ReadableBuffer, size: int) -> bytearray:
    """Copy the first ``size`` bytes of ``src`` to the start of ``dest``."""
    _check_size(size, dest, src)
    if dest is not src:
        dest[:size] = bytes(src[:size])
    return dest


def mem_move(buffer: bytearray, dest: int, src: int, size: int) -> bytearray:
    """Copy ``size`` bytes from offset ``src`` to offset ``dest`` in one buffer.

    The regions may overlap; the result is as if the source were copied
    aside first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if max(dest, src) + size > len(buffer):
        raise ValueError("region lies outside the buffer")
    buffer[dest:dest + size] = buffer[src:src + size]
    return buffer


def mem_set(buffer: bytearray, value: int, size: int) -> bytearray:
    """Fill the first ``size`` bytes with the low byte of ``value``."""
    _check_size(size, buffer)
    buffer[:size] = bytes([value & 0xFF]) * size
    return buffer


def zero(buffer: bytearray, size: int) -> None:
    """Set the first ``size`` bytes to zero."""
    mem_set(buffer, 0, size)


def zeroed(count: int, size: int) -> bytearray:
    """A new zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == SIZE_MAX or size == SIZE_MAX:
        raise MemoryError("allocation too large")
    return bytearray(count * size)