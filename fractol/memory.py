"""Byte-buffer helpers: fill, copy, move, search, compare and allocate."""

from __future__ import annotations

_ALLOCATION_LIMIT = 4294967295


def _check_length(length: int, *buffers: bytes | bytearray | memoryview) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer of size {len(buf)}")


def fill(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of buffer to ``value`` (low byte used)."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def zero(buffer: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes of buffer to zero."""
    return fill(buffer, 0, length)


def copy(dst: bytearray, src: bytes | bytearray, length: int) -> bytearray:
    """Copy ``length`` bytes from src to the start of dst."""
    _check_length(length, dst, src)
    if dst is not src:
        dst[:length] = src[:length]
    return dst


def move(buffer: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Copy ``length`` bytes within buffer; overlapping regions are handled."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length)
    if max(dst_offset, src_offset) + length > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dst_offset:dst_offset + length] = bytes(
        buffer[src_offset:src_offset + length]
    )
    return buffer


def find_byte(data: bytes | bytearray, value: int, length: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``length``."""
    _check_length(length, data)
    index = bytes(data[:length]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def compare(a: bytes | bytearray, b: bytes | bytearray, length: int) -> int:
    """Compare the first ``length`` bytes; return the first difference or 0."""
    _check_length(length, a, b)
    for x, y in zip(a[:length], b[:length]):
        if x != y:
            return x - y
    return 0


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count >= _ALLOCATION_LIMIT or size >= _ALLOCATION_LIMIT:
        raise MemoryError(f"refusing to allocate {count} x {size} bytes")
    return bytearray(count * size)