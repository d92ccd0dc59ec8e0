"""Byte-buffer helpers working on bytearray and bytes-like objects."""

from __future__ import annotations

from typing import Optional


def _check_span(length: int, start: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if start < 0 or start + n > length:
        raise IndexError(f"{what} range [{start}, {start + n}) outside buffer of {length} bytes")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low byte of value."""
    _check_span(len(buffer), 0, n, "fill")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buffer."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value in the first n bytes, or None."""
    _check_span(len(data), 0, n, "search")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _check_span(len(first), 0, n, "first")
    _check_span(len(second), 0, n, "second")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy n bytes from src to the start of dst and return dst."""
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("both source and destination are required")
    _check_span(len(src), 0, n, "source")
    _check_span(len(dst), 0, n, "destination")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy n bytes within buffer from offset src to offset dst; overlap is safe."""
    _check_span(len(buffer), src, n, "source")
    _check_span(len(buffer), dst, n, "destination")
    buffer[dst:dst + n] = bytes(buffer[src:src + n])
    return buffer