"""Byte-buffer operations: fill, search, compare and copy.

Buffers are ``bytes``-like objects; functions that write need a mutable one
such as ``bytearray``. Counts that run past the end of a buffer raise
``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

_SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == _SIZE_MAX or size == _SIZE_MAX:
        raise MemoryError("requested allocation is too large")
    return bytearray(count * size)


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index == -1 else index


def memcmp(a: Optional[Buffer], b: Optional[Buffer], n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first bytes that differ, else 0."""
    if a is None and b is None:
        return 0
    if n == 0:
        return 0
    if a is None or b is None:
        raise TypeError("cannot compare a buffer with None")
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dst: Optional[bytearray], src: Optional[Buffer], n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("both buffers are required")
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from ``src_offset`` to ``dst_offset``; overlap is safe."""
    if n < 0 or dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets and byte count must not be negative")
    if dst_offset + n > len(buf) or src_offset + n > len(buf):
        raise ValueError("move runs past the end of the buffer")
    buf[dst_offset:dst_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` truncated to a byte."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf