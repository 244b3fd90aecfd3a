"""Byte-buffer operations over ``bytearray`` and other bytes-like objects."""

from __future__ import annotations

import sys

_SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers: bytes | bytearray | memoryview) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source were copied
    to a temporary area first.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    end = max(dest_offset, src_offset) + n
    if end > len(buf):
        raise ValueError(f"range ends at {end}, beyond buffer length {len(buf)}")
    if n and dest_offset != src_offset:
        buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(buf: bytes | bytearray, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` (mod 256) in the first ``n`` bytes, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the product would overflow the platform size type.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > _SIZE_MAX // size:
        raise MemoryError(f"{count} * {size} bytes overflows the size limit")
    return bytearray(count * size)