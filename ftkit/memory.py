"""Byte-buffer operations over bytes-like objects.

Writable buffers are ``bytearray`` objects or writable ``memoryview``
slices of them; read-only arguments may be any bytes-like object.
Counts that are negative or run past the end of a buffer raise
``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_count(buf: Buffer, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"count {n} exceeds the length {len(buf)} of {name}")


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(num: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``num`` elements of ``size`` bytes each."""
    if num < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(num * size)


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c & 0xFF`` among the first ``n``, or None."""
    _check_count(buf, n, "buffer")
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_count(a, n, "first buffer")
    _check_count(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` into ``dest`` and return ``dest``.

    Copying a buffer onto itself leaves it untouched.
    """
    _check_count(dest, n, "destination")
    _check_count(src, n, "source")
    if dest is not src:
        dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` into ``dest``, correct even when they overlap."""
    _check_count(dest, n, "destination")
    _check_count(src, n, "source")
    # Taking a copy of the source first makes overlapping views safe.
    dest[:n] = bytes(src[:n])
    return dest


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Fill the first ``n`` bytes of ``buf`` with ``c & 0xFF`` and return ``buf``."""
    _check_count(buf, n, "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf