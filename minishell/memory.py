"""Byte-buffer filling, copying, searching and comparison helpers."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

_CALLOC_LIMIT = 2147483647


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise IndexError("byte count runs past the end of the buffer")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied
    to a temporary first.
    """
    if n < 0 or dest < 0 or src < 0:
        raise ValueError("offsets and byte count must not be negative")
    if dest + n > len(buf) or src + n > len(buf):
        raise IndexError("region runs past the end of the buffer")
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``c`` in ``buf[:n]``."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes.

    Requests larger than 2147483647 bytes raise :class:`MemoryError`.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("sizes must not be negative")
    total = nmemb * size
    if total > _CALLOC_LIMIT:
        raise MemoryError(f"refusing to allocate {total} bytes")
    return bytearray(total)