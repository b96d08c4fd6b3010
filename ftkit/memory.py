"""Byte-buffer operations: filling, allocating, searching, comparing and copying."""

from __future__ import annotations

import sys


def _check_span(length: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what}: negative length {n}")
    if n > length:
        raise IndexError(f"{what}: length {n} exceeds buffer of {length} bytes")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` taken as an unsigned byte."""
    _check_span(len(buf), n, "memset")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb`` elements of ``size`` bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("calloc: negative count or size")
    if nmemb == 0 or size == 0:
        return bytearray()
    total = nmemb * size
    if total > sys.maxsize:
        raise OverflowError(f"calloc: {nmemb} * {size} bytes is too large")
    return bytearray(total)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within the first ``n`` bytes, or None."""
    _check_span(len(data), n, "memchr")
    index = data.find(bytes([c & 0xFF]), 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_span(min(len(a), len(b)), n, "memcmp")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_span(min(len(dest), len(src)), n, "memcpy")
    if dest is not src:
        dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied out first.
    """
    if dest < 0 or src < 0:
        raise ValueError("memmove: negative offset")
    _check_span(len(buf) - max(dest, src), n, "memmove")
    if dest != src and n:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf