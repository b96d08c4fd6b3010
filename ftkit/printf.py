"""Formatted output supporting the %c, %s, %d, %i, %u, %x, %X, %p and %% conversions."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any, TextIO

from ftkit.chars import itoa

_INT_BITS = 32
_POINTER_BITS = 64
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"
_MISSING = object()


def _as_int(value: Any, what: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{what} expects an integer, got {type(value).__name__}") from None


def _signed32(num: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return ((num + half) % (1 << _INT_BITS)) - half


def _unsigned(num: int, bits: int) -> int:
    return num % (1 << bits)


def _to_base16(num: int, digits: str) -> str:
    out = []
    while True:
        num, rem = divmod(num, 16)
        out.append(digits[rem])
        if num == 0:
            break
    return "".join(reversed(out))


def format_char(value: int | str) -> str:
    """Return the single character for ``value``.

    An integer is truncated to one byte, as a ``char`` conversion would.
    """
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "%c") & 0xFF)


def format_string(value: str | None) -> str:
    """Return ``value``, or ``(null)`` when it is None."""
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def format_int(num: int) -> str:
    """Return the decimal text of ``num`` taken as a 32-bit signed integer."""
    return itoa(_signed32(_as_int(num, "%d")))


def utoa(num: int) -> str:
    """Return the decimal text of ``num`` taken as a 32-bit unsigned integer."""
    value = _unsigned(_as_int(num, "utoa"), _INT_BITS)
    digits = []
    while True:
        value, rem = divmod(value, 10)
        digits.append(chr(ord("0") + rem))
        if value == 0:
            break
    return "".join(reversed(digits))


def format_unsigned(num: int) -> str:
    """Return the decimal text of ``num`` taken as a 32-bit unsigned integer."""
    return utoa(num)


def format_hex(num: int, specifier: str) -> str:
    """Return ``num`` as 32-bit unsigned hexadecimal.

    Lowercase digits are used for the ``x`` specifier, uppercase for any other.
    """
    value = _unsigned(_as_int(num, "%x"), _INT_BITS)
    return _to_base16(value, _LOWER_DIGITS if specifier == "x" else _UPPER_DIGITS)


def format_pointer(address: Any) -> str:
    """Return an address as ``0x`` followed by lowercase hexadecimal.

    None or a zero address gives ``(nil)``. An integer is used as the address
    itself; any other object is shown by its identity.
    """
    if address is None:
        return _NULL_POINTER
    if isinstance(address, int) and not isinstance(address, bool):
        value = address
    else:
        value = id(address)
    value = _unsigned(value, _POINTER_BITS)
    if value == 0:
        return _NULL_POINTER
    return "0x" + _to_base16(value, _LOWER_DIGITS)


def _take(args: Iterator[Any], specifier: str) -> Any:
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{specifier}")
    return value


def format_conversion(specifier: str, args: Iterator[Any]) -> str:
    """Render one conversion, drawing its argument from the iterator ``args``.

    ``%`` needs no argument; an unknown specifier renders nothing and
    consumes nothing.
    """
    if specifier == "%":
        return "%"
    if specifier == "c":
        return format_char(_take(args, specifier))
    if specifier == "s":
        return format_string(_take(args, specifier))
    if specifier in ("d", "i"):
        return format_int(_take(args, specifier))
    if specifier == "u":
        return format_unsigned(_take(args, specifier))
    if specifier in ("x", "X"):
        return format_hex(_take(args, specifier), specifier)
    if specifier == "p":
        return format_pointer(_take(args, specifier))
    return ""


def _render(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            specifier = next(chars, None)
            if specifier is None:
                yield ch
            else:
                yield format_conversion(specifier, args)
        else:
            yield ch


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted arguments."""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    return "".join(_render(fmt, iter(args)))


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)