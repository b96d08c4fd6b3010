"""Writing characters, strings, lines and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from ftkit.chars import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _character(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _text(s: object) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s


def putchar(c: int | str, stream: TextIO | None = None) -> None:
    """Write the single character ``c`` to ``stream`` (standard output by default)."""
    _target(stream).write(_character(c))


def putstr(s: str, stream: TextIO | None = None) -> None:
    """Write the string ``s`` to ``stream`` (standard output by default)."""
    _target(stream).write(_text(s))


def putendl(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline to ``stream`` (standard output by default)."""
    _target(stream).write(_text(s) + "\n")


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of ``n`` to ``stream`` (standard output by default)."""
    _target(stream).write(itoa(n))