"""Building new strings: copies, slices, joins, trimming, splitting and mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _delimiter(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(_require_str(s, "s"))


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start beyond the end of ``s`` gives the empty string.
    """
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("substr: negative start or length")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s1: str, charset: str) -> str:
    """Return ``s1`` with characters of ``charset`` removed from both ends."""
    _require_str(s1, "s1")
    _require_str(charset, "charset")
    if not charset:
        return s1
    return s1.strip(charset)


def split(s: str, c: int | str) -> list[str]:
    """Split ``s`` on the delimiter ``c``, dropping empty words."""
    _require_str(s, "s")
    delimiter = _delimiter(c)
    return [word for word in s.split(delimiter) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string of ``f(index, char)`` for each character of ``s``."""
    _require_str(s, "s")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str] | None, f: Callable[[int, str], str | None]) -> None:
    """Apply ``f(index, char)`` to each character of ``s`` in place.

    ``s`` is a mutable sequence of characters. When ``f`` returns a character
    it replaces the one at that index; None leaves it unchanged. A ``s`` of
    None is ignored.
    """
    if s is None:
        return
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement