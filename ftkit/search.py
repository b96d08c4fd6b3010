"""Measuring, searching, comparing and bounded copying of text."""

from __future__ import annotations


def _char_code(c: int | str) -> int:
    """Return the code of ``c``, given as a code point or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_size(size: int, what: str) -> None:
    if size < 0:
        raise ValueError(f"{what}: negative size {size}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string, ``len(s)``.
    """
    code = _char_code(c)
    if code == 0:
        return len(s)
    index = s.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string, ``len(s)``.
    """
    code = _char_code(c)
    if code == 0:
        return len(s)
    index = s.rfind(chr(code))
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when they are equal over that span, otherwise the difference
    of the codes at the first position where they differ; the end of a
    string counts as code 0.
    """
    _check_size(n, "strncmp")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    _check_size(length, "strnstr")
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the new buffer contents and the length of ``src``, the length that
    was attempted. With ``size`` 0 the destination is left as it was.
    """
    _check_size(size, "strlcpy")
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters, terminator included.

    Returns the new buffer contents and the length that was attempted. When
    ``dest`` already fills the buffer it is left as it was and the attempted
    length is ``size + len(src)``.
    """
    _check_size(size, "strlcat")
    if len(dest) >= size:
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)