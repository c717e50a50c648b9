"""Building, splitting, trimming and editing strings."""

from __future__ import annotations

from collections.abc import Callable

__all__ = [
    "charstr",
    "split",
    "strconv",
    "strdel",
    "strins",
    "strjoin",
    "strmapi",
    "strpad",
    "strsubst",
    "strtrim",
    "substr",
]


def _single(c: str) -> str:
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def charstr(number: int, c: str) -> str:
    """Return a string of ``number`` copies of the character ``c``."""
    if number < 0:
        raise ValueError("number must be non-negative")
    return _single(c) * number


def split(s: str, c: str) -> list[str]:
    """Split ``s`` on the character ``c``, dropping empty words.

    Runs of delimiters count as one, and leading or trailing delimiters
    produce no words.
    """
    return [word for word in s.split(_single(c)) if word]


def strconv(s: str, f: Callable[[str], str]) -> str:
    """Return ``s`` with ``f`` applied to each of its characters."""
    return "".join(f(ch) for ch in s)


def strdel(s: str, pos: int) -> str:
    """Return ``s`` without the character at ``pos``.

    A position equal to the length of ``s`` deletes nothing.
    """
    if pos < 0 or pos > len(s):
        raise IndexError("position out of range")
    return s[:pos] + s[pos + 1 :]


def strins(s: str, sym: str, position: int) -> str:
    """Insert the character ``sym`` into ``s`` before index ``position``.

    A position past the end of ``s`` leaves it unchanged.
    """
    _single(sym)
    if position < 0:
        raise IndexError("position must be non-negative")
    if position > len(s):
        return s
    return s[:position] + sym + s[position:]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return s1 + s2


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string made of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def strpad(s: str, pad: str, num: int) -> str:
    """Pad ``s`` with ``abs(num)`` copies of ``pad``.

    A negative ``num`` pads on the left, a positive one on the right.
    """
    padding = charstr(abs(num), pad)
    if num < 0:
        return padding + s
    return s + padding


def strsubst(s: str, src: str, dst: str | None) -> str:
    """Replace the first occurrence of ``src`` in ``s`` with ``dst``.

    A ``dst`` of None deletes ``src``. Raises ValueError when ``src`` does
    not occur in ``s``.
    """
    if s is None or src is None:
        raise TypeError("string and substring are required")
    if src not in s:
        raise ValueError("substring not found")
    return s.replace(src, dst or "", 1)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        raise TypeError("string and character set are required")
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end of ``s`` gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    return s[start : start + length]