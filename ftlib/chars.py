"""Character classification for the ASCII range and UTF-8 lead bytes."""

from __future__ import annotations

__all__ = [
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "isnumeric",
    "utf8_length",
]


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return int(c)


def isalpha(c: int | str) -> bool:
    """Tell whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: int | str) -> bool:
    """Tell whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """Tell whether ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """Tell whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 0o177


def isprint(c: int | str) -> bool:
    """Tell whether ``c`` is a printable ASCII character, space included."""
    return 0o40 <= _code(c) <= 0o176


def isnumeric(s: str) -> bool:
    """Tell whether ``s`` is an optional sign followed only by digits.

    A lone sign and the empty string count as numeric.
    """
    body = s[1:] if s[:1] in ("+", "-") else s
    return all(isdigit(ch) for ch in body)


def _is_continuation(data: bytes, index: int) -> bool:
    return index < len(data) and data[index] >> 6 == 0x2


def utf8_length(data: bytes) -> int:
    """Return the byte length of the UTF-8 character starting ``data``.

    Returns 0 when ``data`` is empty, starts with a NUL byte, or does not
    begin with a well-formed sequence of up to four bytes.
    """
    if not data or data[0] == 0:
        return 0
    lead = data[0]
    if lead >> 7 == 0:
        return 1
    if lead >> 5 == 0x6 and _is_continuation(data, 1):
        return 2
    if lead >> 4 == 0xE and all(_is_continuation(data, i) for i in (1, 2)):
        return 3
    if lead >> 3 == 0x1E and all(_is_continuation(data, i) for i in (1, 2, 3)):
        return 4
    return 0