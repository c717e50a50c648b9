"""Conversions between integers and their text forms."""

from __future__ import annotations

__all__ = [
    "PREFIX_ON",
    "PREFIX_OFF",
    "atoi",
    "itoa",
    "itoa_base",
]

PREFIX_ON = True
PREFIX_OFF = False

_WHITESPACE = " \n\t\r\v\f"
_DIGITS = "0123456789abcdef"
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_UINTMAX_LIMIT = 2**64
_PREFIXES = {2: "0b", 8: "0", 16: "0x"}


def _to_int32(value: int) -> int:
    """Keep the low 32 bits of ``value`` as a signed integer."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def atoi(s: str) -> int:
    """Read a decimal integer from the start of ``s``.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. A value beyond the 64-bit range saturates, and
    the result is then cut to a 32-bit signed integer, so positive overflow
    gives -1 and negative overflow gives 0. Text without digits gives 0.
    """
    text = s.lstrip(_WHITESPACE)
    negative = text[:1] == "-"
    if text[:1] in ("+", "-"):
        text = text[1:]
    magnitude = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        magnitude = magnitude * 10 + ord(ch) - ord("0")
        if not negative and magnitude > _LONG_MAX:
            return _to_int32(_LONG_MAX)
        if negative and -magnitude < _LONG_MIN:
            return _to_int32(_LONG_MIN)
    return _to_int32(-magnitude if negative else magnitude)


def itoa(n: int) -> str:
    """Return the decimal form of ``n``, with a leading minus when negative."""
    return str(int(n))


def itoa_base(n: int, negative: bool, base: int, prefix: bool) -> str:
    """Write the unsigned ``n`` in ``base`` (2 to 16) with lowercase digits.

    When ``negative`` is true a minus sign precedes the digits. When
    ``prefix`` is true, bases 2, 8 and 16 get "0b", "0" and "0x" put in
    front of everything, sign included.
    """
    if not 2 <= base <= 16:
        raise ValueError("base must be between 2 and 16")
    if not 0 <= n < _UINTMAX_LIMIT:
        raise ValueError("n must fit an unsigned 64-bit integer")
    digits: list[str] = []
    while n:
        n, remainder = divmod(n, base)
        digits.append(_DIGITS[remainder])
    body = "".join(reversed(digits)) or "0"
    head = _PREFIXES.get(base, "") if prefix else ""
    return head + ("-" if negative else "") + body