"""Floating point helpers built on the IEEE 754 double layout."""

from __future__ import annotations

import math
import struct

__all__ = [
    "absd",
    "floor",
    "frexp",
    "log10",
    "power",
    "ipow",
    "isnan",
    "isposinf",
    "isneginf",
    "signbit",
    "arclen",
]

_LLONG_MAX = 2**63 - 1
_LLONG_MIN = -(2**63)
_SQRT_LLONG_MAX = 0xB504F333
_LN10 = 2.3025850929940456840179914546844
_LG2 = 0.301029995663981198017467022510

_SIGN_AND_FRACTION = 0x800FFFFFFFFFFFFF
_UNBIASED_EXPONENT = 0x3FF0000000000000


def _bits(value: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def _from_bits(bits: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", bits))[0]


def absd(d: float) -> float:
    """Return the absolute value of ``d``."""
    return -d if d < 0 else d


def floor(value: float) -> float:
    """Return the largest whole number not greater than ``value``.

    Values outside the 64-bit signed integer range, and NaN, come back unchanged.
    """
    if value != value or value >= _LLONG_MAX or value <= _LLONG_MIN:
        return value
    truncated = float(int(value))
    if truncated == value or value >= 0:
        return truncated
    return truncated - 1


def frexp(value: float) -> tuple[float, int]:
    """Split ``value`` into a signed mantissa in [1, 2) and its unbiased exponent.

    The exponent field is read as is, so zero gives -1023 and infinities
    and NaN give 1024.
    """
    bits = _bits(value)
    exponent = ((bits >> 52) & 0x7FF) - 1023
    mantissa = _from_bits((bits & _SIGN_AND_FRACTION) | _UNBIASED_EXPONENT)
    return mantissa, exponent


def _series_log10(x: float) -> float:
    ratio = (x - 1) / (x + 1)
    numerator = ratio
    denominator = 1.0
    total = numerator / denominator
    previous = 0.0
    while total != previous:
        previous = total
        denominator += 2.0
        numerator = numerator * ratio * ratio
        total += numerator / denominator
    return 2.0 * total / _LN10


def log10(x: float) -> float:
    """Return the base-10 logarithm of ``x``, or NaN when ``x`` is not positive."""
    if x <= 0.0:
        return math.nan
    mantissa, exponent = frexp(x)
    if abs(exponent) > 1:
        return _series_log10(mantissa) + exponent * _LG2
    return _series_log10(x)


def _half_toward_zero(n: int) -> int:
    return n // 2 if n >= 0 else -((-n) // 2)


def power(x: float, exponent: int) -> float:
    """Raise ``x`` to the integer ``exponent`` by repeated squaring."""
    if not exponent:
        return 1.0
    if not x:
        return 0.0
    half = power(x, _half_toward_zero(exponent))
    if exponent % 2 == 0:
        return half * half
    if exponent > 0:
        return x * half * half
    return (half * half) / x


def ipow(x: int, exponent: int) -> int:
    """Raise the integer ``x`` to a non-negative ``exponent``.

    Returns 0 when the result would not fit a 64-bit signed integer.
    """
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if not exponent or x == 1:
        return 1
    if not x:
        return 0
    half = ipow(x, exponent // 2)
    if half and exponent % 2 == 0 and abs(half) < _SQRT_LLONG_MAX:
        return half * half
    if half and exponent % 2 == 1 and abs(x) < _LLONG_MAX // (half * half):
        return x * half * half
    return 0


def isnan(value: float) -> bool:
    """Tell whether the exponent field is all ones and the mantissa is not +1.

    This covers NaN and, as the mantissa check is signed, negative infinity.
    """
    mantissa, exponent = frexp(value)
    return mantissa != 1.0 and exponent == 1024


def isposinf(value: float) -> bool:
    """Tell whether ``value`` is positive infinity."""
    mantissa, exponent = frexp(value)
    return mantissa == 1.0 and exponent == 1024


def isneginf(value: float) -> bool:
    """Tell whether ``value`` is negative infinity."""
    mantissa, exponent = frexp(value)
    return mantissa == -1.0 and exponent == 1024


def signbit(value: float) -> int:
    """Return 1 when the sign bit of ``value`` is set, otherwise 0."""
    return _bits(value) >> 63


def arclen(x: float, y: float) -> float:
    """Return the arc length on the unit circle from (1, 0) to (x, y)."""
    if x == 0.0 and y == 0.0:
        return 0.0
    if x >= 0 and y >= 0:
        return math.acos(x)
    if x <= 0 and y >= 0:
        return 0.5 * math.pi + math.asin(-x)
    if x <= 0 and y <= 0:
        return 1.0 * math.pi + math.asin(-y)
    if x >= 0 and y <= 0:
        return 1.5 * math.pi + math.asin(x)
    return 0.0