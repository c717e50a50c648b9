"""Conversion of non-negative doubles to fixed-point and exponent notation."""

from __future__ import annotations

import math
from enum import IntEnum

from ftlib import fmath
from ftlib.strings import strins

__all__ = [
    "Notation",
    "SIGN_PLUS",
    "SIGN_MINUS",
    "convert_double",
    "round_double",
    "stripzeros",
    "dtoa",
]

SIGN_PLUS = 1
SIGN_MINUS = -1

_MAX_DIGITS = 256
_MAX_PRECISION = 15
_PRECISION_LIMIT = 15


class Notation(IntEnum):
    """Output notation; the HASH variants always keep the decimal point."""

    FIXED = 0
    EXPONENT = 1
    FIXED_HASH = 2
    EXPONENT_HASH = 3

    @property
    def fixed(self) -> bool:
        return self in (Notation.FIXED, Notation.FIXED_HASH)

    @property
    def exponential(self) -> bool:
        return self in (Notation.EXPONENT, Notation.EXPONENT_HASH)

    @property
    def force_dot(self) -> bool:
        return self in (Notation.FIXED_HASH, Notation.EXPONENT_HASH)


def convert_double(value: float) -> tuple[str, int]:
    """Return the decimal digits of ``value`` and its decimal exponent.

    The digits hold the whole and fraction parts with no point, the first
    digit standing for ``10 ** exponent``. At most 256 digits are produced.
    """
    if not math.isfinite(value) or value < 0:
        raise ValueError("value must be a finite non-negative number")
    if value == 0.0:
        return "0", 0
    exponent = int(fmath.floor(fmath.log10(value)))
    divisor = fmath.power(10, exponent)
    if divisor == 0.0:
        raise ValueError("value is too small to convert")
    scaled = value / divisor
    if not math.isfinite(scaled):
        raise ValueError("value is too small to convert")
    digits: list[str] = []
    while scaled > 0.0 and len(digits) < _MAX_DIGITS:
        digit = fmath.floor(scaled)
        digits.append(chr(int(digit) + ord("0")))
        scaled = (scaled - digit) * 10.0
    return "".join(digits), exponent


class _Digits:
    """A mutable run of digit characters being rounded in place."""

    def __init__(self, digits: str, exponent: int) -> None:
        self.chars = list(digits)
        self.exponent = exponent

    def get(self, index: int) -> str:
        return self.chars[index] if index < len(self.chars) else ""

    def truncate(self, pos: int) -> None:
        """Keep only the digits before ``pos``."""
        self.chars = self.chars[:pos]

    def round_up(self, pos: int) -> None:
        self.truncate(pos)
        index = pos - 1
        while index >= 0:
            bumped = chr(ord(self.chars[index]) + 1)
            self.chars[index] = bumped
            if bumped != ":":
                break
            if index == 0:
                self.chars[index] = "1"
                self.exponent += 1
                break
            self.chars[index] = "0"
            index -= 1

    def round_five(self, pos: int) -> None:
        step = pos + 1
        while self.get(step) and step < _PRECISION_LIMIT:
            if self.get(step) != "0":
                self.round_up(pos)
                return
            step += 1
        if self.get(step) == "" or step == _PRECISION_LIMIT:
            if (ord(self.chars[pos - 1]) - ord("0")) % 2:
                self.round_up(pos)
            else:
                self.truncate(pos)

    def round_special(self, pos: int) -> None:
        if self.get(pos) == "4":
            step = 1
            while self.get(pos + step) == "9" and step + pos < _PRECISION_LIMIT:
                step += 1
            if step + pos == _PRECISION_LIMIT:
                self.round_up(pos + 1)
                self.round_five(pos)
                return
        if pos > _PRECISION_LIMIT - 1 and self.chars[pos - 1] == "9":
            self.round_up(pos)
            return
        self.truncate(pos)

    def text(self) -> str:
        return "".join(self.chars)


def round_double(digits: str, precision: int, exponent: int) -> tuple[str, int]:
    """Round a digit string to ``precision`` digits after its first one.

    Ties go to the even digit, and runs of zeros or nines reaching the
    fifteenth digit are read as exact ties. Precision is capped at 15.
    Returns the rounded digits and the exponent, raised by one on a carry
    out of the first digit.
    """
    if precision < 0:
        raise ValueError("precision must be non-negative")
    precision = min(precision, _MAX_PRECISION)
    if len(digits) <= precision + 1:
        return digits, exponent
    state = _Digits(digits, exponent)
    pos = precision + 1
    current = state.chars[pos]
    if current < "5":
        if current == "4" or (precision > 13 and state.chars[pos - 1] == "9"):
            state.round_special(pos)
        else:
            state.truncate(pos)
    elif current > "5":
        state.round_up(pos)
    else:
        state.round_five(pos)
    return state.text(), state.exponent


def stripzeros(s: str) -> str:
    """Drop trailing fraction zeros, and a bare point, from a formatted number.

    An exponent suffix is kept. Text without a decimal point is unchanged.
    """
    if "." not in s:
        return s
    exp_at = s.find("e")
    suffix = s[exp_at : exp_at + 9] if exp_at >= 0 else ""
    end = (exp_at if exp_at >= 0 else len(s)) - 1
    end = max(end, 0)
    while end > 0 and s[end] == "0":
        end -= 1
    body = s[:end] if s[end] == "." else s[: end + 1]
    return body + suffix


def _round_result(
    digits: str, exponent: int, precision: int, notation: Notation
) -> tuple[str, int]:
    if notation.fixed:
        if precision + exponent >= 0:
            precision += exponent
        else:
            digits = "0" * -(precision + exponent) + digits
            exponent = -precision
            precision = 0
    if len(digits) < precision + 1:
        return digits + "0" * (precision + 1 - len(digits)), exponent
    before = exponent
    digits, exponent = round_double(digits, precision, exponent)
    if notation.fixed and exponent != before:
        if precision + 1 == len(digits):
            digits += "0"
        elif precision + 1 < len(digits):
            digits = digits[: precision + 1] + "0"
    return digits, exponent


def _exponent_suffix(exponent: int) -> str:
    sign = "+" if exponent >= 0 else "-"
    return f"e{sign}{abs(exponent):02d}"


def _format_result(
    digits: str, exponent: int, precision: int, notation: Notation
) -> str:
    text = digits
    if notation.fixed and exponent < 0:
        text = "0" * -exponent + text
    if exponent > 0 and (
        (notation is Notation.FIXED and precision)
        or notation is Notation.FIXED_HASH
    ):
        text = strins(text, ".", exponent + 1)
    elif precision or notation.force_dot:
        text = strins(text, ".", 1)
    if notation.exponential:
        text += _exponent_suffix(exponent)
    return text


def dtoa(value: float, sign: int, notation: Notation | int, precision: int) -> str:
    """Format the non-negative ``value`` with ``precision`` fraction digits.

    ``sign`` is SIGN_PLUS or SIGN_MINUS and supplies the sign of the result.
    NaN and infinities come out as "nan", "inf" and "-inf".
    """
    notation = Notation(notation)
    if sign not in (SIGN_PLUS, SIGN_MINUS):
        raise ValueError("sign must be SIGN_PLUS or SIGN_MINUS")
    if precision < 0:
        raise ValueError("precision must be non-negative")
    if value < 0:
        raise ValueError("value must be non-negative")
    if fmath.isnan(value):
        return "nan"
    if fmath.isposinf(value * sign):
        return "inf"
    if fmath.isneginf(value * sign):
        return "-inf"
    digits, exponent = convert_double(value)
    digits, exponent = _round_result(digits, exponent, precision, notation)
    text = _format_result(digits, exponent, precision, notation)
    if sign == SIGN_MINUS:
        text = "-" + text
    return text