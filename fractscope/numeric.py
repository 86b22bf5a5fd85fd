"""Integer and fixed-point text conversions used by the formatter and viewer."""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Sequence

BASE10 = "0123456789"
BASE8 = "01234567"
BASE16LOW = "0123456789abcdef"
BASE16UP = "0123456789ABCDEF"

_WHITESPACE = " \n\t\v\f\r"
_INT_MASK = (1 << 32) - 1
_INT_SIGN = 1 << 31


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping the result to a 32-bit int.

    Leading whitespace and one optional sign are skipped; parsing stops at the
    first non-digit. Text without digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    elif rest.startswith("+"):
        rest = rest[1:]
    end = 0
    while end < len(rest) and rest[end] in BASE10:
        end += 1
    value = sign * int(rest[:end]) if end else 0
    value &= _INT_MASK
    return value - (1 << 32) if value & _INT_SIGN else value


def map_range(
    value: float, source: Sequence[float], target: Sequence[float]
) -> float:
    """Map ``value`` linearly from the ``source`` pair onto the ``target`` pair.

    Raises ZeroDivisionError when both ends of ``source`` are equal.
    """
    src_lo, src_hi = source
    dst_lo, dst_hi = target
    return (value - src_lo) * (dst_hi - dst_lo) / (src_hi - src_lo) + dst_lo


def dtoa(value: float, precision: int) -> str:
    """Format ``value`` with ``precision`` fraction digits, rounding half up.

    Rounding is applied to the exact binary value of ``value``.
    """
    if precision < 0:
        raise ValueError("precision must not be negative")
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value {value!r}")
    if value < 0:
        return "-" + dtoa(-value, precision)
    exact = Fraction(value)
    whole = math.floor(exact)
    scale = 10**precision
    fraction = exact - whole + Fraction(1, 2 * scale)
    if fraction >= 1:
        whole += 1
        fraction -= 1
    if precision == 0:
        return str(whole)
    digits = math.floor(fraction * scale)
    return f"{whole}.{digits:0{precision}d}"


def itoa_base(number: int, digits: str) -> str:
    """Write a non-negative integer using ``digits`` as the digit alphabet."""
    base = len(digits)
    if base < 2:
        raise ValueError("a digit alphabet needs at least two symbols")
    if number < 0:
        raise ValueError("number must not be negative")
    if number == 0:
        return "0"
    out = []
    while number:
        number, rem = divmod(number, base)
        out.append(digits[rem])
    return "".join(reversed(out))