"""Conversion specifications for the formatter: parsing and integer casts."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator


class Length(enum.IntEnum):
    """Length modifier of a conversion."""

    NONE = 0
    HH = 1
    H = 2
    L = 3
    LL = 4
    LD = 5


@dataclass
class Spec:
    """Flags, width, precision, length and conversion of one ``%`` directive.

    ``conversion`` is None when the format ended before a conversion character.
    """

    hash: bool = False
    zero: bool = False
    minus: bool = False
    plus: bool = False
    space: bool = False
    width: int | None = None
    precision: int | None = None
    length: Length = Length.NONE
    conversion: str | None = None


_FLAG_FIELDS = {"#": "hash", "0": "zero", "-": "minus", "+": "plus", " ": "space"}
_DIGITS = "0123456789"
_BITS = {Length.HH: 8, Length.H: 16, Length.L: 64, Length.LL: 64}


def _next_int(args: Iterator[object]) -> int:
    try:
        return int(next(args))
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _scan_number(fmt: str, pos: int) -> tuple[int, int]:
    end = pos
    while end < len(fmt) and fmt[end] in _DIGITS:
        end += 1
    return int(fmt[pos:end]), end


def parse_spec(fmt: str, pos: int, args: Iterator[object]) -> tuple[Spec, int]:
    """Parse the directive starting at ``pos`` (just after the ``%``).

    ``args`` is an iterator from which ``*`` widths and precisions are taken.
    Returns the spec and the position after the conversion character.
    """
    spec = Spec()
    size = len(fmt)
    while pos < size:
        char = fmt[pos]
        if char in _FLAG_FIELDS:
            setattr(spec, _FLAG_FIELDS[char], True)
            pos += 1
        elif char in "123456789":
            spec.width, pos = _scan_number(fmt, pos)
        elif char == "*":
            width = _next_int(args)
            if width < 0:
                spec.minus = True
            spec.width = abs(width)
            pos += 1
        elif char == ".":
            pos += 1
            spec.precision = 0
            if pos < size and fmt[pos] in _DIGITS:
                spec.precision, pos = _scan_number(fmt, pos)
            elif pos < size and fmt[pos] == "*":
                spec.precision = _next_int(args)
                pos += 1
        elif char in "hl":
            doubled = fmt.startswith(char * 2, pos)
            if char == "h":
                spec.length = Length.HH if doubled else Length.H
            else:
                spec.length = Length.LL if doubled else Length.L
            pos += 2 if doubled else 1
        elif char == "L":
            spec.length = Length.LD
            pos += 1
        else:
            spec.conversion = char
            return spec, pos + 1
    return spec, pos


def cast_unsigned(value: int, length: Length) -> int:
    """Reduce ``value`` to the unsigned integer type selected by ``length``."""
    bits = _BITS.get(length, 32)
    return int(value) & ((1 << bits) - 1)


def cast_signed(value: int, length: Length) -> int:
    """Reduce ``value`` to the signed integer type selected by ``length``."""
    bits = _BITS.get(length, 32)
    unsigned = int(value) & ((1 << bits) - 1)
    if unsigned >= 1 << (bits - 1):
        unsigned -= 1 << bits
    return unsigned