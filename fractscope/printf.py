"""printf-style formatting with the viewer's own conversion rules."""

from __future__ import annotations

import sys
from typing import Callable, Iterator

from fractscope.numeric import (
    BASE8,
    BASE10,
    BASE16LOW,
    BASE16UP,
    dtoa,
    itoa_base,
)
from fractscope.printf_spec import Length, Spec, cast_signed, cast_unsigned, parse_spec

NULL_STRING = "(null)"

_Handler = Callable[[Spec, Iterator[object]], str]


def _take(args: Iterator[object]) -> object:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _take_int(args: Iterator[object]) -> int:
    return int(_take(args))  # type: ignore[arg-type]


def _pad(spec: Spec, data: str, prefix: str = "") -> str:
    """Plain field padding: spaces only, the zero flag is ignored."""
    padding = " " * ((spec.width or 0) - len(data) - len(prefix))
    if spec.minus:
        return prefix + data + padding
    return padding + prefix + data


def _pad_numeric(
    spec: Spec,
    data: str,
    prefix: str,
    zero: bool,
    precision: int | None,
) -> str:
    """Numeric field padding with precision zeros and optional zero fill."""
    precision_fill = 0
    if precision is not None and precision > len(data):
        precision_fill = precision - len(data)
    width_fill = 0
    if spec.width is not None:
        width_fill = max(0, spec.width - len(data) - len(prefix) - precision_fill)
    body = "0" * precision_fill + data
    if spec.minus:
        return prefix + body + " " * width_fill
    if zero:
        return prefix + "0" * width_fill + body
    return " " * width_fill + prefix + body


def _sign_prefix(spec: Spec, negative: bool) -> str:
    if negative:
        return "-"
    if spec.plus:
        return "+"
    if spec.space:
        return " "
    return ""


def _int_zero(spec: Spec) -> bool:
    return spec.zero and spec.precision is None


def _handle_c(spec: Spec, args: Iterator[object]) -> str:
    value = _take(args)
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        char = value
    else:
        char = chr(int(value) & 0xFF)  # type: ignore[arg-type]
    return _pad(spec, char)


def _handle_s(spec: Spec, args: Iterator[object]) -> str:
    value = _take(args)
    text = NULL_STRING if value is None else str(value)
    if spec.precision is not None:
        if spec.precision < 0:
            raise ValueError("negative precision for %s")
        text = text[: spec.precision]
    return _pad(spec, text)


def _handle_p(spec: Spec, args: Iterator[object]) -> str:
    value = _take(args)
    address = 0 if value is None else cast_unsigned(int(value), Length.L)  # type: ignore[arg-type]
    return _pad(spec, itoa_base(address, BASE16LOW), "0x")


def _handle_di(spec: Spec, args: Iterator[object]) -> str:
    number = cast_signed(_take_int(args), spec.length)
    prefix = _sign_prefix(spec, number < 0)
    data = "" if spec.precision == 0 else itoa_base(abs(number), BASE10)
    return _pad_numeric(spec, data, prefix, _int_zero(spec), spec.precision)


def _handle_o(spec: Spec, args: Iterator[object]) -> str:
    number = cast_unsigned(_take_int(args), spec.length)
    precision = spec.precision
    if precision is not None and spec.hash and number != 0:
        precision -= 1
    prefix = "0" if spec.hash and number != 0 else ""
    if precision == 0 and not spec.hash:
        data = ""
    else:
        data = itoa_base(number, BASE8)
    return _pad_numeric(spec, data, prefix, _int_zero(spec), precision)


def _handle_u(spec: Spec, args: Iterator[object]) -> str:
    number = cast_unsigned(_take_int(args), spec.length)
    data = "" if spec.precision == 0 else itoa_base(number, BASE10)
    return _pad_numeric(spec, data, "", _int_zero(spec), spec.precision)


def _hex_handler(digits: str, marker: str) -> _Handler:
    def handle(spec: Spec, args: Iterator[object]) -> str:
        number = cast_unsigned(_take_int(args), spec.length)
        prefix = marker if spec.hash and number != 0 else ""
        data = "" if spec.precision == 0 else itoa_base(number, digits)
        return _pad_numeric(spec, data, prefix, _int_zero(spec), spec.precision)

    return handle


def _handle_f(spec: Spec, args: Iterator[object]) -> str:
    value = float(_take(args))  # type: ignore[arg-type]
    digits = 6 if spec.precision is None else spec.precision
    prefix = _sign_prefix(spec, value < 0)
    data = dtoa(abs(value), digits)
    if spec.hash and spec.precision == 0:
        data += "."
    zero = spec.zero and not spec.minus
    return _pad_numeric(spec, data, prefix, zero, spec.precision)


def _handle_percent(spec: Spec, args: Iterator[object]) -> str:
    zero = spec.zero and not spec.minus
    return _pad_numeric(spec, "%", "", zero, spec.precision)


_HANDLERS: dict[str, _Handler] = {
    "c": _handle_c,
    "s": _handle_s,
    "p": _handle_p,
    "d": _handle_di,
    "i": _handle_di,
    "o": _handle_o,
    "u": _handle_u,
    "x": _hex_handler(BASE16LOW, "0x"),
    "X": _hex_handler(BASE16UP, "0X"),
    "f": _handle_f,
    "%": _handle_percent,
}


def sprintf(fmt: str, *args: object) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Unknown conversion characters produce no output and consume no argument;
    a directive cut short by the end of the format is dropped. Missing
    arguments raise TypeError; surplus arguments are ignored.
    """
    remaining = iter(args)
    pieces: list[str] = []
    pos = 0
    size = len(fmt)
    while pos < size:
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        spec, pos = parse_spec(fmt, percent + 1, remaining)
        handler = _HANDLERS.get(spec.conversion) if spec.conversion else None
        if handler is not None:
            pieces.append(handler(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)