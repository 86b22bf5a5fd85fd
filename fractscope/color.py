"""Mapping of escape-iteration counts to palette colours."""

from __future__ import annotations

import math

_WARM = (
    0xFFFF7D,
    0xFFEE7D,
    0xFFDF7E,
    0xFFCF7E,
    0xFFBF7E,
    0xFFAF7E,
    0xFF9F7E,
    0xFF8F7F,
    0xFE7E7F,
    0xEE6F7F,
    0xDE5E7F,
    0xCE4F7F,
    0xBE3F7F,
    0xAE2F7F,
    0x9D1F7F,
    0,
)

_ULTRA = (
    0x3C1E0F,
    0x19111A,
    0x09012F,
    0x040449,
    0x000764,
    0x0C2C8A,
    0x1852B1,
    0x397DD1,
    0x86B5E5,
    0xD3ECF8,
    0xF1E9BF,
    0xF8C95F,
    0xFFAA00,
    0xCC8000,
    0x995700,
    0,
)

UNKNOWN_PALETTE_COLOR = 0x7FFFFF
_LAST_INDEX = 15
_INT_LIMIT = 1 << 31


def _log(value: float) -> float:
    if value > 0:
        return math.log(value)
    if value == 0:
        return -math.inf
    return math.nan


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _palette_index(index: int, iterations: int) -> int:
    scaled = _LAST_INDEX * _divide(_log(1 + index), _log(1 + iterations))
    # Non-finite or out-of-range values collapse to the lowest int, i.e. "< 0".
    if not math.isfinite(scaled) or abs(scaled) >= _INT_LIMIT:
        return _LAST_INDEX
    position = int(scaled)
    if position > _LAST_INDEX:
        return 0
    if position < 0:
        return _LAST_INDEX
    return position


def get_color(index: int, iterations: int, palette: int) -> int:
    """Return the 0xRRGGBB colour for a point that escaped after ``index`` steps.

    Points that never escaped (``index == iterations``) are black. Palettes are
    0 (warm), 1 (ultra) and 2 (black and white); any other palette gives a
    fixed fallback colour.
    """
    if index == iterations:
        return 0
    position = _palette_index(index, iterations)
    if palette == 0:
        return _WARM[position]
    if palette == 1:
        return _ULTRA[position]
    if palette == 2:
        return 0xFFFFFF if position % 2 != 0 else 0
    return UNKNOWN_PALETTE_COLOR