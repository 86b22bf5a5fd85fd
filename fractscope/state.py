"""Viewer state, constants and input handling."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field

WIN_W = 1200
WIN_H = 800
NUM_THREADS = 8
NUM_PALETTE = 3
MAX_ITER = 255
UI_TEXT = 0xFFFFFF
UI_BG = 0x202020
UI_FG = 0x303030

FRAC_JULIA_STR = "   JULIA"
FRAC_MANDEL_STR = " MANDELBROT"
FRAC_BURNING_STR = "BURNING SHIP"
FRAC_NONE_STR = "NONE"

SCROLL_UP = 4
SCROLL_DOWN = 5


def _single(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


_MOVE_STEP = _single(0.05)
_ZOOM_IN = _single(1.1)
_ZOOM_OUT = _single(0.9)


class FractalType(enum.IntEnum):
    """Fractal kinds, numbered as on the command line."""

    NONE = 0
    JULIA = 1
    MANDELBROT = 2
    BURNING_SHIP = 3

    @property
    def label(self) -> str:
        """Title shown in the side panel."""
        return _LABELS[self]


_LABELS = {
    FractalType.NONE: FRAC_NONE_STR,
    FractalType.JULIA: FRAC_JULIA_STR,
    FractalType.MANDELBROT: FRAC_MANDEL_STR,
    FractalType.BURNING_SHIP: FRAC_BURNING_STR,
}


class Key(enum.IntEnum):
    """Key codes understood by the viewer."""

    ESC = 53
    NUM_MULT = 67
    NUM_DIV = 75
    NUM_PLUS = 69
    NUM_MINUS = 78
    NUM_ENTER = 76
    NUM_0 = 82
    UP = 126
    DOWN = 125
    LEFT = 123
    RIGHT = 124
    SPACE = 49
    ONE = 18
    TWO = 19
    THREE = 20
    L = 37
    P = 35


_SELECT_KEYS = {
    Key.ONE: FractalType.JULIA,
    Key.TWO: FractalType.MANDELBROT,
    Key.THREE: FractalType.BURNING_SHIP,
}


@dataclass
class ViewerState:
    """Everything that decides how the fractal is drawn.

    The fractal occupies the left two thirds of the window; the panel the rest.
    Handlers return True when the picture should be redrawn.
    """

    window_width: int = WIN_W
    window_height: int = WIN_H
    width: int = field(init=False)
    height: int = field(init=False)
    iterations: int = MAX_ITER
    zoom: float = 0.5
    move_x: float = 0.0
    move_y: float = 0.0
    mouse_x: int = field(init=False)
    mouse_y: int = field(init=False)
    color_palette: int = 0
    free_julia: bool = False
    fractal_type: FractalType = FractalType.NONE
    fractal_name: str = FRAC_NONE_STR
    closed: bool = False

    def __post_init__(self) -> None:
        self.width = self.window_width // 3 * 2
        self.height = self.window_height
        self.mouse_x = self.window_width
        self.mouse_y = self.window_height

    def handle_key(self, key: int) -> bool:
        """Apply a key press. Escape closes the viewer and returns False."""
        if key == Key.ESC:
            self.closed = True
            return False
        if key == Key.SPACE:
            self.free_julia = not self.free_julia
        if key in _SELECT_KEYS:
            kind = _SELECT_KEYS[Key(key)]
            self.fractal_type = kind
            self.fractal_name = kind.label
        if key == Key.LEFT:
            self.move_x += _MOVE_STEP / self.zoom
        elif key == Key.RIGHT:
            self.move_x -= _MOVE_STEP / self.zoom
        if key == Key.DOWN:
            self.move_y -= _MOVE_STEP / self.zoom
        elif key == Key.UP:
            self.move_y += _MOVE_STEP / self.zoom
        if key == Key.P:
            if self.color_palette < NUM_PALETTE - 1:
                self.color_palette += 1
            else:
                self.color_palette = 0
        if key == Key.NUM_PLUS:
            self.iterations += 1
        elif key == Key.NUM_MINUS:
            self.iterations -= 1
        return True

    def handle_mouse_move(self, x: int, y: int) -> bool:
        """Record the clamped cursor position; redraw only a free Julia set."""
        self.mouse_x = min(max(x, 0), self.window_width)
        self.mouse_y = min(max(y, 0), self.window_height)
        return self.fractal_type == FractalType.JULIA and self.free_julia

    def handle_mouse_press(self, button: int, x: int, y: int) -> bool:
        """Zoom with the wheel; presses outside the window are ignored."""
        if not (0 <= x <= self.window_width and 0 <= y <= self.window_height):
            return False
        if button == SCROLL_DOWN:
            self.zoom *= _ZOOM_IN
        elif button == SCROLL_UP:
            self.zoom *= _ZOOM_OUT
        return True