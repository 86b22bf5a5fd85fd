"""Side panel layout: background image and text lines."""

from __future__ import annotations

from fractscope.image import Image, Point2i
from fractscope.printf import sprintf
from fractscope.state import UI_BG, UI_FG, FractalType, ViewerState

HEADER_HEIGHT = 50
CONTROLS_TOP = 300

TextLine = tuple[int, int, str]


def panel_image(width: int, height: int) -> Image:
    """Panel background with the two header bars."""
    image = Image(width, height)
    image.draw_rect(Point2i(0, 0), Point2i(width, height), UI_BG)
    image.draw_rect(Point2i(0, 0), Point2i(width, HEADER_HEIGHT), UI_FG)
    image.draw_rect(Point2i(0, CONTROLS_TOP), Point2i(width, HEADER_HEIGHT), UI_FG)
    return image


def info_lines(state: ViewerState) -> list[TextLine]:
    """Fractal information as (x, y, text), relative to the panel corner."""
    lines = [
        (140, 15, state.fractal_name),
        (10, 50, sprintf("%-17s%.3f", "Zoom level:", state.zoom)),
        (10, 70, sprintf("%-17s%.3f, %.3f", "Pos:", state.move_x, state.move_y)),
        (10, 90, sprintf("%-17s%d", "Palette:", state.color_palette)),
        (10, 110, sprintf("%-17s%d", "Iterations:", state.iterations)),
    ]
    if state.fractal_type == FractalType.JULIA:
        lines.append((10, 460, "Space to set Julia free!"))
    return lines


def control_lines() -> list[TextLine]:
    """Help text as (x, y, text), relative to the panel corner."""
    return [
        (160, 315, "CONTROLS"),
        (10, 360, "Use [1-3] to select fractal type"),
        (10, 380, "Use mousewheel to zoom"),
        (10, 400, "Use arrow keys to move"),
        (10, 420, "P to change color palette"),
        (10, 440, "Numpad + and - to change iterations"),
    ]