"""Command-line entry point and interactive window."""

from __future__ import annotations

import os
import sys
from typing import Any, Sequence

from fractscope.fractals import plot_fractal
from fractscope.image import Image
from fractscope.numeric import atoi
from fractscope.state import UI_TEXT, FractalType, Key, ViewerState
from fractscope.ui import control_lines, info_lines, panel_image

WINDOW_TITLE = "fract_ol"


def usage() -> str:
    """The usage message."""
    return "\n".join(
        [
            "usage: fractscope <fractal type>",
            "\t1: julia",
            "\t2: mandelbrot",
            "\t3: burning ship",
        ]
    )


def parse_fractal_arg(text: str) -> FractalType:
    """Parse a single-digit fractal number from 1 to 3; raise ValueError otherwise."""
    number = atoi(text)
    if number <= 0 or number > 3 or len(text) != 1:
        raise ValueError(f"invalid fractal type {text!r}")
    return FractalType(number)


def _rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _key_map(pygame: Any) -> dict[int, Key]:
    return {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_KP_MULTIPLY: Key.NUM_MULT,
        pygame.K_KP_DIVIDE: Key.NUM_DIV,
        pygame.K_KP_PLUS: Key.NUM_PLUS,
        pygame.K_KP_MINUS: Key.NUM_MINUS,
        pygame.K_KP_ENTER: Key.NUM_ENTER,
        pygame.K_KP0: Key.NUM_0,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_1: Key.ONE,
        pygame.K_2: Key.TWO,
        pygame.K_3: Key.THREE,
        pygame.K_l: Key.L,
        pygame.K_p: Key.P,
    }


class _Window:
    """Draws the fractal and the panel into a pygame window."""

    def __init__(self, pygame: Any, state: ViewerState) -> None:
        self._pygame = pygame
        self._state = state
        self._screen = pygame.display.set_mode(
            (state.window_width, state.window_height)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        self._fractal = Image(state.width, state.height)
        self._panel_pos = (state.window_width // 3 * 2, 0)
        self._panel = panel_image(state.window_width // 3, state.window_height)
        self._font = pygame.font.Font(None, 20)

    def _surface(self, image: Image) -> Any:
        data = bytearray()
        for color in image.pixels:
            data += (color & 0xFFFFFF).to_bytes(3, "big")
        return self._pygame.image.frombuffer(
            bytes(data), (image.width, image.height), "RGB"
        )

    def render(self) -> None:
        plot_fractal(self._state, self._fractal)
        self._screen.blit(self._surface(self._fractal), (0, 0))
        self._screen.blit(self._surface(self._panel), self._panel_pos)
        left, top = self._panel_pos
        for x, y, text in info_lines(self._state) + control_lines():
            label = self._font.render(text, True, _rgb(UI_TEXT))
            self._screen.blit(label, (left + x, top + y))
        self._pygame.display.flip()


def _run(kind: FractalType) -> int:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        state = ViewerState()
        state.fractal_type = kind
        window = _Window(pygame, state)
        keys = _key_map(pygame)
        window.render()
        while not state.closed:
            event = pygame.event.wait()
            redraw = False
            if event.type == pygame.QUIT:
                state.closed = True
            elif event.type == pygame.KEYDOWN:
                redraw = state.handle_key(keys.get(event.key, -1))
            elif event.type == pygame.MOUSEMOTION:
                redraw = state.handle_mouse_move(*event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                redraw = state.handle_mouse_press(event.button, *event.pos)
            if redraw:
                window.render()
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the viewer for the fractal named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(usage())
        return 1
    try:
        kind = parse_fractal_arg(args[0])
    except ValueError:
        print(usage())
        return 1
    return _run(kind)


if __name__ == "__main__":
    sys.exit(main())