"""Escape-time iteration for the Julia, Mandelbrot and Burning Ship sets."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from fractscope.color import get_color
from fractscope.image import Image
from fractscope.numeric import map_range
from fractscope.state import MAX_ITER, NUM_THREADS, FractalType, ViewerState

JULIA_DEFAULT_CONSTANT = complex(-0.7, 0.27015)
_ESCAPE_RADIUS_SQUARED = 4.0


def pixel_to_complex(state: ViewerState, x: int, y: int) -> complex:
    """Map a pixel of the fractal area onto the complex plane."""
    scale = 0.5 * state.zoom * state.width
    real = (x - state.width // 2) / scale + state.move_x
    imag = (y - state.height // 2) / scale + state.move_y
    return complex(real, imag)


def julia_constant(state: ViewerState) -> complex:
    """The Julia constant: fixed, or following the mouse when set free."""
    if not state.free_julia:
        return JULIA_DEFAULT_CONSTANT
    real = map_range(state.mouse_x, (0.0, state.width), (-1.0, 1.0))
    imag = map_range(state.mouse_y, (0.0, state.height), (-1.0, 1.0))
    return complex(real, imag)


def julia_iterations(z: complex, c: complex, iterations: int) -> int:
    """Count steps of z -> z*z + c before |z| exceeds 2, up to ``iterations``."""
    zr, zi = z.real, z.imag
    cr, ci = c.real, c.imag
    count = 0
    while count < iterations:
        zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
        if zr * zr + zi * zi > _ESCAPE_RADIUS_SQUARED:
            break
        count += 1
    return count


def mandelbrot_iterations(c: complex, iterations: int) -> int:
    """Count Mandelbrot steps from zero while |z| < 2, up to ``iterations``."""
    zr = zi = 0.0
    cr, ci = c.real, c.imag
    count = 0
    while zr * zr + zi * zi < _ESCAPE_RADIUS_SQUARED and count < iterations:
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
        count += 1
    return count


def burning_ship_iterations(c: complex) -> int:
    """Count Burning Ship steps while |z| < 2, up to the fixed maximum."""
    zr = zi = 0.0
    cr, ci = c.real, c.imag
    count = 0
    while zr * zr + zi * zi < _ESCAPE_RADIUS_SQUARED and count < MAX_ITER:
        zr, zi = abs(zr * zr - zi * zi + cr), abs(2.0 * zr * zi + ci)
        count += 1
    return count


def _escape_counter(state: ViewerState) -> Callable[[int, int], int]:
    kind = state.fractal_type
    if kind == FractalType.MANDELBROT:
        return lambda x, y: mandelbrot_iterations(
            pixel_to_complex(state, x, y), state.iterations
        )
    if kind == FractalType.BURNING_SHIP:
        return lambda x, y: burning_ship_iterations(pixel_to_complex(state, x, y))
    constant = julia_constant(state)
    return lambda x, y: julia_iterations(
        pixel_to_complex(state, x, y), constant, state.iterations
    )


def plot_rows(state: ViewerState, image: Image, start: int, end: int) -> None:
    """Colour rows ``start`` up to ``end`` of the fractal area into ``image``."""
    count = _escape_counter(state)
    for y in range(start, end):
        for x in range(state.width):
            color = get_color(count(x, y), state.iterations, state.color_palette)
            image.put_pixel(x, y, color)


def plot_fractal(
    state: ViewerState, image: Image, threads: int = NUM_THREADS
) -> Image:
    """Render the whole fractal in equal row bands, one per worker thread.

    Rows left over when the height does not divide evenly are not drawn.
    A state without a fractal type is drawn as a Julia set.
    """
    if threads < 1:
        raise ValueError("at least one thread is needed")
    if state.fractal_type != FractalType.NONE:
        state.fractal_name = state.fractal_type.label
    band = state.height // threads
    with ThreadPoolExecutor(max_workers=threads) as pool:
        jobs = [
            pool.submit(plot_rows, state, image, i * band, (i + 1) * band)
            for i in range(threads)
        ]
    for job in jobs:
        job.result()
    return image