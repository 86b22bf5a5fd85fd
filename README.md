# fractscope

An interactive viewer for three escape-time fractals: the Julia set, the
Mandelbrot set and the Burning Ship. The window is drawn with pygame.

The window is 1200×800. The left two thirds show the fractal. The right third
is a panel that shows the fractal's name, the zoom level, the position, the
palette number, the iteration count and a list of controls. Rendering is split
across worker threads, each of which draws an equal band of rows.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
fractscope <fractal type>
```

The fractal type must be a single digit:

| Argument | Fractal      |
|----------|--------------|
| `1`      | Julia        |
| `2`      | Mandelbrot   |
| `3`      | Burning Ship |

A missing argument, more than one argument, or anything other than a single
digit from 1 to 3 prints a usage message and exits with status 1.

## Controls

| Input                     | Action                                                     |
|---------------------------|------------------------------------------------------------|
| `1`, `2`, `3`             | Switch between Julia, Mandelbrot and Burning Ship          |
| Mouse wheel               | Zoom (one direction multiplies the zoom by 1.1, the other by 0.9) |
| Arrow keys                | Move the view                                              |
| `P`                       | Cycle through the three colour palettes                    |
| Keypad `+` / `-`          | Increase or decrease the iteration count by one            |
| Space                     | Toggle "free Julia": the Julia constant follows the mouse  |
| Esc or closing the window | Quit                                                       |

Without free Julia the Julia constant is −0.7 + 0.27015i. The Burning Ship
always iterates up to 255 steps, whatever the iteration count is set to; the
count still decides the colouring.

## Using the pieces as a library

The rendering code works without a window:

- `fractscope.fractals` holds the per-point iteration functions
  (`julia_iterations`, `mandelbrot_iterations`, `burning_ship_iterations`),
  the pixel-to-complex-plane mapping (`pixel_to_complex`), the Julia constant
  (`julia_constant`), `plot_rows` for a band of rows, and `plot_fractal`,
  which fills an `Image` using a number of threads (8 by default). Rows left
  over when the height does not divide evenly by the thread count are not
  drawn.
- `fractscope.image` has `Point2i`, `Point2f` and `Image`, a plain row-major
  pixel buffer of `0xRRGGBB` integers with `put_pixel` (ignores coordinates
  outside the image), `pixel` (raises `IndexError` outside), `clear` and
  `draw_rect` (clipped to the image).
- `fractscope.state.ViewerState` holds zoom, offset, palette, iteration count
  and fractal type, and updates them through `handle_key`,
  `handle_mouse_move` and `handle_mouse_press`; each returns whether the
  picture should be redrawn. `FractalType` and `Key` enumerate the fractals
  and the key codes.
- `fractscope.color.get_color(index, iterations, palette)` maps an iteration
  count to a colour; points that reached the limit are black, and palettes
  other than 0, 1 and 2 give `0x7FFFFF`.
- `fractscope.ui` builds the panel background (`panel_image`) and its text
  lines (`info_lines`, `control_lines`) as `(x, y, text)` tuples.
- `fractscope.printf` provides `sprintf` and `printf`, a small printf-style
  formatter supporting `c s p d i o u x X f %` with flags `# 0 - + space`,
  widths, precisions (including `*`) and the `hh h l ll L` length modifiers.
- `fractscope.numeric` has `atoi`, `map_range`, `dtoa` and `itoa_base`.

## What it does not do

There is no way to save a rendered image to a file, and the view cannot be
set from the command line: the starting zoom, position and palette are fixed,
and only the fractal type is chosen when starting.