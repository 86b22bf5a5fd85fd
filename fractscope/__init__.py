"""Interactive viewer for the Julia, Mandelbrot and Burning Ship fractals."""

__version__ = "0.1.0"