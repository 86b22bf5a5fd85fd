"""Points and a simple in-memory pixel image."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point2i:
    """Integer 2D point or size."""

    x: int
    y: int


@dataclass(frozen=True)
class Point2f:
    """Floating-point 2D point."""

    x: float
    y: float


@dataclass
class Image:
    """Row-major image of integer 0xRRGGBB colours, initially black."""

    width: int
    height: int
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        self.pixels = [0] * (self.width * self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at ``(x, y)``; raises IndexError outside the image."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.pixels[y * self.width + x]

    def clear(self) -> None:
        """Set every pixel to black."""
        self.pixels = [0] * (self.width * self.height)

    def draw_rect(self, pos: Point2i, size: Point2i, color: int) -> None:
        """Fill a rectangle, clipped to the image."""
        x0 = max(pos.x, 0)
        x1 = min(pos.x + size.x, self.width)
        y0 = max(pos.y, 0)
        y1 = min(pos.y + size.y, self.height)
        if x0 >= x1:
            return
        span = [color] * (x1 - x0)
        for y in range(y0, y1):
            start = y * self.width
            self.pixels[start + x0 : start + x1] = span