"""An 8-bit grayscale canvas that draws filled discs and thick circles."""

from __future__ import annotations

import math
from collections.abc import Sequence

from threepointcircle.geometry import Circle, CollinearPointsError, Point, circumcircle

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 800
BLACK = 0
WHITE = 0xFF


def _round_half_away(value: float) -> int:
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


class Canvas:
    """A white-initialised grayscale pixel grid stored row by row."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = bytearray(b"\xff" * (width * height))

    def clear(self) -> None:
        """Paint every pixel white."""
        self.pixels[:] = b"\xff" * len(self.pixels)

    def contains(self, x: int, y: int) -> bool:
        """Return True if (x, y) is a pixel of the canvas."""
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x: int, y: int) -> int:
        """Return the gray value at (x, y)."""
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]

    def _fill(
        self,
        cx: int,
        cy: int,
        radius: int,
        gray: int,
        top: int,
        bottom: int,
        left: int,
        right: int,
    ) -> None:
        """Paint pixels strictly inside the circle, limited to a box and the canvas."""
        value = bytes([gray])
        top, bottom = max(top, 0), min(bottom, self.height)
        left, right = max(left, 0), min(right, self.width)
        radius_sq = radius * radius
        for y in range(top, bottom):
            rest = radius_sq - (y - cy) ** 2
            if rest <= 0:
                continue
            reach = math.isqrt(rest - 1)
            lo = max(left, cx - reach)
            hi = min(right, cx + reach + 1)
            if lo < hi:
                start = y * self.width
                self.pixels[start + lo:start + hi] = value * (hi - lo)

    def draw_disc(self, x: int, y: int, radius: int, gray: int) -> None:
        """Fill the disc centred at (x, y) with ``gray``; a non-positive radius draws nothing."""
        self._fill(x, y, radius, gray, y - radius, y + 2 * radius, x - radius, x + 2 * radius)

    def draw_ring(self, points: Sequence[Point], thickness: int) -> Circle | None:
        """Draw the thick circle through three points.

        Returns the circle, or None when the points are collinear and nothing is drawn.
        """
        try:
            circle = circumcircle(*points)
        except CollinearPointsError:
            return None

        cx = _round_half_away(circle.center_x)
        cy = _round_half_away(circle.center_y)
        radius = _round_half_away(circle.radius)
        half = int(thickness / 2) or 1

        outer = radius + half
        top, bottom = cy - outer, cy + outer
        left = cx - outer
        # Columns run to the right edge of the canvas.
        self._fill(cx, cy, outer, BLACK, top, bottom, left, self.width)
        self._fill(cx, cy, radius - half, WHITE, top, bottom, left, self.width)
        return circle

    def to_pgm(self) -> bytes:
        """Return the canvas as a binary PGM image."""
        header = f"P5\n{self.width} {self.height}\n255\n".encode("ascii")
        return header + bytes(self.pixels)