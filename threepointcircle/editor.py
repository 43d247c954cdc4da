"""Interactive state for placing three points and the circle through them."""

from __future__ import annotations

import random

from threepointcircle.canvas import BLACK, DEFAULT_HEIGHT, DEFAULT_WIDTH, Canvas
from threepointcircle.geometry import Point, is_in_circle

DEFAULT_RADIUS = 10
DEFAULT_THICKNESS = 5
MAX_POINTS = 3


class CircleEditor:
    """Collects three clicked points, draws them and the circle through them,
    and lets the points be dragged or moved at random."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        radius: int = DEFAULT_RADIUS,
        thickness: int = DEFAULT_THICKNESS,
        rng: random.Random | None = None,
    ) -> None:
        self.canvas = Canvas(width, height)
        self.radius = radius
        self.thickness = thickness
        self.rng = rng if rng is not None else random.Random()
        self.points: list[Point] = []
        self.click_count = 0
        self.pressed = False
        self.dragging = False
        self.drag_index = 0
        self._label_radius = radius

    def _draw_markers(self, radius: int) -> None:
        for x, y in self.points[:MAX_POINTS]:
            self.canvas.draw_disc(x, y, radius, BLACK)

    def _redraw(self, radius: int, thickness: int) -> None:
        self.canvas.clear()
        self.canvas.draw_ring(self.points, thickness)
        self._draw_markers(radius)
        self._label_radius = radius

    def press(self, x: int, y: int) -> None:
        """Handle a button press at (x, y)."""
        self.click_count += 1
        self.pressed = True
        if self.click_count < MAX_POINTS:
            self.points.append((x, y))
            self.canvas.draw_disc(x, y, self.radius, BLACK)
            self._label_radius = self.radius
        elif self.click_count == MAX_POINTS:
            self.points.append((x, y))
            self.canvas.draw_ring(self.points, self.thickness)
            self._draw_markers(self.radius)
            self._label_radius = self.radius

    def release(self) -> None:
        """Handle a button release."""
        self.pressed = False

    def move(self, x: int, y: int) -> bool:
        """Handle pointer motion; return True if a point was dragged and the image redrawn."""
        if self.click_count <= MAX_POINTS:
            return False
        if not self.pressed:
            self.dragging = False
            return False

        hit = False
        if not self.dragging:
            for index in range(MAX_POINTS):
                px, py = self.points[index]
                if is_in_circle(x, y, px, py, self.radius):
                    self.dragging = True
                    hit = True
                    self.drag_index = index
                    self.points[index] = (x, y)
        else:
            self.points[self.drag_index] = (x, y)
            hit = True

        if hit:
            self._redraw(self.radius, self.thickness)
        return hit

    def reset(self) -> None:
        """Clear the image and forget all points."""
        self.canvas.clear()
        self.click_count = 0
        self.points.clear()
        self.dragging = False

    def randomize(self, radius: int | None = None, thickness: int | None = None) -> bool:
        """Move the three points to random places and redraw.

        Does nothing and returns False until three points have been placed.
        """
        if self.click_count < MAX_POINTS:
            return False
        radius = self.radius if radius is None else radius
        thickness = self.thickness if thickness is None else thickness
        self.click_count = MAX_POINTS
        self.points[:] = [
            (self.rng.randrange(self.canvas.width), self.rng.randrange(self.canvas.height))
            for _ in range(MAX_POINTS)
        ]
        self._redraw(radius, thickness)
        return True

    def labels(self) -> list[tuple[int, int, str]]:
        """Return (x, y, text) for the coordinate label shown beside each point."""
        offset = self._label_radius
        shown = self.points[:min(self.click_count, MAX_POINTS)]
        return [(x + offset, y + offset, f"({x}, {y})") for x, y in shown]