"""A moon with rings and an orbiting satellite drifting across the sky."""

from __future__ import annotations

import random

from starfield.canvas import BLACK, WHITE, Canvas
from starfield.fastmath import dfast_cos, dfast_sin


def _random(rng: random.Random, n: int) -> int:
    return rng.randrange(n) if n > 0 else 0


class Moon:
    """A ringed moon that drifts leftwards, one pixel per frame."""

    _MARGIN = 80

    def __init__(self, canvas: Canvas, rng: random.Random | None = None):
        self.canvas = canvas
        self.rng = rng if rng is not None else random.Random()
        self.angle = 0
        self.y = 50 + _random(self.rng, 70)
        self.x = canvas.max_x * 2

    def _visible(self) -> bool:
        m = self._MARGIN
        return -m <= self.x <= self.canvas.max_x + m and -m <= self.y <= self.canvas.max_y + m

    def _show(self) -> None:
        if not self._visible():
            return
        canvas = self.canvas
        x, y = self.x, self.y
        canvas.fill_ellipse(x, y, 10, 10)
        canvas.ellipse(x, y, -45, 45, 15, 3)
        canvas.ellipse(x, y, 135, 225, 15, 3)
        r = int(30 + 9 * dfast_cos(2 * self.angle))
        cos_a = dfast_cos(self.angle)
        sin_a = dfast_sin(self.angle)
        canvas.ellipse(
            int(r * cos_a + x), int(r * sin_a + y + cos_a * 20), 0, 360, 3, 4
        )

    def erase(self) -> None:
        """Remove the moon from the canvas."""
        self.canvas.set_color(BLACK)
        self._show()
        self.canvas.set_color(WHITE)

    def draw(self) -> None:
        """Advance the moon by one frame."""
        self.erase()
        self.angle += 1
        self.x -= 1
        if self.x < -30:
            self.angle = 0
            self.x = self.canvas.max_x * 4
        self._show()