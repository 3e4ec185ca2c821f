"""A small rocket that crosses the sky from left to right."""

from __future__ import annotations

import random

from starfield.canvas import BLACK, WHITE, Canvas


def _random(rng: random.Random, n: int) -> int:
    return rng.randrange(n) if n > 0 else 0


class SpaceShip:
    """A rocket moving right three pixels a frame with a jittery course."""

    def __init__(self, canvas: Canvas, rng: random.Random | None = None):
        self.canvas = canvas
        self.rng = rng if rng is not None else random.Random()
        self.y = _random(self.rng, canvas.max_y // 2)
        self.x = -canvas.max_x

    def _show(self) -> None:
        canvas = self.canvas
        x, y = self.x, self.y
        canvas.line(x, y, x + 12, y)
        canvas.line(x + 4, y - 4, x + 12, y)
        canvas.line(x - 4, y + 4, x + 12, y)
        canvas.line(x, y + 4, x + 12, y)
        canvas.line(x, y + 2, x, y + 4)
        canvas.line(x + 4, y - 4, x - 4, y + 4)

    def erase(self) -> None:
        """Remove the ship from the canvas."""
        self.canvas.set_color(BLACK)
        self._show()
        self.canvas.set_color(WHITE)

    def draw(self) -> None:
        """Advance the ship by one frame."""
        self.erase()
        self.x += 3
        self.y += _random(self.rng, 4) - 1
        if self.x > 5 * self.canvas.max_x:
            self.x = -100
            self.y = _random(self.rng, self.canvas.max_y // 2)
        self._show()