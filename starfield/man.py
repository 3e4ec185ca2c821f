"""A tumbling stick figure floating across the sky."""

from __future__ import annotations

import random

from starfield.canvas import BLACK, WHITE, Canvas
from starfield.fastmath import dfast_cos, dfast_sin


def _random(rng: random.Random, n: int) -> int:
    return rng.randrange(n) if n > 0 else 0


class Man:
    """A spinning spaceman drifting slowly leftwards."""

    _MARGIN = 40

    def __init__(self, canvas: Canvas, rng: random.Random | None = None):
        self.canvas = canvas
        self.rng = rng if rng is not None else random.Random()
        self.angle = 0
        self.y = _random(self.rng, canvas.max_y) // 2
        self.x = canvas.max_x * 10

    def _visible(self) -> bool:
        m = self._MARGIN
        return -m <= self.x <= self.canvas.max_x + m and -m <= self.y <= self.canvas.max_y + m

    def _show(self) -> None:
        if not self._visible():
            return
        canvas = self.canvas
        x, y = self.x, self.y
        xa = dfast_cos(self.angle)
        ya = dfast_sin(self.angle)

        def seg(x1, y1, x2, y2):
            canvas.line(int(x1), int(y1), int(x2), int(y2))

        canvas.circle(x, y, 5)
        seg(x + xa * 4, y + ya * 3, x + xa * 25, y + ya * 19)  # body
        seg(x + xa * 10, y + ya * 6, x + xa * 16, y - ya * 5)  # upper arm
        seg(x - xa * 3, y + ya * 13, x + xa * 10, y + ya * 6)  # lower arm
        seg(x + xa * 25, y + ya * 19, x + xa * 34, y + ya * 13)  # upper leg
        seg(x + xa * 25, y + ya * 19, x + xa * 25, y + ya * 29)  # lower leg

    def erase(self) -> None:
        """Remove the figure from the canvas."""
        self.canvas.set_color(BLACK)
        self._show()
        self.canvas.set_color(WHITE)

    def draw(self) -> None:
        """Advance the figure by one frame."""
        self.erase()
        self.angle += 1
        self.x -= 1 + _random(self.rng, 2)
        self.y += _random(self.rng, 3) - 1
        if self.x < -50:
            self.angle = 0
            self.x = self.canvas.max_x * 10 + _random(self.rng, self.canvas.max_x)
        self._show()