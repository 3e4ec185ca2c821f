"""Twinkling background stars that occasionally fall or race away."""

from __future__ import annotations

import random

from starfield.canvas import BLACK, LIGHT_RED, WHITE, Canvas
from starfield.fastmath import dfast_cos, dfast_sin


def _random(rng: random.Random, n: int) -> int:
    """A whole number in 0..n-1, or 0 when the range is empty."""
    return rng.randrange(n) if n > 0 else 0


def _signed_char(value: int) -> int:
    return (value + 128) % 256 - 128


class Star:
    """A single pixel star.

    A star sits still until its lifetime runs out, then reappears somewhere
    else. It can be made to fall (a short hop up, then down under gravity)
    or to race off in a random direction.
    """

    def __init__(self, canvas: Canvas, rng: random.Random | None = None):
        self.canvas = canvas
        self.rng = rng if rng is not None else random.Random()
        self.x = _random(self.rng, canvas.max_x)
        self.y = _random(self.rng, canvas.max_y)
        self.lifetime = 30 + _random(self.rng, 300)
        self.vel = 0
        self.acc = 0
        self.age = 0
        self.angle = 0
        self.color = WHITE
        self._show()

    def _show(self) -> None:
        self.canvas.put_pixel(self.x, self.y, self.color)

    def erase(self) -> None:
        """Remove the star from the canvas."""
        self.canvas.put_pixel(self.x, self.y, BLACK)

    def move_to(self, x: int, y: int) -> None:
        """Place the star at a new position without redrawing it."""
        self.x = x
        self.y = y

    def fall(self) -> None:
        """Start a fall: a small upward kick followed by acceleration down."""
        self.age = 0
        self.vel = -4
        self.acc = 1
        self.angle = 90

    def race(self) -> None:
        """Shoot off at constant speed in a random direction."""
        self.age = 0
        self.angle = 1 + _random(self.rng, 360)
        self.vel = 5

    def draw(self) -> None:
        """Advance the star by one frame."""
        canvas = self.canvas
        self.age += 1
        if self.age > self.lifetime:
            self.erase()
            self.color = WHITE
            self.x = _random(self.rng, canvas.max_x)
            self.y = _random(self.rng, canvas.max_y)
            self.vel = self.acc = self.age = 0
            if _random(self.rng, 300) == 3:
                self.fall()
            if _random(self.rng, 700) == 1:
                self.color = LIGHT_RED
                self.race()
            self._show()

        if self.vel or self.acc:
            self.erase()
            self.x = int(self.x + dfast_cos(self.angle) * self.vel)
            self.y = int(self.y + dfast_sin(self.angle) * self.vel)
            self.vel = _signed_char(_signed_char(self.vel + self.acc) + self.acc)
            if self.x < 0 or self.y < 0:
                self.vel = self.acc = 0
            if self.x > canvas.max_x:
                self.vel = self.acc = 0
            if self.y > canvas.max_y:
                self.vel = self.acc = 0
                self.y = canvas.max_y
            self._show()