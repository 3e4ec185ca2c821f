"""Colourful inchworms that crawl in from every side of the screen."""

from __future__ import annotations

import random

from starfield.canvas import BLACK, WHITE, Canvas
from starfield.fastmath import dfast_cos, dfast_sin

_SKIPPED_COLOR = 8
_CYCLE = 30

# Leg spread by animation step for the first part of the cycle.
_LEG_ANGLES = {0: 90, 1: 58, 2: 39, 3: 27, 4: 21, 5: 17, 6: 14, 7: 13, 8: 12, 9: 11}

# How far the worm pulls itself forward at each step; negative pushes back.
_STRIDE = {1: 1, 2: 3, 3: 5, 4: 4, 5: 3, 6: 2, 7: 2, 8: 1, 9: 1, 10: 1, 11: 1, 12: 1, 20: -1}


def _random(rng: random.Random, n: int) -> int:
    return rng.randrange(n) if n > 0 else 0


def _leg_angle(step: int) -> int:
    if step < 17:
        return _LEG_ANGLES.get(step, 11)
    return 6 * (step - 15)


class WishWorm:
    """An inchworm heading in direction ``turn`` (degrees), crawling in steps."""

    _MARGIN = 40

    def __init__(self, canvas: Canvas, rng: random.Random | None = None):
        self.canvas = canvas
        self.rng = rng if rng is not None else random.Random()
        while (color := _random(self.rng, canvas.max_color) + 1) == _SKIPPED_COLOR:
            pass
        self.color = color
        self.y = float(_random(self.rng, canvas.max_y))
        self.x = float(2 * canvas.max_x + _random(self.rng, 2 * canvas.max_x))
        self.step = _random(self.rng, _CYCLE)
        self.turn = 0

    def _visible(self) -> bool:
        m = self._MARGIN
        return -m <= self.x <= self.canvas.max_x + m and -m <= self.y <= self.canvas.max_y + m

    def _show(self) -> None:
        if not self._visible():
            return
        canvas = self.canvas
        x, y, turn = self.x, self.y, self.turn
        angle = _leg_angle(self.step)

        def seg(x1, y1, x2, y2):
            canvas.line(int(x1), int(y1), int(x2), int(y2))

        canvas.circle(int(x), int(y), 5)
        seg(x, y, x - 5 * dfast_cos(20 + turn), y - 5 * dfast_sin(20 + turn))
        seg(x, y, x - 5 * dfast_cos(-20 + turn), y - 5 * dfast_sin(-20 + turn))
        cos_t, sin_t = dfast_cos(turn), dfast_sin(turn)
        seg(x + 5 * cos_t, y + 5 * sin_t, x + 10 * cos_t, y + 10 * sin_t)

        xleg = int(x + 10 * cos_t)
        yleg = int(y + 10 * sin_t)
        seg(
            xleg,
            yleg,
            xleg + dfast_cos(turn + angle) * 12,
            yleg + dfast_sin(turn + angle) * 12,
        )
        seg(
            xleg,
            yleg,
            xleg + dfast_cos(turn - angle) * 12,
            yleg + dfast_sin(turn - angle) * 12,
        )

    def erase(self) -> None:
        """Remove the worm from the canvas."""
        self.canvas.set_color(BLACK)
        self._show()
        self.canvas.set_color(WHITE)

    def _gone(self) -> bool:
        max_x, max_y, turn = self.canvas.max_x, self.canvas.max_y, self.turn
        return (
            (self.x < -20 and turn < 90)
            or turn > 270
            or (self.x > max_x + 20 and 90 < turn < 270)
            or (self.y < -20 and turn < 180)
            or (self.y > max_y + 20 and turn > 180)
        )

    def draw(self) -> None:
        """Advance the worm by one frame."""
        self.erase()
        cos_dir = dfast_cos(self.turn)
        sin_dir = dfast_sin(self.turn)

        self.step += 1
        if self.step > _CYCLE:
            self.step = 0

        stride = _STRIDE.get(self.step, 0)
        if stride:
            self.x -= stride * cos_dir
            self.y -= stride * sin_dir

        if self._gone():
            max_x, max_y = self.canvas.max_x, self.canvas.max_y
            self.turn = _random(self.rng, 360)
            self.x = dfast_cos(self.turn) * max_x * 2 + (
                _random(self.rng, max_x) - max_x // 2
            )
            self.y = dfast_sin(self.turn) * max_y * 2 + (
                _random(self.rng, max_y) - max_y // 2
            )

        self.canvas.set_color(self.color)
        self._show()
        self.canvas.set_color(WHITE)