"""A bouncing analogue clock showing the current time."""

from __future__ import annotations

import datetime
import math
import random
from typing import Callable

from starfield.canvas import BLACK, WHITE, Canvas
from starfield.fastmath import dfast_cos, dfast_sin, fast_cos


def _random(rng: random.Random, n: int) -> int:
    return rng.randrange(n) if n > 0 else 0


def _now() -> datetime.time:
    return datetime.datetime.now().time()


class ClockFace:
    """A clock that drifts diagonally and wobbles when it hits an edge.

    ``clock`` is called for the time to show; it is read when the clock is
    created and again every 21 frames.
    """

    _EDGE = 16
    _PING_START = 10
    _PING_END = 100
    _REFRESH_EVERY = 20

    def __init__(
        self,
        canvas: Canvas,
        rng: random.Random | None = None,
        clock: Callable[[], datetime.time] | None = None,
    ):
        self.canvas = canvas
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else _now
        self.refresh = 0
        while (xvel := _random(self.rng, 3) - 1) == 0:
            pass
        while (yvel := _random(self.rng, 3) - 1) == 0:
            pass
        self.xvel = xvel
        self.yvel = yvel
        self._read_time()
        self.y = _random(self.rng, canvas.max_y)
        self.x = _random(self.rng, canvas.max_x)
        self.xping = 0
        self.yping = 0
        self.xscale = 1.0
        self.yscale = 1.0

    def _read_time(self) -> None:
        now = self.clock()
        self.hour = now.hour
        self.minute = now.minute
        self.second = now.second

    def _show(self) -> None:
        canvas = self.canvas
        x, y = self.x, self.y
        xs, ys = self.xscale, self.yscale
        canvas.ellipse(x, y, 0, 360, int(15 * abs(xs)), int(15 * abs(ys)))

        angle = 30 * (self.hour + self.minute // 60) - 90
        canvas.line(
            x, y, int(x + dfast_cos(angle) * 8 * xs), int(y + dfast_sin(angle) * 8 * ys)
        )

        angle = 6 * self.minute - 90
        canvas.line(
            x, y, int(x + dfast_cos(angle) * 11 * xs), int(y + dfast_sin(angle) * 11 * ys)
        )

        angle = 6 * self.second - 90
        cos_a, sin_a = dfast_cos(angle), dfast_sin(angle)
        canvas.line(
            int(x + cos_a * 11 * xs),
            int(y + sin_a * 11 * ys),
            int(x + cos_a * 15 * xs),
            int(y + sin_a * 15 * ys),
        )

    def erase(self) -> None:
        """Remove the clock from the canvas."""
        self.canvas.set_color(BLACK)
        self._show()
        self.canvas.set_color(WHITE)

    @classmethod
    def _wobble(cls, ping: int) -> tuple[int, float]:
        ping += 1
        scale = fast_cos(199.0 / math.sqrt(math.sqrt(ping)))
        if ping > cls._PING_END:
            return 0, 1.0
        return ping, scale

    def draw(self) -> None:
        """Advance the clock by one frame."""
        self.erase()
        if self.xping:
            self.xping, self.xscale = self._wobble(self.xping)
        if self.yping:
            self.yping, self.yscale = self._wobble(self.yping)

        self.refresh += 1
        self.x += self.xvel
        self.y += self.yvel
        edge = self._EDGE
        if self.x + edge > self.canvas.max_x:
            self.yping = self._PING_START
            self.xvel = -1
        if self.x - edge < 0:
            self.yping = self._PING_START
            self.xvel = 1
        if self.y - edge < 0:
            self.xping = self._PING_START
            self.yvel = 1
        if self.y + edge > self.canvas.max_y:
            self.xping = self._PING_START
            self.yvel = -1

        if self.refresh > self._REFRESH_EVERY:
            self.refresh = 0
            self._read_time()
        self._show()