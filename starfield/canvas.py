"""A drawing surface with the primitives the scene objects draw with."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

BLACK = 0
LIGHT_RED = 12
WHITE = 15
MAX_COLOR = 15

Point = tuple[int, int]


def _line_points(x1: int, y1: int, x2: int, y2: int) -> Iterator[Point]:
    dx = abs(x2 - x1)
    dy = -abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx + dy
    while True:
        yield x1, y1
        if x1 == x2 and y1 == y2:
            return
        doubled = 2 * err
        if doubled >= dy:
            err += dy
            x1 += sx
        if doubled <= dx:
            err += dx
            y1 += sy


def _arc_vertices(
    cx: int, cy: int, start: float, end: float, rx: int, ry: int
) -> Iterator[Point]:
    while end < start:
        end += 360
    span = end - start
    steps = max(1, math.ceil(span * max(rx, ry, 1) * math.pi / 180))
    for i in range(steps + 1):
        theta = math.radians(start + span * i / steps)
        # Angles run counter-clockwise on a screen whose y axis points down.
        yield cx + round(rx * math.cos(theta)), cy - round(ry * math.sin(theta))


class Canvas:
    """An in-memory raster of palette colours with BGI-style primitives.

    Coordinates and radii are truncated to integers; anything outside the
    surface is clipped. Colour 0 is the background.
    """

    def __init__(self, width: int = 640, height: int = 480, max_color: int = MAX_COLOR):
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        if max_color < 1:
            raise ValueError("a canvas needs at least one foreground colour")
        self.width = width
        self.height = height
        self.max_color = max_color
        self.color = WHITE if WHITE <= max_color else max_color
        self._pixels: dict[Point, int] = {}

    @property
    def max_x(self) -> int:
        return self.width - 1

    @property
    def max_y(self) -> int:
        return self.height - 1

    @property
    def pixels(self) -> dict[Point, int]:
        """Every non-background pixel, keyed by position."""
        return dict(self._pixels)

    def pixel(self, x: int, y: int) -> int:
        return self._pixels.get((int(x), int(y)), BLACK)

    def _check_color(self, color: int) -> int:
        if not 0 <= color <= self.max_color:
            raise ValueError(f"colour {color} outside 0..{self.max_color}")
        return int(color)

    @staticmethod
    def _check_radius(radius: float) -> int:
        value = int(radius)
        if value < 0:
            raise ValueError("radius must not be negative")
        return value

    def _plot(self, x: int, y: int, color: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            if color == BLACK:
                self._pixels.pop((x, y), None)
            else:
                self._pixels[(x, y)] = color

    def _polyline(self, vertices: Iterator[Point], color: int) -> None:
        previous = None
        for vertex in vertices:
            if previous is None:
                self._plot(*vertex, color)
            else:
                for x, y in _line_points(*previous, *vertex):
                    self._plot(x, y, color)
            previous = vertex

    def set_color(self, color: int) -> None:
        self.color = self._check_color(color)

    def put_pixel(self, x: float, y: float, color: int) -> None:
        self._plot(int(x), int(y), self._check_color(color))

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        for x, y in _line_points(int(x1), int(y1), int(x2), int(y2)):
            self._plot(x, y, self.color)

    def ellipse(
        self, x: float, y: float, start: float, end: float, rx: float, ry: float
    ) -> None:
        rx_i, ry_i = self._check_radius(rx), self._check_radius(ry)
        self._polyline(_arc_vertices(int(x), int(y), start, end, rx_i, ry_i), self.color)

    def circle(self, x: float, y: float, radius: float) -> None:
        self.ellipse(x, y, 0, 360, radius, radius)

    def fill_ellipse(self, x: float, y: float, rx: float, ry: float) -> None:
        cx, cy = int(x), int(y)
        rx_i, ry_i = self._check_radius(rx), self._check_radius(ry)
        for dy in range(-ry_i, ry_i + 1):
            half = rx_i if ry_i == 0 else round(rx_i * math.sqrt(1 - (dy / ry_i) ** 2))
            for dx in range(-half, half + 1):
                self._plot(cx + dx, cy + dy, self.color)
        self.ellipse(cx, cy, 0, 360, rx_i, ry_i)


@dataclass(frozen=True)
class DrawCall:
    """One primitive drawn on a recording canvas, with the colour it used."""

    name: str
    args: tuple
    color: int


class RecordingCanvas(Canvas):
    """A canvas that also keeps a log of every primitive drawn on it."""

    def __init__(self, width: int = 640, height: int = 480, max_color: int = MAX_COLOR):
        super().__init__(width, height, max_color)
        self.log: list[DrawCall] = []

    def _record(self, name: str, args: tuple, color: int) -> None:
        self.log.append(DrawCall(name, args, color))

    def set_color(self, color: int) -> None:
        super().set_color(color)
        self._record("set_color", (color,), self.color)

    def put_pixel(self, x: float, y: float, color: int) -> None:
        super().put_pixel(x, y, color)
        self._record("put_pixel", (x, y), color)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        super().line(x1, y1, x2, y2)
        self._record("line", (x1, y1, x2, y2), self.color)

    def ellipse(
        self, x: float, y: float, start: float, end: float, rx: float, ry: float
    ) -> None:
        Canvas.ellipse(self, x, y, start, end, rx, ry)
        self._record("ellipse", (x, y, start, end, rx, ry), self.color)

    def circle(self, x: float, y: float, radius: float) -> None:
        Canvas.ellipse(self, x, y, 0, 360, radius, radius)
        self._record("circle", (x, y, radius), self.color)

    def fill_ellipse(self, x: float, y: float, rx: float, ry: float) -> None:
        cx, cy = int(x), int(y)
        rx_i, ry_i = self._check_radius(rx), self._check_radius(ry)
        for dy in range(-ry_i, ry_i + 1):
            half = rx_i if ry_i == 0 else round(rx_i * math.sqrt(1 - (dy / ry_i) ** 2))
            for dx in range(-half, half + 1):
                self._plot(cx + dx, cy + dy, self.color)
        Canvas.ellipse(self, cx, cy, 0, 360, rx_i, ry_i)
        self._record("fill_ellipse", (x, y, rx, ry), self.color)

    def clear_log(self) -> None:
        self.log.clear()