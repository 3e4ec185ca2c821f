"""The screen saver: command-line settings, the animated scene and the window."""

from __future__ import annotations

import math
import os
import random
import re
import sys
import time
from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

import datetime

import pygame

from starfield.canvas import BLACK, Canvas
from starfield.clockface import ClockFace
from starfield.man import Man
from starfield.moon import Moon
from starfield.spaceship import SpaceShip
from starfield.stars import Star
from starfield.worm import WishWorm

DEFAULT_STARS = 500
DEFAULT_WORMS = 3
DEFAULT_FRAME_LIMIT = 1000

# The object arrays had to fit in one memory segment; counts whose storage
# would pass that limit fall back to the defaults.
_SEGMENT_LIMIT = 0xFF00
_STAR_RECORD_SIZE = 14
_WORM_RECORD_SIZE = 16

_SCREEN_SIZE = (640, 480)
_FRAMES_PER_SECOND = 70
_BIOS_TICKS_PER_SECOND = 18.2065

PALETTE: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),
    (0, 0, 170),
    (0, 170, 0),
    (0, 170, 170),
    (170, 0, 0),
    (170, 0, 170),
    (170, 85, 0),
    (170, 170, 170),
    (85, 85, 85),
    (85, 85, 255),
    (85, 255, 85),
    (85, 255, 255),
    (255, 85, 85),
    (255, 85, 255),
    (255, 255, 85),
    (255, 255, 255),
)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Settings:
    """How many stars and worms to show, and how many frames to run."""

    stars: int = DEFAULT_STARS
    worms: int = DEFAULT_WORMS
    frame_limit: int = DEFAULT_FRAME_LIMIT


def _leading_int(text: str) -> int:
    """The integer at the start of ``text``, or 0 if there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _value_after(text: str, keyword: str) -> int:
    index = text.find(keyword)
    if index < 0:
        return 0
    return _leading_int(text[index + len(keyword):])


def _within_segment(count: int, record_size: int, default: int) -> int:
    if count < 0 or count * record_size > _SEGMENT_LIMIT:
        return default
    return count


def parse_settings(argv: Sequence[str], environ: Mapping[str, str]) -> Settings:
    """Read the star and worm counts from the STAR variable and the arguments.

    The STAR environment variable may hold ``STAR <n>`` and ``WORM <n>``
    (any case); a zero or missing number keeps the default. Arguments
    ``star <n>`` and ``worm <n>`` override it. Counts that are negative or
    too large fall back to the defaults.
    """
    stars, worms = DEFAULT_STARS, DEFAULT_WORMS

    env = environ.get("STAR")
    if env is not None:
        env = env.upper()
        stars = _value_after(env, "STAR") or DEFAULT_STARS
        worms = _value_after(env, "WORM") or DEFAULT_WORMS

    args = list(argv)
    for position, arg in enumerate(args):
        keyword = arg.upper()
        if keyword not in ("STAR", "WORM"):
            continue
        if position + 1 >= len(args):
            raise ValueError(f"{arg!r} needs a number after it")
        value = _leading_int(args[position + 1])
        if keyword == "STAR":
            stars = value
        else:
            worms = value

    worms = _within_segment(worms, _WORM_RECORD_SIZE, DEFAULT_WORMS)
    stars = _within_segment(stars, _STAR_RECORD_SIZE, DEFAULT_STARS)
    return Settings(stars=stars, worms=worms)


def _random(rng: random.Random, n: int) -> int:
    return rng.randrange(n) if n > 0 else 0


class Scene:
    """Every object on screen, advanced together one frame at a time."""

    def __init__(
        self,
        canvas: Canvas,
        settings: Settings | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], datetime.time] | None = None,
    ):
        self.canvas = canvas
        self.settings = settings if settings is not None else Settings()
        self.rng = rng if rng is not None else random.Random()
        self._clock = clock
        self.moon = Moon(canvas, self.rng)
        self.ship = SpaceShip(canvas, self.rng)
        self.man = Man(canvas, self.rng)
        self.clock_face: ClockFace | None = self._new_clock()
        self.worms = [WishWorm(canvas, self.rng) for _ in range(self.settings.worms)]
        self.fast_worm = _random(self.rng, len(self.worms))
        self.stars = [Star(canvas, self.rng) for _ in range(self.settings.stars)]
        self.fire_fly = False
        self.racing = False
        self.falling = False
        self.frames = 0

    def _new_clock(self) -> ClockFace:
        return ClockFace(self.canvas, self.rng, self._clock)

    @property
    def finished(self) -> bool:
        """True once the scene has shown its full run of frames."""
        return self.frames >= self.settings.frame_limit

    def step(self) -> None:
        """Draw one frame."""
        if self.fire_fly and _random(self.rng, 10) == 2:
            self.racing = True

        for star in self.stars:
            star.draw()
            if self.racing:
                star.race()
            if self.falling:
                star.fall()
        self.falling = self.racing = False
        self.frames += 1

        self.moon.draw()
        self.ship.draw()
        self.man.draw()

        for worm in self.worms:
            worm.draw()
        if self.worms:
            # One worm moves at double speed.
            self.worms[self.fast_worm].draw()

        if self.clock_face is not None:
            self.clock_face.draw()

    def handle_key(self, key: str) -> bool:
        """React to a key press; returns False when the key asks to quit.

        F toggles fireflies (stars racing off at random), space makes the
        stars fall, R makes them race, C shows or hides the clock, Q quits.
        """
        key = key.upper()
        if key == "Q":
            return False
        if key == "F":
            self.fire_fly = not self.fire_fly
        elif key == " ":
            self.falling = True
        elif key == "R":
            self.racing = True
        elif key == "C":
            if self.clock_face is not None:
                self.clock_face.erase()
                self.clock_face = None
            else:
                self.clock_face = self._new_clock()
        return True

    def close(self) -> None:
        """Erase everything from the canvas."""
        for star in self.stars:
            star.erase()
        self.moon.erase()
        self.ship.erase()
        self.man.erase()
        for worm in self.worms:
            worm.erase()
        if self.clock_face is not None:
            self.clock_face.erase()
            self.clock_face = None


class PygameCanvas(Canvas):
    """A canvas that draws straight onto a pygame surface in the 16-colour palette."""

    def __init__(self, surface: pygame.Surface):
        width, height = surface.get_size()
        super().__init__(width, height, len(PALETTE) - 1)
        self.surface = surface
        surface.fill(PALETTE[BLACK])

    @property
    def _rgb(self) -> tuple[int, int, int]:
        return PALETTE[self.color]

    def set_color(self, color: int) -> None:
        super().set_color(color)

    def put_pixel(self, x: float, y: float, color: int) -> None:
        rgb = PALETTE[self._check_color(color)]
        px, py = int(x), int(y)
        if 0 <= px < self.width and 0 <= py < self.height:
            self.surface.set_at((px, py), rgb)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        pygame.draw.line(
            self.surface, self._rgb, (int(x1), int(y1)), (int(x2), int(y2))
        )

    def _flat(self, cx: int, cy: int, rx: int, ry: int) -> None:
        pygame.draw.line(self.surface, self._rgb, (cx - rx, cy - ry), (cx + rx, cy + ry))

    def ellipse(
        self, x: float, y: float, start: float, end: float, rx: float, ry: float
    ) -> None:
        cx, cy = int(x), int(y)
        rx_i, ry_i = self._check_radius(rx), self._check_radius(ry)
        if rx_i == 0 or ry_i == 0:
            self._flat(cx, cy, rx_i, ry_i)
            return
        rect = pygame.Rect(cx - rx_i, cy - ry_i, 2 * rx_i + 1, 2 * ry_i + 1)
        if end - start >= 360:
            pygame.draw.ellipse(self.surface, self._rgb, rect, 1)
        else:
            pygame.draw.arc(
                self.surface, self._rgb, rect, math.radians(start), math.radians(end), 1
            )

    def circle(self, x: float, y: float, radius: float) -> None:
        self.ellipse(x, y, 0, 360, radius, radius)

    def fill_ellipse(self, x: float, y: float, rx: float, ry: float) -> None:
        cx, cy = int(x), int(y)
        rx_i, ry_i = self._check_radius(rx), self._check_radius(ry)
        if rx_i == 0 or ry_i == 0:
            self._flat(cx, cy, rx_i, ry_i)
            return
        rect = pygame.Rect(cx - rx_i, cy - ry_i, 2 * rx_i + 1, 2 * ry_i + 1)
        pygame.draw.ellipse(self.surface, self._rgb, rect)


def run(settings: Settings) -> int:
    """Open a window and animate the scene until it ends or Q is pressed."""
    started = time.monotonic()
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode(_SCREEN_SIZE)
        except pygame.error as exc:
            print(f"Graphics error: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption("starfield")
        scene = Scene(PygameCanvas(screen), settings)
        timer = pygame.time.Clock()
        running = True
        while running and not scene.finished:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.unicode:
                    running = scene.handle_key(event.unicode) and running
            if running:
                scene.step()
                pygame.display.flip()
                timer.tick(_FRAMES_PER_SECOND)
        scene.close()
    finally:
        pygame.quit()

    ticks = round((time.monotonic() - started) * _BIOS_TICKS_PER_SECOND)
    print("Try this:\n")
    print("starfield star 20 worm 10\n\n")
    print(f"Ticks {ticks}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the screen saver with settings from ``argv`` and the environment."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        settings = parse_settings(argv, os.environ)
    except ValueError as exc:
        print(f"starfield: {exc}", file=sys.stderr)
        return 2
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())