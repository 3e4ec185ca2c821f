import random

import pytest

from starfield.canvas import WHITE, RecordingCanvas
from starfield.moon import Moon


@pytest.fixture
def canvas():
    return RecordingCanvas()


def test_starts_off_screen_to_the_right(canvas):
    moon = Moon(canvas, random.Random(1))
    assert moon.x == 2 * canvas.max_x
    assert 50 <= moon.y < 120
    assert moon.angle == 0


def test_draw_drifts_left_and_turns(canvas):
    moon = Moon(canvas, random.Random(2))
    x = moon.x
    moon.draw()
    moon.draw()
    assert moon.x == x - 2
    assert moon.angle == 2


def test_off_screen_moon_draws_nothing(canvas):
    moon = Moon(canvas, random.Random(3))
    canvas.clear_log()
    moon.draw()
    assert {call.name for call in canvas.log} == {"set_color"}
    assert canvas.pixels == {}


def test_wraps_back_far_right(canvas):
    moon = Moon(canvas, random.Random(4))
    moon.x = -30
    moon.angle = 17
    moon.draw()
    assert moon.x == 4 * canvas.max_x
    assert moon.angle == 0


def test_visible_moon_draws_body_rings_and_satellite(canvas):
    moon = Moon(canvas, random.Random(5))
    moon.x = 300
    canvas.clear_log()
    moon.draw()
    white = [call.name for call in canvas.log if call.color == WHITE and call.name != "set_color"]
    assert white.count("fill_ellipse") == 1
    assert white.count("ellipse") == 3
    assert canvas.pixel(moon.x, moon.y) == WHITE


def test_erase_after_draw_leaves_blank_canvas(canvas):
    moon = Moon(canvas, random.Random(6))
    moon.x = 300
    for _ in range(5):
        moon.draw()
    assert canvas.pixels
    moon.erase()
    assert canvas.pixels == {}