import random

import pytest

from starfield.canvas import WHITE, RecordingCanvas
from starfield.man import Man


class _FixedRandom:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return min(self.value, n - 1)


@pytest.fixture
def canvas():
    return RecordingCanvas()


def test_starts_far_to_the_right_in_upper_half(canvas):
    man = Man(canvas, random.Random(1))
    assert man.x == 10 * canvas.max_x
    assert 0 <= man.y <= canvas.max_y // 2
    assert man.angle == 0


def test_draw_drifts_left_and_wobbles(canvas):
    man = Man(canvas, random.Random(2))
    for _ in range(30):
        x, y, angle = man.x, man.y, man.angle
        man.draw()
        assert 1 <= x - man.x <= 2
        assert -1 <= man.y - y <= 1
        assert man.angle == angle + 1


def test_wraps_when_past_left_edge(canvas):
    man = Man(canvas, _FixedRandom(10_000))
    man.x = -49
    man.angle = 33
    man.draw()
    assert man.angle == 0
    assert man.x == 10 * canvas.max_x + canvas.max_x - 1


def test_off_screen_draws_nothing(canvas):
    man = Man(canvas, random.Random(3))
    canvas.clear_log()
    man.draw()
    assert all(call.name == "set_color" for call in canvas.log)
    assert canvas.pixels == {}


def test_visible_figure_has_head_and_five_limbs(canvas):
    man = Man(canvas, random.Random(4))
    man.x, man.y = 300, 200
    canvas.clear_log()
    man.draw()
    white = [c.name for c in canvas.log if c.color == WHITE and c.name != "set_color"]
    assert white.count("circle") == 1
    assert white.count("line") == 5


def test_erase_after_draw_leaves_blank_canvas(canvas):
    man = Man(canvas, random.Random(5))
    man.x, man.y = 300, 200
    for _ in range(7):
        man.draw()
    assert canvas.pixels
    man.erase()
    assert canvas.pixels == {}