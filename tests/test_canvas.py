import pytest

from starfield.canvas import BLACK, WHITE, Canvas, DrawCall, RecordingCanvas


def test_dimensions_give_bgi_maxima():
    canvas = Canvas(320, 200)
    assert canvas.max_x == 319
    assert canvas.max_y == 199


@pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-5, 5)])
def test_bad_dimensions_rejected(width, height):
    with pytest.raises(ValueError):
        Canvas(width, height)


def test_default_color_is_white():
    assert Canvas().color == WHITE


def test_set_color_rejects_out_of_range():
    canvas = Canvas()
    with pytest.raises(ValueError):
        canvas.set_color(16)
    with pytest.raises(ValueError):
        canvas.set_color(-1)


def test_put_pixel_and_read_back():
    canvas = Canvas(10, 10)
    canvas.put_pixel(3, 4, 7)
    assert canvas.pixel(3, 4) == 7
    assert canvas.pixels == {(3, 4): 7}


def test_put_pixel_truncates_coordinates():
    canvas = Canvas(10, 10)
    canvas.put_pixel(3.9, 4.2, 9)
    assert canvas.pixel(3, 4) == 9


def test_put_pixel_outside_is_clipped():
    canvas = Canvas(10, 10)
    canvas.put_pixel(-1, 5, WHITE)
    canvas.put_pixel(10, 5, WHITE)
    assert canvas.pixels == {}


def test_put_pixel_background_erases():
    canvas = Canvas(10, 10)
    canvas.put_pixel(2, 2, WHITE)
    canvas.put_pixel(2, 2, BLACK)
    assert canvas.pixel(2, 2) == BLACK
    assert canvas.pixels == {}


def test_horizontal_line_covers_every_pixel():
    canvas = Canvas(20, 20)
    canvas.line(2, 5, 9, 5)
    assert set(canvas.pixels) == {(x, 5) for x in range(2, 10)}


def test_line_includes_both_endpoints_and_is_symmetric():
    forward = Canvas(50, 50)
    forward.line(3, 7, 40, 22)
    backward = Canvas(50, 50)
    backward.line(40, 22, 3, 7)
    assert (3, 7) in forward.pixels
    assert (40, 22) in forward.pixels
    assert len(forward.pixels) == len(backward.pixels)


def test_line_uses_current_color():
    canvas = Canvas(20, 20)
    canvas.set_color(4)
    canvas.line(0, 0, 5, 5)
    assert set(canvas.pixels.values()) == {4}


def test_circle_touches_its_extremes():
    canvas = Canvas(100, 100)
    canvas.circle(50, 50, 10)
    for point in [(60, 50), (40, 50), (50, 40), (50, 60)]:
        assert point in canvas.pixels
    assert (50, 50) not in canvas.pixels


def test_ellipse_arc_runs_counter_clockwise_upwards():
    canvas = Canvas(100, 100)
    canvas.ellipse(50, 50, 0, 90, 20, 10)
    assert (70, 50) in canvas.pixels
    assert (50, 40) in canvas.pixels
    assert all(x >= 50 and y <= 50 for x, y in canvas.pixels)


def test_ellipse_wraps_negative_start():
    canvas = Canvas(100, 100)
    canvas.ellipse(50, 50, -45, 45, 15, 3)
    assert (65, 50) in canvas.pixels
    assert all(x > 50 for x, _ in canvas.pixels)


def test_negative_radius_rejected():
    with pytest.raises(ValueError):
        Canvas().circle(10, 10, -3)


def test_fill_ellipse_fills_centre():
    canvas = Canvas(100, 100)
    canvas.fill_ellipse(30, 30, 10, 10)
    assert canvas.pixel(30, 30) == WHITE
    assert canvas.pixel(35, 33) == WHITE
    assert canvas.pixel(45, 45) == BLACK


@pytest.mark.parametrize(
    "draw",
    [
        lambda c: c.line(1, 2, 60, 33),
        lambda c: c.circle(40, 40, 12),
        lambda c: c.ellipse(40, 40, 135, 225, 15, 3),
        lambda c: c.fill_ellipse(40, 40, 10, 6),
    ],
)
def test_redrawing_in_background_erases(draw):
    canvas = Canvas(100, 100)
    draw(canvas)
    assert canvas.pixels
    canvas.set_color(BLACK)
    draw(canvas)
    assert canvas.pixels == {}


def test_recording_canvas_logs_calls_with_colour():
    canvas = RecordingCanvas(50, 50)
    canvas.set_color(3)
    canvas.line(0, 0, 4, 4)
    canvas.circle(20, 20, 5)
    canvas.put_pixel(1, 1, 9)
    assert canvas.log == [
        DrawCall("set_color", (3,), 3),
        DrawCall("line", (0, 0, 4, 4), 3),
        DrawCall("circle", (20, 20, 5), 3),
        DrawCall("put_pixel", (1, 1), 9),
    ]


def test_recording_canvas_still_draws():
    canvas = RecordingCanvas(50, 50)
    canvas.fill_ellipse(10, 10, 3, 3)
    assert canvas.pixel(10, 10) == WHITE
    assert [call.name for call in canvas.log] == ["fill_ellipse"]


def test_clear_log_empties_log_but_keeps_pixels():
    canvas = RecordingCanvas(50, 50)
    canvas.ellipse(25, 25, 0, 360, 5, 4)
    canvas.clear_log()
    assert canvas.log == []
    assert canvas.pixels


def test_recording_rejects_bad_colour_without_logging():
    canvas = RecordingCanvas(50, 50)
    with pytest.raises(ValueError):
        canvas.set_color(99)
    assert canvas.log == []