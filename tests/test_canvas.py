import pytest

from threepointcircle.canvas import BLACK, WHITE, Canvas
from threepointcircle.geometry import Circle


def test_new_canvas_is_white():
    canvas = Canvas(10, 8)
    assert canvas.pixel(0, 0) == WHITE
    assert set(canvas.pixels) == {0xFF}
    assert len(canvas.pixels) == 80


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Canvas(0, 10)


def test_contains_edges():
    canvas = Canvas(10, 8)
    assert canvas.contains(0, 0)
    assert canvas.contains(9, 7)
    assert not canvas.contains(10, 0)
    assert not canvas.contains(0, 8)
    assert not canvas.contains(-1, 0)


def test_pixel_outside_raises():
    canvas = Canvas(10, 8)
    with pytest.raises(IndexError):
        canvas.pixel(10, 3)


def test_draw_disc_is_strict_disc():
    canvas = Canvas(20, 20)
    canvas.draw_disc(10, 10, 3, BLACK)
    assert canvas.pixel(10, 10) == BLACK
    assert canvas.pixel(12, 12) == BLACK
    assert canvas.pixel(8, 10) == BLACK
    assert canvas.pixel(13, 10) == WHITE
    assert canvas.pixel(10, 7) == WHITE


def test_draw_disc_is_symmetric():
    canvas = Canvas(30, 30)
    canvas.draw_disc(15, 15, 6, 100)
    assert canvas.pixel(15, 15) == 100
    for dy in range(-8, 9):
        for dx in range(-8, 9):
            assert canvas.pixel(15 + dx, 15 + dy) == canvas.pixel(15 - dx, 15 - dy)
            assert canvas.pixel(15 + dx, 15 + dy) == canvas.pixel(15 + dy, 15 + dx)


def test_draw_disc_clips_at_corner():
    canvas = Canvas(20, 20)
    canvas.draw_disc(0, 0, 5, BLACK)
    assert canvas.pixel(0, 0) == BLACK
    assert canvas.pixel(4, 0) == BLACK
    assert canvas.pixel(5, 0) == WHITE


def test_draw_disc_zero_radius_draws_nothing():
    canvas = Canvas(10, 10)
    canvas.draw_disc(5, 5, 0, BLACK)
    assert set(canvas.pixels) == {WHITE}


def test_draw_ring_paints_band():
    canvas = Canvas(100, 100)
    circle = canvas.draw_ring([(20, 50), (80, 50), (50, 20)], 5)
    assert circle == Circle(50.0, 50.0, 30.0)
    assert canvas.pixel(50, 50) == WHITE
    assert canvas.pixel(50, 77) == WHITE
    assert canvas.pixel(50, 78) == BLACK
    assert canvas.pixel(50, 80) == BLACK
    assert canvas.pixel(50, 81) == BLACK
    assert canvas.pixel(50, 82) == WHITE
    assert canvas.pixel(20, 50) == BLACK


def test_draw_ring_collinear_draws_nothing():
    canvas = Canvas(50, 50)
    assert canvas.draw_ring([(0, 0), (10, 10), (20, 20)], 5) is None
    assert set(canvas.pixels) == {WHITE}


def test_clear_restores_white():
    canvas = Canvas(20, 20)
    canvas.draw_disc(10, 10, 5, BLACK)
    canvas.clear()
    assert set(canvas.pixels) == {WHITE}


def test_to_pgm():
    canvas = Canvas(100, 40)
    data = canvas.to_pgm()
    header = b"P5\n100 40\n255\n"
    assert data.startswith(header)
    assert len(data) == len(header) + 100 * 40
    assert data[len(header):] == bytes(canvas.pixels)