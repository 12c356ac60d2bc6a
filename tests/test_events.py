import pytest

from fractol.events import (
    Key,
    Mouse,
    handle_key,
    handle_mouse,
    is_accuracy_key,
    is_arrow_key,
    is_base_point_key,
    is_rgb_key,
    move_base_point,
    triggers_redraw,
    zoom_at,
    zoom_center,
)
from fractol.fractal import DEFAULT_ACCURACY, Fractal, FractalKind, Palette


def _point(f, x, y, size):
    return (x * (f.zoom / size) + f.offset_x, -(y * (f.zoom / size) - f.offset_y))


def test_key_classes():
    assert is_arrow_key(Key.UP) and not is_arrow_key(Key.PLUS)
    assert is_accuracy_key(Key.NUM_PAD_ENTER) and not is_accuracy_key(Key.UP)
    assert is_rgb_key(Key.NUM_PAD_3) and not is_rgb_key(Key.C)


def test_base_point_key_only_for_julia():
    assert is_base_point_key(Key.C, FractalKind.JULIA)
    assert is_base_point_key(Key.N, FractalKind.JULIA_WITH_PARAM)
    assert not is_base_point_key(Key.C, FractalKind.MANDELBROT)


def test_triggers_redraw():
    assert triggers_redraw(Key.MINUS, FractalKind.MANDELBROT)
    assert not triggers_redraw(Key.ESC, FractalKind.MANDELBROT)
    assert not triggers_redraw(Key.V, FractalKind.BURNING_SHIP)


def test_arrows_move_by_step():
    f = Fractal()
    handle_key(Key.UP, f, Palette(), FractalKind.MANDELBROT)
    assert f.offset_y == pytest.approx(1.75 + 0.042)
    handle_key(Key.LEFT, f, Palette(), FractalKind.MANDELBROT)
    assert f.offset_x == pytest.approx(-1.75 - 0.042)


def test_accuracy_limits_and_reset():
    f = Fractal(accuracy=420)
    handle_key(Key.NUM_PAD_PLUS, f, Palette(), FractalKind.MANDELBROT)
    assert f.accuracy == 420
    f.accuracy = 12
    handle_key(Key.NUM_PAD_MINUS, f, Palette(), FractalKind.MANDELBROT)
    assert f.accuracy == 12
    assert handle_key(Key.NUM_PAD_ENTER, f, Palette(), FractalKind.MANDELBROT)
    assert f.accuracy == DEFAULT_ACCURACY


def test_base_point_scaling():
    f = Fractal(c_real=2.0, c_imag=4.0)
    move_base_point(Key.C, f)
    move_base_point(Key.N, f)
    assert f.c_real == pytest.approx(2.0 * 1.25)
    assert f.c_imag == pytest.approx(4.0 * 0.90)


def test_base_point_ignored_for_mandelbrot():
    f = Fractal(c_real=2.0)
    assert not handle_key(Key.C, f, Palette(), FractalKind.MANDELBROT)
    assert f.c_real == 2.0


def test_rgb_keys_round_trip():
    p = Palette()
    handle_key(Key.NUM_PAD_4, p and Fractal(), p, FractalKind.MANDELBROT)
    assert p.red == 125
    handle_key(Key.NUM_PAD_1, Fractal(), p, FractalKind.MANDELBROT)
    handle_key(Key.NUM_PAD_5, Fractal(), p, FractalKind.MANDELBROT)
    handle_key(Key.NUM_PAD_3, Fractal(), p, FractalKind.MANDELBROT)
    assert (p.red, p.green, p.blue) == (123, 323, 40)


@pytest.mark.parametrize("direction", [1, -1])
def test_zoom_center_keeps_center(direction):
    f = Fractal()
    before = _point(f, 400, 400, 800)
    zoom_center(f, direction, 800)
    assert _point(f, 400, 400, 800) == pytest.approx(before)


def test_zoom_center_in_out_restores():
    f = Fractal()
    zoom_center(f, 1, 800)
    assert f.zoom < 3.5
    zoom_center(f, -1, 800)
    assert f.zoom == pytest.approx(3.5)
    assert (f.offset_x, f.offset_y) == pytest.approx((-1.75, 1.75))


def test_zoom_at_keeps_point_under_cursor():
    f = Fractal()
    before = _point(f, 100, 650, 800)
    zoom_at(f, 100, 650, -1, 800)
    assert f.zoom > 3.5
    assert _point(f, 100, 650, 800) == pytest.approx(before)


def test_mouse_buttons():
    f = Fractal()
    assert handle_mouse(Mouse.LEFT_CLICK, 10, 10, f, 800)
    assert f.zoom < 3.5
    g = Fractal()
    assert not handle_mouse(Mouse.SCROLL_CLICK, 10, 10, g, 800)
    assert g == Fractal()