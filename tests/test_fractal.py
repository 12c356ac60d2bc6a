import pytest

from fractol.fractal import (
    DEFAULT_ACCURACY,
    Fractal,
    FractalKind,
    Palette,
    burning_ship,
    color_for,
    escape_function,
    julia,
    mandelbrot,
    render,
)
from fractol.image import Image


def test_default_view_values():
    f = Fractal.default(FractalKind.MANDELBROT)
    assert (f.zoom, f.offset_x, f.offset_y) == (3.5, -1.75, 1.75)
    assert (f.c_real, f.c_imag) == (0.285, 0.01)
    assert f.accuracy == DEFAULT_ACCURACY


def test_default_palette():
    p = Palette()
    assert (p.red, p.green, p.blue) == (123, 321, 42)


def test_center_of_mandelbrot_never_escapes():
    f = Fractal.default(FractalKind.MANDELBROT)
    assert mandelbrot(f, 400, 400, 800) == f.accuracy


def test_center_of_burning_ship_never_escapes():
    f = Fractal.default(FractalKind.BURNING_SHIP)
    assert burning_ship(f, 400, 400, 800) == f.accuracy


def test_corner_escapes_immediately():
    f = Fractal.default(FractalKind.MANDELBROT)
    assert mandelbrot(f, 0, 0, 800) == 0
    assert julia(f, 0, 0, 800) == 0


@pytest.mark.parametrize("kind", list(FractalKind))
def test_iterations_bounded_by_accuracy(kind):
    f = Fractal.default(kind)
    fn = escape_function(kind)
    for x, y in [(0, 0), (10, 30), (25, 25), (49, 1)]:
        assert 0 <= fn(f, x, y, 50) <= f.accuracy


def test_escape_function_dispatch():
    assert escape_function(FractalKind.MANDELBROT) is mandelbrot
    assert escape_function(FractalKind.JULIA) is julia
    assert escape_function(FractalKind.JULIA_WITH_PARAM) is julia
    assert escape_function(FractalKind.BURNING_SHIP) is burning_ship


def test_color_black_when_not_escaped():
    assert color_for(DEFAULT_ACCURACY, DEFAULT_ACCURACY, Palette()) == 0


def test_color_wraps_negative_channel():
    assert color_for(1, 10, Palette(-1, 0, 0)) == 0xFF0000


def test_color_periodic_in_palette():
    base = color_for(7, 100, Palette(10, 20, 30))
    shifted = color_for(7, 100, Palette(10 + 256, 20 - 256, 30 + 512))
    assert base == shifted
    assert 0 <= base < 0x1000000


@pytest.mark.parametrize("kind", list(FractalKind))
def test_render_matches_per_pixel(kind):
    f = Fractal(zoom=3.0, offset_x=-2.0, offset_y=1.5, c_real=-0.7, c_imag=0.27, accuracy=30)
    palette = Palette()
    image = Image(12, 12)
    render(kind, f, palette, image)
    fn = escape_function(kind)
    for y in range(12):
        for x in range(12):
            expected = color_for(fn(f, x, y, 12), f.accuracy, palette)
            assert image.get_pixel(x, y) == expected


def test_render_center_black():
    f = Fractal.default(FractalKind.MANDELBROT)
    image = Image(20, 20)
    render(FractalKind.MANDELBROT, f, Palette(), image)
    assert image.get_pixel(10, 10) == 0