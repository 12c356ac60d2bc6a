import numpy as np
import pytest

from fractol.app import Viewer, main
from fractol.events import Key, Mouse
from fractol.fractal import Fractal, FractalKind, Palette, render
from fractol.image import Image
from fractol.params import Options, key_help_text, usage_text

SIZE = 32


def make_viewer(kind=FractalKind.MANDELBROT, **kwargs):
    return Viewer(Options(kind=kind, **kwargs), SIZE)


def test_mandelbrot_viewer_starts_from_default_view():
    viewer = make_viewer()
    assert viewer.fractal == Fractal.default(FractalKind.MANDELBROT)
    assert viewer.palette == Palette(red=123, green=321, blue=42)
    assert (viewer.image.width, viewer.image.height) == (SIZE, SIZE)
    assert viewer.running is True


def test_julia_with_param_takes_constant_from_options():
    viewer = make_viewer(FractalKind.JULIA_WITH_PARAM, c_real=0.285, c_imag=0.013)
    assert viewer.fractal.c_real == 0.285
    assert viewer.fractal.c_imag == 0.013
    assert viewer.fractal.zoom == 3.5


def test_viewer_without_kind_is_rejected():
    with pytest.raises(ValueError):
        Viewer(Options(help_text="x"), SIZE)


def test_redraw_matches_render():
    viewer = make_viewer(FractalKind.BURNING_SHIP)
    viewer.redraw()
    expected = Image(SIZE, SIZE)
    render(FractalKind.BURNING_SHIP, viewer.fractal, viewer.palette, expected)
    assert np.array_equal(viewer.image.pixels, expected.pixels)


def test_arrow_key_moves_and_redraws():
    viewer = make_viewer()
    before = viewer.fractal.offset_y
    assert viewer.on_key(Key.UP) is True
    assert viewer.fractal.offset_y == pytest.approx(before + 0.042)
    assert viewer.image.pixels.any()


def test_escape_stops_viewer():
    viewer = make_viewer()
    assert viewer.on_key(Key.ESC) is False
    assert viewer.running is False


def test_unhandled_key_leaves_image_alone():
    viewer = make_viewer()
    assert viewer.on_key(0x61) is False
    assert not viewer.image.pixels.any()
    assert viewer.fractal == Fractal.default(FractalKind.MANDELBROT)


def test_julia_key_ignored_for_mandelbrot():
    viewer = make_viewer()
    assert viewer.on_key(Key.C) is False
    assert viewer.fractal.c_real == Fractal().c_real


def test_julia_key_scales_constant():
    viewer = make_viewer(FractalKind.JULIA)
    before = viewer.fractal.c_real
    assert viewer.on_key(Key.C) is True
    assert viewer.fractal.c_real == pytest.approx(before * 1.25)


def test_mouse_left_click_zooms_in():
    viewer = make_viewer()
    before = viewer.fractal.zoom
    assert viewer.on_mouse(Mouse.LEFT_CLICK, 5, 7) is True
    assert viewer.fractal.zoom < before


def test_mouse_scroll_click_does_nothing():
    viewer = make_viewer()
    assert viewer.on_mouse(Mouse.SCROLL_CLICK, 5, 7) is False
    assert viewer.fractal == Fractal.default(FractalKind.MANDELBROT)


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == usage_text()


def test_main_help_key_prints_key_help(capsys):
    assert main(["-H"]) == 1
    assert capsys.readouterr().out == key_help_text()


def test_main_bad_julia_parameters_prints_usage(capsys):
    assert main(["--Julia", "abc", "0.1"]) == 1
    assert capsys.readouterr().out == usage_text()