"""Escape-time fractals and their rendering into an image."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable

import numpy as np

from fractol.image import Image

__all__ = [
    "WINDOW_SIZE",
    "DEFAULT_ACCURACY",
    "FractalKind",
    "Fractal",
    "Palette",
    "mandelbrot",
    "julia",
    "burning_ship",
    "escape_function",
    "color_for",
    "render",
]

WINDOW_SIZE = 800
DEFAULT_ACCURACY = 42

_ESCAPE_RADIUS_SQUARED = 4.0


class FractalKind(enum.Enum):
    """The fractal being drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    JULIA_WITH_PARAM = "julia_with_param"
    BURNING_SHIP = "burning_ship"

    @property
    def is_julia(self) -> bool:
        return self in (FractalKind.JULIA, FractalKind.JULIA_WITH_PARAM)


@dataclass
class Fractal:
    """The view onto the complex plane and the Julia constant."""

    zoom: float = 3.5
    offset_x: float = -1.75
    offset_y: float = 1.75
    c_real: float = 0.285
    c_imag: float = 0.01
    accuracy: int = DEFAULT_ACCURACY

    @staticmethod
    def default(kind: FractalKind) -> "Fractal":
        """Return the starting view for ``kind``.

        A Julia set given on the command line gets its constant later, so
        its constant starts at zero here.
        """
        if kind is FractalKind.JULIA_WITH_PARAM:
            return Fractal(c_real=0.0, c_imag=0.0)
        return Fractal()


@dataclass
class Palette:
    """Per-channel multipliers turning an iteration count into a colour."""

    red: int = 123
    green: int = 321
    blue: int = 42


def _iterate(z_real: float, z_imag: float, c_real: float, c_imag: float,
             accuracy: int) -> int:
    iterations = 0
    while iterations < accuracy:
        tmp_real = z_real * z_real - z_imag * z_imag + c_real
        z_imag = 2 * z_real * z_imag + c_imag
        z_real = tmp_real
        if z_real * z_real + z_imag * z_imag >= _ESCAPE_RADIUS_SQUARED:
            break
        iterations += 1
    return iterations


def mandelbrot(fractal: Fractal, x: int, y: int, size: int = WINDOW_SIZE) -> int:
    """Return the escape iteration of pixel (x, y) for the Mandelbrot set."""
    scale = fractal.zoom / size
    c_real = x * scale + fractal.offset_x
    c_imag = -(y * scale - fractal.offset_y)
    return _iterate(0.0, 0.0, c_real, c_imag, fractal.accuracy)


def julia(fractal: Fractal, x: int, y: int, size: int = WINDOW_SIZE) -> int:
    """Return the escape iteration of pixel (x, y) for the Julia set."""
    scale = fractal.zoom / size
    z_real = x * scale + fractal.offset_x
    z_imag = -(y * scale - fractal.offset_y)
    return _iterate(z_real, z_imag, fractal.c_real, fractal.c_imag, fractal.accuracy)


def burning_ship(fractal: Fractal, x: int, y: int, size: int = WINDOW_SIZE) -> int:
    """Return the escape iteration of pixel (x, y) for the Burning Ship."""
    scale = fractal.zoom / size
    c_real = x * scale + fractal.offset_x
    c_imag = y * scale - fractal.offset_y
    z_real = z_imag = 0.0
    iterations = 0
    while iterations < fractal.accuracy:
        tmp_real = z_real * z_real - z_imag * z_imag + c_real
        z_imag = 2 * abs(z_real * z_imag) + c_imag
        z_real = abs(tmp_real)
        if z_real * z_real + z_imag * z_imag >= _ESCAPE_RADIUS_SQUARED:
            break
        iterations += 1
    return iterations


EscapeFunction = Callable[[Fractal, int, int, int], int]

_FUNCTIONS: dict[FractalKind, EscapeFunction] = {
    FractalKind.MANDELBROT: mandelbrot,
    FractalKind.JULIA: julia,
    FractalKind.JULIA_WITH_PARAM: julia,
    FractalKind.BURNING_SHIP: burning_ship,
}


def escape_function(kind: FractalKind) -> EscapeFunction:
    """Return the per-pixel escape function for ``kind``."""
    return _FUNCTIONS[kind]


def color_for(iterations: int, accuracy: int, palette: Palette) -> int:
    """Map an iteration count to 0xRRGGBB; points that never escape are black."""
    if iterations == accuracy:
        return 0x000000
    red = (iterations * palette.red) & 0xFF
    green = (iterations * palette.green) & 0xFF
    blue = (iterations * palette.blue) & 0xFF
    return (red << 16) | (green << 8) | blue


def _escape_counts(kind: FractalKind, fractal: Fractal, width: int, height: int,
                   size: int) -> np.ndarray:
    scale = fractal.zoom / size
    columns = np.arange(width, dtype=np.float64) * scale + fractal.offset_x
    rows = np.arange(height, dtype=np.float64) * scale - fractal.offset_y
    if kind is not FractalKind.BURNING_SHIP:
        rows = -rows
    plane_real, plane_imag = np.meshgrid(columns, rows)

    if kind.is_julia:
        z_real, z_imag = plane_real, plane_imag
        c_real = np.full_like(plane_real, fractal.c_real)
        c_imag = np.full_like(plane_imag, fractal.c_imag)
    else:
        z_real = np.zeros_like(plane_real)
        z_imag = np.zeros_like(plane_imag)
        c_real, c_imag = plane_real, plane_imag

    counts = np.full((height, width), fractal.accuracy, dtype=np.int64)
    active = np.ones((height, width), dtype=bool)
    burning = kind is FractalKind.BURNING_SHIP
    with np.errstate(over="ignore", invalid="ignore"):
        for iteration in range(max(fractal.accuracy, 0)):
            tmp_real = z_real * z_real - z_imag * z_imag + c_real
            if burning:
                z_imag = 2 * np.abs(z_real * z_imag) + c_imag
                z_real = np.abs(tmp_real)
            else:
                z_imag = 2 * z_real * z_imag + c_imag
                z_real = tmp_real
            escaped = active & (z_real * z_real + z_imag * z_imag >= _ESCAPE_RADIUS_SQUARED)
            counts[escaped] = iteration
            active &= ~escaped
            if not active.any():
                break
    return counts


def render(kind: FractalKind, fractal: Fractal, palette: Palette, image: Image) -> None:
    """Draw ``kind`` into ``image``, scaling the view by the image width."""
    counts = _escape_counts(kind, fractal, image.width, image.height, image.width)
    red = (counts * palette.red) & 0xFF
    green = (counts * palette.green) & 0xFF
    blue = (counts * palette.blue) & 0xFF
    colors = (red << 16) | (green << 8) | blue
    colors[counts == fractal.accuracy] = 0
    image.pixels[:, :] = colors.astype(np.uint32)