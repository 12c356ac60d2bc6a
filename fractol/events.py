"""Keyboard and mouse handling: moving, zooming, detail and colours."""

from __future__ import annotations

import enum

from fractol.fractal import DEFAULT_ACCURACY, WINDOW_SIZE, Fractal, FractalKind, Palette

__all__ = [
    "Key",
    "Mouse",
    "is_arrow_key",
    "is_accuracy_key",
    "is_base_point_key",
    "is_rgb_key",
    "triggers_redraw",
    "move_base_point",
    "zoom_center",
    "zoom_at",
    "handle_key",
    "handle_mouse",
]

ARROW_STEP = 0.042
KEY_ZOOM_FACTOR = 1.042
MOUSE_ZOOM_FACTOR = 1.42
MAX_ACCURACY = 420
MIN_ACCURACY = 12
ACCURACY_UP = 8
ACCURACY_DOWN = 4
COLOR_STEP = 2


class Key(enum.IntEnum):
    """Keys the viewer reacts to, as X11 keysyms."""

    ESC = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    NUM_PAD_ENTER = 0xFF8D
    NUM_PAD_PLUS = 0xFFAB
    NUM_PAD_MINUS = 0xFFAD
    NUM_PAD_1 = 0xFFB1
    NUM_PAD_2 = 0xFFB2
    NUM_PAD_3 = 0xFFB3
    NUM_PAD_4 = 0xFFB4
    NUM_PAD_5 = 0xFFB5
    NUM_PAD_6 = 0xFFB6
    PLUS = 0x2B
    MINUS = 0x2D
    B = 0x62
    C = 0x63
    N = 0x6E
    V = 0x76


class Mouse(enum.IntEnum):
    """Mouse buttons."""

    LEFT_CLICK = 1
    SCROLL_CLICK = 2
    RIGHT_CLICK = 3
    SCROLL_UP = 4
    SCROLL_DOWN = 5


_ARROWS = frozenset({Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT})
_ACCURACY = frozenset({Key.NUM_PAD_PLUS, Key.NUM_PAD_MINUS, Key.NUM_PAD_ENTER})
_BASE_POINT = {Key.C: ("c_real", 1.25), Key.V: ("c_real", 0.90),
               Key.B: ("c_imag", 1.25), Key.N: ("c_imag", 0.90)}
_RGB = {Key.NUM_PAD_4: ("red", COLOR_STEP), Key.NUM_PAD_1: ("red", -COLOR_STEP),
        Key.NUM_PAD_5: ("green", COLOR_STEP), Key.NUM_PAD_2: ("green", -COLOR_STEP),
        Key.NUM_PAD_6: ("blue", COLOR_STEP), Key.NUM_PAD_3: ("blue", -COLOR_STEP)}


def is_arrow_key(key: int) -> bool:
    return key in _ARROWS


def is_accuracy_key(key: int) -> bool:
    return key in _ACCURACY


def is_base_point_key(key: int, kind: FractalKind) -> bool:
    """True for the Julia constant keys, and only while showing a Julia set."""
    return kind.is_julia and key in _BASE_POINT


def is_rgb_key(key: int) -> bool:
    return key in _RGB


def triggers_redraw(key: int, kind: FractalKind) -> bool:
    """True when ``key`` changes what is drawn."""
    return (is_arrow_key(key) or is_accuracy_key(key) or is_base_point_key(key, kind)
            or is_rgb_key(key) or key in (Key.PLUS, Key.MINUS))


def move_base_point(key: int, fractal: Fractal) -> None:
    """Scale the real or imaginary part of the Julia constant."""
    if key in _BASE_POINT:
        attribute, factor = _BASE_POINT[key]
        setattr(fractal, attribute, getattr(fractal, attribute) * factor)


def _zoom(fractal: Fractal, x: float, y: float, direction: int, factor: float,
          size: int) -> None:
    point_x = x * (fractal.zoom / size) + fractal.offset_x
    point_y = -(y * (fractal.zoom / size) - fractal.offset_y)
    if direction == 1:
        fractal.zoom /= factor
    elif direction == -1:
        fractal.zoom *= factor
    fractal.offset_x = point_x - x * (fractal.zoom / size)
    fractal.offset_y = point_y + y * (fractal.zoom / size)


def zoom_center(fractal: Fractal, direction: int, size: int = WINDOW_SIZE) -> None:
    """Zoom in (1) or out (-1) keeping the window centre fixed."""
    center = size >> 1
    _zoom(fractal, center, center, direction, KEY_ZOOM_FACTOR, size)


def zoom_at(fractal: Fractal, x: int, y: int, direction: int,
            size: int = WINDOW_SIZE) -> None:
    """Zoom in (1) or out (-1) keeping the point under pixel (x, y) fixed."""
    _zoom(fractal, x, y, direction, MOUSE_ZOOM_FACTOR, size)


def _change_accuracy(key: int, fractal: Fractal) -> None:
    if key == Key.NUM_PAD_PLUS:
        if fractal.accuracy < MAX_ACCURACY:
            fractal.accuracy += ACCURACY_UP
    elif key == Key.NUM_PAD_MINUS:
        if fractal.accuracy > MIN_ACCURACY:
            fractal.accuracy -= ACCURACY_DOWN
    elif key == Key.NUM_PAD_ENTER:
        fractal.accuracy = DEFAULT_ACCURACY


def _move(key: int, fractal: Fractal) -> None:
    if key == Key.UP:
        fractal.offset_y += ARROW_STEP
    elif key == Key.DOWN:
        fractal.offset_y -= ARROW_STEP
    elif key == Key.RIGHT:
        fractal.offset_x += ARROW_STEP
    elif key == Key.LEFT:
        fractal.offset_x -= ARROW_STEP


def handle_key(key: int, fractal: Fractal, palette: Palette, kind: FractalKind,
               size: int = WINDOW_SIZE) -> bool:
    """Apply a key press and return whether the image must be redrawn.

    Escape is left to the caller, which ends the program.
    """
    if is_arrow_key(key):
        _move(key, fractal)
    elif is_accuracy_key(key):
        _change_accuracy(key, fractal)
    elif is_base_point_key(key, kind):
        move_base_point(key, fractal)
    elif is_rgb_key(key):
        channel, step = _RGB[key]
        setattr(palette, channel, getattr(palette, channel) + step)
    elif key == Key.PLUS:
        zoom_center(fractal, 1, size)
    elif key == Key.MINUS:
        zoom_center(fractal, -1, size)
    return triggers_redraw(key, kind)


def handle_mouse(button: int, x: int, y: int, fractal: Fractal,
                 size: int = WINDOW_SIZE) -> bool:
    """Apply a mouse button and return whether the image must be redrawn."""
    if button in (Mouse.SCROLL_DOWN, Mouse.LEFT_CLICK):
        zoom_at(fractal, x, y, 1, size)
    elif button in (Mouse.SCROLL_UP, Mouse.RIGHT_CLICK):
        zoom_at(fractal, x, y, -1, size)
    return button != Mouse.SCROLL_CLICK