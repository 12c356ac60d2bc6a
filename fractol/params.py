"""Command-line parameters: which fractal to draw, and help texts."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from fractol.fractal import FractalKind

__all__ = ["Options", "is_signed_float", "usage_text", "key_help_text", "parse_args"]

_SIGNED_FLOAT = re.compile(r"[+-]?\d+(\.\d+)?")

_USAGE = """\
+-----------------------------------------------------+
|                                                     |
|   Empty Param ---> ./fractol <param>                |
|                                                     |
|   Setting Key : --Help_key, -H                      |
|                                                     |
|   Fractal Param Available :                         |
|   --Mandelbrot, -M                                  |
|   --Julia, -J  >>     <-/+1.123>     <-/+1.123>     |
|   --Burning_ship, -B                                |
|                                                     |
|   Exemple : ./fractol --Julia 0.285  0.013          |
|                                                     |
+-----------------------------------------------------+
"""

_KEY_HELP = """\
+-----------------------------------------------------+
|                                                     |
|   Quit                : ESC                         |
|                                                     |
|   Arrow for moving    : UP, DOWN, LEFT, RIGHT       |
|                                                     |
|  Zoom in (on target)  : LEFT_CLICK, SCROLL_UP, +    |
|  Zoom out (on target) : RIGHT_CLICK, SCROLL_DOWN, - |
|                                                     |
|   Details             : num_pad_+, num_pad_-        |
|   Reset details       : num_pad_enter               |
|                                                     |
|   Change color        :                             |
|    *     RED   = num_pad_4 = +,   num_pad_1 = -     |
|    *     GREEN = num_pad_5 = +,   num_pad_2 = -     |
|    *     BLUE  = num_pad_6 = +,   num_pad_3 = -     |
|                                                     |
|   Julia only          :                             |
|    *        C (real++), V (real--)                  |
|    *        B (imag++), N (imag--)                  |
|                                                     |
+-----------------------------------------------------+
"""


@dataclass(frozen=True)
class Options:
    """The result of parsing the command line.

    ``kind`` is None when the program should print ``help_text`` and stop.
    The Julia constant is set only when it was given on the command line.
    """

    kind: Optional[FractalKind] = None
    c_real: Optional[float] = None
    c_imag: Optional[float] = None
    help_text: str = ""


def is_signed_float(text: str) -> bool:
    """True for an optionally signed decimal number such as ``-1.123``."""
    return _SIGNED_FLOAT.fullmatch(text) is not None


def usage_text() -> str:
    return _USAGE


def key_help_text() -> str:
    return _KEY_HELP


def _is_julia(arg: str) -> bool:
    return arg.startswith("--Julia") or arg.startswith("-J")


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the arguments that follow the program name."""
    if not argv:
        return Options(help_text=usage_text())
    first = argv[0]
    if first.startswith("--Help_key") or first.startswith("-H"):
        return Options(help_text=key_help_text())
    if len(argv) == 1 and _is_julia(first):
        return Options(kind=FractalKind.JULIA)
    if first.startswith("--Mandelbrot") or first.startswith("-M"):
        return Options(kind=FractalKind.MANDELBROT)
    if first.startswith("--Burning_ship") or first.startswith("-B"):
        return Options(kind=FractalKind.BURNING_SHIP)
    if len(argv) == 3 and _is_julia(first):
        real, imag = argv[1], argv[2]
        if is_signed_float(real) and is_signed_float(imag):
            return Options(kind=FractalKind.JULIA_WITH_PARAM,
                           c_real=float(real), c_imag=float(imag))
    return Options(help_text=usage_text())