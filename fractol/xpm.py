"""Reading XPM images, from a list of strings or from an XPM source file."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from fractol.colornames import parse_color
from fractol.image import Image

__all__ = [
    "XpmError",
    "split_words",
    "find_substring",
    "find_unquoted",
    "strip_comments",
    "xpm_to_image",
    "xpm_file_to_image",
]

# Pixel value written for the colour "None".
TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def split_words(text: str) -> list[str]:
    """Split on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_substring(text: str, find: str) -> int:
    """Return the index of the first occurrence of ``find``, or -1."""
    return text.find(find)


def find_unquoted(text: str, find: str) -> int:
    """Return the index of the first ``find`` outside double quotes, or -1."""
    in_quote = False
    last_start = len(text) - len(find)
    for pos, char in enumerate(text):
        if pos > last_start:
            break
        if char == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(find, pos):
            return pos
    return -1


def _blank(text: str, start: int, count: int) -> str:
    end = min(len(text), start + max(count, 0))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    The text keeps its length; a line comment's newline is blanked too.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find_substring(text[begin + 2:], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find_substring(text[begin + 2:], "\n")
        text = _blank(text, begin, end + 3)
    return text


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if not all(values):
        raise XpmError(f"XPM header values must be non-zero: {line!r}")
    width, height, ncolors, cpp = values
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError(f"XPM header values must be positive: {line!r}")
    return width, height, ncolors, cpp


def _parse_color_line(line: str, cpp: int) -> int:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"XPM colour line has no 'c' entry: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"XPM colour line has no colour after 'c': {line!r}")
    extra: Optional[str] = words[index + 1] if index + 1 < len(words) else None
    return parse_color(words[index], extra)


def _parse(lines: Iterable[str]) -> Image:
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "the header"))

    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    later_wins = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "the colour table")
        color = _parse_color_line(line, cpp)
        key = line[:cpp]
        if later_wins:
            colors[key] = color
        else:
            colors.setdefault(key, color)

    image = Image(width, height)
    for y in range(height):
        line = _next_line(source, "the pixel rows")
        for x in range(width):
            color = colors.get(line[cpp * x:cpp * (x + 1)], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colour table, pixel rows."""
    return _parse(lines)


def xpm_file_to_image(path: Union[str, Path]) -> Image:
    """Read an XPM source file and build an image from its quoted strings."""
    text = Path(path).read_text(encoding="latin-1")
    return _parse(_quoted_strings(strip_comments(text)))