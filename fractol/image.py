"""In-memory 32-bit pixel images and colour conversion for low-depth visuals."""

from __future__ import annotations

import numpy as np

__all__ = ["Image", "rgb_shifts", "convert_color"]

# Channel layout of a 32-bit little-endian image: 0x00RRGGBB per pixel.
_BITS_PER_PIXEL = 32
_BYTES_PER_PIXEL = _BITS_PER_PIXEL // 8


class Image:
    """A width x height image of 32-bit pixels stored as 0xAARRGGBB values.

    Pixels are laid out row by row, least significant byte first.  The
    ``pixels`` array (shape ``(height, width)``, dtype uint32) may be written
    directly for bulk drawing.
    """

    bits_per_pixel = _BITS_PER_PIXEL
    endian = 0

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    @property
    def size_line(self) -> int:
        """Number of bytes in one row of pixels."""
        return self.width * _BYTES_PER_PIXEL

    @property
    def data(self) -> bytes:
        """The raw pixel bytes, row by row, little endian."""
        return self.pixels.astype("<u4").tobytes()

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (truncated to 32 bits) at column x, row y."""
        self._check(x, y)
        self.pixels[y, x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 32-bit value stored at column x, row y."""
        self._check(x, y)
        return int(self.pixels[y, x])

    def to_rgb_bytes(self) -> bytes:
        """Return the image as packed 8-bit R, G, B triplets, row by row."""
        rgb = np.empty((self.height, self.width, 3), dtype=np.uint8)
        rgb[..., 0] = (self.pixels >> 16) & 0xFF
        rgb[..., 1] = (self.pixels >> 8) & 0xFF
        rgb[..., 2] = self.pixels & 0xFF
        return rgb.tobytes()


def _mask_layout(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    run = mask >> shift
    bits = (run ^ (run + 1)).bit_length() - 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (shift, bits) for red, green and blue as one 6-tuple.

    ``shift`` is the position of a mask's lowest set bit and ``bits`` the
    length of the run of set bits starting there.
    """
    layout: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        layout.extend(_mask_layout(mask))
    return tuple(layout)


def convert_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert 0xRRGGBB to the pixel value of a visual of the given depth.

    Visuals of 24 bits or more take the colour unchanged; shallower ones
    pack each channel into the field described by ``shifts``.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )