import pytest

from fractol.image import Image, convert_color, rgb_shifts

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_new_image_layout():
    img = Image(IM1_SX, IM1_SY)
    assert img.bits_per_pixel == 32
    assert img.size_line == IM1_SX * 4
    assert img.endian == 0
    assert len(img.data) == img.size_line * IM1_SY


def test_new_image_starts_black():
    img = Image(IM3_SX, IM3_SY)
    assert img.get_pixel(0, 0) == 0
    assert img.get_pixel(IM3_SX - 1, IM3_SY - 1) == 0
    assert set(img.data) == {0}


@pytest.mark.parametrize("kind", [1, 2])
def test_fill_image_round_trip(kind):
    img = Image(IM1_SX, IM1_SY)
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            img.put_pixel(x, y, _color_map(x, y, IM1_SX, IM1_SY, kind))
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            assert img.get_pixel(x, y) == _color_map(x, y, IM1_SX, IM1_SY, kind)


def test_data_is_little_endian():
    img = Image(2, 1)
    img.put_pixel(0, 0, 0x11223344)
    assert img.data[:4] == bytes([0x44, 0x33, 0x22, 0x11])
    assert img.data[4:8] == bytes(4)


def test_put_pixel_truncates_to_32_bits():
    img = Image(1, 1)
    img.put_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


def test_to_rgb_bytes():
    img = Image(2, 1)
    img.put_pixel(0, 0, 0xFF99FF)
    img.put_pixel(1, 0, 0xFF00FFFF)
    assert img.to_rgb_bytes() == bytes([0xFF, 0x99, 0xFF, 0x00, 0xFF, 0xFF])


@pytest.mark.parametrize("size", [(0, 10), (10, 0), (-1, 5)])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        Image(*size)


@pytest.mark.parametrize("point", [(IM1_SX, 0), (0, IM1_SY), (-1, 0)])
def test_out_of_range_pixel(point):
    img = Image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        img.put_pixel(*point, 0)
    with pytest.raises(IndexError):
        img.get_pixel(*point)


def test_rgb_shifts_truecolor():
    assert rgb_shifts(0xFF0000, 0xFF00, 0xFF) == (16, 8, 8, 8, 0, 8)


def test_rgb_shifts_565():
    assert rgb_shifts(0xF800, 0x7E0, 0x1F) == (11, 5, 5, 6, 0, 5)


def test_rgb_shifts_zero_mask():
    with pytest.raises(ValueError):
        rgb_shifts(0, 0xFF00, 0xFF)


def test_convert_color_deep_visual_unchanged():
    shifts = rgb_shifts(0xFF0000, 0xFF00, 0xFF)
    assert convert_color(0xFF99FF, 24, shifts) == 0xFF99FF
    assert convert_color(0x00FFFF, 32, shifts) == 0x00FFFF


def test_convert_color_565():
    shifts = rgb_shifts(0xF800, 0x7E0, 0x1F)
    assert convert_color(0xFFFFFF, 16, shifts) == 0xFFFF
    assert convert_color(0xFF0000, 16, shifts) == 0xF800
    assert convert_color(0x00FF00, 16, shifts) == 0x7E0
    assert convert_color(0x0000FF, 16, shifts) == 0x1F
    assert convert_color(0, 16, shifts) == 0