import pytest

from fractol.colornames import COLOR_TABLE, lookup_color, parse_color


def test_lookup_basic_names():
    assert lookup_color("red") == 0xff0000
    assert lookup_color("navy") == 0x80
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == 0xf8f8ff


def test_lookup_duplicate_name_takes_first_entry():
    assert lookup_color("dark slate") == 0x2f4f4f
    assert lookup_color("light goldenrod") == 0xfafad2


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_every_table_name_is_found():
    for name, _ in COLOR_TABLE:
        first = next(color for other, color in COLOR_TABLE if other == name)
        assert lookup_color(name) == first


def test_parse_hex_specification():
    assert parse_color("#ff00ff") == 0xff00ff
    assert parse_color("#00FFFF", "ignored") == 0x00ffff


def test_parse_hex_without_digits_is_zero():
    assert parse_color("#zz") == 0
    assert parse_color("#") == 0


def test_parse_two_word_name():
    assert parse_color("light", "blue") == lookup_color("light blue")
    assert parse_color("white", "smoke") == 0xf5f5f5


def test_parse_single_name_and_unknown():
    assert parse_color("Black") == 0
    assert parse_color("magenta") == 0xff00ff
    assert parse_color("nosuchcolour") == 0
    assert parse_color("None") == -1


def test_parse_too_long_combined_name_is_unknown():
    assert parse_color("x" * 70, "red") == 0