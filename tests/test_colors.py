import math

import pytest

from ps2suitcase.colors import (
    Color,
    ColorF,
    PS2RgbaInterface,
    convert_color_to_float,
    convert_color_to_int,
)


def test_float_conversion_endpoints():
    assert convert_color_to_float(0) == 0.0
    assert convert_color_to_float(255) == 1.0


def test_int_conversion_endpoints():
    assert convert_color_to_int(0.0) == 0
    assert convert_color_to_int(1.0) == 255


def test_int_conversion_saturates():
    assert convert_color_to_int(-0.5) == 0
    assert convert_color_to_int(2.0) == 255
    assert convert_color_to_int(math.nan) == 0


def test_int_conversion_truncates():
    assert convert_color_to_int(0.5) == 127


@pytest.mark.parametrize("value", [-1, 256, 1.5])
def test_float_conversion_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        convert_color_to_float(value)


def test_float_conversion_is_monotonic_and_bounded():
    values = [convert_color_to_float(c) for c in range(256)]
    assert values == sorted(values)
    assert all(0.0 <= v <= 1.0 for v in values)


def test_int_float_round_trip_within_one_step():
    for c in range(256):
        back = convert_color_to_int(convert_color_to_float(c))
        assert c - 1 <= back <= c


def test_color_rejects_bad_channel():
    with pytest.raises(ValueError):
        Color(r=300, g=0, b=0, a=0)


def test_from_color_f_round_trip():
    color_f = ColorF(r=0.25, g=0.5, b=0.75, a=0.125)
    iface = PS2RgbaInterface.from_color_f(color_f)
    assert iface.rgb == [0.25, 0.5, 0.75]
    assert iface.alpha == 0.125
    assert iface.to_color_f() == color_f


def test_from_color_full_channels():
    iface = PS2RgbaInterface.from_color(Color(r=255, g=0, b=255, a=255))
    assert iface.rgb == [1.0, 0.0, 1.0]
    assert iface.alpha == 1.0
    assert iface.to_color() == Color(r=255, g=0, b=255, a=255)


def test_from_color_round_trip_close():
    original = Color(r=10, g=128, b=200, a=77)
    back = PS2RgbaInterface.from_color(original).to_color()
    for name in ("r", "g", "b", "a"):
        assert 0 <= getattr(original, name) - getattr(back, name) <= 1


def test_edited_rgb_is_reflected():
    iface = PS2RgbaInterface.from_color(Color(r=0, g=0, b=0, a=0))
    iface.rgb[1] = 1.0
    assert iface.to_color().g == 255
    assert iface.to_color_f().g == 1.0


def test_rgb_must_have_three_channels():
    with pytest.raises(ValueError):
        PS2RgbaInterface(rgb=[0.0, 0.0], alpha=0.0)