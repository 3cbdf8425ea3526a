import math
import numpy as np
import pytest

from chromagrad.colors import (
    ColorBase, RgbColor, HslColor, HsbColor, HsiColor, HspColor,
    CmykColor, LabColor, OklabColor, XyzColor,
    coerce_color, get_color_class, space_to_class,
)
from chromagrad.errors import UnsupportedColorSpace
from chromagrad.types.color_types import ColorSpace, parse_color_space, is_hue_space


def test_registry_covers_every_space():
    assert set(space_to_class) == set(ColorSpace)
    for space, cls in space_to_class.items():
        assert cls.space == space
        assert get_color_class(space.value) is cls


def test_channels_are_clamped():
    color = RgbColor((300, -5, 10.5))
    assert color.value == (255.0, 0.0, 10.5)
    lab = LabColor((120, -200, 200))
    assert lab.value == (100.0, -128.0, 127.0)


def test_hue_wraps():
    assert HslColor((370, 50, 50)).value[0] == 10.0
    assert HsbColor((-90, 50, 50)).value[0] == 270.0


def test_alpha_defaults_and_clamps():
    assert RgbColor((0, 0, 0)).alpha == 1.0
    assert RgbColor((0, 0, 0), 2.0).alpha == 1.0
    assert RgbColor((0, 0, 0), -1.0).alpha == 0.0


def test_invalid_values():
    with pytest.raises(ValueError):
        RgbColor((1, 2))
    with pytest.raises(ValueError):
        RgbColor((float("nan"), 0, 0))
    with pytest.raises(ValueError):
        RgbColor(np.zeros((2, 3)))
    with pytest.raises(ValueError):
        RgbColor((0, 0, 0), float("nan"))


def test_immutable():
    color = RgbColor((1, 2, 3))
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)
    with pytest.raises(AttributeError):
        color.extra = 1


def test_convert_keeps_alpha():
    red = RgbColor((255, 0, 0), 0.25)
    hsl = red.convert("hsl")
    assert isinstance(hsl, HslColor)
    assert np.allclose(hsl.value, (0.0, 100.0, 50.0))
    assert hsl.alpha == 0.25
    assert red.convert(ColorSpace.RGB) is red


def test_construct_from_other_color():
    red = HsbColor((0, 100, 100), 0.5)
    rgb = RgbColor(red)
    assert np.allclose(rgb.value, (255.0, 0.0, 0.0))
    assert rgb.alpha == 0.5


@pytest.mark.parametrize("cls", [HslColor, HsbColor, HsiColor, HspColor,
                                 CmykColor, LabColor, OklabColor, XyzColor])
def test_round_trip_through_rgb(cls):
    original = RgbColor((51, 102, 153), 0.75)
    back = original.convert(cls.space).convert("rgb")
    assert np.allclose(back.value, original.value, atol=1e-3)
    assert back.alpha == 0.75


def test_to_rgba_and_argb32():
    color = RgbColor.from_argb32(0x80FF8000)
    assert color.value == (255.0, 128.0, 0.0)
    assert color.alpha == 128 / 255
    assert color.to_argb32() == 0x80FF8000
    r, g, b, a = color.to_rgba()
    assert (r, b) == (1.0, 0.0)
    assert abs(g - 128 / 255) < 1e-12


def test_from_hex():
    assert RgbColor.from_hex("#ff8000").value == (255.0, 128.0, 0.0)
    assert RgbColor.from_hex("0f0").value == (0.0, 255.0, 0.0)
    assert RgbColor.from_hex("#00000000").alpha == 0.0
    assert RgbColor.from_hex("#ff8000").to_hex() == "#ffff8000"
    with pytest.raises(ValueError):
        RgbColor.from_hex("#12345")
    with pytest.raises(ValueError):
        RgbColor.from_hex("#gggggg")


def test_scale_alpha_and_with_alpha():
    color = HslColor((200, 50, 50), 0.8)
    scaled = color.scale_alpha(0.5)
    assert isinstance(scaled, HslColor)
    assert scaled.value == color.value
    assert math.isclose(scaled.alpha, 0.4)
    assert color.scale_alpha(0.0).alpha == 0.0
    assert color.with_alpha(0.1).alpha == 0.1


def test_structural_equality():
    assert RgbColor((1, 2, 3)) == RgbColor((1.0, 2.0, 3.0))
    assert hash(RgbColor((1, 2, 3))) == hash(RgbColor((1, 2, 3)))
    assert RgbColor((1, 2, 3)) != RgbColor((1, 2, 3), 0.5)
    assert RgbColor((0, 0, 0)) != HsbColor((0, 0, 0))
    assert len({RgbColor((1, 2, 3)), RgbColor((1, 2, 3))}) == 1


def test_to_array():
    arr = CmykColor((0, 50, 100, 0), 0.5).to_array()
    assert arr.shape == (5,)
    assert np.array_equal(arr, [0.0, 50.0, 100.0, 0.0, 0.5])


def test_coerce_color():
    lab = LabColor((50, 0, 0))
    assert coerce_color(lab) is lab
    assert coerce_color("#0000ff") == RgbColor((0, 0, 255))
    assert coerce_color(0xFF00FF00) == RgbColor((0, 255, 0))
    assert coerce_color((10, 20, 30)) == RgbColor((10, 20, 30))
    assert coerce_color([0, 0, 255, 127.5]).alpha == 0.5
    assert isinstance(coerce_color(np.array([1.0, 2.0, 3.0])), RgbColor)
    with pytest.raises(TypeError):
        coerce_color(1.5)
    with pytest.raises(TypeError):
        coerce_color(True)
    with pytest.raises(ValueError):
        coerce_color((1, 2))


def test_color_space_names():
    assert parse_color_space("HSV") is ColorSpace.HSB
    assert parse_color_space(" Oklab ") is ColorSpace.OKLAB
    assert is_hue_space("hsp")
    assert not is_hue_space(ColorSpace.LAB)
    with pytest.raises(UnsupportedColorSpace):
        parse_color_space("ycbcr")
    with pytest.raises(UnsupportedColorSpace):
        get_color_class("ycbcr")


def test_hue_properties():
    color = HspColor((45, 60, 70))
    assert color.has_hue
    assert color.hue == 45.0
    assert color.saturation == 60.0
    assert not isinstance(RgbColor((0, 0, 0)), type(color))
    assert isinstance(color, ColorBase)
