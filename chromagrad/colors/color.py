from __future__ import annotations
from numbers import Integral, Real
from typing import Sequence, Union

import numpy as np
from numpy import ndarray

from ..conversions import np_convert
from ..errors import UnsupportedColorSpace
from ..types.color_types import ColorSpace, parse_color_space
from .color_base import ColorBase, build_registry
from .rgb import RgbColor
from .hue_models import HslColor, HsbColor, HsiColor, HspColor
from .device_independent import CmykColor, LabColor, OklabColor, XyzColor

space_to_class: dict[ColorSpace, type[ColorBase]] = build_registry(
    RgbColor,
    HslColor,
    HsbColor,
    HsiColor,
    HspColor,
    CmykColor,
    LabColor,
    OklabColor,
    XyzColor,
)

ColorInput = Union[ColorBase, str, int, Sequence[float], ndarray]


def get_color_class(color_space: ColorSpace | str) -> type[ColorBase]:
    space = parse_color_space(color_space)
    color_class = space_to_class.get(space)
    if color_class is None:
        raise UnsupportedColorSpace(space, "no color class registered")
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace | str) -> ColorBase:
    """
    Convert this color to another color model, keeping its alpha.

    Args:
        to_space: Target color space (e.g. "rgb", "hsl", "oklab")

    Returns:
        New ColorBase instance in the target space, or ``self`` when the
        space already matches.
    """
    target = get_color_class(to_space)
    if target.space == self.space:
        return self
    result = np_convert(np.array(self.value, dtype=float), self.space, target.space)
    return target(result, self.alpha)


ColorBase.convert = color_convert


def coerce_color(value: ColorInput) -> ColorBase:
    """
    Turn any accepted color input into a ColorBase.

    ColorBase instances pass through untouched. Hex strings, packed ARGB
    integers and ``(r, g, b[, a])`` sequences (all 0-255) become RgbColor.
    """
    if isinstance(value, ColorBase):
        return value
    if isinstance(value, str):
        return RgbColor.from_hex(value)
    if isinstance(value, Integral) and not isinstance(value, bool):
        return RgbColor.from_argb32(int(value))
    if isinstance(value, (ndarray, list, tuple)):
        channels = np.asarray(value, dtype=float).ravel()
        if channels.size == 3:
            return RgbColor(channels)
        if channels.size == 4:
            return RgbColor(channels[:3], float(channels[3]) / 255.0)
        raise ValueError(f"Expected 3 or 4 channels for an RGB color, got {channels.size}")
    if isinstance(value, Real):
        raise TypeError(f"A bare number is not a color: {value!r}")
    raise TypeError(f"Unsupported color input type: {type(value).__name__}")
