from __future__ import annotations
from enum import Enum
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

from ..errors import UnsupportedColorSpace

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorElement = Union[Scalar, ScalarVector]
ColorValue = Union[ColorElement, ndarray]


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSB = "hsb"
    HSI = "hsi"
    HSP = "hsp"
    CMYK = "cmyk"
    LAB = "lab"
    OKLAB = "oklab"
    XYZ = "xyz"


HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSB, ColorSpace.HSI, ColorSpace.HSP}

# Common spellings accepted in place of the canonical names
_ALIASES = {
    "hsv": ColorSpace.HSB,
    "srgb": ColorSpace.RGB,
    "cielab": ColorSpace.LAB,
}


def parse_color_space(space: ColorSpace | str) -> ColorSpace:
    """
    Normalize a color space name to a ``ColorSpace`` member.

    Args:
        space: A ``ColorSpace`` or a case-insensitive name ("rgb", "hsv", ...)

    Returns:
        The matching ``ColorSpace``

    Raises:
        UnsupportedColorSpace: if the name is not recognized
    """
    if isinstance(space, ColorSpace):
        return space
    if not isinstance(space, str):
        raise UnsupportedColorSpace(space, "expected a ColorSpace or a string")
    key = space.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return ColorSpace(key)
    except ValueError:
        raise UnsupportedColorSpace(space) from None


def is_hue_space(color_space: ColorSpace | str) -> bool:
    """Check if the given color space carries a hue angle as its first channel."""
    return parse_color_space(color_space) in HUE_SPACES


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    if isinstance(element, (int, float)):
        return np.array([element], dtype=float)
    return np.array(element, dtype=float)
