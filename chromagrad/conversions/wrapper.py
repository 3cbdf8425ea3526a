import numpy as np
from typing import Callable, Dict, Tuple, cast

from ..errors import UnsupportedColorSpace
from ..types.color_types import ColorElement, ColorSpace, element_to_array, parse_color_space

from .to_hue import (
    np_unit_rgb_to_hsb, np_hsb_to_unit_rgb,
    np_unit_rgb_to_hsl, np_hsl_to_unit_rgb,
    np_unit_rgb_to_hsi, np_hsi_to_unit_rgb,
    np_unit_rgb_to_hsp, np_hsp_to_unit_rgb,
    np_hsb_to_hsl, np_hsl_to_hsb,
)
from .cmyk import np_unit_rgb_to_cmyk, np_cmyk_to_unit_rgb
from .xyz_lab import (
    np_unit_rgb_to_xyz, np_xyz_to_unit_rgb,
    np_unit_rgb_to_lab, np_lab_to_unit_rgb,
    np_unit_rgb_to_oklab, np_oklab_to_unit_rgb,
    np_xyz_to_lab, np_lab_to_xyz,
)

Converter = Callable[[np.ndarray], np.ndarray]

# Divisors taking each space's public channel ranges to the working ranges
# the conversion kernels expect.
NATIVE_SCALE: Dict[ColorSpace, Tuple[float, ...]] = {
    ColorSpace.RGB: (255.0, 255.0, 255.0),
    ColorSpace.HSL: (1.0, 100.0, 100.0),
    ColorSpace.HSB: (1.0, 100.0, 100.0),
    ColorSpace.HSI: (1.0, 100.0, 100.0),
    ColorSpace.HSP: (1.0, 100.0, 100.0),
    ColorSpace.CMYK: (100.0, 100.0, 100.0, 100.0),
    ColorSpace.LAB: (1.0, 1.0, 1.0),
    ColorSpace.OKLAB: (1.0, 1.0, 1.0),
    ColorSpace.XYZ: (1.0, 1.0, 1.0),
}

TO_UNIT_RGB: Dict[ColorSpace, Converter] = {
    ColorSpace.RGB: lambda rgb: np.asarray(rgb, dtype=float),
    ColorSpace.HSL: np_hsl_to_unit_rgb,
    ColorSpace.HSB: np_hsb_to_unit_rgb,
    ColorSpace.HSI: np_hsi_to_unit_rgb,
    ColorSpace.HSP: np_hsp_to_unit_rgb,
    ColorSpace.CMYK: np_cmyk_to_unit_rgb,
    ColorSpace.LAB: np_lab_to_unit_rgb,
    ColorSpace.OKLAB: np_oklab_to_unit_rgb,
    ColorSpace.XYZ: np_xyz_to_unit_rgb,
}

FROM_UNIT_RGB: Dict[ColorSpace, Converter] = {
    ColorSpace.RGB: lambda rgb: np.asarray(rgb, dtype=float),
    ColorSpace.HSL: np_unit_rgb_to_hsl,
    ColorSpace.HSB: np_unit_rgb_to_hsb,
    ColorSpace.HSI: np_unit_rgb_to_hsi,
    ColorSpace.HSP: np_unit_rgb_to_hsp,
    ColorSpace.CMYK: np_unit_rgb_to_cmyk,
    ColorSpace.LAB: np_unit_rgb_to_lab,
    ColorSpace.OKLAB: np_unit_rgb_to_oklab,
    ColorSpace.XYZ: np_unit_rgb_to_xyz,
}

# Pairs converted without the RGB hub (and therefore without gamut clipping)
CONVERT_DIRECT: Dict[Tuple[ColorSpace, ColorSpace], Converter] = {
    (ColorSpace.HSB, ColorSpace.HSL): np_hsb_to_hsl,
    (ColorSpace.HSL, ColorSpace.HSB): np_hsl_to_hsb,
    (ColorSpace.XYZ, ColorSpace.LAB): np_xyz_to_lab,
    (ColorSpace.LAB, ColorSpace.XYZ): np_lab_to_xyz,
}


def channel_count(space: ColorSpace | str) -> int:
    return len(NATIVE_SCALE[parse_color_space(space)])


def normalize(color: np.ndarray, space: ColorSpace) -> np.ndarray:
    return color / np.array(NATIVE_SCALE[space])


def scale(color: np.ndarray, space: ColorSpace) -> np.ndarray:
    return color * np.array(NATIVE_SCALE[space])


def _lookup(table: Dict[ColorSpace, Converter], space: ColorSpace) -> Converter:
    try:
        return table[space]
    except KeyError:
        raise UnsupportedColorSpace(space, "no conversion registered") from None


def _check_channels(color: np.ndarray, space: ColorSpace) -> None:
    expected = len(NATIVE_SCALE[space])
    if color.shape[-1] != expected:
        raise ValueError(
            f"{space.value} expects last dimension to be {expected}, got shape {color.shape}"
        )


def to_unit_rgb(color: np.ndarray, space: ColorSpace | str, clip: bool = True) -> np.ndarray:
    """Convert native-range channels of ``space`` to unit sRGB."""
    space = parse_color_space(space)
    color = np.asarray(color, dtype=float)
    _check_channels(color, space)
    rgb = _lookup(TO_UNIT_RGB, space)(normalize(color, space))
    return np.clip(rgb, 0.0, 1.0) if clip else rgb


def from_unit_rgb(rgb: np.ndarray, space: ColorSpace | str) -> np.ndarray:
    """Convert unit sRGB to the native channel ranges of ``space``."""
    space = parse_color_space(space)
    rgb = np.asarray(rgb, dtype=float)
    return scale(_lookup(FROM_UNIT_RGB, space)(rgb), space)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
    clip: bool = True,
) -> np.ndarray:
    """
    Convert an array of colors (..., channels) between two color spaces.

    Channels are in each space's native ranges (RGB 0-255, hue in degrees
    with the other hue-model channels 0-100, CMYK 0-100, LAB/Oklab/XYZ in
    their usual units). Alpha is not handled here.

    Args:
        color: Array whose last dimension holds the channels of ``from_space``
        from_space: Source color space
        to_space: Target color space
        clip: Clip to the sRGB gamut when passing through the RGB hub

    Raises:
        UnsupportedColorSpace: if either space is unknown
    """
    fs = parse_color_space(from_space)
    ts = parse_color_space(to_space)
    color = np.asarray(color, dtype=float)
    _check_channels(color, fs)

    if fs == ts:
        return color.copy()

    key = (fs, ts)
    if key in CONVERT_DIRECT:
        converted = CONVERT_DIRECT[key](normalize(color, fs))
        return scale(converted, ts)

    rgb = to_unit_rgb(color, fs, clip=clip)
    return from_unit_rgb(rgb, ts)


def convert(
    color: ColorElement,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
    clip: bool = True,
) -> ColorElement:
    """Scalar counterpart of ``np_convert``; returns a tuple of floats."""
    result = np_convert(element_to_array(color), from_space, to_space, clip=clip)
    return tuple(float(v) for v in result.flat) if result.ndim == 1 else cast(ColorElement, result)
