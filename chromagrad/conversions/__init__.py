"""
Chromagrad Color Space Conversions
==================================

Vectorized numpy conversions between the color models gradients can be
interpolated in. Every model converts through unit sRGB, except the
HSB ↔ HSL and XYZ ↔ LAB pairs, which convert directly.

Supported spaces: RGB, HSL, HSB (HSV), HSI, HSP, CMYK, LAB, Oklab, XYZ.

High-Level API
--------------
    np_convert(color, from_space, to_space, clip=True)
        Convert an (..., channels) array between spaces
    convert(color, from_space, to_space, clip=True)
        Scalar/tuple counterpart of np_convert
    to_unit_rgb(color, space) / from_unit_rgb(rgb, space)
        Convert to and from the unit sRGB hub

Examples
--------
>>> from chromagrad.conversions import convert
>>> convert((255, 0, 0), "rgb", "hsl")
(0.0, 100.0, 50.0)
"""

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
from .wrapper import convert, np_convert, to_unit_rgb, from_unit_rgb, channel_count
from ..types.color_types import ColorSpace

__all__ = [
    'np_unit_rgb_to_hsb', 'np_hsb_to_unit_rgb',
    'np_unit_rgb_to_hsl', 'np_hsl_to_unit_rgb',
    'np_unit_rgb_to_hsi', 'np_hsi_to_unit_rgb',
    'np_unit_rgb_to_hsp', 'np_hsp_to_unit_rgb',
    'np_hsb_to_hsl', 'np_hsl_to_hsb',
    'np_unit_rgb_to_cmyk', 'np_cmyk_to_unit_rgb',
    'np_unit_rgb_to_xyz', 'np_xyz_to_unit_rgb',
    'np_unit_rgb_to_lab', 'np_lab_to_unit_rgb',
    'np_unit_rgb_to_oklab', 'np_oklab_to_unit_rgb',
    'np_xyz_to_lab', 'np_lab_to_xyz',
    'convert', 'np_convert', 'to_unit_rgb', 'from_unit_rgb', 'channel_count',
    'ColorSpace',
]
