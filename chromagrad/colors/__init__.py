"""Immutable color classes, one per supported color model."""

from .color_base import ColorBase
from .rgb import RgbColor
from .hue_models import HslColor, HsbColor, HsiColor, HspColor
from .device_independent import CmykColor, LabColor, OklabColor, XyzColor
from .color import space_to_class, get_color_class, color_convert, coerce_color, ColorInput

__all__ = [
    "ColorBase",
    "RgbColor",
    "HslColor",
    "HsbColor",
    "HsiColor",
    "HspColor",
    "CmykColor",
    "LabColor",
    "OklabColor",
    "XyzColor",
    "space_to_class",
    "get_color_class",
    "color_convert",
    "coerce_color",
    "ColorInput",
]
