from typing import ClassVar, Tuple

from ..defaults import D65_WHITE
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class CmykColor(ColorBase):
    __slots__ = ()

    num_channels: ClassVar[int] = 4
    space:  ClassVar[ColorSpace] = ColorSpace.CMYK
    minima: ClassVar[Tuple[float, ...]] = (0.0, 0.0, 0.0, 0.0)
    maxima: ClassVar[Tuple[float, ...]] = (100.0, 100.0, 100.0, 100.0)


class LabColor(ColorBase):
    """CIE L*a*b* relative to D65."""
    __slots__ = ()

    space:  ClassVar[ColorSpace] = ColorSpace.LAB
    minima: ClassVar[Tuple[float, ...]] = (0.0, -128.0, -128.0)
    maxima: ClassVar[Tuple[float, ...]] = (100.0, 127.0, 127.0)


class OklabColor(ColorBase):
    __slots__ = ()

    space:  ClassVar[ColorSpace] = ColorSpace.OKLAB
    minima: ClassVar[Tuple[float, ...]] = (0.0, -0.5, -0.5)
    maxima: ClassVar[Tuple[float, ...]] = (1.0, 0.5, 0.5)


class XyzColor(ColorBase):
    """CIE XYZ (D65), scaled so that white has Y = 100."""
    __slots__ = ()

    space:  ClassVar[ColorSpace] = ColorSpace.XYZ
    minima: ClassVar[Tuple[float, ...]] = (0.0, 0.0, 0.0)
    maxima: ClassVar[Tuple[float, ...]] = D65_WHITE
