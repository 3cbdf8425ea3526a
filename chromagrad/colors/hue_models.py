from typing import ClassVar, Optional, Tuple

from ..types.color_types import ColorSpace
from .color_base import ColorBase


class _HueColor(ColorBase):
    """Hue in degrees followed by two 0-100 channels."""
    __slots__ = ()

    minima:    ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    maxima:    ClassVar[Tuple[float, float, float]] = (360.0, 100.0, 100.0)
    hue_index: ClassVar[Optional[int]] = 0

    @property
    def hue(self) -> float:
        return self.value[0]

    @property
    def saturation(self) -> float:
        return self.value[1]


class HslColor(_HueColor):
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HSL


class HsbColor(_HueColor):
    """Hue, saturation, brightness (also known as HSV)."""
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HSB


class HsiColor(_HueColor):
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HSI


class HspColor(_HueColor):
    """Hue, saturation, perceived brightness."""
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HSP
