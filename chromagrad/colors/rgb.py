from __future__ import annotations
from typing import ClassVar, Optional, Tuple

from ..types.color_types import ColorSpace
from .color_base import ColorBase


class RgbColor(ColorBase):
    """sRGB color with 0-255 channels; the renderer's native representation."""
    __slots__ = ()

    space:  ClassVar[ColorSpace] = ColorSpace.RGB
    minima: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    maxima: ClassVar[Tuple[float, float, float]] = (255.0, 255.0, 255.0)

    @classmethod
    def from_argb32(cls, value: int) -> RgbColor:
        """Build from a packed 0xAARRGGBB integer."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"ARGB value out of range: {value:#x}")
        a = (value >> 24) & 0xFF
        r = (value >> 16) & 0xFF
        g = (value >> 8) & 0xFF
        b = value & 0xFF
        return cls((r, g, b), a / 255.0)

    @classmethod
    def from_hex(cls, text: str) -> RgbColor:
        """
        Parse ``#rgb``, ``#rrggbb`` or ``#aarrggbb`` (the leading ``#`` is optional).
        """
        digits = text.strip().lstrip('#')
        if len(digits) == 3:
            digits = ''.join(ch * 2 for ch in digits)
        if len(digits) == 6:
            digits = 'ff' + digits
        if len(digits) != 8:
            raise ValueError(f"Invalid hex color: {text!r}")
        try:
            packed = int(digits, 16)
        except ValueError:
            raise ValueError(f"Invalid hex color: {text!r}") from None
        return cls.from_argb32(packed)

    @classmethod
    def from_unit(cls, r: float, g: float, b: float, alpha: Optional[float] = None) -> RgbColor:
        return cls((r * 255.0, g * 255.0, b * 255.0), alpha)

    def to_hex(self) -> str:
        """``#aarrggbb`` hex string."""
        return f"#{self.to_argb32():08x}"
