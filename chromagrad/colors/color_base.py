from __future__ import annotations
import math
from typing import Any, Callable, ClassVar, Optional, Tuple, Union, cast
from numpy import ndarray
import numpy as np

from ..types.color_types import ColorSpace, ColorValue, HUE_SPACES, Scalar
from ..defaults import HUE_360
from ..utils import get_dimension


class ColorBase:
    """
    An immutable color in one color model plus a unit alpha.

    Channels are stored in the model's native ranges (see ``minima`` and
    ``maxima``); out-of-range channels are clamped and hue channels wrap
    into [0, 360).
    """
    __slots__ = ('_value', '_alpha', '_frozen')  # prevents adding new attributes → immutability

    space:        ClassVar[ColorSpace]
    num_channels: ClassVar[int] = 3
    minima:       ClassVar[Tuple[float, ...]]
    maxima:       ClassVar[Tuple[float, ...]]
    hue_index:    ClassVar[Optional[int]] = None

    # attached in .color to avoid a circular import with the registry
    convert: Callable[[ColorBase, Union[ColorSpace, str]], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ColorValue, ColorBase], alpha: Optional[float] = None) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if alpha is None:
                alpha = value.alpha
            value = value.convert(self.space).value if value.space != self.space else value.value

        # ---- Handle array input ----
        if isinstance(value, ndarray):
            if value.ndim != 1:
                raise ValueError(f"{self.space.value} expects a 1-dimensional array, got shape {value.shape}")
            value = tuple(value.tolist())

        value_dim = get_dimension(value)
        if value_dim != self.num_channels:
            raise ValueError(
                f"{self.space.value} expects {self.num_channels} channels, got {value!r}"
            )
        channels = tuple(float(v) for v in cast(Tuple[Any, ...], value))
        if not all(math.isfinite(v) for v in channels):
            raise ValueError(f"{self.space.value} channels must be finite, got {channels!r}")

        # clamp value, wrap hue
        clamped = []
        for i, (v, lo, hi) in enumerate(zip(channels, self.minima, self.maxima)):
            if i == self.hue_index:
                clamped.append(v % HUE_360)
            else:
                clamped.append(max(lo, min(v, hi)))

        a = 1.0 if alpha is None else float(alpha)
        if math.isnan(a):
            raise ValueError("alpha must be a number, got NaN")

        # safe assignment; __setattr__ still allows it during init
        self._value = tuple(clamped)
        self._alpha = max(0.0, min(a, 1.0))

        # freeze instance, no more writes allowed
        super().__setattr__('_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[float, ...]:
        return self._value

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def has_hue(self) -> bool:
        """Check if this color model includes a hue channel."""
        return self.space in HUE_SPACES

    def to_array(self) -> np.ndarray:
        """Channels followed by alpha, as a float array."""
        return np.array(self._value + (self._alpha,), dtype=float)

    def with_alpha(self, alpha: Scalar) -> ColorBase:
        """Return a copy of this color with a different alpha."""
        return self.__class__(self._value, alpha)

    def scale_alpha(self, factor: Scalar) -> ColorBase:
        """
        Blend this color toward transparent.

        ``factor`` 1.0 keeps the color, 0.0 makes it fully transparent.
        """
        return self.__class__(self._value, self._alpha * float(factor))

    def to_rgba(self) -> Tuple[float, float, float, float]:
        """Unit sRGB channels plus alpha."""
        rgb = self.convert(ColorSpace.RGB).value
        return (rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0, self._alpha)

    def to_argb32(self) -> int:
        """Pack into a 32-bit 0xAARRGGBB integer."""
        r, g, b, a = (int(round(c * 255.0)) for c in self.to_rgba())
        return (a << 24) | (r << 16) | (g << 8) | b

    # ------------------ STRUCTURAL EQUALITY ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (
            self.space == other.space
            and self._value == other._value
            and self._alpha == other._alpha
        )

    def __hash__(self) -> int:
        return hash((self.space, self._value, self._alpha))

    def __repr__(self) -> str:
        channels = ", ".join(f"{v:g}" for v in self._value)
        return f"{self.__class__.__name__}(({channels}), alpha={self._alpha:g})"


def build_registry(*classes: type[ColorBase]) -> dict[ColorSpace, type[ColorBase]]:
    return {cls.space: cls for cls in classes}
