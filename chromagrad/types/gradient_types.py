from __future__ import annotations
from enum import Enum
from typing import Tuple

Offset = Tuple[float, float]
Matrix4Storage = Tuple[float, ...]


class GradientKind(str, Enum):
    LINEAR = "linear"
    RADIAL = "radial"
    SWEEP = "sweep"


class TileMode(str, Enum):
    """Behavior of the gradient outside of its defined span."""
    CLAMP = "clamp"
    REPEATED = "repeated"
    MIRROR = "mirror"
    DECAL = "decal"


class TextDirection(str, Enum):
    LTR = "ltr"
    RTL = "rtl"
