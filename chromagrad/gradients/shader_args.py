from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..colors import ColorBase
from ..types.gradient_types import GradientKind, Matrix4Storage, Offset, TileMode


@dataclass(frozen=True)
class ShaderArgs:
    """
    Everything a shader constructor needs for one paint call.

    ``colors`` and ``stops`` always have the same length. ``resampled`` tells
    whether they were regenerated (``sample_count`` of them) or passed
    through from the gradient unchanged.
    """
    colors: Tuple[ColorBase, ...]
    stops: Tuple[float, ...]
    tile_mode: TileMode
    matrix: Optional[Matrix4Storage]
    sample_count: int
    resampled: bool


@dataclass(frozen=True)
class LinearShaderArgs(ShaderArgs):
    start: Offset
    end: Offset

    kind = GradientKind.LINEAR


@dataclass(frozen=True)
class RadialShaderArgs(ShaderArgs):
    center: Offset
    radius: float
    focal: Optional[Offset]
    focal_radius: float

    kind = GradientKind.RADIAL


@dataclass(frozen=True)
class SweepShaderArgs(ShaderArgs):
    center: Offset
    start_angle: float
    end_angle: float

    kind = GradientKind.SWEEP


AnyShaderArgs = Union[LinearShaderArgs, RadialShaderArgs, SweepShaderArgs]
