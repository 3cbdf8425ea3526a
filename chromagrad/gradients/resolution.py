"""
Sample budgets for each gradient geometry.

Each function estimates how many color samples a gradient needs: roughly
one per device pixel along the gradient's principal axis, scaled down by
``density``. Degenerate geometry yields 0; NaN and negative inputs are
treated as 0.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional, Union

from .. import defaults
from ..types.gradient_types import GradientKind, Offset, TextDirection
from ..utils import non_negative
from .geometry import Rect, resolve_point
from .spec import GradientSpec, LinearGeometry, RadialGeometry, SweepGeometry


@dataclass(frozen=True)
class LinearRenderGeometry:
    rect: Rect
    start: Offset
    end: Offset

    kind = GradientKind.LINEAR

    @property
    def span(self) -> float:
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])


@dataclass(frozen=True)
class RadialRenderGeometry:
    rect: Rect
    center: Offset
    radius: float
    focal: Optional[Offset] = None
    focal_radius: float = 0.0

    kind = GradientKind.RADIAL


@dataclass(frozen=True)
class SweepRenderGeometry:
    rect: Rect
    center: Offset
    start_angle: float
    end_angle: float

    kind = GradientKind.SWEEP


RenderGeometry = Union[LinearRenderGeometry, RadialRenderGeometry, SweepRenderGeometry]


def resolve_geometry(spec: GradientSpec, rect: Rect,
                     text_direction: Optional[TextDirection] = None) -> RenderGeometry:
    """Place ``spec.geometry`` inside ``rect`` (device space)."""
    geometry = spec.geometry
    if isinstance(geometry, LinearGeometry):
        return LinearRenderGeometry(
            rect=rect,
            start=resolve_point(geometry.begin, rect, text_direction),
            end=resolve_point(geometry.end, rect, text_direction),
        )
    if isinstance(geometry, RadialGeometry):
        focal = None
        if geometry.focal is not None:
            focal = resolve_point(geometry.focal, rect, text_direction)
        return RadialRenderGeometry(
            rect=rect,
            center=resolve_point(geometry.center, rect, text_direction),
            radius=geometry.radius * rect.shortest_side,
            focal=focal,
            focal_radius=geometry.focal_radius * rect.shortest_side,
        )
    if isinstance(geometry, SweepGeometry):
        return SweepRenderGeometry(
            rect=rect,
            center=resolve_point(geometry.center, rect, text_direction),
            start_angle=geometry.start_angle,
            end_angle=geometry.end_angle,
        )
    raise TypeError(f"Unknown gradient geometry: {type(geometry).__name__}")


def _budget(length: float, device_pixel_ratio: float, density: float) -> int:
    samples = non_negative(length) * non_negative(device_pixel_ratio) * non_negative(density)
    if math.isnan(samples):
        return 0
    if math.isinf(samples):
        raise OverflowError("sample budget is unbounded; check the gradient geometry")
    return math.ceil(samples)


def linear_sample_count(start: Offset, end: Offset, device_pixel_ratio: float,
                        density: float = defaults.DEFAULT_LINEAR_DENSITY) -> int:
    span = math.hypot(end[0] - start[0], end[1] - start[1])
    return _budget(span, device_pixel_ratio, density)


def radial_sample_count(radius: float, device_pixel_ratio: float,
                        density: float = defaults.DEFAULT_RADIAL_DENSITY) -> int:
    return _budget(radius, device_pixel_ratio, density)


def sweep_slice(start_angle: float, end_angle: float) -> float:
    """Fraction of a full turn covered between the two (clamped) angles."""
    full = defaults.FULL_TURN
    start = min(non_negative(start_angle), full)
    end = min(non_negative(end_angle), full)
    return (end - start) / full


def sweep_sample_count(rect: Rect, start_angle: float, end_angle: float,
                       device_pixel_ratio: float,
                       density: float = defaults.DEFAULT_SWEEP_DENSITY) -> int:
    diagonal = math.hypot(rect.longest_side, rect.shortest_side)
    return _budget(diagonal * non_negative(sweep_slice(start_angle, end_angle)),
                   device_pixel_ratio, density)


def sample_count(geometry: RenderGeometry, device_pixel_ratio: float, density: float) -> int:
    """Dispatch to the sizing rule matching the render geometry's kind."""
    if isinstance(geometry, LinearRenderGeometry):
        return linear_sample_count(geometry.start, geometry.end, device_pixel_ratio, density)
    if isinstance(geometry, RadialRenderGeometry):
        return radial_sample_count(geometry.radius, device_pixel_ratio, density)
    if isinstance(geometry, SweepRenderGeometry):
        return sweep_sample_count(geometry.rect, geometry.start_angle, geometry.end_angle,
                                  device_pixel_ratio, density)
    raise TypeError(f"Unknown render geometry: {type(geometry).__name__}")
