"""
Immutable gradient descriptions.

A ``GradientSpec`` is one data type for all three gradient kinds; the kind
is carried by its ``geometry`` (``LinearGeometry``, ``RadialGeometry`` or
``SweepGeometry``). Equality and hashing are structural.
"""
from __future__ import annotations
import math
import warnings
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple, Union

from .. import defaults
from ..colors import ColorBase, ColorInput, coerce_color
from ..errors import InvalidSpecification
from ..types.color_types import ColorSpace, parse_color_space
from ..types.gradient_types import GradientKind, TileMode
from ..utils import value_or_default
from .geometry import Alignment, AlignmentGeometry, GradientTransform


@dataclass(frozen=True)
class LinearGeometry:
    begin: AlignmentGeometry = Alignment.center_left
    end: AlignmentGeometry = Alignment.center_right

    kind = GradientKind.LINEAR


@dataclass(frozen=True)
class RadialGeometry:
    center: AlignmentGeometry = Alignment.center
    radius: float = defaults.DEFAULT_RADIAL_RADIUS
    focal: Optional[AlignmentGeometry] = None
    focal_radius: float = defaults.DEFAULT_FOCAL_RADIUS

    kind = GradientKind.RADIAL


@dataclass(frozen=True)
class SweepGeometry:
    center: AlignmentGeometry = Alignment.center
    start_angle: float = defaults.DEFAULT_SWEEP_START_ANGLE
    end_angle: float = defaults.DEFAULT_SWEEP_END_ANGLE

    kind = GradientKind.SWEEP


GradientGeometry = Union[LinearGeometry, RadialGeometry, SweepGeometry]

DEFAULT_DENSITIES = {
    GradientKind.LINEAR: defaults.DEFAULT_LINEAR_DENSITY,
    GradientKind.RADIAL: defaults.DEFAULT_RADIAL_DENSITY,
    GradientKind.SWEEP: defaults.DEFAULT_SWEEP_DENSITY,
}


def implied_stops(count: int) -> Tuple[float, ...]:
    """Evenly spread ``count`` stops from 0.0 to 1.0 inclusive."""
    if count < 2:
        return (0.0,) * count
    return tuple(i / (count - 1) for i in range(count))


@dataclass(frozen=True)
class GradientSpec:
    """
    A multi-color gradient and the controls used to resample it.

    Attributes:
        geometry: Kind-specific placement (linear, radial or sweep)
        colors: Two or more colors; each may be in a different color model
        stops: Optional positions in [0, 1], one per color, non-decreasing
        tile_mode: What is painted outside of the gradient's span
        transform: Optional transform applied to the shader
        color_space: Interpolate every segment in this space when set
        invert: Without ``color_space``, interpolate each segment in the space
            of its end color instead of its start color
        density: Fraction of device pixels along the gradient axis that get
            their own color sample, in (0, 1]; ``None`` uses the kind default
    """
    geometry: GradientGeometry
    colors: Tuple[ColorBase, ...]
    stops: Optional[Tuple[float, ...]] = None
    tile_mode: TileMode = TileMode.CLAMP
    transform: Optional[GradientTransform] = None
    color_space: Optional[ColorSpace] = None
    invert: bool = False
    density: Optional[float] = field(default=None)

    def __post_init__(self) -> None:
        if not isinstance(self.geometry, (LinearGeometry, RadialGeometry, SweepGeometry)):
            raise InvalidSpecification(
                f"geometry must be LinearGeometry, RadialGeometry or SweepGeometry, "
                f"got {type(self.geometry).__name__}"
            )

        try:
            colors = tuple(coerce_color(c) for c in self.colors)
        except (TypeError, ValueError) as exc:
            raise InvalidSpecification(f"invalid color: {exc}") from exc
        if len(colors) < 2:
            raise InvalidSpecification(f"a gradient needs at least 2 colors, got {len(colors)}")
        object.__setattr__(self, 'colors', colors)

        if self.stops is not None:
            stops = tuple(float(s) for s in self.stops)
            if len(stops) != len(colors):
                raise InvalidSpecification(
                    f"stops length ({len(stops)}) must match colors length ({len(colors)})"
                )
            if not all(math.isfinite(s) and 0.0 <= s <= 1.0 for s in stops):
                raise InvalidSpecification(f"stops must lie in [0, 1], got {stops!r}")
            if any(b < a for a, b in zip(stops, stops[1:])):
                raise InvalidSpecification(f"stops must be non-decreasing, got {stops!r}")
            object.__setattr__(self, 'stops', stops)

        try:
            object.__setattr__(self, 'tile_mode', TileMode(self.tile_mode))
        except ValueError:
            raise InvalidSpecification(f"unknown tile mode: {self.tile_mode!r}") from None

        if self.color_space is not None:
            object.__setattr__(self, 'color_space', parse_color_space(self.color_space))
            if self.invert:
                warnings.warn(
                    "invert has no effect when color_space is set",
                    stacklevel=3,
                )

        if self.density is not None:
            density = float(self.density)
            if not (0.0 < density <= 1.0):
                raise InvalidSpecification(f"density must be in (0, 1], got {self.density!r}")
            object.__setattr__(self, 'density', density)

    # ------------------ DERIVED ------------------
    @property
    def kind(self) -> GradientKind:
        return self.geometry.kind

    @property
    def resolved_stops(self) -> Tuple[float, ...]:
        """The given stops, or evenly spaced ones when none were given."""
        return value_or_default(self.stops, implied_stops(len(self.colors)))

    @property
    def resolved_density(self) -> float:
        return value_or_default(self.density, DEFAULT_DENSITIES[self.kind])

    def scale(self, factor: float) -> GradientSpec:
        """
        Return a copy with every color blended toward transparent.

        ``factor`` multiplies each color's alpha; all other fields, ``invert``
        included, are kept.
        """
        return replace(self, colors=tuple(c.scale_alpha(factor) for c in self.colors))

    def create_shader(self, rect, **kwargs):
        """Shortcut for :func:`chromagrad.gradients.orchestrator.build_shader_args`."""
        from .orchestrator import build_shader_args
        return build_shader_args(self, rect, **kwargs)


def _make(geometry: GradientGeometry, colors: Iterable[ColorInput], stops, tile_mode,
          transform, color_space, invert, density) -> GradientSpec:
    return GradientSpec(
        geometry=geometry,
        colors=tuple(colors),  # type: ignore[arg-type]
        stops=None if stops is None else tuple(stops),
        tile_mode=tile_mode,
        transform=transform,
        color_space=color_space,
        invert=invert,
        density=density,
    )


def linear_gradient(
    colors: Iterable[ColorInput],
    stops: Optional[Iterable[float]] = None,
    *,
    begin: AlignmentGeometry = Alignment.center_left,
    end: AlignmentGeometry = Alignment.center_right,
    tile_mode: TileMode = TileMode.CLAMP,
    transform: Optional[GradientTransform] = None,
    color_space: Optional[Union[ColorSpace, str]] = None,
    invert: bool = False,
    density: Optional[float] = None,
) -> GradientSpec:
    """A linear gradient from ``begin`` to ``end``."""
    return _make(LinearGeometry(begin, end), colors, stops, tile_mode,
                 transform, color_space, invert, density)


def radial_gradient(
    colors: Iterable[ColorInput],
    stops: Optional[Iterable[float]] = None,
    *,
    center: AlignmentGeometry = Alignment.center,
    radius: float = defaults.DEFAULT_RADIAL_RADIUS,
    focal: Optional[AlignmentGeometry] = None,
    focal_radius: float = defaults.DEFAULT_FOCAL_RADIUS,
    tile_mode: TileMode = TileMode.CLAMP,
    transform: Optional[GradientTransform] = None,
    color_space: Optional[Union[ColorSpace, str]] = None,
    invert: bool = False,
    density: Optional[float] = None,
) -> GradientSpec:
    """
    A radial gradient. ``radius`` and ``focal_radius`` are fractions of the
    shortest side of the painted rect.
    """
    return _make(RadialGeometry(center, radius, focal, focal_radius), colors, stops,
                 tile_mode, transform, color_space, invert, density)


def sweep_gradient(
    colors: Iterable[ColorInput],
    stops: Optional[Iterable[float]] = None,
    *,
    center: AlignmentGeometry = Alignment.center,
    start_angle: float = defaults.DEFAULT_SWEEP_START_ANGLE,
    end_angle: float = defaults.DEFAULT_SWEEP_END_ANGLE,
    tile_mode: TileMode = TileMode.CLAMP,
    transform: Optional[GradientTransform] = None,
    color_space: Optional[Union[ColorSpace, str]] = None,
    invert: bool = False,
    density: Optional[float] = None,
) -> GradientSpec:
    """A sweep gradient around ``center``; angles are in radians."""
    return _make(SweepGeometry(center, start_angle, end_angle), colors, stops,
                 tile_mode, transform, color_space, invert, density)
