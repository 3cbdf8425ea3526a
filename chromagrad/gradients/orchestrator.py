"""
Turn a ``GradientSpec`` into shader arguments for one paint call.

The sample budget comes from the painted geometry. When it is smaller than
the number of colors the gradient already has, the original colors and
stops are handed to the renderer untouched; otherwise the colors are
resampled into ``N`` evenly spaced samples.
"""
from __future__ import annotations
import logging
from typing import Optional

from .. import defaults
from ..types.gradient_types import TextDirection
from ..utils import value_or_default
from .geometry import Rect, resolve_transform
from .resampler import ColorSpaceResampler, default_resampler
from .resolution import (
    LinearRenderGeometry,
    RadialRenderGeometry,
    RenderGeometry,
    SweepRenderGeometry,
    resolve_geometry,
    sample_count,
)
from .shader_args import AnyShaderArgs, LinearShaderArgs, RadialShaderArgs, SweepShaderArgs
from .spec import GradientSpec
from .stops import build_stops

logger = logging.getLogger(__name__)


def build_from_geometry(
    spec: GradientSpec,
    geometry: RenderGeometry,
    *,
    text_direction: Optional[TextDirection] = None,
    device_pixel_ratio: Optional[float] = None,
    resampler: Optional[ColorSpaceResampler] = None,
) -> AnyShaderArgs:
    """Build shader arguments for an already resolved render geometry."""
    if geometry.kind != spec.kind:
        raise TypeError(
            f"{spec.kind.value} gradient cannot be painted with {geometry.kind.value} geometry"
        )
    dpr = value_or_default(device_pixel_ratio, defaults.DEFAULT_DEVICE_PIXEL_RATIO)
    resampler = value_or_default(resampler, default_resampler)

    size = sample_count(geometry, dpr, spec.resolved_density)
    original_stops = spec.resolved_stops

    if size < len(spec.colors):
        logger.debug("%s gradient: %d samples < %d colors, passing through",
                     spec.kind.value, size, len(spec.colors))
        colors = spec.colors
        stops = original_stops
        resampled = False
    else:
        logger.debug("%s gradient: resampling %d colors into %d",
                     spec.kind.value, len(spec.colors), size)
        colors = tuple(resampler.resample(spec.colors, original_stops,
                                          spec.color_space, spec.invert, size))
        stops = build_stops(size)
        resampled = True

    common = dict(
        colors=colors,
        stops=stops,
        tile_mode=spec.tile_mode,
        matrix=resolve_transform(spec.transform, geometry.rect, text_direction),
        sample_count=size,
        resampled=resampled,
    )

    if isinstance(geometry, LinearRenderGeometry):
        return LinearShaderArgs(start=geometry.start, end=geometry.end, **common)
    if isinstance(geometry, RadialRenderGeometry):
        return RadialShaderArgs(center=geometry.center, radius=geometry.radius,
                                focal=geometry.focal, focal_radius=geometry.focal_radius,
                                **common)
    if isinstance(geometry, SweepRenderGeometry):
        return SweepShaderArgs(center=geometry.center, start_angle=geometry.start_angle,
                               end_angle=geometry.end_angle, **common)
    raise TypeError(f"Unknown render geometry: {type(geometry).__name__}")


def build_shader_args(
    spec: GradientSpec,
    rect: Rect,
    *,
    text_direction: Optional[TextDirection] = None,
    device_pixel_ratio: Optional[float] = None,
    resampler: Optional[ColorSpaceResampler] = None,
) -> AnyShaderArgs:
    """
    Resolve ``spec`` inside ``rect`` and build its shader arguments.

    Args:
        spec: The gradient to paint
        rect: Target rectangle in logical pixels
        text_direction: Needed only for directional alignments
        device_pixel_ratio: Device pixels per logical pixel
        resampler: Strategy producing the resampled colors

    Returns:
        Linear, radial or sweep shader arguments matching ``spec.kind``
    """
    geometry = resolve_geometry(spec, rect, text_direction)
    return build_from_geometry(spec, geometry, text_direction=text_direction,
                               device_pixel_ratio=device_pixel_ratio, resampler=resampler)
