from .geometry import (
    Rect,
    Alignment,
    AlignmentDirectional,
    AlignmentGeometry,
    GradientTransform,
    GradientRotation,
    resolve_transform,
)
from .spec import (
    GradientSpec,
    LinearGeometry,
    RadialGeometry,
    SweepGeometry,
    implied_stops,
    linear_gradient,
    radial_gradient,
    sweep_gradient,
)
from .stops import build_stops
from .resolution import (
    LinearRenderGeometry,
    RadialRenderGeometry,
    SweepRenderGeometry,
    RenderGeometry,
    resolve_geometry,
    linear_sample_count,
    radial_sample_count,
    sweep_sample_count,
    sweep_slice,
    sample_count,
)
from .resampler import (
    ColorSpaceResampler,
    SegmentResampler,
    default_resampler,
    locate_segments,
    segment_space,
    interpolate_segment,
)
from .shader_args import ShaderArgs, LinearShaderArgs, RadialShaderArgs, SweepShaderArgs
from .orchestrator import build_shader_args, build_from_geometry

__all__ = [
    "Rect", "Alignment", "AlignmentDirectional", "AlignmentGeometry",
    "GradientTransform", "GradientRotation", "resolve_transform",
    "GradientSpec", "LinearGeometry", "RadialGeometry", "SweepGeometry",
    "implied_stops", "linear_gradient", "radial_gradient", "sweep_gradient",
    "build_stops",
    "LinearRenderGeometry", "RadialRenderGeometry", "SweepRenderGeometry", "RenderGeometry",
    "resolve_geometry", "linear_sample_count", "radial_sample_count",
    "sweep_sample_count", "sweep_slice", "sample_count",
    "ColorSpaceResampler", "SegmentResampler", "default_resampler",
    "locate_segments", "segment_space", "interpolate_segment",
    "ShaderArgs", "LinearShaderArgs", "RadialShaderArgs", "SweepShaderArgs",
    "build_shader_args", "build_from_geometry",
]
