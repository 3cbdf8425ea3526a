"""Chromagrad: gradients resampled in the color space of your choice."""

from .colors import (
    ColorBase,
    RgbColor,
    HslColor,
    HsbColor,
    HsiColor,
    HspColor,
    CmykColor,
    LabColor,
    OklabColor,
    XyzColor,
    coerce_color,
    get_color_class,
)
from .conversions import convert, np_convert
from .errors import ChromagradError, InvalidSpecification, UnsupportedColorSpace
from .types.color_types import ColorSpace
from .types.gradient_types import GradientKind, TileMode, TextDirection
from .gradients import (
    Rect,
    Alignment,
    AlignmentDirectional,
    GradientRotation,
    GradientSpec,
    LinearGeometry,
    RadialGeometry,
    SweepGeometry,
    linear_gradient,
    radial_gradient,
    sweep_gradient,
    build_stops,
    resolve_geometry,
    sample_count,
    ColorSpaceResampler,
    SegmentResampler,
    build_shader_args,
    build_from_geometry,
    ShaderArgs,
    LinearShaderArgs,
    RadialShaderArgs,
    SweepShaderArgs,
)
from .render import rasterize, paint, to_image

__version__ = "1.0.0"

__all__ = [
    # colors
    "ColorBase",
    "RgbColor",
    "HslColor",
    "HsbColor",
    "HsiColor",
    "HspColor",
    "CmykColor",
    "LabColor",
    "OklabColor",
    "XyzColor",
    "coerce_color",
    "get_color_class",
    # conversions
    "convert",
    "np_convert",
    "ColorSpace",
    # errors
    "ChromagradError",
    "InvalidSpecification",
    "UnsupportedColorSpace",
    # gradients
    "GradientKind",
    "TileMode",
    "TextDirection",
    "Rect",
    "Alignment",
    "AlignmentDirectional",
    "GradientRotation",
    "GradientSpec",
    "LinearGeometry",
    "RadialGeometry",
    "SweepGeometry",
    "linear_gradient",
    "radial_gradient",
    "sweep_gradient",
    "build_stops",
    "resolve_geometry",
    "sample_count",
    "ColorSpaceResampler",
    "SegmentResampler",
    "build_shader_args",
    "build_from_geometry",
    "ShaderArgs",
    "LinearShaderArgs",
    "RadialShaderArgs",
    "SweepShaderArgs",
    # rendering
    "rasterize",
    "paint",
    "to_image",
    "__version__",
]
