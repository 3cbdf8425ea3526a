"""
Reference rasterizer for shader arguments.

Paints ``ShaderArgs`` into a float RGBA array the way a GPU gradient shader
would: every pixel center gets a gradient parameter ``t``, the tile mode
folds ``t`` into [0, 1], and colors are blended linearly between stops.
"""
from __future__ import annotations
from typing import Optional, Tuple

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from .defaults import FULL_TURN
from .gradients.geometry import Rect, matrix_from_storage
from .gradients.orchestrator import build_shader_args
from .gradients.shader_args import (
    AnyShaderArgs,
    LinearShaderArgs,
    RadialShaderArgs,
    SweepShaderArgs,
)
from .gradients.spec import GradientSpec
from .types.gradient_types import TileMode


def _pixel_grid(width: int, height: int, matrix) -> Tuple[NDArray, NDArray]:
    ys, xs = np.indices((height, width), dtype=float)
    xs += 0.5
    ys += 0.5
    if matrix is None:
        return xs, ys
    inverse = np.linalg.inv(matrix_from_storage(matrix))
    points = np.stack([xs, ys, np.zeros_like(xs), np.ones_like(xs)], axis=-1)
    local = points @ inverse.T
    w = np.where(local[..., 3] == 0, 1.0, local[..., 3])
    return local[..., 0] / w, local[..., 1] / w


def _linear_t(args: LinearShaderArgs, xs: NDArray, ys: NDArray) -> Tuple[NDArray, NDArray]:
    dx = args.end[0] - args.start[0]
    dy = args.end[1] - args.start[1]
    length2 = dx * dx + dy * dy
    valid = np.ones(xs.shape, dtype=bool)
    if length2 == 0:
        return np.zeros(xs.shape), valid
    return ((xs - args.start[0]) * dx + (ys - args.start[1]) * dy) / length2, valid


def _radial_t(args: RadialShaderArgs, xs: NDArray, ys: NDArray) -> Tuple[NDArray, NDArray]:
    cx, cy = args.center
    focal = args.focal
    if focal is None or (tuple(focal) == tuple(args.center) and args.focal_radius == 0):
        valid = np.ones(xs.shape, dtype=bool)
        if args.radius <= 0:
            return np.ones(xs.shape), valid
        return np.hypot(xs - cx, ys - cy) / args.radius, valid

    # Two-point conical: the circle interpolated from (focal, focal_radius)
    # at t = 0 to (center, radius) at t = 1 that passes through the pixel.
    r0, r1 = args.focal_radius, args.radius
    cdx, cdy = cx - focal[0], cy - focal[1]
    dr = r1 - r0
    pdx, pdy = xs - focal[0], ys - focal[1]

    a = cdx * cdx + cdy * cdy - dr * dr
    b = pdx * cdx + pdy * cdy + r0 * dr
    c = pdx * pdx + pdy * pdy - r0 * r0

    if abs(a) < 1e-12:
        safe_b = np.where(b == 0, 1.0, b)
        t = c / (2.0 * safe_b)
        valid = (b != 0) & (r0 + t * dr >= 0)
        return t, valid

    disc = b * b - a * c
    root = np.sqrt(np.maximum(disc, 0.0))
    t_hi = (b + root) / a
    t_lo = (b - root) / a
    if a < 0:
        t_hi, t_lo = t_lo, t_hi
    hi_ok = r0 + t_hi * dr >= 0
    t = np.where(hi_ok, t_hi, t_lo)
    valid = (disc >= 0) & (hi_ok | (r0 + t_lo * dr >= 0))
    return t, valid


def _sweep_t(args: SweepShaderArgs, xs: NDArray, ys: NDArray) -> Tuple[NDArray, NDArray]:
    cx, cy = args.center
    angle = np.arctan2(ys - cy, xs - cx) % FULL_TURN
    valid = np.ones(xs.shape, dtype=bool)
    arc = args.end_angle - args.start_angle
    if arc == 0:
        return np.zeros(xs.shape), valid
    return (angle - args.start_angle) / arc, valid


def apply_tile_mode(t: NDArray, tile_mode: TileMode) -> Tuple[NDArray, NDArray]:
    """Fold ``t`` into [0, 1]; the mask marks pixels that get painted at all."""
    inside = np.ones(t.shape, dtype=bool)
    if tile_mode is TileMode.REPEATED:
        return t - np.floor(t), inside
    if tile_mode is TileMode.MIRROR:
        folded = np.mod(t, 2.0)
        return np.where(folded > 1.0, 2.0 - folded, folded), inside
    if tile_mode is TileMode.DECAL:
        inside = (t >= 0.0) & (t <= 1.0)
    return np.clip(t, 0.0, 1.0), inside


def rasterize(args: AnyShaderArgs, width: int, height: int) -> NDArray:
    """
    Paint shader arguments into an array of shape (height, width, 4).

    Pixel centers sit at half-integer coordinates in the same space as the
    offsets stored in ``args``. Channels are unit-scaled straight RGBA.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive integers")

    xs, ys = _pixel_grid(width, height, args.matrix)
    if isinstance(args, LinearShaderArgs):
        t, valid = _linear_t(args, xs, ys)
    elif isinstance(args, RadialShaderArgs):
        t, valid = _radial_t(args, xs, ys)
    elif isinstance(args, SweepShaderArgs):
        t, valid = _sweep_t(args, xs, ys)
    else:
        raise TypeError(f"Unknown shader arguments: {type(args).__name__}")

    t, inside = apply_tile_mode(t, args.tile_mode)
    rgba = np.array([c.to_rgba() for c in args.colors], dtype=float)
    stops = np.asarray(args.stops, dtype=float)

    out = np.stack([np.interp(t, stops, rgba[:, ch]) for ch in range(4)], axis=-1)
    out[~(valid & inside)] = 0.0
    return out


def paint(spec: GradientSpec, width: int, height: int, **kwargs) -> NDArray:
    """Build shader arguments for a ``width`` x ``height`` rect and rasterize them."""
    args = build_shader_args(spec, Rect.from_size(width, height), **kwargs)
    return rasterize(args, width, height)


def to_image(pixels: NDArray, background: Optional[Tuple[int, int, int]] = None) -> Image.Image:
    """
    Convert a rasterized array to a Pillow image.

    Args:
        pixels: Unit RGBA array of shape (height, width, 4)
        background: Flatten onto this 0-255 RGB color instead of keeping alpha
    """
    data = np.round(np.clip(pixels, 0.0, 1.0) * 255.0).astype(np.uint8)
    image = Image.fromarray(data)
    if background is None:
        return image
    flat = Image.new("RGB", image.size, tuple(background))
    flat.paste(image, mask=image.getchannel("A"))
    return flat
