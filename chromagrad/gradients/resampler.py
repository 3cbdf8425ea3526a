"""
Color-space aware resampling of a sparse color/stop list.

The orchestration layer only depends on the ``ColorSpaceResampler``
protocol; ``SegmentResampler`` is the default implementation backed by
``chromagrad.conversions``.
"""
from __future__ import annotations
import logging
from typing import Optional, Protocol, Sequence, Tuple, runtime_checkable

import numpy as np

from ..colors import ColorBase, RgbColor, get_color_class
from ..conversions import np_convert, to_unit_rgb
from ..defaults import HUE_360
from ..errors import InvalidSpecification
from ..types.color_types import ColorSpace, parse_color_space

logger = logging.getLogger(__name__)


@runtime_checkable
class ColorSpaceResampler(Protocol):
    def resample(
        self,
        colors: Sequence[ColorBase],
        stops: Sequence[float],
        color_space: Optional[ColorSpace],
        invert: bool,
        size: int,
    ) -> Tuple[ColorBase, ...]:
        """Return exactly ``size`` renderer-ready colors."""
        ...


def locate_segments(stops: Sequence[float], size: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Find the original segment and local parameter for each output sample.

    Sample ``k`` sits at ``t = k / size``. Its segment ``i`` satisfies
    ``stops[i] <= t < stops[i + 1]`` (the last segment is closed on the
    right) and ``u = (t - stops[i]) / (stops[i + 1] - stops[i])``, or 0 for a
    zero-width segment. Samples outside the stop range clamp ``u`` to [0, 1].

    Returns:
        (segment indices, u values), both of length ``size``
    """
    stops_arr = np.asarray(stops, dtype=float)
    t = np.arange(size, dtype=float) / size
    last_segment = len(stops_arr) - 2

    index = np.searchsorted(stops_arr, t, side='right') - 1
    index = np.clip(index, 0, last_segment)

    start = stops_arr[index]
    width = stops_arr[index + 1] - start
    has_width = width > 0
    u = np.where(has_width, (t - start) / np.where(has_width, width, 1.0), 0.0)
    return index, np.clip(u, 0.0, 1.0)


def segment_space(start: ColorBase, end: ColorBase,
                  color_space: Optional[ColorSpace], invert: bool) -> ColorSpace:
    """The color space a segment is interpolated in."""
    if color_space is not None:
        return parse_color_space(color_space)
    return end.space if invert else start.space


def lerp_channels(start: np.ndarray, end: np.ndarray, u: np.ndarray,
                  hue_index: Optional[int] = None) -> np.ndarray:
    """
    Channel-wise linear interpolation, one row per value of ``u``.

    The hue channel (if any) follows the shorter arc around the circle.
    """
    u = np.asarray(u, dtype=float)[:, None]
    delta = end - start
    if hue_index is not None:
        delta = delta.copy()
        delta[hue_index] = (delta[hue_index] + HUE_360 / 2.0) % HUE_360 - HUE_360 / 2.0
    out = start + u * delta
    if hue_index is not None:
        out[:, hue_index] %= HUE_360
    return out


def interpolate_segment(start: ColorBase, end: ColorBase, u: np.ndarray,
                        space: ColorSpace) -> np.ndarray:
    """
    Interpolate between two colors in ``space``.

    Returns:
        Unit RGBA array of shape (len(u), 4)
    """
    target = get_color_class(space)
    a = np_convert(np.array(start.value), start.space, target.space)
    b = np_convert(np.array(end.value), end.space, target.space)
    channels = lerp_channels(a, b, u, target.hue_index)
    rgb = to_unit_rgb(channels, target.space)
    alpha = start.alpha + np.asarray(u, dtype=float) * (end.alpha - start.alpha)
    return np.concatenate([rgb, alpha[:, None]], axis=-1)


def _check_preconditions(colors: Sequence[ColorBase], stops: Sequence[float], size: int) -> None:
    if len(colors) < 2:
        raise InvalidSpecification(f"resampling needs at least 2 colors, got {len(colors)}")
    if len(stops) != len(colors):
        raise InvalidSpecification(
            f"stops length ({len(stops)}) must match colors length ({len(colors)})"
        )
    if size < len(colors):
        raise InvalidSpecification(
            f"cannot resample {len(colors)} colors into {size} samples"
        )
    if any(b < a for a, b in zip(stops, stops[1:])):
        raise InvalidSpecification(f"stops must be non-decreasing, got {tuple(stops)!r}")


class SegmentResampler:
    """Resample each original segment in its own interpolation space."""

    def resample_array(
        self,
        colors: Sequence[ColorBase],
        stops: Sequence[float],
        color_space: Optional[ColorSpace],
        invert: bool,
        size: int,
    ) -> np.ndarray:
        """Like ``resample`` but returns a unit RGBA array of shape (size, 4)."""
        _check_preconditions(colors, stops, size)
        index, u = locate_segments(stops, size)

        out = np.empty((size, 4), dtype=float)
        for seg in np.unique(index):
            mask = index == seg
            start, end = colors[seg], colors[seg + 1]
            space = segment_space(start, end, color_space, invert)
            logger.debug("segment %d: %d samples in %s", seg, int(mask.sum()), space.value)
            out[mask] = interpolate_segment(start, end, u[mask], space)
        return out

    def resample(
        self,
        colors: Sequence[ColorBase],
        stops: Sequence[float],
        color_space: Optional[ColorSpace],
        invert: bool,
        size: int,
    ) -> Tuple[RgbColor, ...]:
        rgba = self.resample_array(colors, stops, color_space, invert, size)
        return tuple(RgbColor.from_unit(r, g, b, a) for r, g, b, a in rgba.tolist())


default_resampler = SegmentResampler()
