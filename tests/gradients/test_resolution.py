import math
import pytest

from chromagrad.gradients import (
    Alignment,
    AlignmentDirectional,
    LinearRenderGeometry,
    RadialRenderGeometry,
    Rect,
    SweepRenderGeometry,
    linear_gradient,
    linear_sample_count,
    radial_gradient,
    radial_sample_count,
    resolve_geometry,
    sample_count,
    sweep_gradient,
    sweep_sample_count,
    sweep_slice,
)
from chromagrad.types.gradient_types import TextDirection

COLORS = ["#ff0000", "#0000ff"]


def test_linear_count():
    assert linear_sample_count((0, 0), (100, 0), 1.0, 0.5) == 50
    assert linear_sample_count((0, 0), (100, 0), 2.0, 0.5) == 100
    assert linear_sample_count((0, 0), (3, 4), 1.0, 1.0) == 5


def test_linear_count_rounds_up():
    assert linear_sample_count((0, 0), (10, 0), 1.0, 0.25) == 3


def test_linear_degenerate_is_zero():
    assert linear_sample_count((5, 5), (5, 5), 3.0, 1.0) == 0


def test_nan_and_negative_inputs_are_zero():
    assert linear_sample_count((0, 0), (float("nan"), 0), 1.0, 1.0) == 0
    assert linear_sample_count((0, 0), (100, 0), -2.0, 1.0) == 0
    assert linear_sample_count((0, 0), (100, 0), float("nan"), 1.0) == 0
    assert radial_sample_count(-10.0, 1.0, 1.0) == 0
    assert radial_sample_count(float("nan"), 1.0, 1.0) == 0


def test_radial_count():
    assert radial_sample_count(50.0, 2.0, 0.5) == 50
    assert radial_sample_count(0.0, 2.0, 0.5) == 0


def test_sweep_slice():
    assert sweep_slice(0.0, 2 * math.pi) == 1.0
    assert sweep_slice(0.0, math.pi) == 0.5
    assert sweep_slice(-1.0, 10.0) == 1.0
    assert sweep_slice(math.pi, 0.0) < 0


def test_sweep_count():
    rect = Rect.from_size(30, 40)
    assert sweep_sample_count(rect, 0.0, 2 * math.pi, 1.0, 1.0) == 50
    assert sweep_sample_count(rect, 0.0, math.pi, 1.0, 1.0) == 25
    assert sweep_sample_count(rect, -1.0, 10.0, 1.0, 1.0) == 50
    assert sweep_sample_count(rect, math.pi, 0.0, 1.0, 1.0) == 0
    assert sweep_sample_count(rect, 1.0, 1.0, 1.0, 1.0) == 0


def test_counts_never_decrease_with_size():
    previous = {"linear": 0, "radial": 0, "sweep": 0}
    for size in range(0, 500, 7):
        counts = {
            "linear": linear_sample_count((0, 0), (size, size / 2), 1.5, 0.075),
            "radial": radial_sample_count(size * 0.5, 1.5, 0.125),
            "sweep": sweep_sample_count(Rect.from_size(size, size / 3), 0.5, 4.0, 1.5, 0.075),
        }
        for kind, count in counts.items():
            assert count >= previous[kind], kind
            assert count >= 0
        previous = counts


def test_resolve_linear_geometry():
    rect = Rect.from_ltwh(10, 20, 200, 100)
    geometry = resolve_geometry(linear_gradient(COLORS), rect)
    assert isinstance(geometry, LinearRenderGeometry)
    assert geometry.start == (10.0, 70.0)
    assert geometry.end == (210.0, 70.0)
    assert geometry.span == 200.0
    assert geometry.rect is rect


def test_resolve_directional_alignment():
    spec = linear_gradient(COLORS, begin=AlignmentDirectional.center_start,
                           end=AlignmentDirectional.center_end)
    rect = Rect.from_size(200, 100)
    ltr = resolve_geometry(spec, rect, TextDirection.LTR)
    rtl = resolve_geometry(spec, rect, TextDirection.RTL)
    assert (ltr.start, ltr.end) == ((0.0, 50.0), (200.0, 50.0))
    assert (rtl.start, rtl.end) == ((200.0, 50.0), (0.0, 50.0))
    with pytest.raises(ValueError):
        resolve_geometry(spec, rect)


def test_resolve_radial_geometry():
    spec = radial_gradient(COLORS, radius=0.5, focal=Alignment.top_left, focal_radius=0.1)
    geometry = resolve_geometry(spec, Rect.from_size(200, 100))
    assert isinstance(geometry, RadialRenderGeometry)
    assert geometry.center == (100.0, 50.0)
    assert geometry.radius == 50.0
    assert geometry.focal == (0.0, 0.0)
    assert geometry.focal_radius == pytest.approx(10.0)


def test_resolve_sweep_geometry():
    spec = sweep_gradient(COLORS, start_angle=0.5, end_angle=2.0)
    geometry = resolve_geometry(spec, Rect.from_size(40, 40))
    assert isinstance(geometry, SweepRenderGeometry)
    assert geometry.center == (20.0, 20.0)
    assert (geometry.start_angle, geometry.end_angle) == (0.5, 2.0)


def test_sample_count_dispatch():
    rect = Rect.from_size(200, 100)
    linear = resolve_geometry(linear_gradient(COLORS), rect)
    radial = resolve_geometry(radial_gradient(COLORS), rect)
    sweep = resolve_geometry(sweep_gradient(COLORS), Rect.from_size(30, 40))
    assert sample_count(linear, 1.0, 0.5) == 100
    assert sample_count(radial, 1.0, 0.5) == 25
    assert sample_count(sweep, 1.0, 0.5) == 25
    with pytest.raises(TypeError):
        sample_count(object(), 1.0, 0.5)
