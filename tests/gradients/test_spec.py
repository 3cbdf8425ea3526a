import dataclasses
import math
import pytest

from chromagrad.colors import HslColor, LabColor, RgbColor
from chromagrad.errors import InvalidSpecification, UnsupportedColorSpace
from chromagrad.gradients import (
    GradientRotation,
    GradientSpec,
    LinearGeometry,
    linear_gradient,
    radial_gradient,
    sweep_gradient,
)
from chromagrad.types.color_types import ColorSpace
from chromagrad.types.gradient_types import GradientKind, TileMode

COLORS = ["#ff0000", "#00ff00", "#0000ff"]


def test_colors_are_coerced():
    spec = linear_gradient(["#ff0000", 0xFF0000FF, (0, 255, 0), LabColor((50, 10, 10))])
    assert spec.colors[0] == RgbColor((255, 0, 0))
    assert spec.colors[1] == RgbColor((0, 0, 255))
    assert spec.colors[2] == RgbColor((0, 255, 0))
    assert isinstance(spec.colors[3], LabColor)


def test_default_density_per_kind():
    assert linear_gradient(COLORS).resolved_density == 0.075
    assert radial_gradient(COLORS).resolved_density == 0.125
    assert sweep_gradient(COLORS).resolved_density == 0.075
    assert linear_gradient(COLORS, density=0.5).resolved_density == 0.5


def test_kind_follows_geometry():
    assert linear_gradient(COLORS).kind is GradientKind.LINEAR
    assert radial_gradient(COLORS).kind is GradientKind.RADIAL
    assert sweep_gradient(COLORS).kind is GradientKind.SWEEP


@pytest.mark.parametrize("density", [0.0, -0.1, 1.5, float("nan")])
def test_density_out_of_range(density):
    with pytest.raises(InvalidSpecification):
        linear_gradient(COLORS, density=density)


def test_density_upper_bound_is_inclusive():
    assert linear_gradient(COLORS, density=1.0).density == 1.0


def test_too_few_colors():
    with pytest.raises(InvalidSpecification):
        linear_gradient(["#ff0000"])
    with pytest.raises(InvalidSpecification):
        linear_gradient([])


def test_stops_validation():
    with pytest.raises(InvalidSpecification):
        linear_gradient(COLORS, stops=[0.0, 1.0])
    with pytest.raises(InvalidSpecification):
        linear_gradient(COLORS, stops=[0.0, 0.7, 0.5])
    with pytest.raises(InvalidSpecification):
        linear_gradient(COLORS, stops=[0.0, 0.5, 1.5])
    with pytest.raises(InvalidSpecification):
        linear_gradient(COLORS, stops=[0.0, float("nan"), 1.0])


def test_invalid_color_and_tile_mode():
    with pytest.raises(InvalidSpecification):
        linear_gradient(["#ff0000", 1.5])
    with pytest.raises(InvalidSpecification):
        linear_gradient(COLORS, tile_mode="wrap")
    with pytest.raises(InvalidSpecification):
        GradientSpec(geometry="linear", colors=tuple(COLORS))


def test_unknown_color_space():
    with pytest.raises(UnsupportedColorSpace):
        linear_gradient(COLORS, color_space="ycbcr")


def test_color_space_is_normalized():
    assert linear_gradient(COLORS, color_space="hsv").color_space is ColorSpace.HSB
    assert linear_gradient(COLORS, tile_mode="mirror").tile_mode is TileMode.MIRROR


def test_invert_with_fixed_space_warns():
    with pytest.warns(UserWarning, match="invert"):
        linear_gradient(COLORS, color_space="lab", invert=True)


def test_resolved_stops():
    assert linear_gradient(COLORS).stops is None
    assert linear_gradient(COLORS).resolved_stops == (0.0, 0.5, 1.0)
    spec = linear_gradient(COLORS, stops=[0, 0.2, 1])
    assert spec.stops == (0.0, 0.2, 1.0)
    assert spec.resolved_stops is spec.stops


def test_structural_equality_and_hash():
    a = linear_gradient(COLORS, transform=GradientRotation(math.pi / 4), color_space="oklab")
    b = linear_gradient([RgbColor((255, 0, 0)), RgbColor((0, 255, 0)), RgbColor((0, 0, 255))],
                        transform=GradientRotation(math.pi / 4), color_space=ColorSpace.OKLAB)
    assert a == b
    assert hash(a) == hash(b)
    assert a != linear_gradient(COLORS, color_space="oklab")
    assert a != radial_gradient(COLORS, transform=GradientRotation(math.pi / 4), color_space="oklab")


def test_spec_is_frozen():
    spec = linear_gradient(COLORS)
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.density = 0.5


def test_scale_fades_colors_and_keeps_everything_else():
    spec = radial_gradient(
        [HslColor((0, 100, 50)), RgbColor((0, 0, 255), 0.5)],
        stops=[0.1, 0.9],
        radius=0.3,
        tile_mode=TileMode.REPEATED,
        invert=True,
        density=0.4,
    )
    scaled = spec.scale(0.5)
    assert [c.alpha for c in scaled.colors] == [0.5, 0.25]
    assert [c.value for c in scaled.colors] == [c.value for c in spec.colors]
    assert isinstance(scaled.colors[0], HslColor)
    assert scaled.invert is True
    assert scaled.geometry == spec.geometry
    assert (scaled.stops, scaled.tile_mode, scaled.density) == (spec.stops, spec.tile_mode, spec.density)
    assert spec.colors[0].alpha == 1.0


def test_explicit_geometry_construction():
    spec = GradientSpec(geometry=LinearGeometry(), colors=("#000", "#fff"))
    assert spec == linear_gradient(["#000", "#fff"])
