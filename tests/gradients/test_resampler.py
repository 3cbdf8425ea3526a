import numpy as np
import pytest

from chromagrad.colors import HslColor, LabColor, OklabColor, RgbColor
from chromagrad.errors import InvalidSpecification, UnsupportedColorSpace
from chromagrad.gradients import (
    ColorSpaceResampler,
    SegmentResampler,
    interpolate_segment,
    locate_segments,
    segment_space,
)
from chromagrad.types.color_types import ColorSpace

RED_HSL = HslColor((0, 100, 50))
BLUE_RGB = RgbColor((0, 0, 255))


def test_segment_selection_boundaries():
    index, u = locate_segments([0.0, 0.5, 1.0], 4)
    assert index.tolist() == [0, 0, 1, 1]
    assert u.tolist() == [0.0, 0.5, 0.0, 0.5]


def test_zero_width_segment_is_skipped():
    index, u = locate_segments([0.0, 0.5, 0.5, 1.0], 4)
    assert index.tolist() == [0, 0, 2, 2]
    assert u.tolist() == [0.0, 0.5, 0.0, 0.5]


def test_targets_before_first_stop_clamp():
    index, u = locate_segments([0.5, 1.0], 4)
    assert index.tolist() == [0, 0, 0, 0]
    assert u.tolist() == [0.0, 0.0, 0.0, 0.5]


def test_segment_space_rules():
    assert segment_space(RED_HSL, BLUE_RGB, None, False) is ColorSpace.HSL
    assert segment_space(RED_HSL, BLUE_RGB, None, True) is ColorSpace.RGB
    assert segment_space(RED_HSL, BLUE_RGB, ColorSpace.LAB, False) is ColorSpace.LAB
    assert segment_space(RED_HSL, BLUE_RGB, "lab", True) is ColorSpace.LAB


def test_output_length_and_type():
    colors = [RgbColor((255, 0, 0)), HslColor((120, 100, 50)), LabColor((30, 20, -40))]
    out = SegmentResampler().resample(colors, [0.0, 0.3, 1.0], None, False, 17)
    assert len(out) == 17
    assert all(isinstance(c, RgbColor) for c in out)


def test_rgb_interpolation_values():
    black, white = RgbColor((0, 0, 0)), RgbColor((255, 255, 255))
    out = SegmentResampler().resample([black, white], [0.0, 1.0], None, False, 4)
    assert [c.value[0] for c in out] == [0.0, 63.75, 127.5, 191.25]


def test_interpolation_space_changes_the_result():
    rgba_fwd = SegmentResampler().resample_array([RED_HSL, BLUE_RGB], [0.0, 1.0], None, False, 2)
    rgba_inv = SegmentResampler().resample_array([RED_HSL, BLUE_RGB], [0.0, 1.0], None, True, 2)
    # HSL takes the short way round the hue circle through magenta
    assert np.allclose(rgba_fwd[1], (1.0, 0.0, 1.0, 1.0))
    # RGB blends the channels
    assert np.allclose(rgba_inv[1], (0.5, 0.0, 0.5, 1.0))
    assert np.allclose(rgba_fwd[0], rgba_inv[0])


def test_invert_symmetry():
    n = 8
    resampler = SegmentResampler()
    forward = resampler.resample_array([RED_HSL, BLUE_RGB], [0.0, 1.0], None, False, n)
    backward = resampler.resample_array([BLUE_RGB, RED_HSL], [0.0, 1.0], None, True, n)
    # sample k of the forward run sits where sample n - k of the reversed run does
    for k in range(1, n):
        assert np.allclose(forward[k], backward[n - k], atol=1e-9)

    u = np.linspace(0.0, 1.0, 11)
    assert np.allclose(
        interpolate_segment(RED_HSL, BLUE_RGB, u, ColorSpace.HSL),
        interpolate_segment(BLUE_RGB, RED_HSL, 1.0 - u, ColorSpace.HSL),
    )


@pytest.mark.parametrize("space", [ColorSpace.LAB, ColorSpace.OKLAB, ColorSpace.HSB, ColorSpace.RGB])
def test_fixed_space_ignores_invert(space):
    colors = [RED_HSL, BLUE_RGB, OklabColor((0.7, -0.1, 0.1))]
    resampler = SegmentResampler()
    a = resampler.resample_array(colors, [0.0, 0.4, 1.0], space, False, 12)
    b = resampler.resample_array(colors, [0.0, 0.4, 1.0], space, True, 12)
    assert np.array_equal(a, b)


def test_first_sample_is_first_color():
    colors = [LabColor((60, 40, 20)), HslColor((200, 80, 40)), RgbColor((10, 200, 30))]
    out = SegmentResampler().resample(colors, [0.0, 0.5, 1.0], None, False, 6)
    assert np.allclose(out[0].value, colors[0].convert("rgb").value, atol=1e-6)
    # the first sample of the second segment is its start color
    assert np.allclose(out[3].value, colors[1].convert("rgb").value, atol=1e-6)


def test_alpha_interpolates_linearly():
    colors = [RgbColor((0, 0, 0), 0.0), RgbColor((0, 0, 0), 1.0)]
    out = SegmentResampler().resample_array(colors, [0.0, 1.0], ColorSpace.LAB, False, 4)
    assert out[:, 3].tolist() == [0.0, 0.25, 0.5, 0.75]


def test_preconditions():
    resampler = SegmentResampler()
    colors = [RED_HSL, BLUE_RGB, RED_HSL]
    with pytest.raises(InvalidSpecification):
        resampler.resample(colors, [0.0, 0.5, 1.0], None, False, 2)
    with pytest.raises(InvalidSpecification):
        resampler.resample(colors, [0.0, 1.0], None, False, 10)
    with pytest.raises(InvalidSpecification):
        resampler.resample(colors, [0.0, 0.8, 0.5], None, False, 10)
    with pytest.raises(InvalidSpecification):
        resampler.resample([RED_HSL], [0.0], None, False, 10)


def test_unknown_space_propagates():
    with pytest.raises(UnsupportedColorSpace):
        SegmentResampler().resample([RED_HSL, BLUE_RGB], [0.0, 1.0], "ycbcr", False, 4)


def test_satisfies_protocol():
    assert isinstance(SegmentResampler(), ColorSpaceResampler)
