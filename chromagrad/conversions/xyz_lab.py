"""
Device-independent color models: CIE XYZ (D65, Y scaled to 100), CIE LAB
and Oklab. RGB inputs and outputs are unit-scaled sRGB.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..defaults import D65_WHITE

_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

_XYZ_TO_RGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
])

_LINEAR_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

_LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

_OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

_LMS_TO_LINEAR = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
])

_LAB_EPSILON = (6.0 / 29.0) ** 3
_LAB_KAPPA = 3.0 * (6.0 / 29.0) ** 2


def srgb_to_linear(rgb: NDArray) -> NDArray:
    rgb = np.asarray(rgb, dtype=float)
    return np.where(rgb <= 0.04045, rgb / 12.92, ((rgb + 0.055) / 1.055) ** 2.4)


def linear_to_srgb(linear: NDArray) -> NDArray:
    linear = np.asarray(linear, dtype=float)
    sign = np.sign(linear)
    mag = np.abs(linear)
    return sign * np.where(mag <= 0.0031308, mag * 12.92, 1.055 * mag ** (1.0 / 2.4) - 0.055)


def np_unit_rgb_to_xyz(rgb: NDArray) -> NDArray:
    return srgb_to_linear(rgb) @ _RGB_TO_XYZ.T * 100.0


def np_xyz_to_unit_rgb(xyz: NDArray) -> NDArray:
    linear = (np.asarray(xyz, dtype=float) / 100.0) @ _XYZ_TO_RGB.T
    return linear_to_srgb(linear)


def np_xyz_to_lab(xyz: NDArray) -> NDArray:
    scaled = np.asarray(xyz, dtype=float) / np.array(D65_WHITE)
    f = np.where(
        scaled > _LAB_EPSILON,
        np.cbrt(scaled),
        scaled / _LAB_KAPPA + 4.0 / 29.0,
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)


def np_lab_to_xyz(lab: NDArray) -> NDArray:
    lab = np.asarray(lab, dtype=float)
    fy = (lab[..., 0] + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0
    f = np.stack([fx, fy, fz], axis=-1)
    scaled = np.where(f > 6.0 / 29.0, f ** 3, _LAB_KAPPA * (f - 4.0 / 29.0))
    return scaled * np.array(D65_WHITE)


def np_unit_rgb_to_lab(rgb: NDArray) -> NDArray:
    return np_xyz_to_lab(np_unit_rgb_to_xyz(rgb))


def np_lab_to_unit_rgb(lab: NDArray) -> NDArray:
    return np_xyz_to_unit_rgb(np_lab_to_xyz(lab))


def np_unit_rgb_to_oklab(rgb: NDArray) -> NDArray:
    lms = srgb_to_linear(rgb) @ _LINEAR_TO_LMS.T
    return np.cbrt(lms) @ _LMS_TO_OKLAB.T


def np_oklab_to_unit_rgb(oklab: NDArray) -> NDArray:
    lms = (np.asarray(oklab, dtype=float) @ _OKLAB_TO_LMS.T) ** 3
    return linear_to_srgb(lms @ _LMS_TO_LINEAR.T)
