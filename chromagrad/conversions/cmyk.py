import numpy as np
from numpy import ndarray as NDArray


def np_unit_rgb_to_cmyk(rgb: NDArray) -> NDArray:
    """Unit RGB (..., 3) to unit CMYK (..., 4)."""
    rgb = np.asarray(rgb, dtype=float)
    k = 1.0 - np.max(rgb, axis=-1)
    denom = 1.0 - k
    safe = np.where(denom > 0, denom, 1.0)[..., None]
    cmy = np.where(denom[..., None] > 0, (1.0 - rgb - k[..., None]) / safe, 0.0)
    return np.concatenate([cmy, k[..., None]], axis=-1)


def np_cmyk_to_unit_rgb(cmyk: NDArray) -> NDArray:
    """Unit CMYK (..., 4) to unit RGB (..., 3)."""
    cmyk = np.asarray(cmyk, dtype=float)
    k = cmyk[..., 3:4]
    return (1.0 - cmyk[..., :3]) * (1.0 - k)
