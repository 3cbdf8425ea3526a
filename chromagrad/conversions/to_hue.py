"""
RGB ↔ hue-based color models (HSB, HSL, HSI, HSP).

All functions are vectorized: they take and return arrays of shape (..., 3).
RGB is unit-scaled ([0, 1] per channel); hue is in degrees [0, 360) and the
remaining two channels are unit-scaled.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..defaults import HSP_WEIGHTS, HUE_360


def _split(arr: NDArray) -> tuple[NDArray, NDArray, NDArray]:
    arr = np.asarray(arr, dtype=float)
    return arr[..., 0], arr[..., 1], arr[..., 2]


def _hexagonal_hue(r: NDArray, g: NDArray, b: NDArray, maxc: NDArray, delta: NDArray) -> NDArray:
    """Hue in degrees on the RGB hexagon; achromatic pixels get 0."""
    safe = np.where(delta == 0, 1.0, delta)
    h = np.where(
        maxc == r,
        ((g - b) / safe) % 6.0,
        np.where(maxc == g, (b - r) / safe + 2.0, (r - g) / safe + 4.0),
    )
    return np.where(delta == 0, 0.0, h * 60.0) % HUE_360


def _chroma_to_rgb(h: NDArray, c: NDArray, m: NDArray) -> NDArray:
    """Rebuild RGB from hue, chroma and the lightness offset ``m``."""
    hp = (h % HUE_360) / 60.0
    x = c * (1.0 - np.abs(hp % 2.0 - 1.0))
    sector = np.floor(hp).astype(int) % 6
    zero = np.zeros_like(c)

    r = np.choose(sector, [c, x, zero, zero, x, c])
    g = np.choose(sector, [x, c, c, x, zero, zero])
    b = np.choose(sector, [zero, zero, x, c, c, x])
    return np.stack([r + m, g + m, b + m], axis=-1)


# ---------------------------------------------------------------- HSB / HSV

def np_unit_rgb_to_hsb(rgb: NDArray) -> NDArray:
    r, g, b = _split(rgb)
    maxc = np.maximum(np.maximum(r, g), b)
    minc = np.minimum(np.minimum(r, g), b)
    delta = maxc - minc
    h = _hexagonal_hue(r, g, b, maxc, delta)
    s = np.where(maxc > 0, delta / np.where(maxc > 0, maxc, 1.0), 0.0)
    return np.stack([h, s, maxc], axis=-1)


def np_hsb_to_unit_rgb(hsb: NDArray) -> NDArray:
    h, s, v = _split(hsb)
    c = v * s
    return _chroma_to_rgb(h, c, v - c)


# ---------------------------------------------------------------------- HSL

def np_unit_rgb_to_hsl(rgb: NDArray) -> NDArray:
    r, g, b = _split(rgb)
    maxc = np.maximum(np.maximum(r, g), b)
    minc = np.minimum(np.minimum(r, g), b)
    delta = maxc - minc
    h = _hexagonal_hue(r, g, b, maxc, delta)
    l = (maxc + minc) / 2.0
    denom = 1.0 - np.abs(2.0 * l - 1.0)
    s = np.where((delta > 0) & (denom > 0), delta / np.where(denom > 0, denom, 1.0), 0.0)
    return np.stack([h, s, l], axis=-1)


def np_hsl_to_unit_rgb(hsl: NDArray) -> NDArray:
    h, s, l = _split(hsl)
    c = (1.0 - np.abs(2.0 * l - 1.0)) * s
    return _chroma_to_rgb(h, c, l - c / 2.0)


def np_hsb_to_hsl(hsb: NDArray) -> NDArray:
    h, s, v = _split(hsb)
    l = v * (1.0 - s / 2.0)
    denom = np.minimum(l, 1.0 - l)
    s_l = np.where(denom > 0, (v - l) / np.where(denom > 0, denom, 1.0), 0.0)
    return np.stack([h, s_l, l], axis=-1)


def np_hsl_to_hsb(hsl: NDArray) -> NDArray:
    h, s, l = _split(hsl)
    v = l + s * np.minimum(l, 1.0 - l)
    s_v = np.where(v > 0, 2.0 * (1.0 - l / np.where(v > 0, v, 1.0)), 0.0)
    return np.stack([h, s_v, v], axis=-1)


# ---------------------------------------------------------------------- HSI

def np_unit_rgb_to_hsi(rgb: NDArray) -> NDArray:
    r, g, b = _split(rgb)
    i = (r + g + b) / 3.0
    minc = np.minimum(np.minimum(r, g), b)
    s = np.where(i > 0, 1.0 - minc / np.where(i > 0, i, 1.0), 0.0)

    num = 0.5 * ((r - g) + (r - b))
    den = np.sqrt((r - g) ** 2 + (r - b) * (g - b))
    cos_theta = np.clip(num / np.where(den > 0, den, 1.0), -1.0, 1.0)
    theta = np.degrees(np.arccos(cos_theta))
    h = np.where(b <= g, theta, HUE_360 - theta)
    h = np.where(den > 0, h, 0.0) % HUE_360
    return np.stack([h, s, i], axis=-1)


def np_hsi_to_unit_rgb(hsi: NDArray) -> NDArray:
    h, s, i = _split(hsi)
    h = h % HUE_360
    sector = np.floor(h / 120.0).astype(int) % 3
    local = np.radians(h - sector * 120.0)

    low = i * (1.0 - s)
    high = i * (1.0 + s * np.cos(local) / np.cos(np.radians(60.0) - local))
    rest = 3.0 * i - (low + high)

    # sector 0: (high, rest, low), 1: (low, high, rest), 2: (rest, low, high)
    r = np.choose(sector, [high, low, rest])
    g = np.choose(sector, [rest, high, low])
    b = np.choose(sector, [low, rest, high])
    return np.stack([r, g, b], axis=-1)


# ---------------------------------------------------------------------- HSP

def np_unit_rgb_to_hsp(rgb: NDArray) -> NDArray:
    """HSP ("perceived brightness") shares hue and saturation with HSB."""
    r, g, b = _split(rgb)
    pr, pg, pb = HSP_WEIGHTS
    hsb = np_unit_rgb_to_hsb(rgb)
    p = np.sqrt(pr * r * r + pg * g * g + pb * b * b)
    return np.stack([hsb[..., 0], hsb[..., 1], p], axis=-1)


# (largest, middle, smallest) channel for each sixth of the hue circle, and
# whether the local hue runs up (H - k/6) or down ((k+1)/6 - H) in the sector.
_HSP_SECTORS = (
    (0, 1, 2, True),
    (1, 0, 2, False),
    (1, 2, 0, True),
    (2, 1, 0, False),
    (2, 0, 1, True),
    (0, 2, 1, False),
)


def np_hsp_to_unit_rgb(hsp: NDArray) -> NDArray:
    h, s, p = _split(hsp)
    weights = HSP_WEIGHTS
    frac = (h % HUE_360) / HUE_360
    sector = np.floor(frac * 6.0).astype(int) % 6
    min_over_max = 1.0 - s

    out = np.zeros(h.shape + (3,), dtype=float)
    for k, (hi, mid, lo, rising) in enumerate(_HSP_SECTORS):
        mask = sector == k
        if not np.any(mask):
            continue
        local = 6.0 * frac[mask] - k if rising else (k + 1) - 6.0 * frac[mask]
        mom = min_over_max[mask]
        pm = p[mask]

        chromatic = mom > 0
        safe_mom = np.where(chromatic, mom, 1.0)
        part = 1.0 + local * (1.0 / safe_mom - 1.0)
        lo_val = pm / np.sqrt(weights[hi] / safe_mom ** 2 + weights[mid] * part ** 2 + weights[lo])
        hi_val = lo_val / safe_mom
        mid_val = lo_val + local * (hi_val - lo_val)

        # fully saturated: the smallest channel is exactly zero
        sat_hi = np.sqrt(pm * pm / (weights[hi] + weights[mid] * local * local))
        sat_mid = sat_hi * local

        block = np.empty(pm.shape + (3,), dtype=float)
        block[..., hi] = np.where(chromatic, hi_val, sat_hi)
        block[..., mid] = np.where(chromatic, mid_val, sat_mid)
        block[..., lo] = np.where(chromatic, lo_val, 0.0)
        out[mask] = block
    return out
