import numpy as np
from numpy import ndarray as NDArray


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360


def _unit(value: float) -> float:
    return max(0.0, min(value, 1.0))


## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    # Lightness
    lightness = (max_c + min_c) / 2.0

    # Saturation
    if delta == 0:
        saturation = 0.0
    else:
        saturation = delta / (1 - abs(2 * lightness - 1))

    # Hue, 0 on the achromatic axis
    if delta == 0:
        hue = 0.0
    elif max_c == r:
        hue = (60 * ((g - b) / delta) + 360) % 360
    elif max_c == g:
        hue = (60 * ((b - r) / delta) + 120) % 360
    else:
        hue = (60 * ((r - g) / delta) + 240) % 360

    return hue, _unit(saturation), _unit(lightness)


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    mask = delta > 0
    saturation = np.zeros(out_shape)
    saturation[mask] = delta[mask] / (1 - np.abs(2 * lightness[mask] - 1))

    # Same channel priority as the scalar version when maxima tie
    hue = np.zeros(out_shape)
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = (60 * ((g[mask_r] - b[mask_r]) / delta[mask_r]) + 360) % 360
    hue[mask_g] = (60 * ((b[mask_g] - r[mask_g]) / delta[mask_g]) + 120) % 360
    hue[mask_b] = (60 * ((r[mask_b] - g[mask_b]) / delta[mask_b]) + 240) % 360

    return np.stack([hue, np.clip(saturation, 0, 1), np.clip(lightness, 0, 1)], axis=-1)


## HSV to HSL conversions

def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert HSV to HSL. Hue passes through unchanged."""
    lightness = v * (1 - s / 2)
    if lightness == 0 or lightness == 1:
        saturation = 0.0
    else:
        saturation = (v - lightness) / min(lightness, 1 - lightness)
    return normalize_hue(h), _unit(saturation), _unit(lightness)


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV to HSL."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    lightness = v * (1 - s / 2)
    saturation = np.zeros(out_shape)
    mask = (lightness > 0) & (lightness < 1)
    saturation[mask] = (v[mask] - lightness[mask]) / np.minimum(lightness[mask], 1 - lightness[mask])

    return np.stack([h % 360, np.clip(saturation, 0, 1), np.clip(lightness, 0, 1)], axis=-1)
