import math
import numpy as np
from numpy import ndarray as NDArray
from .to_hsl import normalize_hue


## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)

    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = m1, m2, low
    elif hue_section == 1:
        r, g, b = m2, m1, low
    elif hue_section == 2:
        r, g, b = low, m1, m2
    elif hue_section == 3:
        r, g, b = low, m2, m1
    elif hue_section == 4:
        r, g, b = m2, low, m1
    elif hue_section == 5:
        r, g, b = m1, low, m2
    else:
        r, g, b = low, low, low

    return r, g, b


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    m1 = np.asarray(l + s * np.where(l < 0.5, l, 1 - l), dtype=float)
    m2 = np.asarray(m1 - (m1 - l) * 2 * np.abs(((h / 60) % 2) - 1), dtype=float)
    low = np.broadcast_to(2 * l - m1, out_shape)

    # Everything outside the six sections stays achromatic
    r = np.array(low, dtype=float)
    g = np.array(low, dtype=float)
    b = np.array(low, dtype=float)

    hue_section = np.floor(h / 60).astype(int)

    mask0 = (hue_section == 0)
    mask1 = (hue_section == 1)
    mask2 = (hue_section == 2)
    mask3 = (hue_section == 3)
    mask4 = (hue_section == 4)
    mask5 = (hue_section == 5)

    r[mask0] = m1[mask0]
    g[mask0] = m2[mask0]

    r[mask1] = m2[mask1]
    g[mask1] = m1[mask1]

    g[mask2] = m1[mask2]
    b[mask2] = m2[mask2]

    g[mask3] = m2[mask3]
    b[mask3] = m1[mask3]

    r[mask4] = m2[mask4]
    b[mask4] = m1[mask4]

    r[mask5] = m1[mask5]
    b[mask5] = m2[mask5]

    return np.stack([r, g, b], axis=-1)


## HSV to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)

    chroma = v * s
    x = chroma * (1 - abs(((h / 60) % 2) - 1))
    m = v - chroma

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = chroma, x, 0.0
    elif hue_section == 1:
        r, g, b = x, chroma, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, chroma, x
    elif hue_section == 3:
        r, g, b = 0.0, x, chroma
    elif hue_section == 4:
        r, g, b = x, 0.0, chroma
    elif hue_section == 5:
        r, g, b = chroma, 0.0, x
    else:
        r, g, b = 0.0, 0.0, 0.0

    return r + m, g + m, b + m


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        v: array-like or scalar, value in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    chroma = v * s
    x = chroma * (1 - np.abs(((h / 60) % 2) - 1))
    m = v - chroma

    r = np.zeros(out_shape)
    g = np.zeros(out_shape)
    b = np.zeros(out_shape)

    hue_section = np.floor(h / 60).astype(int)

    for section, (r_src, g_src, b_src) in enumerate((
        (chroma, x, None),
        (x, chroma, None),
        (None, chroma, x),
        (None, x, chroma),
        (x, None, chroma),
        (chroma, None, x),
    )):
        mask = hue_section == section
        for channel, src in ((r, r_src), (g, g_src), (b, b_src)):
            if src is not None:
                channel[mask] = src[mask]

    return np.stack([r + m, g + m, b + m], axis=-1)
