import numpy as np
from typing import Literal, cast, Callable

from ..types.format_type import FormatType, max_non_hue

from .to_rgb import np_hsv_to_unit_rgb, np_hsl_to_unit_rgb
from .to_hsv import np_unit_rgb_to_hsv, np_hsl_to_hsv
from .to_hsl import np_unit_rgb_to_hsl, np_hsv_to_hsl

from ..types.color_types import ColorElement, element_to_array, ColorSpace

CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgb", "hsv"): np_unit_rgb_to_hsv,
    ("hsv", "rgb"): np_hsv_to_unit_rgb,
    ("rgb", "hsl"): np_unit_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_unit_rgb,
    ("hsv", "hsl"): np_hsv_to_hsl,
    ("hsl", "hsv"): np_hsl_to_hsv,
}

def normalize(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        return color / maxval

    if space in ("hsv", "hsl"):
        h = color[..., 0]
        a = color[..., 1] / maxval
        b = color[..., 2] / maxval
        return np.stack([h, a, b], axis=-1)

    raise ValueError(f"Unknown space: {space}")

def scale(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        scaled = color * maxval
        return np.round(scaled).astype(int) if fmt == FormatType.INT else scaled

    if space in ("hsv", "hsl"):
        h = color[..., 0]
        a = color[..., 1] * maxval
        b = color[..., 2] * maxval

        if fmt == FormatType.INT:
            return np.stack([np.round(h), np.round(a), np.round(b)], axis=-1).astype(int)

        return np.stack([h, a, b], axis=-1)

    raise ValueError(f"Unknown space: {space}")

def convert_alpha(alpha: np.ndarray | None, input_fmt: FormatType, output_fmt: FormatType) -> np.ndarray | None:
    if alpha is None:
        return None

    max_in  = max_non_hue[input_fmt]
    max_out = max_non_hue[output_fmt]

    result = alpha / max_in * max_out
    return np.round(result).astype(int) if output_fmt == FormatType.INT else result

def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    has_alpha_in  = from_space.endswith("a")
    has_alpha_out = to_space.endswith("a")

    if has_alpha_in:
        base = color[..., :3]
        alpha = color[..., 3]
    else:
        base = color
        alpha = None

    fs, ts = from_space[:3], to_space[:3]

    # normalize → convert → scale
    base_norm = normalize(base, fs, input_fmt)

    if fs == ts:
        converted = base_norm
    else:
        converted = CONVERT_NUMPY[(fs, ts)](
            base_norm[..., 0],
            base_norm[..., 1],
            base_norm[..., 2],
        )

    out = scale(converted, ts, output_fmt)

    if has_alpha_out:
        new_alpha = convert_alpha(alpha, input_fmt, output_fmt)
        if new_alpha is None:
            # Opaque when the input carries no alpha
            default_alpha = max_non_hue[output_fmt]
            alpha_array = np.full(out.shape[:-1] + (1,), default_alpha)
            return np.concatenate([out, alpha_array], axis=-1)
        return np.concatenate([out, new_alpha[..., None]], axis=-1)

    return out


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space:   ColorSpace,
    input_type:  FormatType=FormatType.INT,
    output_type: FormatType=FormatType.INT,
 ) -> ColorElement:
    if from_space.lower() == to_space.lower() and input_type == output_type:
        return color  # No conversion needed
    color_array = element_to_array(color).astype(float)
    result = _convert_core(
        color_array,
        from_space.lower(),
        to_space.lower(),
        FormatType(input_type),
        FormatType(output_type),
    )
    # Convert back to tuple of python scalars for scalar output
    return tuple(result.tolist()) if result.ndim == 1 else cast(ColorElement, result)

def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space:   ColorSpace,
    input_type:  Literal["int","float","percentage"]="int",
    output_type: Literal["int","float","percentage"]="int",
) -> np.ndarray:
    if from_space.lower() == to_space.lower() and input_type == output_type:
        return color  # No conversion needed
    return _convert_core(
        np.asarray(color, dtype=float),
        from_space.lower(),
        to_space.lower(),
        FormatType(input_type),
        FormatType(output_type),
    )
