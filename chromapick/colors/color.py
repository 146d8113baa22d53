from __future__ import annotations
from .color_base import ColorBase
from .hsl import hsl_tuple_to_class, ColorHSLA
from .rgb import rgb_tuple_to_class, ColorRGBA
from .hsv import hsv_tuple_to_class, ColorHSVA
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from ..conversions import (
    convert,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    hex_to_rgba,
    rgba_to_hex,
)

unified_tuple_to_class: dict[tuple[ColorSpace, FormatType], type[ColorBase]] = {
    **rgb_tuple_to_class, **hsl_tuple_to_class, **hsv_tuple_to_class
}


def color_convert(self: ColorBase, to_space: ColorSpace | None = None, to_format: FormatType | None = None) -> ColorBase:
    """
    Convert this color to a different color space and/or format.

    Args:
        to_space: Target color space ("rgba", "hsla", "hsva"). Defaults to current space.
        to_format: Target format type (INT, FLOAT). Defaults to the target class's format.

    Returns:
        New ColorBase instance in the target space/format
    """
    to_space = (to_space or self.mode).lower()  # type: ignore
    if to_format is None:
        to_format = self.format_type if to_space == self.mode else _default_format(to_space)

    result = convert(
        color=self.value,
        from_space=self.mode,
        to_space=to_space,  # type: ignore
        input_type=self.format_type,
        output_type=to_format,
    )
    return get_color_class(to_space, to_format)(result)


ColorBase.convert = color_convert


def _default_format(color_space: str) -> FormatType:
    return FormatType.INT if color_space.startswith("rgb") else FormatType.FLOAT


def get_color_class(color_space: str, format_type: FormatType) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get((color_space, format_type))  # type: ignore
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class


def _as_rgba(color: ColorBase) -> ColorRGBA:
    if isinstance(color, ColorRGBA):
        return color
    if not isinstance(color, ColorBase):
        raise TypeError(f"Expected a color, got {type(color).__name__}")
    return ColorRGBA(color)


def _to_8bit(unit: float) -> int:
    return int(round(unit * 255))


## Color-level conversions, alpha in [0, 1] on the cylindrical side

def rgb_to_hsl(color: ColorBase) -> tuple[float, float, float, float]:
    """Return ``(hue, saturation, lightness, alpha)`` of ``color``."""
    r, g, b, a = _as_rgba(color).value
    h, s, l = unit_rgb_to_hsl(r / 255, g / 255, b / 255)
    return h, s, l, a / 255


def hsl_to_rgb(h: float, s: float, l: float, a: float = 1.0) -> ColorRGBA:
    """Build an 8-bit color from HSL, rounding each channel to the nearest integer."""
    r, g, b = hsl_to_unit_rgb(h, s, l)
    return ColorRGBA((_to_8bit(r), _to_8bit(g), _to_8bit(b), _to_8bit(a)))


def rgb_to_hsv(color: ColorBase) -> tuple[float, float, float, float]:
    """Return ``(hue, saturation, value, alpha)`` of ``color``."""
    r, g, b, a = _as_rgba(color).value
    h, s, v = unit_rgb_to_hsv(r / 255, g / 255, b / 255)
    return h, s, v, a / 255


def hsv_to_rgb(h: float, s: float, v: float, a: float = 1.0) -> ColorRGBA:
    """Build an 8-bit color from HSV, rounding each channel to the nearest integer."""
    r, g, b = hsv_to_unit_rgb(h, s, v)
    return ColorRGBA((_to_8bit(r), _to_8bit(g), _to_8bit(b), _to_8bit(a)))


def hex_to_color(hex_string: str) -> ColorRGBA:
    """
    Decode 6 (opaque) or 8 (last byte alpha) hex digits into a color.

    Raises:
        MalformedHexError: If the text is not 6 or 8 hexadecimal digits.
    """
    return ColorRGBA(hex_to_rgba(hex_string))


def color_to_hex(color: ColorBase, include_alpha: bool = False) -> str:
    """Encode ``color`` as 6 or 8 uppercase hex digits, without a prefix."""
    r, g, b, a = _as_rgba(color).value
    return rgba_to_hex(r, g, b, a, include_alpha=include_alpha)


def to_hsla(color: ColorBase) -> ColorHSLA:
    return ColorHSLA(rgb_to_hsl(color))


def to_hsva(color: ColorBase) -> ColorHSVA:
    return ColorHSVA(rgb_to_hsv(color))
