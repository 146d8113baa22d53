"""
Chromapick - Color Picker Core
==============================

Framework-agnostic core of a color picker: color model conversions, the hex
input field's masking rules, and the state behind the HSL ring/diamond picker,
its slider panel and its gradient editor. Drawing is left to the caller.

Key Features
------------
- RGB ↔ HSL ↔ HSV conversions, scalar and vectorized (numpy)
- Hex codec for 6 digit (RGB) and 8 digit (RGBA) colors
- Hex text masking: edit acceptance, ``#``-prefixed display, caret mapping
- Picker, slider panel and gradient stop state with change callbacks

Quick Start
-----------
>>> from chromapick import HexTextField, ColorRGBA
>>> seen = []
>>> field = HexTextField(on_color_change=seen.append)
>>> for text in ("1", "1a", "1a2", "1a2b", "1a2b3", "1a2b3c"):
...     _ = field.edit(text)
>>> seen
[ColorRGBA((26, 43, 60, 255))]
>>> field.display_text
'#1A2B3C'

Modules
-------
- conversions: color space conversion functions and the hex codec
- colors: immutable color classes and color-level conversions
- hex: validator, masking engine and hex text field
- picker: picker state, slider panel and gradient state
"""

from .conversions import (
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    hsl_to_hsv,
    hsv_to_hsl,
    np_unit_rgb_to_hsl,
    np_unit_rgb_to_hsv,
    np_hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
    np_hsl_to_hsv,
    np_hsv_to_hsl,
    convert,
    np_convert,
    FormatType,
)
from .colors import (
    ColorBase,
    ColorRGBA,
    ColorUnitRGBA,
    ColorHSLA,
    ColorHSVA,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    hex_to_color,
    color_to_hex,
)
from .exceptions import MalformedHexError
from .hex.validator import is_single_hex_digit, is_hex_no_alpha, is_hex_with_alpha
from .hex.masking import (
    EditResult,
    REJECT,
    OffsetMapping,
    TransformedText,
    HEX_OFFSET_MAPPING,
    MAX_HEX_LENGTH,
    on_edit,
    render,
    transform,
    map_raw_to_display,
    map_display_to_raw,
)
from .hex.field import HexTextField
from .types.color_types import ColorModel, ColorMode
from .picker import (
    ColorPickerState,
    CompositeSliderPanel,
    GradientColorState,
    GradientType,
    ColorStop,
    GradientBrush,
)

__version__ = "1.0.0"

__all__ = [
    # conversions
    "unit_rgb_to_hsl",
    "unit_rgb_to_hsv",
    "hsl_to_unit_rgb",
    "hsv_to_unit_rgb",
    "hsl_to_hsv",
    "hsv_to_hsl",
    "np_unit_rgb_to_hsl",
    "np_unit_rgb_to_hsv",
    "np_hsl_to_unit_rgb",
    "np_hsv_to_unit_rgb",
    "np_hsl_to_hsv",
    "np_hsv_to_hsl",
    "convert",
    "np_convert",
    "FormatType",

    # colors
    "ColorBase",
    "ColorRGBA",
    "ColorUnitRGBA",
    "ColorHSLA",
    "ColorHSVA",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "hex_to_color",
    "color_to_hex",
    "MalformedHexError",

    # hex input
    "is_single_hex_digit",
    "is_hex_no_alpha",
    "is_hex_with_alpha",
    "EditResult",
    "REJECT",
    "OffsetMapping",
    "TransformedText",
    "HEX_OFFSET_MAPPING",
    "MAX_HEX_LENGTH",
    "on_edit",
    "render",
    "transform",
    "map_raw_to_display",
    "map_display_to_raw",
    "HexTextField",

    # picker
    "ColorModel",
    "ColorMode",
    "ColorPickerState",
    "CompositeSliderPanel",
    "GradientColorState",
    "GradientType",
    "ColorStop",
    "GradientBrush",

    "__version__",
]
