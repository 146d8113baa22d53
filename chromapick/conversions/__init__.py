"""
Chromapick Color Space Conversions
==================================

Scalar and vectorized (numpy) conversions between RGB, HSV and HSL, plus the
hex codec used by the hex input field.

Conversion Functions
-------------------

RGB → HSV / HSL:
    unit_rgb_to_hsv(r, g, b), np_unit_rgb_to_hsv(r, g, b)
    unit_rgb_to_hsl(r, g, b), np_unit_rgb_to_hsl(r, g, b)

HSV / HSL → RGB:
    hsv_to_unit_rgb(h, s, v), np_hsv_to_unit_rgb(h, s, v)
    hsl_to_unit_rgb(h, s, l), np_hsl_to_unit_rgb(h, s, l)

HSV ↔ HSL:
    hsv_to_hsl, hsl_to_hsv, np_hsv_to_hsl, np_hsl_to_hsv

Hex:
    hex_to_rgba("1A2B3C")   -> (26, 43, 60, 255)
    rgba_to_hex(26, 43, 60) -> "1A2B3C"

High-Level API
-------------
    convert(color, from_space, to_space, input_type, output_type)
    np_convert(color, from_space, to_space, input_type, output_type)

All unit functions take RGB channels in [0, 1] and hue in degrees.

Examples
--------
>>> from chromapick.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> h, s, l = unit_rgb_to_hsl(1.0, 0.5, 0.0)
>>> r, g, b = hsl_to_unit_rgb(h, s, l)
"""

# RGB → HSV conversions
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv

# RGB → HSL conversions
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl

# HSV / HSL → RGB conversions
from .to_rgb import (
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    np_hsl_to_unit_rgb,
)

# HSV ↔ HSL conversions
from .to_hsv import hsl_to_hsv, np_hsl_to_hsv
from .to_hsl import hsv_to_hsl, np_hsv_to_hsl

# Hex codec
from .to_hex import hex_to_rgba, rgba_to_hex

# High-level API
from .wrapper import convert, np_convert

# Types and enums
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

__all__ = [
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'hsv_to_hsl',
    'hsl_to_hsv',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',
    'hex_to_rgba',
    'rgba_to_hex',
    'convert',
    'np_convert',
    'ColorSpace',
    'FormatType',
]
