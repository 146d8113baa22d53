"""
Chromapick Color Classes
========================

Immutable color values for the RGB, HSL and HSV spaces, all carrying alpha.

Usage
-----
>>> from chromapick.colors import ColorRGBA, rgb_to_hsl, hex_to_color
>>> red = ColorRGBA((255, 0, 0, 255))
>>> rgb_to_hsl(red)
(0.0, 1.0, 0.5, 1.0)
>>> hex_to_color("1A2B3C80")
ColorRGBA((26, 43, 60, 128))
>>> red.convert("hsla")
ColorHSLA((0.0, 1.0, 0.5, 1.0))

Color Classes
-------------
    - ColorRGBA: 8-bit RGBA (0-255), the canonical color
    - ColorUnitRGBA: float RGBA (0.0-1.0)
    - ColorHSLA: hue in degrees, saturation/lightness/alpha in 0.0-1.0
    - ColorHSVA: hue in degrees, saturation/value/alpha in 0.0-1.0

Notes
-----
- Instances are frozen after initialization
- Hue wraps into [0, 360); every other channel is clamped to its maximum
- Integer formats round to the nearest integer
"""

from .color_base import ColorBase
from .rgb import ColorRGBA, ColorUnitRGBA
from .hsl import ColorHSLA
from .hsv import ColorHSVA
from .color import (
    color_convert,
    get_color_class,
    unified_tuple_to_class,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    hex_to_color,
    color_to_hex,
    to_hsla,
    to_hsva,
)

__all__ = [
    'ColorBase',
    'ColorRGBA',
    'ColorUnitRGBA',
    'ColorHSLA',
    'ColorHSVA',
    'color_convert',
    'get_color_class',
    'unified_tuple_to_class',
    'rgb_to_hsl',
    'hsl_to_rgb',
    'rgb_to_hsv',
    'hsv_to_rgb',
    'hex_to_color',
    'color_to_hex',
    'to_hsla',
    'to_hsva',
]
