"""
Hex color text input.

- validator: full-match grammars for single digits, RGB and RGBA hex text
- masking: edit acceptance, display rendering and cursor offset mapping
- field: stateful text field wiring edits to callbacks
"""
from .validator import (
    HEX_SINGLE_CHAR_PATTERN,
    HEX_NO_ALPHA_PATTERN,
    HEX_WITH_ALPHA_PATTERN,
    is_single_hex_digit,
    is_hex_no_alpha,
    is_hex_with_alpha,
)

__all__ = [
    "HEX_SINGLE_CHAR_PATTERN",
    "HEX_NO_ALPHA_PATTERN",
    "HEX_WITH_ALPHA_PATTERN",
    "is_single_hex_digit",
    "is_hex_no_alpha",
    "is_hex_with_alpha",
]
