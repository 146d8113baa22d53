from __future__ import annotations

import logging
from typing import Callable, Optional

from ..colors import ColorBase, ColorRGBA, hex_to_color, color_to_hex
from .masking import EditResult, TransformedText, HEX_PREFIX, MAX_HEX_LENGTH, on_edit, render, transform
from .validator import is_single_hex_digit, is_hex_with_alpha

logger = logging.getLogger(__name__)

TextChangeCallback = Callable[[str], None]
ColorChangeCallback = Callable[[ColorRGBA], None]


def _raw_text(value: str) -> str:
    """Strip the display prefix and keep at most eight hex digits."""
    text = value.removeprefix(HEX_PREFIX)[:MAX_HEX_LENGTH]
    if not all(is_single_hex_digit(char) for char in text):
        raise ValueError(f"Not hex digits: {value!r}")
    return text


class HexTextField:
    """
    State of one hex input field.

    Holds the raw text and forwards accepted edits to ``on_text_change``;
    edits that spell a full 6 or 8 digit color also reach ``on_color_change``.
    Rejected edits leave the text alone and call nothing.
    """

    def __init__(
        self,
        hex_string: str = "",
        on_text_change: Optional[TextChangeCallback] = None,
        on_color_change: Optional[ColorChangeCallback] = None,
    ) -> None:
        self._text = _raw_text(hex_string)
        self.on_text_change = on_text_change
        self.on_color_change = on_color_change

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = _raw_text(value)

    def edit(self, candidate: str) -> EditResult:
        result = on_edit(candidate)
        if result.is_rejected:
            return result

        self._text = result.text
        if self.on_text_change is not None:
            self.on_text_change(result.text)
        if result.color is not None and self.on_color_change is not None:
            self.on_color_change(result.color)
        return result

    def set_color(self, color: ColorBase, include_alpha: bool = True) -> None:
        """Show ``color`` in the field without firing callbacks."""
        self._text = color_to_hex(color, include_alpha=include_alpha)
        logger.debug("Hex field set to %s", self._text)

    @property
    def is_valid(self) -> bool:
        return is_hex_with_alpha(self._text)

    @property
    def color(self) -> Optional[ColorRGBA]:
        return hex_to_color(self._text) if self.is_valid else None

    @property
    def display_text(self) -> str:
        return render(self._text)

    @property
    def transformed(self) -> TransformedText:
        return transform(self._text)

    def __repr__(self) -> str:
        return f"HexTextField(text={self._text!r})"
