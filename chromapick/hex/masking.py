"""
Hex input masking.

Raw text is what the user typed, without ``#``, at most eight hex digits.
Display text is the raw text upper-cased behind a ``#``. The offset mapping
moves the caret across the inserted prefix so it stays visually in place.

>>> on_edit("1a2b3c").color
ColorRGBA((26, 43, 60, 255))
>>> on_edit("1a2b3g").is_rejected
True
>>> render("ab12cd")
'#AB12CD'
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..colors import ColorRGBA, hex_to_color
from .validator import is_single_hex_digit, is_hex_with_alpha

logger = logging.getLogger(__name__)

MAX_HEX_LENGTH = 8
HEX_PREFIX = "#"


@dataclass(frozen=True)
class EditResult:
    """Outcome of one edit: accepted text and, for complete hex text, the color it spells."""
    accepted: bool
    text: Optional[str] = None
    color: Optional[ColorRGBA] = None

    @classmethod
    def accept(cls, text: str, color: Optional[ColorRGBA] = None) -> "EditResult":
        return cls(True, text, color)

    @property
    def is_rejected(self) -> bool:
        return not self.accepted

    @property
    def produced_color(self) -> bool:
        return self.color is not None


REJECT = EditResult(False)


def on_edit(candidate: str) -> EditResult:
    """
    Decide whether ``candidate`` may replace the current raw text.

    The whole edit is dropped when it is longer than eight characters or when
    its last character is not a hex digit, so a paste ending in a bad
    character leaves the previous text untouched. Empty text always passes.
    Accepted text of 6 or 8 digits also carries the decoded color.
    """
    if len(candidate) > MAX_HEX_LENGTH:
        logger.debug("Rejected hex edit %r: longer than %d", candidate, MAX_HEX_LENGTH)
        return REJECT

    if candidate and not is_single_hex_digit(candidate[-1]):
        logger.debug("Rejected hex edit %r: trailing %r is not a hex digit", candidate, candidate[-1])
        return REJECT

    color = hex_to_color(candidate) if is_hex_with_alpha(candidate) else None
    if color is not None:
        logger.debug("Hex edit %r produced %r", candidate, color)
    return EditResult.accept(candidate, color)


def render(raw_text: str) -> str:
    trimmed = raw_text[:MAX_HEX_LENGTH]
    if not trimmed:
        return trimmed
    return HEX_PREFIX + trimmed.upper()


def map_raw_to_display(offset: int) -> int:
    # caret at the very start stays before the prefix
    if offset == 0:
        return offset
    if offset <= MAX_HEX_LENGTH - 1:
        return offset + 1
    return MAX_HEX_LENGTH + 1


def map_display_to_raw(offset: int) -> int:
    if offset == 0:
        return offset
    # #FFABCABC
    if offset <= MAX_HEX_LENGTH:
        return offset - 1
    return MAX_HEX_LENGTH


@dataclass(frozen=True)
class OffsetMapping:
    original_to_transformed: Callable[[int], int]
    transformed_to_original: Callable[[int], int]


@dataclass(frozen=True)
class TransformedText:
    text: str
    offset_mapping: OffsetMapping


HEX_OFFSET_MAPPING = OffsetMapping(
    original_to_transformed=map_raw_to_display,
    transformed_to_original=map_display_to_raw,
)


def transform(raw_text: str) -> TransformedText:
    """Rendering hook for a text widget: display text plus caret mapping."""
    return TransformedText(render(raw_text), HEX_OFFSET_MAPPING)
