"""Full-match grammars for hex color text."""
import re

HEX_SINGLE_CHAR_PATTERN = re.compile(r"[0-9a-fA-F]")
HEX_NO_ALPHA_PATTERN = re.compile(r"[0-9a-fA-F]{6}")
HEX_WITH_ALPHA_PATTERN = re.compile(r"[0-9a-fA-F]{6}(?:[0-9a-fA-F]{2})?")


def _full_match(pattern: re.Pattern, text: object) -> bool:
    if not isinstance(text, str):
        return False
    return pattern.fullmatch(text) is not None


def is_single_hex_digit(text: object) -> bool:
    """True if ``text`` is exactly one hexadecimal digit."""
    return _full_match(HEX_SINGLE_CHAR_PATTERN, text)


def is_hex_no_alpha(text: object) -> bool:
    """True if ``text`` is exactly 6 hexadecimal digits."""
    return _full_match(HEX_NO_ALPHA_PATTERN, text)


def is_hex_with_alpha(text: object) -> bool:
    """True if ``text`` is exactly 6 or 8 hexadecimal digits."""
    return _full_match(HEX_WITH_ALPHA_PATTERN, text)
