from ..exceptions import MalformedHexError
from ..hex.validator import is_hex_with_alpha

OPAQUE = 255


def hex_to_rgba(hex_string: str) -> tuple[int, int, int, int]:
    """
    Decode a 6 or 8 digit hex string into 8-bit ``(r, g, b, a)`` channels.

    Six digits are opaque; with eight digits the last byte is alpha.
    No ``#`` prefix is accepted.

    Raises:
        MalformedHexError: If the string is not 6 or 8 hexadecimal digits.
    """
    if not is_hex_with_alpha(hex_string):
        raise MalformedHexError(hex_string)

    r = int(hex_string[0:2], 16)
    g = int(hex_string[2:4], 16)
    b = int(hex_string[4:6], 16)
    a = int(hex_string[6:8], 16) if len(hex_string) == 8 else OPAQUE
    return r, g, b, a


def rgba_to_hex(r: int, g: int, b: int, a: int = OPAQUE, include_alpha: bool = False) -> str:
    """Encode 8-bit channels as 6 (or 8 with alpha) uppercase hex digits, no prefix."""
    channels = (r, g, b, a) if include_alpha else (r, g, b)
    for channel in channels:
        if not 0 <= channel <= 255:
            raise ValueError(f"Channel value must be within 0-255, got {channel}")
    return "".join(f"{int(channel):02X}" for channel in channels)
