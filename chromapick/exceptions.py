class MalformedHexError(ValueError):
    """Raised when a hex color string is not 6 or 8 hexadecimal digits."""

    def __init__(self, hex_string: object) -> None:
        self.hex_string = hex_string
        super().__init__(
            f"Expected 6 or 8 hexadecimal digits without prefix, got {hex_string!r}"
        )
