from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, build_registry


class ColorRGBA(ColorBase, WithAlpha):
    """8-bit RGBA color, the canonical color value handed to callers."""
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)
    format_type: ClassVar[FormatType] = FormatType.INT
    alpha_max: ClassVar[int] = 255

    @classmethod
    def rgb(cls, r: int, g: int, b: int, a: int = 255) -> "ColorRGBA":
        return cls((r, g, b, a))

    @property
    def red(self) -> int:
        return self.value[0]

    @property
    def green(self) -> int:
        return self.value[1]

    @property
    def blue(self) -> int:
        return self.value[2]


class ColorUnitRGBA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    maxima: ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    null_value: ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    alpha_max: ClassVar[float] = 1.0


rgb_tuple_to_class = build_registry(
    ColorRGBA,
    ColorUnitRGBA,
)
