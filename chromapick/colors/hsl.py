from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, build_registry


class ColorHSLA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode:       ClassVar[ColorSpace] = "hsla"
    maxima:     ClassVar[Tuple[float, float, float, float]] = (360.0, 1.0, 1.0, 1.0)
    null_value: ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    alpha_max: ClassVar[float] = 1.0

    @property
    def hue(self) -> float:
        return self.value[0]

    @property
    def saturation(self) -> float:
        return self.value[1]

    @property
    def lightness(self) -> float:
        return self.value[2]


hsl_tuple_to_class = build_registry(ColorHSLA)
