from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast, Callable, Iterator
from ..conversions import convert, FormatType
from ..types.format_type import format_classes, HUE_360
from ..types.color_types import ColorElement, Scalar, ScalarVector, ColorSpace, is_hue_space
from ..utils import get_dimension
from abc import ABC


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # no new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[ColorSpace]
    maxima:     ClassVar[ColorElement]
    null_value: ClassVar[ColorElement]
    format_type: ClassVar[FormatType]
    # Installed by colors.color once every class is registered
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorElement | ColorBase) -> None:
        maxima_dim = get_dimension(self.maxima)

        if self.num_channels != maxima_dim:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode and value.format_type == self.format_type:
                value = value.value
            else:
                value = convert(
                    color=value.value,
                    from_space=value.mode,
                    to_space=self.mode,
                    input_type=value.format_type,
                    output_type=self.format_type,
                )

        if isinstance(value, (str, bytes)):
            raise TypeError(f"{self.__class__.__name__} expects a channel tuple, got {type(value).__name__}")

        value_dim = get_dimension(value)
        if maxima_dim != value_dim:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped value, got {value!r}")

        # type enforcement, integer formats round to the nearest step
        to_type = format_classes[self.format_type]
        if to_type is int:
            channels = tuple(int(round(v)) for v in cast(Tuple[Any, ...], value))
        else:
            channels = tuple(float(v) for v in cast(Tuple[Any, ...], value))

        # hue wraps, everything else clamps
        if self.has_hue:
            channels = (channels[0] % HUE_360,) + channels[1:]
            start = 1
        else:
            start = 0
        maxima = cast(Tuple[Scalar, ...], self.maxima)
        channels = channels[:start] + tuple(
            max(0, min(v, m)) for v, m in zip(channels[start:], maxima[start:])
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = channels

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (
            self.mode == other.mode
            and self.format_type == other.format_type
            and self._value == other._value
        )

    def __hash__(self) -> int:
        return hash((self.mode, self.format_type, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    maxima: ClassVar[ColorElement]
    mode: ClassVar[ColorSpace]
    value: ScalarVector

    alpha_index: ClassVar[int] = -1
    alpha_max:   ClassVar[Scalar]

    @property
    def alpha(self) -> Scalar:
        """Get alpha channel value."""
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: Scalar):
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, clamped to the format's maximum.

        Returns:
            New color instance with updated alpha.
        """
        a = max(0, min(alpha, self.alpha_max))
        new_vals = tuple(self.value[:-1]) + (a,)
        return self.__class__(new_vals)  # type: ignore


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
