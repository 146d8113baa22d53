from __future__ import annotations

import logging
from typing import Callable, Optional

from boundednumbers import clamp

from ..colors import ColorBase, ColorRGBA, rgb_to_hsl, hsl_to_rgb, color_to_hex
from ..hex.field import HexTextField
from ..types.color_types import ColorMode, ColorModel
from ..types.format_type import HUE_360
from .gradient import GradientColorState, BrushChangeCallback

logger = logging.getLogger(__name__)

ColorChangeCallback = Callable[[ColorRGBA], None]

# Tabs that edit a color select the slider model of the same name; HSV edits in HSV, not HSL
MODE_TO_MODEL = {
    ColorMode.HSL: ColorModel.HSL,
    ColorMode.HSV: ColorModel.HSV,
    ColorMode.RGB: ColorModel.RGB,
}


def _unit(value: float) -> float:
    return float(clamp(float(value), 0.0, 1.0))


class ColorPickerState:
    """
    State of the HSL picker with a hue ring and a saturation/lightness diamond.

    The picker owns hue, saturation, lightness and alpha; the current color is
    derived from them. Construction and every later change report the color to
    ``on_color_change``; changes also keep the gradient state's color in step.
    """

    def __init__(
        self,
        initial_color: ColorBase,
        on_color_change: Optional[ColorChangeCallback] = None,
        on_brush_change: Optional[BrushChangeCallback] = None,
        gradient_state: Optional[GradientColorState] = None,
    ) -> None:
        self.initial_color = ColorRGBA(initial_color)
        hue, saturation, lightness, alpha = rgb_to_hsl(self.initial_color)
        self._hue = hue
        self._saturation = saturation
        self._lightness = lightness
        self._alpha = alpha

        self.color_mode = ColorMode.HSL
        self.input_color_model = ColorModel.HSL
        self.on_color_change = on_color_change

        if gradient_state is None:
            gradient_state = GradientColorState(self.current_color)
        if on_brush_change is not None:
            gradient_state.on_brush_change = on_brush_change
        self.gradient_state = gradient_state

        # listeners start out with the seeded color
        if self.on_color_change is not None:
            self.on_color_change(self.current_color)

    # ------------------ CHANNELS ------------------
    @property
    def hue(self) -> float:
        return self._hue

    @hue.setter
    def hue(self, value: float) -> None:
        self._hue = float(value) % HUE_360
        self._changed()

    @property
    def saturation(self) -> float:
        return self._saturation

    @saturation.setter
    def saturation(self, value: float) -> None:
        self._saturation = _unit(value)
        self._changed()

    @property
    def lightness(self) -> float:
        return self._lightness

    @lightness.setter
    def lightness(self, value: float) -> None:
        self._lightness = _unit(value)
        self._changed()

    @property
    def alpha(self) -> float:
        return self._alpha

    @alpha.setter
    def alpha(self, value: float) -> None:
        self._alpha = _unit(value)
        self._changed()

    @property
    def current_color(self) -> ColorRGBA:
        return hsl_to_rgb(self._hue, self._saturation, self._lightness, self._alpha)

    @property
    def hex_string(self) -> str:
        return color_to_hex(self.current_color, include_alpha=True)

    # ------------------ SELECTORS ------------------
    def set_hue(self, hue: float) -> None:
        """Hue ring moved."""
        self.hue = hue

    def set_saturation_lightness(self, saturation: float, lightness: float) -> None:
        """Diamond selector moved; one notification for both channels."""
        self._saturation = _unit(saturation)
        self._lightness = _unit(lightness)
        self._changed()

    def set_hsla(self, hue: float, saturation: float, lightness: float, alpha: float) -> None:
        self._hue = float(hue) % HUE_360
        self._saturation = _unit(saturation)
        self._lightness = _unit(lightness)
        self._alpha = _unit(alpha)
        self._changed()

    def set_color(self, color: ColorBase) -> None:
        """Take over a color chosen elsewhere, e.g. typed into the hex field."""
        self.set_hsla(*rgb_to_hsl(color))

    def set_color_mode(self, mode: ColorMode) -> None:
        self.color_mode = ColorMode(mode)
        # the gradient tab keeps whatever model the sliders had
        if self.color_mode in MODE_TO_MODEL:
            self.input_color_model = MODE_TO_MODEL[self.color_mode]
        logger.debug("Color mode %s, slider model %s", self.color_mode, self.input_color_model)

    def hex_field(self) -> HexTextField:
        """A hex field showing the current color; complete hex input updates the picker."""
        return HexTextField(self.hex_string, on_color_change=self.set_color)

    def _changed(self) -> None:
        color = self.current_color
        self.gradient_state.color = color
        if self.on_color_change is not None:
            self.on_color_change(color)

    def __repr__(self) -> str:
        return (
            f"ColorPickerState(hue={self._hue!r}, saturation={self._saturation!r}, "
            f"lightness={self._lightness!r}, alpha={self._alpha!r}, mode={self.color_mode.value!r})"
        )
