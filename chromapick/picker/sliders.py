from __future__ import annotations

from typing import Sequence, Tuple

from boundednumbers import clamp

from ..colors import ColorBase, ColorRGBA, ColorHSLA, ColorHSVA, rgb_to_hsl, rgb_to_hsv, hsv_to_rgb, hsl_to_rgb
from ..conversions import hsl_to_hsv, hsv_to_hsl
from ..types.color_types import ColorModel
from .state import ColorPickerState

CHANNEL_LABELS = {
    ColorModel.HSL: ("Hue", "Saturation", "Lightness", "Alpha"),
    ColorModel.HSV: ("Hue", "Saturation", "Value", "Alpha"),
    ColorModel.RGB: ("Red", "Green", "Blue", "Alpha"),
}

CHANNEL_MAXIMA = {
    ColorModel.HSL: (360.0, 1.0, 1.0, 1.0),
    ColorModel.HSV: (360.0, 1.0, 1.0, 1.0),
    ColorModel.RGB: (255, 255, 255, 255),
}

ALPHA_INDEX = 3


def slider_values(color: ColorBase, model: ColorModel) -> Tuple[float, ...]:
    """Channel values of ``color`` as the sliders of ``model`` show them."""
    model = ColorModel(model)
    if model == ColorModel.HSL:
        return rgb_to_hsl(color)
    if model == ColorModel.HSV:
        return rgb_to_hsv(color)
    return ColorRGBA(color).value


def color_from_slider_values(values: Sequence[float], model: ColorModel) -> ColorRGBA:
    model = ColorModel(model)
    if len(values) != len(CHANNEL_LABELS[model]):
        raise ValueError(f"{model.value} sliders expect {len(CHANNEL_LABELS[model])} values, got {len(values)}")
    if model == ColorModel.HSL:
        return hsl_to_rgb(*values)
    if model == ColorModel.HSV:
        return hsv_to_rgb(*values)
    return ColorRGBA(tuple(values))


class CompositeSliderPanel:
    """
    Slider panel editing a picker's color in its current input model.

    Values are read from the picker's own channels where possible so hue
    survives gray colors; changes are written back as HSL.
    """

    def __init__(
        self,
        state: ColorPickerState,
        show_alpha_slider: bool = True,
        output_color_model: ColorModel = ColorModel.HSL,
    ) -> None:
        self.state = state
        self.show_alpha_slider = show_alpha_slider
        self.output_color_model = ColorModel(output_color_model)

    @property
    def input_color_model(self) -> ColorModel:
        return self.state.input_color_model

    @property
    def labels(self) -> Tuple[str, ...]:
        labels = CHANNEL_LABELS[self.input_color_model]
        return labels if self.show_alpha_slider else labels[:ALPHA_INDEX]

    @property
    def values(self) -> Tuple[float, ...]:
        state = self.state
        model = self.input_color_model
        if model == ColorModel.HSL:
            values = (state.hue, state.saturation, state.lightness, state.alpha)
        elif model == ColorModel.HSV:
            values = hsl_to_hsv(state.hue, state.saturation, state.lightness) + (state.alpha,)
        else:
            values = state.current_color.value
        return values if self.show_alpha_slider else values[:ALPHA_INDEX]

    @property
    def composite_color(self) -> ColorBase:
        """The picker's color in the panel's output model."""
        state = self.state
        if self.output_color_model == ColorModel.HSL:
            return ColorHSLA((state.hue, state.saturation, state.lightness, state.alpha))
        if self.output_color_model == ColorModel.HSV:
            return ColorHSVA(hsl_to_hsv(state.hue, state.saturation, state.lightness) + (state.alpha,))
        return state.current_color

    def set_channel(self, index: int, value: float) -> None:
        """Move one slider and push the result into the picker."""
        labels = self.labels
        if not 0 <= index < len(labels):
            raise ValueError(f"Slider index {index} out of range for {labels}")

        model = self.input_color_model
        values = list(self.values)
        if len(values) == ALPHA_INDEX:
            values.append(self.state.alpha if model != ColorModel.RGB else self.state.current_color.alpha)

        maximum = CHANNEL_MAXIMA[model][index]
        if model != ColorModel.RGB and index == 0:
            values[index] = float(value) % maximum
        else:
            values[index] = clamp(value, 0, maximum)

        if model == ColorModel.HSL:
            self.state.set_hsla(*values)
        elif model == ColorModel.HSV:
            h, s, l = hsv_to_hsl(*values[:ALPHA_INDEX])
            self.state.set_hsla(h, s, l, values[ALPHA_INDEX])
        else:
            h, s, l, a = rgb_to_hsl(ColorRGBA(tuple(values)))
            # gray has no hue, keep the one the picker had
            if s == 0:
                h = self.state.hue
            self.state.set_hsla(h, s, l, a)
