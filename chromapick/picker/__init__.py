"""
Picker state for the HSL ring/diamond color picker.

- state: hue/saturation/lightness/alpha, active tab, hex field binding
- sliders: slider panel values per color model
- gradient: color stops and sampled gradient brushes
"""
from .gradient import GradientType, ColorStop, GradientBrush, GradientColorState, sample_stops
from .state import ColorPickerState, MODE_TO_MODEL
from .sliders import (
    CHANNEL_LABELS,
    CompositeSliderPanel,
    slider_values,
    color_from_slider_values,
)

__all__ = [
    "GradientType",
    "ColorStop",
    "GradientBrush",
    "GradientColorState",
    "sample_stops",
    "ColorPickerState",
    "MODE_TO_MODEL",
    "CHANNEL_LABELS",
    "CompositeSliderPanel",
    "slider_values",
    "color_from_slider_values",
]
