from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function, clamp

from ..colors import ColorBase, ColorRGBA, rgb_to_hsl, rgb_to_hsv
from ..conversions import np_hsl_to_unit_rgb, np_hsv_to_unit_rgb
from ..types.color_types import HueDirection

logger = logging.getLogger(__name__)

DEFAULT_STEPS = 256
_GRADIENT_SPACES = ("rgb", "hsl", "hsv")
_wrap_hue = bound_type_to_np_function[BoundType.CYCLIC]
_clamp_channels = bound_type_to_np_function[BoundType.CLAMP]


class GradientType(str, Enum):
    LINEAR = "linear"
    RADIAL = "radial"
    SWEEP = "sweep"


@dataclass(frozen=True)
class ColorStop:
    offset: float
    color: ColorRGBA


@dataclass(frozen=True, eq=False)
class GradientBrush:
    """What the presentation layer needs to paint a gradient."""
    gradient_type: GradientType
    stops: Tuple[ColorStop, ...]
    colors: NDArray = field(repr=False)


BrushChangeCallback = Callable[[GradientBrush], None]


def _hue_delta(h0: NDArray, h1: NDArray, direction: Optional[HueDirection]) -> NDArray:
    delta = h1 - h0
    if direction == "cw":
        return np.where(delta < 0, delta + 360.0, delta)
    if direction == "ccw":
        return np.where(delta > 0, delta - 360.0, delta)
    if direction not in (None, "shortest"):
        warnings.warn(f"Unknown hue direction: {direction}, defaulting to shortest")
    delta = np.where(delta > 180.0, delta - 360.0, delta)
    return np.where(delta < -180.0, delta + 360.0, delta)


def sample_stops(
    stops: Sequence[ColorStop],
    steps: int = DEFAULT_STEPS,
    color_space: str = "rgb",
    direction: Optional[HueDirection] = None,
) -> NDArray:
    """
    Sample a gradient defined by sorted color stops.

    Args:
        stops: Color stops sorted by offset, at least one
        steps: Number of evenly spaced samples over [0, 1]
        color_space: Interpolation space, 'rgb', 'hsl' or 'hsv'
        direction: Hue direction for HSL/HSV - 'cw', 'ccw', or None for shortest path

    Returns:
        uint8 array of shape (steps, 4), RGBA
    """
    color_space = color_space.lower()
    if color_space not in _GRADIENT_SPACES:
        raise ValueError(f"Unknown gradient color space: {color_space}")
    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")
    if not stops:
        raise ValueError("A gradient needs at least one color stop")

    offsets = np.array([stop.offset for stop in stops], dtype=float)
    if color_space == "rgb":
        channels = np.array([stop.color.value for stop in stops], dtype=float) / 255.0
    elif color_space == "hsl":
        channels = np.array([rgb_to_hsl(stop.color) for stop in stops], dtype=float)
    else:
        channels = np.array([rgb_to_hsv(stop.color) for stop in stops], dtype=float)

    if len(stops) == 1:
        offsets = np.array([0.0, 1.0])
        channels = np.repeat(channels, 2, axis=0)

    u = np.linspace(0.0, 1.0, steps, dtype=float)
    index = np.clip(np.searchsorted(offsets, u, side="right") - 1, 0, len(offsets) - 2)
    x0 = offsets[index]
    x1 = offsets[index + 1]
    span = x1 - x0
    t = np.where(span > 0, (u - x0) / np.where(span > 0, span, 1.0), 0.0)
    t = np.clip(t, 0.0, 1.0)[:, None]

    start = channels[index]
    end = channels[index + 1]

    if color_space == "rgb":
        rgba = start * (1 - t) + end * t
    else:
        # A gray stop has no hue of its own, borrow the neighbour's
        h0 = np.where(start[:, 1] == 0, end[:, 0], start[:, 0])
        h1 = np.where(end[:, 1] == 0, start[:, 0], end[:, 0])
        hues = _wrap_hue(h0 + t[:, 0] * _hue_delta(h0, h1, direction), 0.0, 360.0)
        rest = start[:, 1:] * (1 - t) + end[:, 1:] * t
        to_rgb = np_hsl_to_unit_rgb if color_space == "hsl" else np_hsv_to_unit_rgb
        rgb = to_rgb(hues, rest[:, 0], rest[:, 1])
        rgba = np.concatenate([rgb, rest[:, 2:3]], axis=1)

    return _clamp_channels(np.round(rgba * 255.0), 0, 255).astype(np.uint8)


class GradientColorState:
    """
    Editable gradient behind the picker's gradient tab.

    Stops are kept sorted by offset. ``color`` is the picker's current color;
    while a stop is selected, changing it recolors that stop.
    """

    def __init__(
        self,
        color: ColorBase = ColorRGBA((0, 0, 0, 255)),
        gradient_type: GradientType = GradientType.LINEAR,
        stops: Optional[Sequence[Tuple[float, ColorBase]]] = None,
        on_brush_change: Optional[BrushChangeCallback] = None,
    ) -> None:
        self._color = ColorRGBA(color)
        self._gradient_type = GradientType(gradient_type)
        if stops is None:
            stops = [(0.0, self._color), (1.0, self._color)]
        if len(stops) < 2:
            raise ValueError("A gradient needs at least two color stops")
        self._stops = sorted(
            (self._make_stop(offset, stop_color) for offset, stop_color in stops),
            key=lambda stop: stop.offset,
        )
        self.selected_index: Optional[int] = None
        self.on_brush_change = on_brush_change

    @staticmethod
    def _make_stop(offset: float, color: ColorBase) -> ColorStop:
        return ColorStop(float(clamp(float(offset), 0.0, 1.0)), ColorRGBA(color))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._stops):
            raise ValueError(f"Stop index {index} out of range for {len(self._stops)} stops")

    def _sort_keeping(self, stop: ColorStop) -> int:
        self._stops.sort(key=lambda s: s.offset)
        # identity, two stops may be equal
        return next(i for i, s in enumerate(self._stops) if s is stop)

    def _changed(self) -> None:
        if self.on_brush_change is not None:
            self.on_brush_change(self.brush())

    # ------------------ PROPERTIES ------------------
    @property
    def color(self) -> ColorRGBA:
        return self._color

    @color.setter
    def color(self, value: ColorBase) -> None:
        self._color = ColorRGBA(value)
        if self.selected_index is not None:
            self.update_stop(self.selected_index, color=self._color)

    @property
    def gradient_type(self) -> GradientType:
        return self._gradient_type

    @gradient_type.setter
    def gradient_type(self, value: GradientType) -> None:
        self._gradient_type = GradientType(value)
        self._changed()

    @property
    def stops(self) -> Tuple[ColorStop, ...]:
        return tuple(self._stops)

    # ------------------ STOP EDITING ------------------
    def select(self, index: Optional[int]) -> None:
        if index is not None:
            self._check_index(index)
        self.selected_index = index

    def add_stop(self, offset: float, color: Optional[ColorBase] = None) -> int:
        """Insert a stop (defaults to the current color), select it and return its index."""
        stop = self._make_stop(offset, self._color if color is None else color)
        self._stops.append(stop)
        index = self._sort_keeping(stop)
        self.selected_index = index
        logger.debug("Added color stop %r at index %d", stop, index)
        self._changed()
        return index

    def remove_stop(self, index: int) -> ColorStop:
        self._check_index(index)
        if len(self._stops) <= 2:
            raise ValueError("A gradient needs at least two color stops")
        stop = self._stops.pop(index)
        if self.selected_index is not None:
            if self.selected_index == index:
                self.selected_index = None
            elif self.selected_index > index:
                self.selected_index -= 1
        logger.debug("Removed color stop %r", stop)
        self._changed()
        return stop

    def update_stop(
        self,
        index: int,
        offset: Optional[float] = None,
        color: Optional[ColorBase] = None,
    ) -> int:
        """Move and/or recolor a stop; returns its index after re-sorting."""
        self._check_index(index)
        old = self._stops[index]
        stop = self._make_stop(
            old.offset if offset is None else offset,
            old.color if color is None else color,
        )
        self._stops[index] = stop
        new_index = self._sort_keeping(stop)
        if self.selected_index == index:
            self.selected_index = new_index
        self._changed()
        return new_index

    # ------------------ OUTPUT ------------------
    def sample(
        self,
        steps: int = DEFAULT_STEPS,
        color_space: str = "rgb",
        direction: Optional[HueDirection] = None,
    ) -> NDArray:
        return sample_stops(self._stops, steps, color_space, direction)

    def brush(self, steps: int = DEFAULT_STEPS, color_space: str = "rgb") -> GradientBrush:
        return GradientBrush(self._gradient_type, self.stops, self.sample(steps, color_space))
