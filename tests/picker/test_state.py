from chromapick.colors import ColorRGBA
from chromapick.picker.state import ColorPickerState
from chromapick.picker.gradient import GradientColorState
from chromapick.types.color_types import ColorMode, ColorModel
import pytest

RED = ColorRGBA((255, 0, 0, 255))
GREEN = ColorRGBA((0, 255, 0, 255))
BLUE = ColorRGBA((0, 0, 255, 255))

def make_state(color=RED):
    seen = []
    state = ColorPickerState(color, on_color_change=seen.append)
    seen.clear()
    return state, seen

def test_seeded_from_initial_color():
    state, seen = make_state(ColorRGBA((255, 0, 0, 128)))
    assert (state.hue, state.saturation, state.lightness) == (0.0, 1.0, 0.5)
    assert state.alpha == pytest.approx(128 / 255)
    assert state.current_color == ColorRGBA((255, 0, 0, 128))
    assert state.hex_string == "FF000080"

def test_construction_reports_seeded_color():
    seen = []
    ColorPickerState(ColorRGBA((0, 0, 255, 128)), on_color_change=seen.append)
    assert seen == [ColorRGBA((0, 0, 255, 128))]

def test_ring_changes_hue():
    state, seen = make_state()
    state.set_hue(120)
    assert state.current_color == GREEN
    assert seen == [GREEN]

def test_hue_wraps():
    state, _ = make_state()
    state.hue = 370
    assert state.hue == pytest.approx(10.0)
    state.hue = -120
    assert state.hue == pytest.approx(240.0)
    assert state.current_color == BLUE

def test_diamond_changes_saturation_and_lightness_once():
    state, seen = make_state()
    state.set_saturation_lightness(0.0, 1.0)
    assert state.current_color == ColorRGBA((255, 255, 255, 255))
    assert len(seen) == 1

def test_channels_are_clamped():
    state, _ = make_state()
    state.saturation = 1.5
    state.lightness = -0.5
    state.alpha = 2
    assert state.saturation == 1.0
    assert state.lightness == 0.0
    assert state.alpha == 1.0

def test_set_color():
    state, seen = make_state()
    state.set_color(ColorRGBA((0, 0, 255, 0)))
    assert state.hue == pytest.approx(240.0)
    assert state.alpha == 0.0
    assert seen == [ColorRGBA((0, 0, 255, 0))]

def test_mode_selects_slider_model():
    state, _ = make_state()
    assert state.color_mode == ColorMode.HSL
    assert state.input_color_model == ColorModel.HSL

    state.set_color_mode(ColorMode.HSV)
    assert state.input_color_model == ColorModel.HSV
    state.set_color_mode("rgb")
    assert state.color_mode == ColorMode.RGB
    assert state.input_color_model == ColorModel.RGB

    state.set_color_mode(ColorMode.GRADIENT)
    assert state.color_mode == ColorMode.GRADIENT
    assert state.input_color_model == ColorModel.RGB

def test_unknown_mode():
    state, _ = make_state()
    with pytest.raises(ValueError):
        state.set_color_mode("cmyk")

def test_hex_field_drives_picker():
    state, seen = make_state()
    field = state.hex_field()
    assert field.text == "FF0000FF"

    field.edit("00ff00")
    assert state.current_color == GREEN
    assert seen == [GREEN]

def test_gradient_color_follows_picker():
    state, _ = make_state()
    assert state.gradient_state.color == RED
    state.set_hue(240)
    assert state.gradient_state.color == BLUE

def test_selected_stop_follows_picker_and_reports_brush():
    brushes = []
    state = ColorPickerState(RED, on_brush_change=brushes.append)
    state.gradient_state.select(0)

    state.set_hue(120)

    assert state.gradient_state.stops[0].color == GREEN
    assert state.gradient_state.stops[1].color == RED
    assert len(brushes) == 1
    assert tuple(brushes[0].colors[0]) == (0, 255, 0, 255)

def test_shared_gradient_state():
    gradient = GradientColorState(BLUE)
    state = ColorPickerState(RED, gradient_state=gradient)
    assert state.gradient_state is gradient
    state.set_hue(120)
    assert gradient.color == GREEN
