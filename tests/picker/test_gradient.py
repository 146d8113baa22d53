from chromapick.colors import ColorRGBA
from chromapick.picker.gradient import (
    ColorStop,
    GradientColorState,
    GradientType,
    sample_stops,
)
import numpy as np
import pytest

BLACK = ColorRGBA((0, 0, 0, 255))
WHITE = ColorRGBA((255, 255, 255, 255))
RED = ColorRGBA((255, 0, 0, 255))
GREEN = ColorRGBA((0, 255, 0, 255))
BLUE = ColorRGBA((0, 0, 255, 255))

def test_default_stops_use_current_color():
    state = GradientColorState(RED)
    assert state.stops == (ColorStop(0.0, RED), ColorStop(1.0, RED))
    assert state.selected_index is None
    assert state.gradient_type == GradientType.LINEAR

def test_needs_two_stops():
    with pytest.raises(ValueError):
        GradientColorState(RED, stops=[(0.0, RED)])

def test_stops_are_sorted_and_clamped():
    state = GradientColorState(stops=[(1.5, WHITE), (-1.0, BLACK), (0.5, RED)])
    assert [stop.offset for stop in state.stops] == [0.0, 0.5, 1.0]
    assert [stop.color for stop in state.stops] == [BLACK, RED, WHITE]

def test_linear_rgb_sample():
    state = GradientColorState(stops=[(0.0, BLACK), (1.0, WHITE)])
    samples = state.sample(3)
    assert samples.dtype == np.uint8
    np.testing.assert_array_equal(
        samples,
        [[0, 0, 0, 255], [128, 128, 128, 255], [255, 255, 255, 255]],
    )

def test_sample_holds_end_colors_outside_stops():
    stops = [ColorStop(0.25, RED), ColorStop(0.75, BLUE)]
    samples = sample_stops(stops, 5)
    np.testing.assert_array_equal(samples[0], [255, 0, 0, 255])
    np.testing.assert_array_equal(samples[1], [255, 0, 0, 255])
    np.testing.assert_array_equal(samples[3], [0, 0, 255, 255])
    np.testing.assert_array_equal(samples[4], [0, 0, 255, 255])

def test_sample_interpolates_alpha():
    stops = [ColorStop(0.0, ColorRGBA((255, 0, 0, 0))), ColorStop(1.0, RED)]
    samples = sample_stops(stops, 3)
    assert list(samples[:, 3]) == [0, 128, 255]

def test_hsl_shortest_and_clockwise():
    stops = [ColorStop(0.0, RED), ColorStop(1.0, BLUE)]
    shortest = sample_stops(stops, 3, color_space="hsl")
    clockwise = sample_stops(stops, 3, color_space="hsl", direction="cw")
    np.testing.assert_array_equal(shortest[1], [255, 0, 255, 255])
    np.testing.assert_array_equal(clockwise[1], [0, 255, 0, 255])

def test_hsv_counter_clockwise():
    stops = [ColorStop(0.0, RED), ColorStop(1.0, GREEN)]
    samples = sample_stops(stops, 3, color_space="hsv", direction="ccw")
    np.testing.assert_array_equal(samples[1], [0, 0, 255, 255])

def test_gray_stop_borrows_hue():
    stops = [ColorStop(0.0, WHITE), ColorStop(1.0, BLUE)]
    samples = sample_stops(stops, 3, color_space="hsl")
    r, g, b, _ = samples[1]
    assert r == g
    assert b > r

def test_unknown_direction_warns():
    stops = [ColorStop(0.0, RED), ColorStop(1.0, BLUE)]
    with pytest.warns(UserWarning):
        samples = sample_stops(stops, 3, color_space="hsl", direction="sideways")
    np.testing.assert_array_equal(samples[1], [255, 0, 255, 255])

def test_bad_sampling_arguments():
    stops = [ColorStop(0.0, RED), ColorStop(1.0, BLUE)]
    with pytest.raises(ValueError):
        sample_stops(stops, 3, color_space="lab")
    with pytest.raises(ValueError):
        sample_stops(stops, 0)
    with pytest.raises(ValueError):
        sample_stops([], 3)

def test_add_stop_selects_it():
    state = GradientColorState(stops=[(0.0, BLACK), (1.0, WHITE)])
    assert state.add_stop(0.25, RED) == 1
    assert state.selected_index == 1
    assert state.add_stop(0.75, GREEN) == 2
    assert state.selected_index == 2
    assert [stop.color for stop in state.stops] == [BLACK, RED, GREEN, WHITE]

def test_add_stop_defaults_to_current_color():
    state = GradientColorState(BLUE, stops=[(0.0, BLACK), (1.0, WHITE)])
    index = state.add_stop(0.5)
    assert state.stops[index].color == BLUE

def test_update_stop_resorts():
    state = GradientColorState(stops=[(0.0, BLACK), (1.0, WHITE)])
    state.add_stop(0.25, RED)
    state.add_stop(0.75, GREEN)
    state.select(1)

    new_index = state.update_stop(1, offset=0.9)

    assert new_index == 2
    assert state.selected_index == 2
    assert state.stops[2] == ColorStop(0.9, RED)

def test_remove_stop():
    state = GradientColorState(stops=[(0.0, BLACK), (0.5, RED), (1.0, WHITE)])
    state.select(2)
    assert state.remove_stop(1) == ColorStop(0.5, RED)
    assert state.selected_index == 1
    with pytest.raises(ValueError):
        state.remove_stop(0)
    with pytest.raises(ValueError):
        state.select(5)

def test_remove_selected_stop_clears_selection():
    state = GradientColorState(stops=[(0.0, BLACK), (0.5, RED), (1.0, WHITE)])
    state.select(1)
    state.remove_stop(1)
    assert state.selected_index is None

def test_color_recolors_selected_stop():
    state = GradientColorState(stops=[(0.0, BLACK), (1.0, WHITE)])
    state.color = RED
    assert state.stops == (ColorStop(0.0, BLACK), ColorStop(1.0, WHITE))

    state.select(1)
    state.color = BLUE
    assert state.stops[1] == ColorStop(1.0, BLUE)
    assert state.color == BLUE

def test_brush_reports_changes():
    brushes = []
    state = GradientColorState(RED, on_brush_change=brushes.append)

    state.gradient_type = GradientType.RADIAL
    state.add_stop(0.5, BLUE)

    assert len(brushes) == 2
    brush = brushes[-1]
    assert brush.gradient_type == GradientType.RADIAL
    assert len(brush.stops) == 3
    assert brush.colors.shape == (256, 4)
    assert brush.colors.dtype == np.uint8

def test_gradient_type_from_string():
    state = GradientColorState()
    state.gradient_type = "sweep"
    assert state.gradient_type is GradientType.SWEEP
    with pytest.raises(ValueError):
        state.gradient_type = "conic"

def test_hsl_brush_after_stop_edits():
    brushes = []
    state = GradientColorState(RED, stops=[(0.0, RED), (1.0, BLUE)], on_brush_change=brushes.append)
    state.select(1)
    state.color = GREEN

    brush = state.brush(steps=3, color_space="hsl")

    assert len(brushes) == 1
    np.testing.assert_array_equal(brush.colors, [[255, 0, 0, 255], [255, 255, 0, 255], [0, 255, 0, 255]])
