from chromapick.conversions.to_hsv import unit_rgb_to_hsv, hsl_to_hsv, np_unit_rgb_to_hsv
from chromapick.conversions.to_rgb import hsv_to_unit_rgb, hsl_to_unit_rgb, np_hsl_to_unit_rgb
from chromapick.conversions.to_hsl import hsv_to_hsl, unit_rgb_to_hsl, np_unit_rgb_to_hsl
from ..samples import samples_rgb_hsl, samples_rgb_hsv, samples_hsl_hsv
import numpy as np


rgb_tolerance = 1e-9
hsl_tolerance = 1e-9

def test_round_trip_rgb_hsv():
    for (r, g, b) in samples_rgb_hsv:
        h, s, v = unit_rgb_to_hsv(r, g, b)
        r_out, g_out, b_out = hsv_to_unit_rgb(h, s, v)

        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance

def test_round_trip_rgb_hsl():
    for (r, g, b) in samples_rgb_hsl:
        h, s, l = unit_rgb_to_hsl(r, g, b)
        r_out, g_out, b_out = hsl_to_unit_rgb(h, s, l)

        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance

def test_round_trip_hsl_hsv():
    for (h, s, l) in samples_hsl_hsv:
        h_final, s_final, l_final = hsv_to_hsl(*hsl_to_hsv(h, s, l))

        assert abs(h - h_final) < hsl_tolerance
        assert abs(s - s_final) < hsl_tolerance
        assert abs(l - l_final) < hsl_tolerance

def test_round_trip_8bit_grid_numpy():
    levels = np.arange(0, 256, 5) / 255
    r, g, b = np.meshgrid(levels, levels, levels, indexing="ij")
    hsl = np_unit_rgb_to_hsl(r, g, b)
    rgb = np_hsl_to_unit_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])
    original = np.stack([r, g, b], axis=-1)

    assert np.array_equal(np.round(rgb * 255), np.round(original * 255))

def test_numpy_hsv_of_grid_in_range():
    levels = np.linspace(0.0, 1.0, 11)
    r, g, b = np.meshgrid(levels, levels, levels, indexing="ij")
    hsv = np_unit_rgb_to_hsv(r, g, b)

    assert np.all((hsv[..., 0] >= 0) & (hsv[..., 0] < 360))
    assert np.all((hsv[..., 1:] >= 0) & (hsv[..., 1:] <= 1))
