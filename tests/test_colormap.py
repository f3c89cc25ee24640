"""Tests for the gradient colormap."""

import math

import numpy as np
import pytest

from dashboard_charts.colormap import Colormap, linear_to_srgb, srgb_to_linear
from dashboard_charts.errors import ConfigurationError, InvalidBoundsError, InvalidPaletteError
from dashboard_charts.palettes import ColormapType


@pytest.mark.parametrize("colormap_type", list(ColormapType))
def test_end_values_map_to_end_stops(colormap_type):
    colormap = Colormap(colormap_type, -10.0, 30.0)
    assert colormap.get_color_rgb_bytes(-10.0) == colormap_type.stops[0]
    assert colormap.get_color_rgb_bytes(30.0) == colormap_type.stops[-1]


@pytest.mark.parametrize("colormap_type", list(ColormapType))
def test_reversed_swaps_end_stops(colormap_type):
    colormap = Colormap(colormap_type, 0.0, 1.0, reverse=True)
    assert colormap.get_color_rgb_bytes(0.0) == colormap_type.stops[-1]
    assert colormap.get_color_rgb_bytes(1.0) == colormap_type.stops[0]


def test_nan_maps_to_minimum(blues):
    assert blues.get_color(math.nan) == blues.get_color(0.0)
    assert blues.get_color_rgb_bytes(float("nan")) == ColormapType.BLUES.stops[0]


def test_out_of_range_values_are_clamped(blues):
    assert blues.get_color(-100.0) == blues.get_color(0.0)
    assert blues.get_color(200.0) == blues.get_color(100.0)
    assert blues.get_color(math.inf) == blues.get_color(100.0)


def test_interpolation_happens_in_linear_light():
    colormap = Colormap([(0, 0, 0), (255, 255, 255)], 0.0, 1.0)
    # Half of the light, re-encoded as sRGB, is much brighter than 127
    assert colormap.get_color_rgb_bytes(0.5) == (188, 188, 188)


def test_get_color_is_float_version_of_bytes(blues):
    r, g, b = blues.get_color_rgb_bytes(42.0)
    assert blues.get_color(42.0) == (r / 255.0, g / 255.0, b / 255.0)


def test_grays_get_darker_with_value():
    colormap = Colormap(ColormapType.GRAYS, 0.0, 1.0)
    levels = [colormap.get_color_rgb_bytes(v)[0] for v in np.linspace(0.0, 1.0, 21)]
    assert levels == sorted(levels, reverse=True)
    assert levels[0] == 255
    assert levels[-1] == 0


def test_equal_bounds_are_rejected():
    with pytest.raises(InvalidBoundsError):
        Colormap(ColormapType.REDS, 5.0, 5.0)
    with pytest.raises(ValueError):
        Colormap(ColormapType.REDS, 0.0, math.nan)


def test_empty_palette_is_rejected():
    with pytest.raises(InvalidPaletteError):
        Colormap([], 0.0, 1.0)


def test_from_name_defaults_to_blues_and_ignores_case():
    assert Colormap.from_name(None, 0, 1).stops == ColormapType.BLUES.stops
    colormap = Colormap.from_name("coolwarm", 0, 1, reverse=True)
    assert colormap.name == "CoolWarm"
    assert colormap.reversed
    assert colormap.bounds == (0.0, 1.0)
    with pytest.raises(ConfigurationError):
        Colormap.from_name("Rainbow", 0, 1)


def test_matplotlib_colormap_shares_end_colors():
    colormap = Colormap(ColormapType.GREENS, 0.0, 1.0)
    cmap = colormap.to_matplotlib(64)
    assert cmap.N == 64
    first = tuple(round(c * 255) for c in cmap(0.0)[:3])
    last = tuple(round(c * 255) for c in cmap(1.0)[:3])
    assert first == ColormapType.GREENS.stops[0]
    assert last == ColormapType.GREENS.stops[-1]


def test_transfer_functions_round_trip():
    values = np.linspace(0.0, 1.0, 101)
    assert np.allclose(linear_to_srgb(srgb_to_linear(values)), values)
    assert srgb_to_linear(0.04045) == pytest.approx(0.04045 / 12.92)
