"""Tests for matplotlib composition of regions and bars."""

import logging
from pathlib import Path

import matplotlib.image as mpimg
import matplotlib.pyplot as plt
import pytest

from dashboard_charts._common import new_canvas
from dashboard_charts.bars import Colorbar, Loadbar
from dashboard_charts.config import StyleConfiguration, load_config
from dashboard_charts.errors import DegenerateGeometryError
from dashboard_charts.palettes import SystemPalette
from dashboard_charts.render import (
    draw_bar,
    draw_gradient,
    draw_region,
    draw_title,
    render_palette_sheet,
    render_region_map,
)

EXAMPLE = Path(__file__).resolve().parent.parent / "config" / "example.yaml"


def test_new_canvas_uses_pixel_coordinates():
    fig, ax = new_canvas(300, 200)
    try:
        assert ax.get_xlim() == (0, 300)
        # y grows downward
        assert ax.get_ylim() == (200, 0)
    finally:
        plt.close(fig)


def test_draw_colorbar_adds_bands_border_and_labels(blues):
    fig, ax = new_canvas(200, 200, SystemPalette.LIGHT)
    try:
        draw_bar(ax, Colorbar((10, 10), (10, 180), blues, unit="%"), SystemPalette.LIGHT)
        assert len(ax.patches) == 61 + 1
        assert [t.get_text() for t in ax.texts] == ["100%", "75%", "50%", "25%", "0%"]
    finally:
        plt.close(fig)


def test_draw_loadbar_leaves_unfilled_bands_empty(blues):
    fig, ax = new_canvas(100, 40)
    try:
        draw_bar(ax, Loadbar((10, 10), (61, 10), blues, maximum=100.0, value=50.0))
        assert len(ax.patches) == 31 + 1
        assert len(ax.texts) == 0
    finally:
        plt.close(fig)


def test_draw_region_without_value_is_outline_only(blues):
    fig, ax = new_canvas(100, 100)
    try:
        draw_region(ax, [(10, 10), (10, 90), (90, 90), (90, 10)], None, blues)
        assert len(ax.patches) == 1
        assert not ax.patches[0].get_fill()
        assert len(ax.texts) == 0
    finally:
        plt.close(fig)


def test_draw_region_with_value_is_filled_and_labelled(blues):
    fig, ax = new_canvas(100, 100)
    try:
        draw_region(ax, [(10, 10), (10, 90), (90, 90), (90, 10)], 21.49, blues, precision=1)
        assert len(ax.patches) == 2
        assert ax.texts[0].get_text() == "21.5"
        assert ax.texts[0].get_position() == (50, 50)
    finally:
        plt.close(fig)


def test_render_region_map_writes_image_at_resolution(tmp_path, caplog):
    style, region_map = load_config(EXAMPLE)
    out = tmp_path / "map.png"
    with caplog.at_level(logging.WARNING, logger="dashboard_charts.render"):
        render_region_map(region_map, style, str(out))
    image = mpimg.imread(out)
    assert image.shape[:2] == (320, 480)
    assert "No value for region 'living room'" in caplog.text


def test_render_region_map_accepts_value_override_and_oblique(tmp_path):
    style, region_map = load_config(EXAMPLE)
    oblique = region_map.model_copy(update={"oblique": True})
    out = tmp_path / "nested" / "oblique.png"
    render_region_map(oblique, StyleConfiguration(resolution=(240, 160)), str(out), values={"kitchen": 30.0})
    assert mpimg.imread(out).shape[:2] == (160, 240)


def test_render_palette_sheet(tmp_path):
    out = tmp_path / "palettes.png"
    render_palette_sheet(str(out), SystemPalette.LIGHT)
    assert mpimg.imread(out).shape[:2] == (320, 720)


def test_draw_gradient_keeps_pixel_limits(blues):
    fig, ax = new_canvas(100, 100)
    try:
        draw_gradient(ax, blues, (10, 10, 10, 80))
        assert len(ax.images) == 1
        assert ax.images[0].get_cmap().name == "Blues"
        assert tuple(ax.images[0].get_extent()) == (10, 20, 90, 10)
        assert ax.get_xlim() == (0, 100)
        assert ax.get_ylim() == (100, 0)
    finally:
        plt.close(fig)


def test_title_height_follows_font_size():
    fig, ax = new_canvas(200, 100)
    try:
        # 16 pt title at 100 dpi, doubled for spacing
        assert draw_title(ax, "Temperature", 200, SystemPalette.DARK, 1.0) == 44
        assert draw_title(ax, "Temperature", 200, SystemPalette.DARK, 2.0) == 89
    finally:
        plt.close(fig)


def test_render_region_map_rejects_canvas_too_small_for_legend(tmp_path):
    style, region_map = load_config(EXAMPLE)
    with pytest.raises(DegenerateGeometryError, match="no room"):
        render_region_map(region_map, StyleConfiguration(resolution=(60, 60)), str(tmp_path / "tiny.png"))
