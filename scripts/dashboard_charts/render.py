"""Compose the colormap, region, and bar helpers into matplotlib images."""

import logging

import numpy as np
from matplotlib.patches import Polygon, Rectangle

from ._common import BASE_FONT_SIZE, DPI, new_canvas, outlined, save, theme
from .bars import Colorbar, Loadbar
from .colormap import Colormap
from .geometry import closed_ring
from .palettes import ColormapType, SystemColor, SystemPalette, to_mpl
from .projection import project_regions
from .regions import Margins, as_mapping, normalize_regions, region_label_position

logger = logging.getLogger(__name__)

# Inner padding around the region drawing area
REGION_PADDING = 5

# Vertical offset of the colorbar from the top of the canvas, and the room
# it leaves below itself
COLORBAR_TOP = 40
COLORBAR_BOTTOM_SKIP = 20


# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------


def draw_bar(ax, bar, system_palette=SystemPalette.DARK, font_scale=1.0):
    """Draw a Colorbar or Loadbar: bands, a 1-pixel border, and tick labels."""
    colors = theme(system_palette)
    for segment in bar.segments():
        x, y, width, height = segment.rect
        ax.add_patch(
            Rectangle(
                (x, y),
                width,
                height,
                facecolor=to_mpl(segment.color),
                edgecolor="none",
                linewidth=0,
            )
        )

    x, y, width, height = bar.border()
    ax.add_patch(
        Rectangle(
            (x, y),
            width,
            height,
            fill=False,
            edgecolor=colors["border"],
            linewidth=1,
        )
    )

    for label in bar.labels():
        ax.text(
            label.position[0],
            label.position[1],
            label.text,
            color=colors["text"],
            fontsize=BASE_FONT_SIZE * font_scale,
            ha="left",
            va="center",
        )


def draw_gradient(ax, colormap, rect, n=256):
    """Draw the continuous gradient into a vertical rect, maximum at the top."""
    x, y, width, height = rect
    ax.imshow(
        np.linspace(1.0, 0.0, n)[:, np.newaxis],
        cmap=colormap.to_matplotlib(n),
        vmin=0.0,
        vmax=1.0,
        extent=(x, x + width, y + height, y),
        aspect="auto",
        interpolation="nearest",
    )


def draw_region(
    ax,
    path,
    value,
    colormap,
    precision=0,
    border_color=(192, 192, 192),
    border_width=1,
    font_scale=1.0,
):
    """Fill a normalized region with its mapped color and write its value.

    A region without a value is only outlined.
    """
    ring = closed_ring(path)
    if value is not None:
        ax.add_patch(
            Polygon(
                ring,
                closed=True,
                facecolor=colormap.get_color(value),
                edgecolor="none",
            )
        )
        cx, cy = region_label_position(path)
        ax.text(
            cx,
            cy,
            f"{value:.{precision}f}",
            color="black",
            fontsize=BASE_FONT_SIZE * font_scale,
            ha="center",
            va="center",
            path_effects=outlined(colormap.get_color(value)),
        )

    ax.add_patch(
        Polygon(
            ring,
            closed=True,
            fill=False,
            edgecolor=to_mpl(border_color),
            linewidth=border_width,
        )
    )


def draw_title(ax, title, width, system_palette=SystemPalette.DARK, font_scale=1.0):
    """Write a centered title and return the pixel height it occupies."""
    font_size = 2 * BASE_FONT_SIZE * font_scale
    ax.text(
        width / 2,
        5,
        title,
        color=theme(system_palette)["text"],
        fontsize=font_size,
        ha="center",
        va="top",
    )
    # Points to pixels, plus the same again as spacing
    return int(round(2 * font_size * DPI / 72))


# ---------------------------------------------------------------------------
# Region map
# ---------------------------------------------------------------------------


def _border_style(name, configuration, style):
    tagged = {tag: index for index, tag in enumerate(configuration.colored_tag_values)}
    if name in tagged:
        return style.series_palette.pick(tagged[name]), 2
    return style.system_palette.pick(SystemColor.LIGHT_FOREGROUND), 1


def render_region_map(configuration, style, path, values=None):
    """Render a geographical heatmap with a colorbar legend to a PNG file.

    values overrides the values found in the configuration; a region missing
    from both is drawn as an outline only.
    """
    logger.info("Drawing region map '%s'", configuration.title.lower())
    width, height = style.resolution
    fig, ax = new_canvas(width, height, style.system_palette)

    title_height = draw_title(ax, configuration.title, width, style.system_palette, style.font_scale)

    colorbar_width = int(10 * style.font_scale)
    colorbar_x = width - colorbar_width - int(configuration.right_margin * style.font_scale)

    regions = as_mapping(configuration.build_regions())
    projected = project_regions(regions, oblique=configuration.oblique)
    margins = Margins(
        top=title_height + REGION_PADDING,
        bottom=REGION_PADDING,
        left=REGION_PADDING,
        right=width - colorbar_x + REGION_PADDING,
    )
    normalized = normalize_regions(projected, (width, height), margins)

    colormap = configuration.build_colormap()
    values = dict(configuration.values) if values is None else values

    logger.debug("Drawing regions")
    for name in sorted(normalized):
        value = values.get(name)
        if value is None:
            logger.warning("No value for region '%s'", name)
        border_color, border_width = _border_style(name, configuration, style)
        draw_region(
            ax,
            normalized[name],
            value,
            colormap,
            precision=configuration.precision,
            border_color=border_color,
            border_width=border_width,
            font_scale=style.font_scale,
        )

    logger.debug("Drawing colorbar")
    colorbar = Colorbar(
        (colorbar_x, COLORBAR_TOP),
        (colorbar_width, height - COLORBAR_TOP - COLORBAR_BOTTOM_SKIP),
        colormap,
        precision=configuration.precision,
        unit=configuration.unit,
    )
    draw_bar(ax, colorbar, style.system_palette, style.font_scale)

    save(fig, path, style.system_palette)


# ---------------------------------------------------------------------------
# Palette sheet
# ---------------------------------------------------------------------------


def render_palette_sheet(path, system_palette=SystemPalette.DARK, column_width=90, height=320):
    """One column per colormap: a stepped colorbar beside its continuous
    gradient, over a 70% loadbar.
    """
    types = list(ColormapType)
    width = column_width * len(types)
    fig, ax = new_canvas(width, height, system_palette)
    colors = theme(system_palette)

    for index, colormap_type in enumerate(types):
        left = index * column_width
        ax.text(
            left + column_width / 2,
            8,
            colormap_type.value,
            color=colors["text"],
            fontsize=BASE_FONT_SIZE,
            ha="center",
            va="top",
        )
        colormap = Colormap(colormap_type, 0.0, 100.0)
        colorbar = Colorbar((left + 15, 30), (15, height - 80), colormap, unit="%")
        draw_bar(ax, colorbar, system_palette)
        draw_gradient(ax, colormap, (left + 65, 30, 10, height - 80))

        loadbar = Loadbar((left + 15, height - 30), (60, 10), colormap, maximum=100.0, value=70.0)
        draw_bar(ax, loadbar, system_palette)

    save(fig, path, system_palette)
