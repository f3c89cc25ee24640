"""Shared style, canvas helpers, and constants for dashboard chart rendering."""

import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.patheffects as pe  # noqa: E402
import matplotlib.pyplot as plt  # noqa: E402

from .palettes import SystemColor, SystemPalette, to_mpl  # noqa: E402

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

# One figure inch per 100 pixels; canvases are sized in pixels
DPI = 100

# Base font size in points at font_scale 1.0
BASE_FONT_SIZE = 8.0

# ---------------------------------------------------------------------------
# Theme (derived from the system palette)
# ---------------------------------------------------------------------------


def theme(system_palette=SystemPalette.DARK):
    """Matplotlib colors for the chart chrome of a system palette."""
    return {
        "bg": to_mpl(system_palette.pick(SystemColor.BACKGROUND)),
        "text": to_mpl(system_palette.pick(SystemColor.FOREGROUND)),
        "surface": to_mpl(system_palette.pick(SystemColor.LIGHT_BACKGROUND)),
        "border": to_mpl(system_palette.pick(SystemColor.LIGHT_FOREGROUND)),
        "text_dim": to_mpl(system_palette.pick(SystemColor.MIDDLE)),
    }


def new_canvas(width, height, system_palette=SystemPalette.DARK):
    """Create a figure whose data coordinates are pixels, origin top-left.

    The y axis grows downward so that coordinates produced by the region and
    bar helpers can be drawn without flipping.
    """
    colors = theme(system_palette)
    fig = plt.figure(figsize=(width / DPI, height / DPI), dpi=DPI, facecolor=colors["bg"])
    ax = fig.add_axes((0, 0, 1, 1))
    ax.set_facecolor(colors["bg"])
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect("equal")
    ax.axis("off")
    return fig, ax


def outlined(foreground):
    """Text stroke for readability on top of colored fills."""
    return [pe.withStroke(linewidth=2, foreground=foreground)]


def save(fig, path, system_palette=SystemPalette.DARK):
    """Save a figure as PNG at canvas resolution and close it."""
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fig.savefig(path, dpi=DPI, facecolor=theme(system_palette)["bg"])
    plt.close(fig)
    print(f"  {os.path.relpath(os.path.abspath(path))}")
