"""Stepped gradient bars: a vertical colorbar legend and a horizontal loadbar.

Both split a pixel rectangle into N equal bands (default 61, enough for a
smooth-looking gradient at dashboard sizes) and color each band through a
Colormap.  They only compute geometry; render.draw_bar hands the result to
matplotlib.

Band edges are computed with integer arithmetic, offset + i * size // N, so
the bands tile the rectangle exactly: no gaps, no overlaps, and the last
band ends on the rectangle's far edge.
"""

import logging
import math
from typing import NamedTuple

from .errors import InvalidBoundsError

logger = logging.getLogger(__name__)

DEFAULT_STEPS = 61
DEFAULT_LABEL_COUNT = 4

# Horizontal gap between a colorbar and its tick labels
LABEL_GAP = 5


class Rect(NamedTuple):
    """Axis-aligned pixel rectangle; y grows downward."""

    x: int
    y: int
    width: int
    height: int


class BarSegment(NamedTuple):
    """One colored band of a bar."""

    rect: Rect
    value: float
    color: tuple


class BarLabel(NamedTuple):
    """A tick label anchored at its left-center point."""

    position: tuple
    text: str


def _band_edges(offset, size, steps):
    """Pixel edges of steps equal bands covering [offset, offset + size]."""
    return [offset + i * size // steps for i in range(steps + 1)]


def _border(position, size):
    x, y = position
    width, height = size
    return Rect(x - 1, y - 1, width + 2, height + 2)


class Colorbar:
    """Vertical legend bar: maximum at the top, minimum at the bottom.

    Every (steps // label_count)-th band, counting from the top, carries a
    label with its value at the given precision followed by the unit.
    """

    def __init__(
        self,
        position,
        size,
        colormap,
        bounds=None,
        precision=0,
        unit="",
        steps=DEFAULT_STEPS,
        label_count=DEFAULT_LABEL_COUNT,
    ):
        if steps < 2:
            raise ValueError(f"a colorbar needs at least 2 steps, got {steps}")
        if label_count < 1:
            raise ValueError(f"label count must be positive, got {label_count}")
        self.position = (int(position[0]), int(position[1]))
        self.size = (int(size[0]), int(size[1]))
        self.colormap = colormap
        self.bounds = tuple(bounds) if bounds is not None else colormap.bounds
        self.precision = precision
        self.unit = unit
        self.steps = steps
        self.label_count = label_count

    def value_at(self, index):
        """Value shown by the index-th band from the top."""
        low, high = self.bounds
        return low + (self.steps - index - 1) * (high - low) / (self.steps - 1)

    def format_value(self, value):
        return f"{value:.{self.precision}f}{self.unit}"

    def segments(self):
        x, y = self.position
        width, height = self.size
        edges = _band_edges(y, height, self.steps)
        segments = []
        for i in range(self.steps):
            value = self.value_at(i)
            rect = Rect(x, edges[i], width, edges[i + 1] - edges[i])
            segments.append(BarSegment(rect, value, self.colormap.get_color_rgb_bytes(value)))
        return segments

    def labels(self):
        x, y = self.position
        width, height = self.size
        edges = _band_edges(y, height, self.steps)
        label_step = max(self.steps // self.label_count, 1)
        labels = []
        for i in range(0, self.steps, label_step):
            center_y = (edges[i] + edges[i + 1]) / 2
            labels.append(
                BarLabel((x + width + LABEL_GAP, center_y), self.format_value(self.value_at(i)))
            )
        return labels

    def border(self):
        return _border(self.position, self.size)


class Loadbar:
    """Horizontal gauge filled left to right in proportion to value / maximum.

    Band i is drawn only while i / steps is below value / maximum, so a half-full
    load lights up the left half of the bands and leaves the rest as
    background.  NaN or non-positive values draw nothing.
    """

    def __init__(self, position, size, colormap, maximum, value, steps=DEFAULT_STEPS):
        if steps < 1:
            raise ValueError(f"a loadbar needs at least 1 step, got {steps}")
        maximum = float(maximum)
        if not math.isfinite(maximum) or maximum <= 0:
            raise InvalidBoundsError(f"loadbar maximum must be positive, got {maximum}")
        self.position = (int(position[0]), int(position[1]))
        self.size = (int(size[0]), int(size[1]))
        self.colormap = colormap
        self.maximum = maximum
        self.value = float(value)
        self.steps = steps

    def filled_steps(self):
        """Number of bands lit by the current value."""
        if math.isnan(self.value) or self.value <= 0:
            return 0
        return sum(1 for i in range(self.steps) if i * self.maximum < self.value * self.steps)

    def value_at(self, index):
        return index * self.maximum / self.steps

    def segments(self):
        x, y = self.position
        width, height = self.size
        edges = _band_edges(x, width, self.steps)
        segments = []
        for i in range(self.filled_steps()):
            value = self.value_at(i)
            rect = Rect(edges[i], y, edges[i + 1] - edges[i], height)
            segments.append(BarSegment(rect, value, self.colormap.get_color_rgb_bytes(value)))
        logger.debug("Loadbar %.2f/%.2f: %d of %d bands", self.value, self.maximum, len(segments), self.steps)
        return segments

    def labels(self):
        return []

    def border(self):
        return _border(self.position, self.size)
