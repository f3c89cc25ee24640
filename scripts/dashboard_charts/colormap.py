"""Continuous value-to-color mapping built from a discrete palette.

Stops are decoded from sRGB to linear light, interpolated linearly there, and
encoded back to 8-bit sRGB.  Interpolating in linear light keeps the midpoint
between two stops at half their brightness instead of visibly darker.
"""

import logging
import math

import numpy as np
from matplotlib.colors import ListedColormap

from .errors import InvalidBoundsError, InvalidPaletteError
from .palettes import ColormapType

logger = logging.getLogger(__name__)

DEFAULT_COLORMAP = ColormapType.BLUES


# ---------------------------------------------------------------------------
# sRGB transfer functions (IEC 61966-2-1)
# ---------------------------------------------------------------------------


def srgb_to_linear(values):
    """Decode sRGB values in [0, 1] to linear light."""
    values = np.asarray(values, dtype=np.float64)
    return np.where(
        values <= 0.04045,
        values / 12.92,
        np.power((values + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(values):
    """Encode linear light in [0, 1] to sRGB values in [0, 1]."""
    values = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)
    return np.where(
        values <= 0.0031308,
        values * 12.92,
        1.055 * np.power(values, 1 / 2.4) - 0.055,
    )


def _to_bytes(srgb):
    return np.clip(np.rint(srgb * 255.0), 0, 255).astype(np.uint8)


# ---------------------------------------------------------------------------
# Colormap
# ---------------------------------------------------------------------------


class Colormap:
    """Map scalars in [vmin, vmax] onto a gradient through a palette's stops.

    Values outside the range are clamped to the end stops, and NaN maps to
    the first stop so that missing readings show as the "coldest" color
    rather than aborting a render.
    """

    def __init__(self, palette, vmin, vmax, reverse=False):
        vmin = float(vmin)
        vmax = float(vmax)
        if not (math.isfinite(vmin) and math.isfinite(vmax)):
            raise InvalidBoundsError(f"colormap bounds must be finite, got ({vmin}, {vmax})")
        if vmin == vmax:
            raise InvalidBoundsError(f"colormap bounds are equal ({vmin}, {vmax})")

        if isinstance(palette, ColormapType):
            self._name = palette.value
            stops = palette.stops
        else:
            self._name = "custom"
            stops = tuple(tuple(stop) for stop in palette)
        if not stops:
            raise InvalidPaletteError("palette has no color stops")
        if reverse:
            stops = stops[::-1]

        self._stops = stops
        self._vmin = vmin
        self._vmax = vmax
        self._reversed = bool(reverse)
        self._linear = srgb_to_linear(np.array(stops, dtype=np.float64) / 255.0)
        self._positions = np.linspace(0.0, 1.0, len(stops))

    @classmethod
    def from_name(cls, name, vmin, vmax, reverse=False):
        """Build a colormap from a palette name as found in configuration."""
        colormap_type = DEFAULT_COLORMAP if name is None else ColormapType.from_name(name)
        return cls(colormap_type, vmin, vmax, reverse=reverse)

    def __repr__(self):
        return (
            f"Colormap({self._name!r}, {self._vmin}, {self._vmax}, "
            f"reversed={self._reversed})"
        )

    @property
    def name(self):
        return self._name

    @property
    def bounds(self):
        return (self._vmin, self._vmax)

    @property
    def reversed(self):
        return self._reversed

    @property
    def stops(self):
        return self._stops

    def position(self, value):
        """Normalized gradient position of a value, clamped to [0, 1]."""
        t = (float(value) - self._vmin) / (self._vmax - self._vmin)
        if math.isnan(t):
            return 0.0
        return min(max(t, 0.0), 1.0)

    def _sample(self, positions):
        """Return an (N, 3) uint8 array of colors at gradient positions."""
        positions = np.asarray(positions, dtype=np.float64)
        linear = np.stack(
            [np.interp(positions, self._positions, self._linear[:, c]) for c in range(3)],
            axis=-1,
        )
        return _to_bytes(linear_to_srgb(linear))

    def get_color_rgb_bytes(self, value):
        """Color for a value as an 8-bit (R, G, B) tuple."""
        r, g, b = self._sample([self.position(value)])[0]
        return (int(r), int(g), int(b))

    def get_color(self, value):
        """Color for a value as a matplotlib (R, G, B) float tuple."""
        r, g, b = self.get_color_rgb_bytes(value)
        return (r / 255.0, g / 255.0, b / 255.0)

    def to_matplotlib(self, n=256):
        """Sample the gradient into a matplotlib ListedColormap."""
        colors = self._sample(np.linspace(0.0, 1.0, n)) / 255.0
        logger.debug("Sampled colormap %s into %d entries", self._name, n)
        return ListedColormap(colors, name=self._name)
