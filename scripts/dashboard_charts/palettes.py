"""Constant color tables: colormap stops, series colors, and system colors.

Every table is an immutable tuple of 8-bit (R, G, B) triples.  The enums below
are the only way to reach them; each member maps to exactly one table.
"""

import enum

from .errors import ConfigurationError

# ---------------------------------------------------------------------------
# Colormap stops (sequential palettes from https://colorbrewer2.org/)
# ---------------------------------------------------------------------------

PALETTE_REDS = (
    (255, 245, 240),
    (254, 224, 210),
    (252, 187, 161),
    (252, 146, 114),
    (251, 106, 74),
    (239, 59, 44),
    (203, 24, 29),
    (165, 15, 21),
    (103, 0, 13),
)

PALETTE_BLUES = (
    (247, 251, 255),
    (222, 235, 247),
    (198, 219, 239),
    (158, 202, 225),
    (107, 174, 214),
    (66, 146, 198),
    (33, 113, 181),
    (8, 81, 156),
    (8, 48, 107),
)

PALETTE_GREENS = (
    (247, 252, 245),
    (229, 245, 224),
    (199, 233, 192),
    (161, 217, 155),
    (116, 196, 118),
    (65, 171, 93),
    (35, 139, 69),
    (0, 109, 44),
    (0, 68, 27),
)

PALETTE_GRAYS = (
    (255, 255, 255),
    (240, 240, 240),
    (217, 217, 217),
    (189, 189, 189),
    (150, 150, 150),
    (115, 115, 115),
    (82, 82, 82),
    (37, 37, 37),
    (0, 0, 0),
)

PALETTE_ORANGES = (
    (255, 245, 235),
    (254, 230, 206),
    (253, 208, 162),
    (253, 174, 107),
    (253, 141, 60),
    (241, 105, 19),
    (217, 72, 1),
    (166, 54, 3),
    (127, 39, 4),
)

PALETTE_VIOLETS = (
    (252, 251, 253),
    (239, 237, 245),
    (218, 218, 235),
    (188, 189, 220),
    (158, 154, 200),
    (128, 125, 186),
    (106, 81, 163),
    (84, 39, 143),
    (63, 0, 125),
)

# Diverging: blue (cold) through white to red (hot)
PALETTE_COOLWARM = (
    (5, 48, 97),
    (33, 102, 172),
    (5, 113, 176),
    (67, 147, 195),
    (103, 169, 207),
    (146, 197, 222),
    (209, 229, 240),
    (247, 247, 247),
    (253, 219, 199),
    (244, 165, 130),
    (239, 138, 98),
    (214, 96, 77),
    (202, 0, 32),
    (178, 24, 43),
    (103, 0, 31),
)

# Green / yellow / red traffic light
PALETTE_STATUS = (
    (77, 175, 74),
    (255, 255, 51),
    (228, 26, 28),
)

# ---------------------------------------------------------------------------
# Series colors (qualitative palettes from https://colorbrewer2.org/)
# ---------------------------------------------------------------------------

PALETTE_COLORBREWER_SET1 = (
    (228, 26, 28),
    (55, 126, 184),
    (77, 175, 74),
    (152, 78, 163),
    (255, 127, 0),
    (255, 255, 51),
    (166, 86, 40),
    (247, 129, 191),
    (153, 153, 153),
)

PALETTE_COLORBREWER_SET2 = (
    (102, 194, 165),
    (252, 141, 98),
    (141, 160, 203),
    (231, 138, 195),
    (166, 216, 84),
    (255, 217, 47),
    (229, 196, 148),
    (179, 179, 179),
)

PALETTE_COLORBREWER_SET3 = (
    (141, 211, 199),
    (255, 255, 179),
    (190, 186, 218),
    (251, 128, 114),
    (128, 177, 211),
    (253, 180, 98),
    (179, 222, 105),
    (252, 205, 229),
    (217, 217, 217),
    (188, 128, 189),
    (204, 235, 197),
    (255, 237, 111),
)

# ---------------------------------------------------------------------------
# System colors, indexed by SystemColor
# ---------------------------------------------------------------------------

PALETTE_DARK_THEME = (
    (0, 0, 0),
    (255, 255, 255),
    (32, 32, 32),
    (192, 192, 192),
    (128, 128, 128),
)

PALETTE_LIGHT_THEME = (
    (255, 255, 255),
    (0, 0, 0),
    (192, 192, 192),
    (32, 32, 32),
    (128, 128, 128),
)


def _lookup(enum_cls, name):
    """Find an enum member by its configuration name, ignoring case."""
    if isinstance(name, enum_cls):
        return name
    wanted = str(name).strip().lower()
    for member in enum_cls:
        if member.value.lower() == wanted:
            return member
    choices = ", ".join(member.value for member in enum_cls)
    raise ConfigurationError(
        f"unknown {enum_cls.__name__} '{name}' (expected one of: {choices})"
    )


class ColormapType(enum.Enum):
    """Named gradient palettes for value-to-color mapping."""

    COOL_WARM = "CoolWarm"
    BLUES = "Blues"
    REDS = "Reds"
    GREENS = "Greens"
    ORANGES = "Oranges"
    VIOLETS = "Violets"
    GRAYS = "Grays"
    STATUS = "Status"

    @classmethod
    def from_name(cls, name):
        return _lookup(cls, name)

    @property
    def stops(self):
        return _COLORMAP_STOPS[self]


_COLORMAP_STOPS = {
    ColormapType.COOL_WARM: PALETTE_COOLWARM,
    ColormapType.BLUES: PALETTE_BLUES,
    ColormapType.REDS: PALETTE_REDS,
    ColormapType.GREENS: PALETTE_GREENS,
    ColormapType.ORANGES: PALETTE_ORANGES,
    ColormapType.VIOLETS: PALETTE_VIOLETS,
    ColormapType.GRAYS: PALETTE_GRAYS,
    ColormapType.STATUS: PALETTE_STATUS,
}


class SeriesPalette(enum.Enum):
    """Qualitative palettes for telling series (or tagged regions) apart."""

    COLORBREWER_SET1 = "ColorbrewerSet1"
    COLORBREWER_SET2 = "ColorbrewerSet2"
    COLORBREWER_SET3 = "ColorbrewerSet3"

    @classmethod
    def from_name(cls, name):
        return _lookup(cls, name)

    @property
    def colors(self):
        return _SERIES_COLORS[self]

    def pick(self, index):
        """Return the color for the index-th series, wrapping around."""
        colors = self.colors
        return colors[index % len(colors)]


_SERIES_COLORS = {
    SeriesPalette.COLORBREWER_SET1: PALETTE_COLORBREWER_SET1,
    SeriesPalette.COLORBREWER_SET2: PALETTE_COLORBREWER_SET2,
    SeriesPalette.COLORBREWER_SET3: PALETTE_COLORBREWER_SET3,
}


class SystemColor(enum.IntEnum):
    """Role of a color in the chart chrome (text, borders, background)."""

    BACKGROUND = 0
    FOREGROUND = 1
    LIGHT_BACKGROUND = 2
    LIGHT_FOREGROUND = 3
    MIDDLE = 4


class SystemPalette(enum.Enum):
    """Dark or light theme for chart chrome."""

    DARK = "Dark"
    LIGHT = "Light"

    @classmethod
    def from_name(cls, name):
        return _lookup(cls, name)

    def pick(self, color):
        table = PALETTE_DARK_THEME if self is SystemPalette.DARK else PALETTE_LIGHT_THEME
        return table[int(color)]


def to_mpl(rgb):
    """Convert an 8-bit (R, G, B) triple to a matplotlib float color."""
    return tuple(channel / 255.0 for channel in rgb)
