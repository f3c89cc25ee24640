"""Exception types raised by dashboard_charts."""


class DashboardChartsError(Exception):
    """Base class for every error raised by this package."""


class EmptyGeometryError(DashboardChartsError, ValueError):
    """A geometry function received no points."""


class DegenerateGeometryError(DashboardChartsError, ValueError):
    """A shape has no area or extent, or margins leave no room on the canvas."""


class InvalidBoundsError(DashboardChartsError, ValueError):
    """A value range is empty (min == max) or not finite."""


class InvalidPaletteError(DashboardChartsError, ValueError):
    """A palette has no color stops."""


class ConfigurationError(DashboardChartsError):
    """A configuration document is missing a field or has a bad value."""
