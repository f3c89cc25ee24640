"""Shared fixtures for dashboard_charts tests."""

import matplotlib
import pytest

matplotlib.use("Agg")

from dashboard_charts.colormap import Colormap  # noqa: E402
from dashboard_charts.palettes import ColormapType  # noqa: E402


@pytest.fixture
def blues():
    return Colormap(ColormapType.BLUES, 0.0, 100.0)


@pytest.fixture
def two_regions():
    """Two regions whose union bounding box spans 200 x 100."""
    return {
        "west": [(0, 0), (0, 100), (100, 100), (100, 0)],
        "east": [(100, 0), (100, 50), (200, 50), (200, 0)],
    }
