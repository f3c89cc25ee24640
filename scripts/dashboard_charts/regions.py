"""Fit named geographic regions onto a fixed pixel canvas.

All regions share one bounding box and one scale factor, so their relative
sizes and shapes survive the mapping.  Any slack left over on the
unconstrained axis is split evenly on both sides to center the drawing.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import DegenerateGeometryError, EmptyGeometryError
from .geometry import bounding_box_center, bounds_of, centroid_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Region:
    """A named simple polygon, stored open (first point not repeated)."""

    name: str
    coordinates: tuple

    def __post_init__(self):
        coordinates = tuple((float(x), float(y)) for x, y in self.coordinates)
        if not coordinates:
            raise EmptyGeometryError(f"region '{self.name}' has no coordinates")
        object.__setattr__(self, "coordinates", coordinates)


@dataclass(frozen=True)
class Margins:
    """Pixels reserved on each side of the canvas (title, labels, legend)."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0


@dataclass(frozen=True)
class RegionTransform:
    """Uniform scale plus translation from region space to canvas pixels."""

    ratio: float
    min_x: float
    min_y: float
    offset_x: float
    offset_y: float

    def apply(self, x, y):
        return (
            self.offset_x + (x - self.min_x) * self.ratio,
            self.offset_y + (y - self.min_y) * self.ratio,
        )


def as_mapping(regions):
    """Accept either a name -> points mapping or an iterable of Region."""
    if isinstance(regions, Mapping):
        return regions
    return {region.name: region.coordinates for region in regions}


def regions_bounds(regions):
    """Shared (min_x, max_x, min_y, max_y) box across all regions."""
    regions = as_mapping(regions)
    xs = [x for points in regions.values() for x, _ in points]
    ys = [y for points in regions.values() for _, y in points]
    if not xs:
        raise EmptyGeometryError("no region coordinates to compute bounds from")
    min_x, max_x = bounds_of(xs)
    min_y, max_y = bounds_of(ys)
    return (min_x, max_x, min_y, max_y)


def compute_transform(regions, canvas, margins=None):
    """Compute the scale and offsets fitting all regions inside the canvas."""
    margins = margins or Margins()
    width, height = canvas
    min_x, max_x, min_y, max_y = regions_bounds(regions)

    effective_width = width - margins.left - margins.right
    effective_height = height - margins.top - margins.bottom
    if effective_width <= 0 or effective_height <= 0:
        raise DegenerateGeometryError(
            f"margins leave no room on a {width}x{height} canvas "
            f"({effective_width} x {effective_height} pixels)"
        )

    dx = max_x - min_x
    dy = max_y - min_y
    if dx == 0 and dy == 0:
        raise DegenerateGeometryError("regions collapse to a single point")
    if dx == 0:
        ratio = effective_height / dy
    elif dy == 0:
        ratio = effective_width / dx
    else:
        ratio = min(effective_width / dx, effective_height / dy)

    slack_x = effective_width - dx * ratio
    slack_y = effective_height - dy * ratio

    logger.debug(
        "Normalizing regions: bounds (%s, %s)-(%s, %s), ratio %.4f, slack (%.1f, %.1f)",
        min_x,
        min_y,
        max_x,
        max_y,
        ratio,
        slack_x,
        slack_y,
    )
    return RegionTransform(
        ratio=ratio,
        min_x=min_x,
        min_y=min_y,
        offset_x=margins.left + slack_x / 2.0,
        offset_y=margins.top + slack_y / 2.0,
    )


def normalize_regions(regions, canvas, margins=None):
    """Map every region into canvas pixels with one shared uniform scale."""
    regions = as_mapping(regions)
    transform = compute_transform(regions, canvas, margins)
    return {
        name: [transform.apply(x, y) for x, y in points]
        for name, points in regions.items()
    }


def region_label_position(points):
    """Where to write a region's value: its centroid, or box center if flat."""
    try:
        return centroid_of(points)
    except DegenerateGeometryError:
        logger.debug("Degenerate region, labelling at bounding box center")
        return bounding_box_center(points)
