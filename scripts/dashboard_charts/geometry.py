"""Planar polygon helpers: bounds, signed area, centroid.

All functions work on any numeric type with the needed operators (int, float,
fractions.Fraction, numpy scalars).  Polygons are stored open: the first point
is not repeated at the end, and the ring is closed here when needed.

Area sign: a polygon listed clockwise in a y-up frame, which is
counter-clockwise on screen where y grows downward, has positive area.
"""

from .errors import DegenerateGeometryError, EmptyGeometryError


def bounds_of(elements):
    """Return (min, max) of a non-empty sequence in a single scan."""
    iterator = iter(elements)
    try:
        low = high = next(iterator)
    except StopIteration:
        raise EmptyGeometryError("cannot compute bounds of an empty sequence") from None
    for element in iterator:
        if element < low:
            low = element
        if element > high:
            high = element
    return (low, high)


def closed_ring(points):
    """Return the points with the first one appended at the end."""
    points = list(points)
    if not points:
        raise EmptyGeometryError("cannot close an empty polygon")
    return points + points[:1]


def _edges(points):
    """Yield (x1, y1, x2, y2, cross) for every edge of the closed ring."""
    ring = closed_ring(points)
    for (x1, y1), (x2, y2) in zip(ring, ring[1:]):
        yield x1, y1, x2, y2, x2 * y1 - x1 * y2


def area_of(points):
    """Signed area of an open polygon (shoelace formula)."""
    total = 0
    for _x1, _y1, _x2, _y2, cross in _edges(points):
        total = total + cross
    return total / 2


def centroid_of(points):
    """Centroid (cx, cy) of an open polygon.

    Raises DegenerateGeometryError when the polygon has zero area (a single
    point, two points, or collinear points), since the formula divides by it.
    """
    cx = 0
    cy = 0
    doubled_area = 0
    for x1, y1, x2, y2, cross in _edges(points):
        cx = cx + (x1 + x2) * cross
        cy = cy + (y1 + y2) * cross
        doubled_area = doubled_area + cross
    if doubled_area == 0:
        raise DegenerateGeometryError("polygon has zero area, centroid is undefined")
    area = doubled_area / 2
    return (cx / (6 * area), cy / (6 * area))


def bounding_box_center(points):
    """Center of the axis-aligned bounding box of a polygon."""
    points = list(points)
    if not points:
        raise EmptyGeometryError("cannot compute the bounding box of an empty polygon")
    min_x, max_x = bounds_of(x for x, _ in points)
    min_y, max_y = bounds_of(y for _, y in points)
    return ((min_x + max_x) / 2, (min_y + max_y) / 2)
