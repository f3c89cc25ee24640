"""Oblique "2-to-1" projection used to give flat map data a pseudo-3D look.

The projection is a fixed linear map: each source axis (X, Y, Z) is sent to a
basis vector in the drawing plane, plus an origin offset.  With the 2-to-1
convention a step along X or Y moves 2 pixels sideways for every pixel of
rise, the classic pixel-art isometric look.
"""

import logging
import math

import numpy as np

logger = logging.getLogger(__name__)

# Overall scale of the projected drawing
_SIZE = 0.5

# Depth component shared by all three basis vectors
_DEPTH = -1.0 / (2.0 * math.sqrt(2.0))

# Columns are the images of the X, Y and Z source axes
TWO_TO_ONE_BASIS = _SIZE * np.array(
    [
        [1.0, -1.0, 0.0],
        [0.5, 0.5, 1.0],
        [_DEPTH, _DEPTH, _DEPTH],
    ]
)

TWO_TO_ONE_ORIGIN = np.zeros(3)


def project(point, basis, origin):
    """Apply basis (3x3, columns = axis images) and origin to a 3-D point."""
    result = np.asarray(basis, dtype=np.float64) @ np.asarray(point, dtype=np.float64)
    result = result + np.asarray(origin, dtype=np.float64)
    return (float(result[0]), float(result[1]), float(result[2]))


def project_oblique(x, y, z=0.0):
    """Project a point with the 2-to-1 oblique basis."""
    return project((x, y, z), TWO_TO_ONE_BASIS, TWO_TO_ONE_ORIGIN)


def project_regions(regions, oblique=False):
    """Project every polygon of a name -> points mapping onto the plane z = 0.

    When oblique is false the coordinates pass through unchanged (copied into
    fresh lists so callers may mutate the result).
    """
    logger.debug("Computing projected regions (oblique: %s)", oblique)
    if not oblique:
        return {name: [(x, y) for x, y in points] for name, points in regions.items()}

    projected = {}
    for name, points in regions.items():
        path = []
        for x, y in points:
            new_x, new_y, _new_z = project_oblique(x, y, 0.0)
            path.append((new_x, new_y))
        projected[name] = path
    return projected
