"""Tests for polygon bounds, area and centroid."""

from fractions import Fraction

import pytest

from dashboard_charts.errors import DegenerateGeometryError, EmptyGeometryError
from dashboard_charts.geometry import (
    area_of,
    bounding_box_center,
    bounds_of,
    centroid_of,
    closed_ring,
)

L_SHAPE = [(0, 0), (0, 2), (1, 2), (1, 1), (2, 1), (2, 0)]


def test_bounds_of_list():
    assert bounds_of([1, 4, 2, 5, 7, 2, 6, -2, 6, -1]) == (-2, 7)


def test_bounds_of_single_element():
    assert bounds_of([3.5]) == (3.5, 3.5)


def test_bounds_of_generator():
    assert bounds_of(x * x for x in range(-3, 3)) == (0, 9)


def test_bounds_of_empty_fails():
    with pytest.raises(EmptyGeometryError):
        bounds_of([])


def test_area_of_square():
    assert area_of([(0, 0), (0, 1), (1, 1), (1, 0)]) == 1


def test_area_of_triangle():
    assert area_of([(0, 0), (1, 1), (2, 0)]) == 1


def test_area_of_path():
    assert area_of(L_SHAPE) == 3


def test_area_sign_follows_winding():
    square = [(0, 0), (0, 1), (1, 1), (1, 0)]
    assert area_of(list(reversed(square))) == -1


def test_area_of_degenerate_polygons_is_zero():
    assert area_of([(4, 2)]) == 0
    assert area_of([(0, 0), (3, 3)]) == 0
    assert area_of([(0, 0), (1, 1), (2, 2)]) == 0


def test_area_of_empty_fails():
    with pytest.raises(EmptyGeometryError):
        area_of([])


def test_centroid_of_square():
    assert centroid_of([(0, 0), (0, 2), (2, 2), (2, 0)]) == (1, 1)


def test_centroid_of_triangle():
    cx, cy = centroid_of([(0, 0), (1, 1), (2, 0)])
    assert cx == pytest.approx(1.0)
    assert cy == pytest.approx(1 / 3)


def test_centroid_of_path_with_exact_fractions():
    path = [(Fraction(x), Fraction(y)) for x, y in L_SHAPE]
    assert centroid_of(path) == (Fraction(5, 6), Fraction(5, 6))


def test_centroid_does_not_depend_on_winding():
    square = [(1.0, 1.0), (1.0, 5.0), (3.0, 5.0), (3.0, 1.0)]
    assert centroid_of(square) == centroid_of(square[::-1]) == (2.0, 3.0)


def test_centroid_of_degenerate_polygon_fails():
    with pytest.raises(DegenerateGeometryError):
        centroid_of([(0, 0), (1, 1), (2, 2)])
    with pytest.raises(DegenerateGeometryError):
        centroid_of([(5, 5)])


def test_centroid_of_empty_fails():
    with pytest.raises(EmptyGeometryError):
        centroid_of([])


def test_closed_ring_repeats_first_point():
    assert closed_ring([(0, 0), (1, 0), (1, 1)]) == [(0, 0), (1, 0), (1, 1), (0, 0)]


def test_bounding_box_center():
    assert bounding_box_center([(0, 0), (4, 2), (2, 6)]) == (2, 3)
