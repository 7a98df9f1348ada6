"""Tests for core types and geometry helpers."""

import math

import pytest
from shapely.geometry import GeometryCollection, LineString, MultiPolygon, Point, Polygon

from polyslice.core.errors import KernelError, PolysliceError
from polyslice.core.geometry_utils import polygon_parts, remove_holes, to_coordinate_distance
from polyslice.core.types import Direction, Units, earth_radius


def _box(x0, y0, x1, y1) -> Polygon:
    return Polygon([(x0, y0), (x1, y0), (x1, y1), (x0, y1)])


class TestDirection:

    def test_signs(self):
        assert Direction.UPPER.sign == 1
        assert Direction.LOWER.sign == -1

    def test_labels(self):
        assert Direction.UPPER.label == "upper"
        assert Direction.LOWER.label == "lower"


class TestPolygonParts:

    def test_polygon(self):
        poly = _box(0, 0, 1, 1)
        assert polygon_parts(poly) == [poly]

    def test_multipolygon(self):
        multi = MultiPolygon([_box(0, 0, 1, 1), _box(2, 0, 3, 1)])
        assert len(polygon_parts(multi)) == 2

    def test_collection_ignores_lines_and_points(self):
        collection = GeometryCollection([
            _box(0, 0, 1, 1),
            LineString([(0, 0), (5, 5)]),
            Point(3, 3),
            MultiPolygon([_box(2, 0, 3, 1), _box(4, 0, 5, 1)]),
        ])
        assert len(polygon_parts(collection)) == 3

    def test_empty(self):
        assert polygon_parts(Polygon()) == []
        assert polygon_parts(None) == []


class TestRemoveHoles:

    def test_hole_removed(self):
        poly = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)], holes=[[(4, 4), (5, 4), (5, 5), (4, 5)]])
        result = remove_holes(poly, preserve_holes=False)
        assert len(result.interiors) == 0
        assert result.area == pytest.approx(100.0)

    def test_hole_preserved(self):
        poly = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)], holes=[[(4, 4), (5, 4), (5, 5), (4, 5)]])
        assert remove_holes(poly, preserve_holes=True) is poly


class TestUnits:

    def test_planar_unchanged(self):
        assert to_coordinate_distance(0.25, Units.PLANAR) == 0.25

    def test_degrees_unchanged(self):
        assert to_coordinate_distance(0.25, Units.DEGREES) == 0.25

    def test_radians(self):
        assert to_coordinate_distance(math.pi, Units.RADIANS) == pytest.approx(180.0)

    @pytest.mark.parametrize("units,one_degree", [
        (Units.KILOMETERS, 111.19508),
        (Units.METERS, 111195.08),
        (Units.MILES, 69.09341),
        (Units.NAUTICAL_MILES, 60.04054),
    ])
    def test_lengths_to_degrees(self, units, one_degree):
        assert to_coordinate_distance(one_degree, units) == pytest.approx(1.0, rel=1e-5)

    def test_planar_has_no_earth_radius(self):
        with pytest.raises(ValueError):
            earth_radius(Units.PLANAR)


def test_kernel_error_message():
    error = KernelError("difference", "TopologyException")
    assert isinstance(error, PolysliceError)
    assert error.operation == "difference"
    assert str(error) == "Kernel operation 'difference' failed: TopologyException"
