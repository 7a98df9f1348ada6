"""Tests for splitter trimming."""

from shapely.geometry import LineString, Polygon

from polyslice.trim import trim_line


def _square() -> Polygon:
    return Polygon([(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)])


class TestTrimLine:
    """Tests for trim_line()."""

    def test_exterior_endpoints_kept(self):
        line = LineString([(5, 15), (5, -15)])
        result = trim_line(_square(), line)
        assert result.coords[:] == [(5.0, 15.0), (5.0, -15.0)]

    def test_leading_interior_points_removed(self):
        line = LineString([(5, 5), (6, 6), (5, 15), (5, -15)])
        result = trim_line(_square(), line)
        assert result.coords[:] == [(5.0, 15.0), (5.0, -15.0)]

    def test_trailing_interior_points_removed(self):
        line = LineString([(5, 15), (5, -15), (4, 4)])
        result = trim_line(_square(), line)
        assert result.coords[:] == [(5.0, 15.0), (5.0, -15.0)]

    def test_interior_middle_points_kept(self):
        """Only leading and trailing runs are trimmed."""
        line = LineString([(-2, 4), (4, 6), (6, 3), (12, 5)])
        result = trim_line(_square(), line)
        assert len(result.coords) == 4

    def test_both_endpoints_inside(self):
        assert trim_line(_square(), LineString([(2, 2), (8, 8)])) is None

    def test_single_point_left(self):
        line = LineString([(2, 2), (20, 20), (8, 8)])
        assert trim_line(_square(), line) is None

    def test_boundary_point_is_trimmed(self):
        line = LineString([(0, 5), (-5, 5)])
        assert trim_line(_square(), line) is None

    def test_input_not_modified(self):
        line = LineString([(5, 5), (5, 15), (5, -15)])
        trim_line(_square(), line)
        assert len(line.coords) == 3

    def test_z_values_dropped(self):
        line = LineString([(5, 5, 1), (5, 15, 2), (5, -15, 3)])
        result = trim_line(_square(), line)

        assert not result.has_z
        assert result.coords[:] == [(5.0, 15.0), (5.0, -15.0)]
