"""Tests for band construction."""

import pytest
from shapely.geometry import LineString, Polygon

from polyslice.band import band_ring, build_band
from polyslice.core.config import SliceConfig
from polyslice.core.errors import KernelError
from polyslice.core.types import Direction, Units
from polyslice.kernel import ShapelyKernel


SPLITTER = LineString([(5, 15), (5, -15)])


class KinkedTrialsKernel(ShapelyKernel):
    """Reports the first ``kinked`` band trials as self-intersecting."""

    def __init__(self, kinked: int):
        super().__init__()
        self.kinked = kinked
        self.calls = 0

    def resolve_self_intersections(self, polygon):
        self.calls += 1
        parts = super().resolve_self_intersections(polygon)
        if self.calls <= self.kinked:
            return parts + parts
        return parts


class FailingOffsetKernel(ShapelyKernel):
    """Refuses to offset at the listed widths."""

    def __init__(self, failing_widths):
        super().__init__()
        self.failing_widths = set(failing_widths)

    def offset(self, line, distance, units=Units.PLANAR):
        if abs(distance) in self.failing_widths:
            raise KernelError("offset", "refused")
        return super().offset(line, distance, units)


class FailingResolveKernel(ShapelyKernel):
    """Raises from the first ``failing_calls`` self-intersection checks."""

    def __init__(self, failing_calls: int):
        super().__init__()
        self.failing_calls = failing_calls
        self.calls = 0

    def resolve_self_intersections(self, polygon):
        self.calls += 1
        if self.calls <= self.failing_calls:
            raise KernelError("resolve_self_intersections", "TopologyException")
        return super().resolve_self_intersections(polygon)


class TestBandRing:

    def test_ring_layout(self):
        offset = LineString([(6, 15), (6, -15)])
        band = band_ring(SPLITTER, offset)

        coords = band.exterior.coords[:]
        assert coords == [(5.0, 15.0), (5.0, -15.0), (6.0, -15.0), (6.0, 15.0), (5.0, 15.0)]
        assert band.area == pytest.approx(30.0)

    def test_z_values_dropped(self):
        line = LineString([(5, 15, 2), (5, -15, 3)])
        offset = LineString([(6, 15), (6, -15)])
        band = band_ring(line, offset)

        assert not band.has_z
        assert band.area == pytest.approx(30.0)


class TestBuildBand:
    """Tests for build_band()."""

    def test_upper_band_on_right_side(self):
        """Travelling south, the right side is west."""
        band = build_band(SPLITTER, Direction.UPPER)

        minx, miny, maxx, maxy = band.bounds
        assert minx == pytest.approx(4.99)
        assert maxx == pytest.approx(5.0)
        assert (miny, maxy) == (-15.0, 15.0)

    def test_lower_band_on_left_side(self):
        band = build_band(SPLITTER, Direction.LOWER)

        minx, _, maxx, _ = band.bounds
        assert minx == pytest.approx(5.0)
        assert maxx == pytest.approx(5.01)

    def test_band_is_single_ring(self):
        band = build_band(SPLITTER, Direction.UPPER)
        assert isinstance(band, Polygon)
        assert len(band.interiors) == 0
        assert band.exterior.coords[0] == band.exterior.coords[-1] == (5.0, 15.0)

    def test_largest_simple_width_accepted(self):
        kernel = KinkedTrialsKernel(kinked=0)
        band = build_band(SPLITTER, Direction.UPPER, kernel=kernel)

        assert kernel.calls == 1
        assert band.area == pytest.approx(30 * 0.01)

    def test_falls_through_to_second_width(self):
        """A self-intersecting 0.01 band gives way to the 0.001 band."""
        kernel = KinkedTrialsKernel(kinked=1)
        band = build_band(SPLITTER, Direction.UPPER, kernel=kernel)

        assert kernel.calls == 2
        assert band.area == pytest.approx(30 * 0.001)
        assert band.hausdorff_distance(SPLITTER) == pytest.approx(0.001)

    def test_last_width_used_when_none_is_simple(self):
        kernel = KinkedTrialsKernel(kinked=3)
        band = build_band(SPLITTER, Direction.UPPER, kernel=kernel)

        assert kernel.calls == 3
        assert band.area == pytest.approx(30 * 0.0001)

    def test_failed_offset_skipped(self):
        kernel = FailingOffsetKernel(failing_widths=[0.01])
        band = build_band(SPLITTER, Direction.LOWER, kernel=kernel)
        assert band.area == pytest.approx(30 * 0.001)

    def test_no_offset_possible(self):
        kernel = FailingOffsetKernel(failing_widths=[0.01, 0.001, 0.0001])
        assert build_band(SPLITTER, Direction.UPPER, kernel=kernel) is None

    def test_failed_resolve_skipped(self):
        kernel = FailingResolveKernel(failing_calls=1)
        band = build_band(SPLITTER, Direction.UPPER, kernel=kernel)
        assert band.area == pytest.approx(30 * 0.001)

    def test_no_resolve_possible(self):
        kernel = FailingResolveKernel(failing_calls=3)
        assert build_band(SPLITTER, Direction.UPPER, kernel=kernel) is None

    def test_custom_widths(self):
        config = SliceConfig(offset_scales=(0.5, 0.25))
        band = build_band(SPLITTER, Direction.UPPER, config=config)
        assert band.area == pytest.approx(30 * 0.5)

    def test_verbose_reports_trials(self, capsys):
        build_band(SPLITTER, Direction.UPPER, verbose=True)
        assert "upper band at width 0.01: 1 simple part(s)" in capsys.readouterr().out
