"""Geometry kernel used by the slicing stages.

The slicing algorithm only needs six geometric capabilities. They are
collected in :class:`GeometryKernel` so that another engine (exact
arithmetic, a different boolean-op implementation, a test fake) can be
passed to any stage through its ``kernel`` argument. :class:`ShapelyKernel`
is the implementation used by default.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

import numpy as np
import shapely
from shapely.errors import GEOSException
from shapely.geometry import LineString, MultiLineString, Point, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.strtree import STRtree

from .core.errors import KernelError
from .core.geometry_utils import polygon_parts, to_coordinate_distance
from .core.types import Units


@runtime_checkable
class GeometryKernel(Protocol):
    """Capabilities the slicing stages consume.

    Any method may raise :class:`KernelError` when the underlying engine
    cannot handle its input.
    """

    def contains(self, point: Point, polygon: Polygon) -> bool:
        """Return True if ``point`` lies inside or on the boundary of ``polygon``."""
        ...

    def offset(self, line: LineString, distance: float, units: Units) -> LineString:
        """Return a copy of ``line`` shifted sideways by ``distance``.

        Positive distances offset to the right of the line's direction of
        travel, negative ones to the left. The result keeps the input's
        direction. Raises :class:`KernelError` if no single offset line can be
        formed.
        """
        ...

    def difference(self, a: BaseGeometry, b: BaseGeometry) -> BaseGeometry:
        """Return ``a`` minus ``b``."""
        ...

    def resolve_self_intersections(self, polygon: Polygon) -> List[Polygon]:
        """Split a possibly self-intersecting ring into simple polygons."""
        ...

    def boundary_overlap(self, polygon: Polygon, line: LineString, tolerance: float) -> bool:
        """Return True if the polygon boundary shares a segment with ``line``.

        ``tolerance`` is in coordinate units.
        """
        ...

    def line_intersections(self, polygon: Polygon, line: LineString) -> List[Point]:
        """Return the distinct points where ``line`` crosses the polygon boundary."""
        ...


class ShapelyKernel:
    """:class:`GeometryKernel` backed by Shapely 2.x and NumPy.

    The kernel holds no state; one instance can be shared freely. GEOS
    failures are re-raised as :class:`KernelError`.

    Args:
        mitre_limit: Mitre ratio limit for offset joins. Sharper corners are
            bevelled.
    """

    def __init__(self, mitre_limit: float = 5.0):
        self.mitre_limit = mitre_limit

    def contains(self, point: Point, polygon: Polygon) -> bool:
        try:
            return bool(shapely.covers(polygon, point))
        except GEOSException as e:
            raise KernelError("contains", str(e))

    def offset(self, line: LineString, distance: float, units: Units = Units.PLANAR) -> LineString:
        coord_distance = to_coordinate_distance(distance, units)
        try:
            # Shapely offsets positive distances to the left.
            result = line.offset_curve(
                -coord_distance,
                join_style="mitre",
                mitre_limit=self.mitre_limit,
            )
        except GEOSException as e:
            raise KernelError("offset", str(e))

        if isinstance(result, MultiLineString) and len(result.geoms) == 1:
            result = result.geoms[0]
        if not isinstance(result, LineString) or result.is_empty:
            raise KernelError("offset", f"offset produced {result.geom_type}, expected LineString")
        if len(result.coords) < 2:
            raise KernelError("offset", "offset line has fewer than 2 coordinates")
        return result

    def difference(self, a: BaseGeometry, b: BaseGeometry) -> BaseGeometry:
        try:
            return shapely.difference(a, b)
        except GEOSException as e:
            raise KernelError("difference", str(e))

    def resolve_self_intersections(self, polygon: Polygon) -> List[Polygon]:
        if polygon.is_empty:
            return []
        try:
            # Node the ring at every crossing, then rebuild the enclosed faces.
            noded = shapely.node(polygon.exterior)
            faces = shapely.polygonize(shapely.get_parts(noded))
        except GEOSException as e:
            raise KernelError("resolve_self_intersections", str(e))
        return polygon_parts(faces)

    def boundary_overlap(self, polygon: Polygon, line: LineString, tolerance: float) -> bool:
        rings = [polygon.exterior, *polygon.interiors]
        ring_coords = np.vstack([np.asarray(r.coords)[:, :2] for r in rings])
        poly_starts, poly_ends = _segments(ring_coords, breaks=_ring_breaks(rings))
        line_starts, line_ends = _segments(np.asarray(line.coords)[:, :2])
        if len(poly_starts) == 0 or len(line_starts) == 0:
            return False

        # Only segment pairs whose tolerance-grown envelopes meet can overlap.
        tree = STRtree(shapely.linestrings(np.stack([poly_starts, poly_ends], axis=1)))
        lo = np.minimum(line_starts, line_ends) - tolerance
        hi = np.maximum(line_starts, line_ends) + tolerance
        line_idx, poly_idx = tree.query(shapely.box(lo[:, 0], lo[:, 1], hi[:, 0], hi[:, 1]))
        if len(line_idx) == 0:
            return False

        ls, le = line_starts[line_idx], line_ends[line_idx]
        ps, pe = poly_starts[poly_idx], poly_ends[poly_idx]

        # A splitter segment lying along a polygon edge...
        line_on_poly = (
            (_point_segment_distances(ls, ps, pe) <= tolerance)
            & (_point_segment_distances(le, ps, pe) <= tolerance)
        )
        # ...or a polygon edge lying along a splitter segment.
        poly_on_line = (
            (_point_segment_distances(ps, ls, le) <= tolerance)
            & (_point_segment_distances(pe, ls, le) <= tolerance)
        )
        return bool(np.any(line_on_poly | poly_on_line))

    def line_intersections(self, polygon: Polygon, line: LineString) -> List[Point]:
        try:
            crossing = shapely.intersection(polygon.boundary, line)
        except GEOSException as e:
            raise KernelError("line_intersections", str(e))

        points: List[Point] = []
        seen = set()
        for part in shapely.get_parts(crossing):
            # Collinear stretches are shared edges, not crossings.
            if part.geom_type != "Point" or part.is_empty:
                continue
            key = (part.x, part.y)
            if key not in seen:
                seen.add(key)
                points.append(part)
        return points


def _ring_breaks(rings) -> List[int]:
    breaks = []
    total = 0
    for ring in rings:
        total += len(ring.coords)
        breaks.append(total)
    return breaks


def _segments(coords: np.ndarray, breaks: Optional[List[int]] = None):
    """Return (starts, ends) of the non-degenerate segments of ``coords``.

    ``breaks`` lists the cumulative end index of each ring when several rings
    are stacked into one array, so no segment joins two rings.
    """
    if len(coords) < 2:
        empty = np.empty((0, 2))
        return empty, empty

    starts = coords[:-1]
    ends = coords[1:]
    keep = np.ones(len(starts), dtype=bool)
    if breaks:
        for b in breaks[:-1]:
            keep[b - 1] = False
    keep &= np.any(starts != ends, axis=1)
    return starts[keep], ends[keep]


def _point_segment_distances(
    points: np.ndarray,
    starts: np.ndarray,
    ends: np.ndarray,
) -> np.ndarray:
    """Distance from ``points[i]`` to segment ``(starts[i], ends[i])``, row by row."""
    direction = ends - starts
    length_sq = np.einsum("ij,ij->i", direction, direction)
    length_sq = np.where(length_sq > 0, length_sq, 1.0)

    t = np.clip(np.einsum("ij,ij->i", points - starts, direction) / length_sq, 0.0, 1.0)
    projected = starts + t[:, None] * direction
    return np.linalg.norm(points - projected, axis=1)


_DEFAULT_KERNEL = ShapelyKernel()


def default_kernel() -> ShapelyKernel:
    """Return the shared :class:`ShapelyKernel` instance."""
    return _DEFAULT_KERNEL


__all__ = [
    'GeometryKernel',
    'ShapelyKernel',
    'default_kernel',
]
