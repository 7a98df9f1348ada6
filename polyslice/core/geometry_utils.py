"""Common geometry manipulation utilities.

This module provides the small conversions shared by the slicing stages:
exploding kernel results into polygon parts, dropping holes and converting
band widths into coordinate distances.
"""

import math
from typing import List, Union

from shapely.geometry import Polygon, MultiPolygon, GeometryCollection
from shapely.geometry.base import BaseGeometry

from .types import Units, earth_radius


def polygon_parts(geometry: BaseGeometry) -> List[Polygon]:
    """Return the non-empty polygons contained in ``geometry``.

    A Polygon yields itself, a MultiPolygon its members and a
    GeometryCollection the polygons found among (possibly nested) members.
    Points and lines produced by boolean operations are ignored.

    Args:
        geometry: Result of a kernel operation

    Returns:
        List of polygons, in the order the geometry stores them

    Examples:
        >>> multi = MultiPolygon([poly1, poly2])
        >>> len(polygon_parts(multi))
        2
    """
    if geometry is None or geometry.is_empty:
        return []
    if isinstance(geometry, Polygon):
        return [geometry]
    if isinstance(geometry, MultiPolygon):
        return [p for p in geometry.geoms if not p.is_empty]
    if isinstance(geometry, GeometryCollection):
        parts: List[Polygon] = []
        for member in geometry.geoms:
            parts.extend(polygon_parts(member))
        return parts
    return []


def remove_holes(
    geometry: Union[Polygon, MultiPolygon],
    preserve_holes: bool
) -> Union[Polygon, MultiPolygon]:
    """Remove interior holes from geometry if preserve_holes is False.

    Args:
        geometry: Input Polygon or MultiPolygon
        preserve_holes: If False, removes all interior holes

    Returns:
        Geometry with holes removed (if preserve_holes=False)

    Examples:
        >>> poly_with_hole = Polygon(shell, [hole])
        >>> result = remove_holes(poly_with_hole, preserve_holes=False)
        >>> len(result.interiors)
        0
    """
    if preserve_holes:
        return geometry

    if isinstance(geometry, Polygon):
        if geometry.interiors:
            return Polygon(geometry.exterior)
        return geometry
    elif isinstance(geometry, MultiPolygon):
        return MultiPolygon([Polygon(p.exterior) for p in geometry.geoms])

    return geometry


def to_coordinate_distance(distance: float, units: Units) -> float:
    """Convert ``distance`` in ``units`` into a distance in coordinate units.

    Planar distances pass through unchanged. Geographic units are converted
    to degrees of arc, which is what a longitude/latitude coordinate space
    measures.

    Examples:
        >>> to_coordinate_distance(0.5, Units.PLANAR)
        0.5
        >>> round(to_coordinate_distance(111.195, Units.KILOMETERS), 3)
        1.0
    """
    if units is Units.PLANAR or units is Units.DEGREES:
        return distance
    radians = distance / earth_radius(units)
    return math.degrees(radians)


__all__ = [
    'polygon_parts',
    'remove_holes',
    'to_coordinate_distance',
]
