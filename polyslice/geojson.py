"""GeoJSON front-end for polygon slicing.

Accepts GeoJSON Feature or geometry mappings and returns a FeatureCollection
mapping, so the slicer can be used directly on parsed GeoJSON documents.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from shapely.errors import ShapelyError
from shapely.geometry import LineString, Polygon, mapping, shape
from shapely.geometry.base import BaseGeometry

from .core.config import SliceConfig
from .core.errors import ValidationError
from .kernel import GeometryKernel
from .slice import slice_polygon_detailed


def _to_geometry(obj: Mapping[str, Any], expected: type, role: str) -> BaseGeometry:
    if not isinstance(obj, Mapping):
        raise ValidationError(f"{role} must be a GeoJSON mapping, got {type(obj).__name__}")

    geometry = obj.get("geometry") if obj.get("type") == "Feature" else obj
    if geometry is None:
        raise ValidationError(f"{role} feature has no geometry")

    try:
        geom = shape(geometry)
    except (ShapelyError, KeyError, TypeError, ValueError, AttributeError) as e:
        raise ValidationError(f"{role} is not valid GeoJSON: {e}")

    if not isinstance(geom, expected):
        raise ValidationError(
            f"{role} must be a {expected.__name__}, got {geom.geom_type}"
        )
    return geom


def slice_feature(
    feature: Mapping[str, Any],
    splitter: Mapping[str, Any],
    config: Optional[SliceConfig] = None,
    kernel: Optional[GeometryKernel] = None,
) -> Dict[str, Any]:
    """Slice a GeoJSON polygon with a GeoJSON line.

    Args:
        feature: ``Feature<Polygon>`` or bare ``Polygon`` geometry
        splitter: ``Feature<LineString>`` or bare ``LineString`` geometry
        config: Slice configuration
        kernel: Geometry kernel

    Returns:
        ``FeatureCollection`` of polygon features. Each feature's properties
        hold ``side``: ``"upper"``, ``"lower"``, or None for the unsliced
        polygon.

    Raises:
        ValidationError: If either input is not the expected GeoJSON geometry

    Examples:
        >>> square = {"type": "Polygon",
        ...           "coordinates": [[[0, 0], [0, 10], [10, 10], [10, 0], [0, 0]]]}
        >>> line = {"type": "Feature", "properties": {},
        ...         "geometry": {"type": "LineString", "coordinates": [[5, 15], [5, -15]]}}
        >>> len(slice_feature(square, line)["features"])
        2
    """
    polygon = _to_geometry(feature, Polygon, "feature")
    line = _to_geometry(splitter, LineString, "splitter")

    result = slice_polygon_detailed(polygon, line, config=config, kernel=kernel)
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"side": fragment.label},
                "geometry": mapping(fragment.polygon),
            }
            for fragment in result.fragments
        ],
    }


__all__ = ['slice_feature']
