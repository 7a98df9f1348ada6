"""Splitter trimming.

Splitter vertices lying inside the target polygon produce degenerate bands
and unstable differences. Only the stretch of the splitter that actually
crosses the boundary is kept.
"""

from __future__ import annotations

from typing import Optional

from shapely.geometry import LineString, Point, Polygon

from .kernel import GeometryKernel, default_kernel


def trim_line(
    polygon: Polygon,
    line: LineString,
    kernel: Optional[GeometryKernel] = None,
) -> Optional[LineString]:
    """Drop leading and trailing splitter vertices that lie inside ``polygon``.

    Vertices on the polygon boundary count as inside. ``line`` itself is not
    modified; a new 2D LineString is returned, with any Z values dropped.

    Args:
        polygon: Polygon about to be sliced
        line: Splitter line
        kernel: Geometry kernel (defaults to :func:`default_kernel`)

    Returns:
        Trimmed LineString, or None if fewer than two vertices remain

    Examples:
        >>> square = Polygon([(0, 0), (0, 10), (10, 10), (10, 0)])
        >>> trim_line(square, LineString([(5, 5), (5, 15), (5, -15)])).coords[:]
        [(5.0, 15.0), (5.0, -15.0)]
    """
    kernel = kernel or default_kernel()
    coords = [c[:2] for c in line.coords]

    start = 0
    while start < len(coords) and kernel.contains(Point(coords[start]), polygon):
        start += 1

    end = len(coords)
    while end > start and kernel.contains(Point(coords[end - 1]), polygon):
        end -= 1

    trimmed = coords[start:end]
    if len(trimmed) < 2:
        return None
    return LineString(trimmed)


__all__ = ['trim_line']
