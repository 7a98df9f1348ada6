"""Directional cutting.

A directional cut removes the band built on one side of the splitter from the
polygon and keeps the resulting pieces that border the splitter itself. The
pieces bordering the band's far edge are the slivers of the other side and
are discarded; the opposite direction's cut recovers them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

import shapely
from shapely.geometry import LineString, MultiPolygon, Polygon

from .band import build_band
from .core.config import DEFAULT_CONFIG, SliceConfig
from .core.errors import KernelError
from .core.geometry_utils import polygon_parts, to_coordinate_distance
from .core.types import Direction, SliceFailure
from .kernel import GeometryKernel, default_kernel


@dataclass(frozen=True)
class CutResult:
    """Fragments kept by one directional cut.

    Attributes:
        direction: Side of the splitter the band was built on
        parts: Kept polygons, in the order the difference produced them
    """

    direction: Direction
    parts: Tuple[Polygon, ...]

    @property
    def label(self) -> str:
        return self.direction.label

    @property
    def geometry(self) -> Union[Polygon, MultiPolygon]:
        if len(self.parts) == 1:
            return self.parts[0]
        return MultiPolygon(list(self.parts))

    def __len__(self) -> int:
        return len(self.parts)


def cut_polygon_detailed(
    polygon: Polygon,
    line: LineString,
    direction: Direction,
    config: Optional[SliceConfig] = None,
    kernel: Optional[GeometryKernel] = None,
    verbose: bool = False,
) -> Tuple[Optional[CutResult], Optional[SliceFailure]]:
    """Cut ``polygon`` along ``line`` on one side and report why it failed.

    Returns:
        ``(result, None)`` on success, ``(None, reason)`` on failure
    """
    config = config or DEFAULT_CONFIG
    kernel = kernel or default_kernel()

    if not isinstance(polygon, Polygon) or polygon.is_empty:
        return None, SliceFailure.INVALID_INPUT
    if not isinstance(line, LineString) or len(line.coords) < 2:
        return None, SliceFailure.INVALID_INPUT

    polygon = shapely.force_2d(polygon)
    line = shapely.force_2d(line)

    # The splitter must enter and leave the polygon in matched pairs.
    try:
        crossings = len(kernel.line_intersections(polygon, line))
    except KernelError as e:
        if verbose:
            print(f"   {direction.label} cut: {e}")
        return None, SliceFailure.KERNEL_FAILED
    if crossings == 0 or crossings % 2 != 0:
        if verbose:
            print(f"   {direction.label} cut: {crossings} boundary crossing(s)")
        return None, SliceFailure.CROSSING_PARITY

    band = build_band(line, direction, config=config, kernel=kernel, verbose=verbose)
    if band is None:
        return None, SliceFailure.NO_BAND

    try:
        clipped = kernel.difference(polygon, band)
    except KernelError as e:
        if verbose:
            print(f"   {direction.label} cut: {e}")
        return None, SliceFailure.DIFFERENCE_FAILED

    pieces = polygon_parts(clipped)
    if not pieces:
        return None, SliceFailure.DIFFERENCE_FAILED

    tolerance = to_coordinate_distance(config.overlap_tolerance, config.units)
    try:
        kept = tuple(p for p in pieces if kernel.boundary_overlap(p, line, tolerance))
    except KernelError as e:
        if verbose:
            print(f"   {direction.label} cut: {e}")
        return None, SliceFailure.KERNEL_FAILED
    if verbose:
        print(f"   {direction.label} cut: kept {len(kept)} of {len(pieces)} piece(s)")
    if not kept:
        return None, SliceFailure.NO_OVERLAP

    return CutResult(direction=direction, parts=kept), None


def cut_polygon(
    polygon: Polygon,
    line: LineString,
    direction: Direction,
    config: Optional[SliceConfig] = None,
    kernel: Optional[GeometryKernel] = None,
) -> Optional[CutResult]:
    """Cut ``polygon`` along ``line`` on the ``direction`` side.

    Args:
        polygon: Polygon to cut
        line: Trimmed splitter
        direction: Side of the splitter to build the band on
        config: Slice configuration
        kernel: Geometry kernel (defaults to :func:`default_kernel`)

    Returns:
        The kept fragments, or None if the cut failed for any reason

    Examples:
        >>> square = Polygon([(0, 0), (0, 10), (10, 10), (10, 0)])
        >>> result = cut_polygon(square, LineString([(5, 15), (5, -15)]), Direction.UPPER)
        >>> result.geometry.area
        50.0
    """
    result, _ = cut_polygon_detailed(polygon, line, direction, config=config, kernel=kernel)
    return result


__all__ = ['CutResult', 'cut_polygon', 'cut_polygon_detailed']
