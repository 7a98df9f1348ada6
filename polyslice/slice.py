"""Polygon slicing along a splitter line.

The slice runs in four stages:

1. **Trim** the splitter to the stretch that crosses the polygon boundary.
2. **Band** - build a thin ring on each side of the splitter.
3. **Cut** - subtract each band from the polygon and keep the pieces that
   border the splitter.
4. **Assemble** the pieces of both sides, or return the polygon unchanged if
   either side failed.

No stage raises for geometric trouble. Every failure ends in the untouched
polygon being returned, and :func:`slice_polygon_detailed` reports why.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from shapely.geometry import LineString, Polygon

from .assemble import SliceFragment, assemble_fragments
from .core.config import DEFAULT_CONFIG, SliceConfig
from .core.errors import KernelError
from .core.types import Direction, SliceFailure
from .cut import cut_polygon_detailed
from .kernel import GeometryKernel, default_kernel
from .trim import trim_line


@dataclass
class SliceResult:
    """Outcome of :func:`slice_polygon_detailed`.

    Attributes:
        fragments: Output polygons with the direction that produced each
        splitter: Trimmed splitter, or None if trimming left too few points
        failure: Reason the whole slice was abandoned before cutting
        direction_failures: Reason each failed directional cut failed
    """

    fragments: List[SliceFragment]
    splitter: Optional[LineString] = None
    failure: Optional[SliceFailure] = None
    direction_failures: Dict[Direction, SliceFailure] = field(default_factory=dict)

    @property
    def sliced(self) -> bool:
        return self.failure is None and not self.direction_failures

    @property
    def polygons(self) -> List[Polygon]:
        return [fragment.polygon for fragment in self.fragments]

    def __repr__(self) -> str:
        if self.sliced:
            return f"SliceResult(sliced into {len(self.fragments)} fragment(s))"
        reasons = [self.failure] if self.failure else list(self.direction_failures.values())
        reasons_str = ", ".join(r.value for r in reasons)
        return f"SliceResult(passthrough: {reasons_str})"


def slice_polygon_detailed(
    polygon: Polygon,
    splitter: LineString,
    config: Optional[SliceConfig] = None,
    kernel: Optional[GeometryKernel] = None,
    verbose: bool = False,
) -> SliceResult:
    """Slice ``polygon`` along ``splitter`` and report how it went.

    Same algorithm as :func:`slice_polygon`. The result also carries the
    trimmed splitter, the direction label of every fragment and the failure
    reasons, so "nothing to cut" can be told apart from a numerical failure.

    Args:
        polygon: Simple polygon to slice
        splitter: Open line with at least two coordinates
        config: Slice configuration (defaults to :data:`DEFAULT_CONFIG`)
        kernel: Geometry kernel (defaults to :func:`default_kernel`)
        verbose: Print progress for each stage

    Returns:
        SliceResult whose fragments are never empty
    """
    config = config or DEFAULT_CONFIG
    kernel = kernel or default_kernel()

    if not isinstance(polygon, Polygon) or polygon.is_empty or not isinstance(splitter, LineString):
        if verbose:
            print("Slice skipped: expected a Polygon and a LineString")
        return SliceResult([SliceFragment(polygon)], failure=SliceFailure.INVALID_INPUT)

    try:
        line = trim_line(polygon, splitter, kernel=kernel)
    except KernelError as e:
        if verbose:
            print(f"Slice skipped: {e}")
        return SliceResult([SliceFragment(polygon)], failure=SliceFailure.KERNEL_FAILED)
    if line is None:
        if verbose:
            print("Slice skipped: splitter has fewer than 2 points outside the polygon")
        return SliceResult([SliceFragment(polygon)], failure=SliceFailure.DEGENERATE_TRIM)

    if verbose:
        print(f"Slicing with trimmed splitter of {len(line.coords)} point(s)")

    results = {}
    failures: Dict[Direction, SliceFailure] = {}
    for direction in (Direction.UPPER, Direction.LOWER):
        result, reason = cut_polygon_detailed(
            polygon, line, direction, config=config, kernel=kernel, verbose=verbose
        )
        results[direction] = result
        if reason is not None:
            failures[direction] = reason

    fragments = assemble_fragments(
        polygon,
        results[Direction.UPPER],
        results[Direction.LOWER],
        preserve_holes=config.preserve_holes,
    )
    if verbose:
        if failures:
            print("Slice failed, returning the original polygon")
        else:
            print(f"Sliced into {len(fragments)} fragment(s)")

    return SliceResult(fragments, splitter=line, direction_failures=failures)


def slice_polygon(
    polygon: Polygon,
    splitter: LineString,
    config: Optional[SliceConfig] = None,
    kernel: Optional[GeometryKernel] = None,
    verbose: bool = False,
) -> List[Polygon]:
    """Slice a polygon into pieces along a splitter line.

    The splitter is trimmed to the part crossing the polygon, a thin band is
    removed on each side of it, and the pieces bordering the splitter are
    collected. Holes are dropped from the pieces unless
    ``config.preserve_holes`` is set. If the splitter does not cross the
    polygon cleanly, or any geometric operation fails, the original polygon is
    returned as the only element. This function never raises for geometric
    failures.

    Args:
        polygon: Simple polygon to slice
        splitter: Open line with at least two coordinates
        config: Slice configuration (defaults to :data:`DEFAULT_CONFIG`)
        kernel: Geometry kernel (defaults to :func:`default_kernel`)
        verbose: Print progress for each stage

    Returns:
        Non-empty list of polygons

    Examples:
        >>> from shapely.geometry import Polygon, LineString
        >>> square = Polygon([(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)])
        >>> pieces = slice_polygon(square, LineString([(5, 15), (5, -15)]))
        >>> [p.area for p in pieces]
        [50.0, 50.0]

        >>> # A splitter that misses the polygon leaves it untouched
        >>> slice_polygon(square, LineString([(20, 0), (20, 10)]))[0].equals(square)
        True
    """
    return slice_polygon_detailed(
        polygon, splitter, config=config, kernel=kernel, verbose=verbose
    ).polygons


__all__ = ['SliceResult', 'slice_polygon', 'slice_polygon_detailed']
