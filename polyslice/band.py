"""Band ("thick line polygon") construction.

A band is a thin ring that turns the splitter into an area: the splitter's
coordinates followed by an offset copy of the splitter in reverse. Removing
the band from a polygon separates the polygon along the splitter. Wider bands
give more stable boolean differences but self-intersect more easily around
sharp splitter corners, so widths are tried from largest to smallest.
"""

from __future__ import annotations

from typing import Optional

from shapely.geometry import LineString, Polygon

from .core.config import DEFAULT_CONFIG, SliceConfig
from .core.errors import KernelError
from .core.types import Direction
from .kernel import GeometryKernel, default_kernel


def band_ring(line: LineString, offset_line: LineString) -> Polygon:
    """Close ``line`` and the reversed ``offset_line`` into a 2D band polygon."""
    forward = [c[:2] for c in line.coords]
    backward = [c[:2] for c in reversed(offset_line.coords)]
    return Polygon(forward + backward + forward[:1])


def build_band(
    line: LineString,
    direction: Direction,
    config: Optional[SliceConfig] = None,
    kernel: Optional[GeometryKernel] = None,
    verbose: bool = False,
) -> Optional[Polygon]:
    """Build the band on the ``direction`` side of ``line``.

    Each width in ``config.offset_scales`` is tried in order. The first band
    that resolves to exactly one simple polygon is returned. If none does, the
    band of the last width that could be formed is returned anyway.

    Args:
        line: Trimmed splitter
        direction: Side of the splitter the band is built on
        config: Slice configuration (widths and units)
        kernel: Geometry kernel (defaults to :func:`default_kernel`)
        verbose: Print each trial

    Returns:
        Band polygon, or None if no offset line could be formed at any width
    """
    config = config or DEFAULT_CONFIG
    kernel = kernel or default_kernel()

    band: Optional[Polygon] = None
    for width in config.offset_scales:
        try:
            offset_line = kernel.offset(line, width * direction.sign, config.units)
        except KernelError as e:
            if verbose:
                print(f"   {direction.label} band at width {width}: {e}")
            continue

        ring = band_ring(line, offset_line)
        try:
            parts = kernel.resolve_self_intersections(ring)
        except KernelError as e:
            if verbose:
                print(f"   {direction.label} band at width {width}: {e}")
            continue

        band = ring
        if verbose:
            print(f"   {direction.label} band at width {width}: {len(parts)} simple part(s)")
        if len(parts) == 1:
            return band

    return band


__all__ = ['band_ring', 'build_band']
