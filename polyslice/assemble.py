"""Reassembly of directional cuts into the final polygon list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from shapely.geometry import Polygon

from .core.geometry_utils import remove_holes
from .core.types import Direction
from .cut import CutResult


@dataclass(frozen=True)
class SliceFragment:
    """One output polygon and the directional cut that produced it.

    ``direction`` is None for the untouched polygon returned on fallback.
    """

    polygon: Polygon
    direction: Optional[Direction] = None

    @property
    def label(self) -> Optional[str]:
        return self.direction.label if self.direction is not None else None


def assemble_fragments(
    polygon: Polygon,
    upper: Optional[CutResult],
    lower: Optional[CutResult],
    preserve_holes: bool = False,
) -> List[SliceFragment]:
    """Combine both directional cuts, or fall back to ``polygon``.

    Slicing is all-or-nothing: unless both cuts succeeded the original polygon
    is returned unchanged as the only fragment.

    Args:
        polygon: Polygon that was sliced
        upper: Result of the upper cut, or None
        lower: Result of the lower cut, or None
        preserve_holes: Keep interior rings on the fragments

    Returns:
        Upper fragments followed by lower fragments, or ``[polygon]``
    """
    if upper is None or lower is None:
        return [SliceFragment(polygon)]

    return [
        SliceFragment(remove_holes(part, preserve_holes), result.direction)
        for result in (upper, lower)
        for part in result.parts
    ]


__all__ = ['SliceFragment', 'assemble_fragments']
