"""Configuration for the slicing pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .errors import ConfigurationError
from .types import Units


DEFAULT_OFFSET_SCALES: Tuple[float, ...] = (0.01, 0.001, 0.0001)
DEFAULT_OVERLAP_TOLERANCE = 0.00005


@dataclass(frozen=True)
class SliceConfig:
    """Settings shared by the band constructor, cutter and assembler.

    Attributes:
        offset_scales: Band widths to try, largest first. The first width whose
            band is a single simple ring is used.
        units: Units of ``offset_scales`` and ``overlap_tolerance``.
        overlap_tolerance: Distance within which a fragment edge counts as
            lying on the splitter. Must stay below the smallest band width so
            the fragment on the band side is rejected.
        preserve_holes: Keep interior rings on output fragments. The default
            drops them and returns exterior rings only.

    Examples:
        >>> from polyslice import SliceConfig, Units
        >>> config = SliceConfig(offset_scales=(0.5, 0.05), units=Units.METERS)
    """

    offset_scales: Tuple[float, ...] = DEFAULT_OFFSET_SCALES
    units: Units = Units.PLANAR
    overlap_tolerance: float = DEFAULT_OVERLAP_TOLERANCE
    preserve_holes: bool = False

    def __post_init__(self) -> None:
        scales = tuple(float(s) for s in self.offset_scales)
        object.__setattr__(self, "offset_scales", scales)

        if not scales:
            raise ConfigurationError("offset_scales must contain at least one width")
        if any(not math.isfinite(s) or s <= 0 for s in scales):
            raise ConfigurationError(f"offset_scales must be positive and finite, got {scales}")
        if any(b >= a for a, b in zip(scales, scales[1:])):
            raise ConfigurationError(f"offset_scales must be strictly descending, got {scales}")
        if not isinstance(self.units, Units):
            raise ConfigurationError(f"units must be a Units member, got {self.units!r}")
        if not math.isfinite(self.overlap_tolerance) or self.overlap_tolerance <= 0:
            raise ConfigurationError(
                f"overlap_tolerance must be positive, got {self.overlap_tolerance}"
            )
        if self.overlap_tolerance >= scales[-1]:
            raise ConfigurationError(
                f"overlap_tolerance ({self.overlap_tolerance}) must be smaller than the "
                f"smallest offset scale ({scales[-1]})"
            )


DEFAULT_CONFIG = SliceConfig()


__all__ = [
    'SliceConfig',
    'DEFAULT_CONFIG',
    'DEFAULT_OFFSET_SCALES',
    'DEFAULT_OVERLAP_TOLERANCE',
]
