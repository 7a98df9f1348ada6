"""Type definitions for polyslice operations.

This module defines the enums shared by the slicing stages.
"""

import math
from enum import Enum


class Direction(Enum):
    """Side of the splitter on which a band is built.

    Attributes:
        UPPER: Positive offset, to the right of the splitter's direction of travel
        LOWER: Negative offset, to the left of the splitter's direction of travel

    Examples:
        >>> from polyslice import Direction
        >>> Direction.UPPER.sign
        1
        >>> Direction.LOWER.label
        'lower'
    """
    UPPER = 'upper'
    LOWER = 'lower'

    @property
    def sign(self) -> int:
        return 1 if self is Direction.UPPER else -1

    @property
    def label(self) -> str:
        return self.value


class Units(Enum):
    """Units for band widths and the boundary-overlap tolerance.

    ``PLANAR`` distances are taken as-is, in the coordinate units of the
    geometries. Every other unit assumes longitude/latitude coordinates and is
    converted to degrees through the mean earth radius.

    Attributes:
        PLANAR: Coordinate units, no conversion (default)
        DEGREES: Degrees of arc
        RADIANS: Radians of arc
        KILOMETERS: Kilometers on the earth's surface
        METERS: Meters on the earth's surface
        MILES: Statute miles on the earth's surface
        NAUTICAL_MILES: Nautical miles on the earth's surface

    Examples:
        >>> from polyslice import SliceConfig, Units
        >>> config = SliceConfig(units=Units.KILOMETERS)
    """
    PLANAR = 'planar'
    DEGREES = 'degrees'
    RADIANS = 'radians'
    KILOMETERS = 'kilometers'
    METERS = 'meters'
    MILES = 'miles'
    NAUTICAL_MILES = 'nauticalmiles'


EARTH_RADIUS_METERS = 6371008.8

# Earth radius expressed in each unit (radians of arc per unit length).
_EARTH_RADIUS = {
    Units.RADIANS: 1.0,
    Units.DEGREES: 180.0 / math.pi,
    Units.KILOMETERS: EARTH_RADIUS_METERS / 1000.0,
    Units.METERS: EARTH_RADIUS_METERS,
    Units.MILES: EARTH_RADIUS_METERS / 1609.344,
    Units.NAUTICAL_MILES: EARTH_RADIUS_METERS / 1852.0,
}


def earth_radius(units: Units) -> float:
    """Return the earth radius in ``units`` (not defined for ``PLANAR``)."""
    if units is Units.PLANAR:
        raise ValueError("Planar units have no earth radius")
    return _EARTH_RADIUS[units]


class SliceFailure(Enum):
    """Reason a directional cut (or the whole slice) fell back to passthrough.

    Attributes:
        INVALID_INPUT: Polygon or splitter is not of the expected kind
        DEGENERATE_TRIM: Fewer than two splitter points remain after trimming
        CROSSING_PARITY: Zero or an odd number of boundary crossings
        NO_BAND: No band could be formed around the splitter
        DIFFERENCE_FAILED: Boolean difference raised or returned nothing
        NO_OVERLAP: No difference part borders the splitter
        KERNEL_FAILED: Another kernel operation raised on this input
    """
    INVALID_INPUT = 'invalid_input'
    DEGENERATE_TRIM = 'degenerate_trim'
    CROSSING_PARITY = 'crossing_parity'
    NO_BAND = 'no_band'
    DIFFERENCE_FAILED = 'difference_failed'
    NO_OVERLAP = 'no_overlap'
    KERNEL_FAILED = 'kernel_failed'


__all__ = [
    'Direction',
    'Units',
    'SliceFailure',
    'EARTH_RADIUS_METERS',
    'earth_radius',
]
