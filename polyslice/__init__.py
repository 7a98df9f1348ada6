"""Polyslice - Polygon slicing library.

This library slices a simple polygon into pieces along a cutting line using
Shapely. The geometric primitives are provided by an injectable kernel.
"""


# Slicing functions
from .slice import (
    slice_polygon,
    slice_polygon_detailed,
    SliceResult,
)

# Individual stages
from .trim import trim_line
from .band import build_band
from .cut import cut_polygon, cut_polygon_detailed, CutResult
from .assemble import assemble_fragments, SliceFragment

# GeoJSON front-end
from .geojson import slice_feature

# Geometry kernel
from .kernel import GeometryKernel, ShapelyKernel, default_kernel

# Core types, configuration and exceptions
from .core import (
    Direction,
    Units,
    SliceFailure,
    SliceConfig,
    DEFAULT_CONFIG,
    PolysliceError,
    ValidationError,
    ConfigurationError,
    KernelError,
)

__all__ = [

    # Slicing
    'slice_polygon',
    'slice_polygon_detailed',
    'SliceResult',

    # Stages
    'trim_line',
    'build_band',
    'cut_polygon',
    'cut_polygon_detailed',
    'CutResult',
    'assemble_fragments',
    'SliceFragment',

    # GeoJSON
    'slice_feature',

    # Kernel
    'GeometryKernel',
    'ShapelyKernel',
    'default_kernel',

    # Core types
    'Direction',
    'Units',
    'SliceFailure',
    'SliceConfig',
    'DEFAULT_CONFIG',

    # Core exceptions
    'PolysliceError',
    'ValidationError',
    'ConfigurationError',
    'KernelError',
]
