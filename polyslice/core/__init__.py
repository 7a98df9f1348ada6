"""Core types and utilities for polyslice.

This module provides type definitions, enums, configuration, exceptions and
core utilities used throughout the library.
"""

from .types import (
    Direction,
    Units,
    SliceFailure,
)

from .config import (
    SliceConfig,
    DEFAULT_CONFIG,
)

from .errors import (
    PolysliceError,
    ValidationError,
    ConfigurationError,
    KernelError,
)

__all__ = [
    # Enums
    'Direction',
    'Units',
    'SliceFailure',

    # Configuration
    'SliceConfig',
    'DEFAULT_CONFIG',

    # Exceptions
    'PolysliceError',
    'ValidationError',
    'ConfigurationError',
    'KernelError',
]
