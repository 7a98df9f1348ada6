"""Exception hierarchy for polyslice.

The slicing algorithm itself never raises for geometric failures; these
exceptions mark programming errors (bad configuration, malformed input to
the GeoJSON front-end) and failures reported by a geometry kernel.
"""


class PolysliceError(Exception):
    """Base class for all polyslice errors."""


class ValidationError(PolysliceError):
    """Input could not be interpreted as the expected geometry kind."""


class ConfigurationError(PolysliceError):
    """A :class:`~polyslice.core.config.SliceConfig` value is invalid."""


class KernelError(PolysliceError):
    """A geometry kernel operation could not produce a result.

    Raised by kernel implementations (offset, difference) and caught by the
    band constructor and the directional cutter.
    """

    def __init__(self, operation: str, message: str = ""):
        self.operation = operation
        detail = f": {message}" if message else ""
        super().__init__(f"Kernel operation '{operation}' failed{detail}")


__all__ = [
    'PolysliceError',
    'ValidationError',
    'ConfigurationError',
    'KernelError',
]
