# src/symorder/core/exceptions.py
"""Error kinds raised by the order detection core."""

from typing import Optional


class SymmetryOrderError(Exception):
    """Base class for all errors raised by symorder."""


class ConfigurationError(SymmetryOrderError, ValueError):
    """A detector parameter is out of range."""


class GeometryError(SymmetryOrderError, ValueError):
    """Coordinate sets or rotation axis are malformed or degenerate."""


class SmoothingError(SymmetryOrderError, ArithmeticError):
    """Smoothing parameters are invalid or a local fit could not be solved."""


class OrderDetectionFailedError(SymmetryOrderError):
    """Wraps any failure of the sampling or smoothing stages."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
