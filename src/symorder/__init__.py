"""Estimate rotational symmetry order by counting peaks of a rotation curve."""

from .core import (
    CensusJob,
    CensusRecord,
    CensusService,
    ClassificationPath,
    ConfigurationError,
    CoordinateSet,
    DetectorConfig,
    ExampleType,
    GeometryError,
    OrderDetectionFailedError,
    OrderDetector,
    PeakCountingOrderDetector,
    RotationAxis,
    SmoothingError,
    SymmetryOrderError,
    SymmetryOrderReport,
    calculate_order,
)

__version__ = "0.1.0"

__all__ = [
    "CensusJob",
    "CensusRecord",
    "CensusService",
    "ClassificationPath",
    "ConfigurationError",
    "CoordinateSet",
    "DetectorConfig",
    "ExampleType",
    "GeometryError",
    "OrderDetectionFailedError",
    "OrderDetector",
    "PeakCountingOrderDetector",
    "RotationAxis",
    "SmoothingError",
    "SymmetryOrderError",
    "SymmetryOrderReport",
    "calculate_order",
]
