"""Core domain models, interfaces and services for symmetry order detection."""

from .exceptions import (
    ConfigurationError,
    GeometryError,
    OrderDetectionFailedError,
    SmoothingError,
    SymmetryOrderError,
)
from .domain.models import (
    CensusRecord,
    ClassificationPath,
    CoordinateSet,
    DetectorConfig,
    RotationAxis,
    SampleSeries,
    SmoothedSeries,
)
from .domain.interfaces.order_detector import OrderDetector
from .domain.implementations.peak_counting_order_detector import (
    PeakCountingOrderDetector,
    calculate_order,
)
from .services.census_service import CensusJob, CensusService
from .services.report_service import ExampleType, SymmetryOrderReport

__all__ = [
    "ConfigurationError",
    "GeometryError",
    "OrderDetectionFailedError",
    "SmoothingError",
    "SymmetryOrderError",
    "CensusRecord",
    "ClassificationPath",
    "CoordinateSet",
    "DetectorConfig",
    "RotationAxis",
    "SampleSeries",
    "SmoothedSeries",
    "OrderDetector",
    "PeakCountingOrderDetector",
    "calculate_order",
    "CensusJob",
    "CensusService",
    "ExampleType",
    "SymmetryOrderReport",
]
