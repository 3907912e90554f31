"""Core domain models, interfaces and implementations."""

from .models import (
    CensusRecord,
    ClassificationPath,
    CoordinateSet,
    DetectorConfig,
    RotationAxis,
    SampleSeries,
    SmoothedSeries,
)
from .interfaces.order_detector import OrderDetector
from .implementations.peak_counting_order_detector import (
    PeakCountingOrderDetector,
    calculate_order,
)

__all__ = [
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
]
