"""Domain model classes."""

from .coordinate_set import CoordinateSet
from .rotation_axis import RotationAxis
from .sample_series import SampleSeries, SmoothedSeries
from .detector_config import DetectorConfig
from .census_record import CensusRecord, ClassificationPath

__all__ = [
    "CoordinateSet",
    "RotationAxis",
    "SampleSeries",
    "SmoothedSeries",
    "DetectorConfig",
    "CensusRecord",
    "ClassificationPath",
]
