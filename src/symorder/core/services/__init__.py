"""Batch census and reporting services."""

from .census_service import CensusJob, CensusService
from .report_service import ExampleType, OrderInfo, SymmetryOrderReport

__all__ = [
    "CensusJob",
    "CensusService",
    "ExampleType",
    "OrderInfo",
    "SymmetryOrderReport",
]
