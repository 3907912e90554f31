"""Repository implementations."""

from .structure_repository import StructureRepository
from .census_repository import read_census_records, write_census_records

__all__ = ["StructureRepository", "read_census_records", "write_census_records"]
