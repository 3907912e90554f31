"""Domain models for census results."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ClassificationPath:
    """Fold, superfamily and family identifiers of a domain (e.g. b.69, b.69.8, b.69.8.1)."""

    fold: str
    superfamily: str
    family: str


@dataclass(frozen=True)
class CensusRecord:
    """Estimated order of one structure; ``order`` is None when detection failed."""

    structure_id: str
    order: Optional[int]
    classification: ClassificationPath
