# src/symorder/infrastructure/repositories/census_repository.py
"""Read and write census results as CSV."""

from typing import Iterable, List
import logging
import pandas as pd

from ...core.domain.models.census_record import CensusRecord, ClassificationPath

logger = logging.getLogger(__name__)

CENSUS_COLUMNS = ["structure_id", "order", "fold", "superfamily", "family"]


def write_census_records(records: Iterable[CensusRecord], path: str) -> str:
    """Write records to CSV; failed detections leave the order empty."""
    df = pd.DataFrame(
        [
            {
                "structure_id": record.structure_id,
                "order": record.order,
                "fold": record.classification.fold,
                "superfamily": record.classification.superfamily,
                "family": record.classification.family,
            }
            for record in records
        ],
        columns=CENSUS_COLUMNS,
    )
    df["order"] = df["order"].astype("Int64")
    df.to_csv(path, index=False)
    logger.info(f"Wrote {len(df)} census records to {path}")
    return path


def read_census_records(path: str) -> List[CensusRecord]:
    """
    Read records written by write_census_records.

    Raises:
        ValueError: If a required column is missing
    """
    df = pd.read_csv(
        path,
        dtype={"structure_id": str, "fold": str, "superfamily": str, "family": str},
    )
    missing = [column for column in CENSUS_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Census file {path} is missing columns {missing}")

    records = []
    for row in df.itertuples(index=False):
        records.append(
            CensusRecord(
                structure_id=row.structure_id,
                order=None if pd.isna(row.order) else int(row.order),
                classification=ClassificationPath(
                    fold=row.fold, superfamily=row.superfamily, family=row.family
                ),
            )
        )
    logger.info(f"Read {len(records)} census records from {path}")
    return records
