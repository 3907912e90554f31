# src/symorder/core/services/report_service.py
"""Tabulate estimated symmetry orders by classification level."""

import logging
from collections import defaultdict
from enum import Enum
from typing import Dict, Iterable, List, Set, Tuple

import pandas as pd

from ..domain.models.census_record import CensusRecord

logger = logging.getLogger(__name__)

TABLE_COLUMNS = [
    "order",
    "N folds",
    "N superfamilies",
    "N families",
    "N domains",
    "examples",
]


class ExampleType(Enum):
    """Classification level whose groups are listed as examples."""

    FOLD = "fold"
    SUPERFAMILY = "superfamily"
    FAMILY = "family"
    DOMAIN = "domain"


class OrderInfo:
    """Members of every classification group found with one symmetry order."""

    def __init__(self, order: int):
        self.order = order
        self._domains: Dict[ExampleType, Dict[str, Set[str]]] = {
            level: defaultdict(set) for level in ExampleType
        }
        self._superfamilies_in_fold: Dict[str, Set[str]] = defaultdict(set)

    def add(self, record: CensusRecord) -> None:
        path = record.classification
        domain = record.structure_id
        self._domains[ExampleType.FOLD][path.fold].add(domain)
        self._domains[ExampleType.SUPERFAMILY][path.superfamily].add(domain)
        self._domains[ExampleType.FAMILY][path.family].add(domain)
        self._domains[ExampleType.DOMAIN][domain].add(domain)
        self._superfamilies_in_fold[path.fold].add(path.superfamily)

    def count(self, level: ExampleType) -> int:
        """Number of distinct groups at a classification level."""
        return len(self._domains[level])

    def ranked(self, level: ExampleType) -> List[Tuple[str, int]]:
        """
        Groups at a level with their domain counts.

        Sorted by descending domain count, ties broken lexicographically.
        """
        counts = [(key, len(members)) for key, members in self._domains[level].items()]
        return sorted(counts, key=lambda item: (-item[1], item[0]))

    def n_superfamilies_in_fold(self, fold: str) -> int:
        return len(self._superfamilies_in_fold.get(fold, ()))

    def summary(self, limit: int = 5) -> str:
        """
        Describe the folds that have this order.

        Args:
            limit: Maximum number of folds to list, most populated first
        """
        lines = [
            f"{self.count(ExampleType.DOMAIN)} domains, "
            f"{self.count(ExampleType.FAMILY)} families, "
            f"{self.count(ExampleType.SUPERFAMILY)} superfamilies, "
            f"{self.count(ExampleType.FOLD)} folds for order={self.order}:",
            "fold\tN domains\tN SFs",
        ]
        for fold, n_domains in self.ranked(ExampleType.FOLD)[:limit]:
            lines.append(f"{fold}\t{n_domains}\t{self.n_superfamilies_in_fold(fold)}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.summary()


class SymmetryOrderReport:
    """Census results grouped by order, then by classification level."""

    def __init__(self):
        self._infos: Dict[int, OrderInfo] = {}

    @classmethod
    def from_records(cls, records: Iterable[CensusRecord]) -> "SymmetryOrderReport":
        report = cls()
        for record in records:
            report.add(record)
        return report

    def add(self, record: CensusRecord) -> bool:
        """
        Tabulate one record.

        Records without an order, or with order 1 (no symmetry), are skipped.

        Returns:
            True if the record was tabulated
        """
        if record.order is None:
            logger.warning(f"Skipping {record.structure_id}: no order was estimated")
            return False
        if record.order <= 1:
            logger.debug(f"Skipping {record.structure_id}: order {record.order}")
            return False
        if record.order not in self._infos:
            self._infos[record.order] = OrderInfo(record.order)
        self._infos[record.order].add(record)
        return True

    @property
    def orders(self) -> List[int]:
        return sorted(self._infos)

    def info(self, order: int) -> OrderInfo:
        return self._infos[order]

    def to_table(
        self,
        example_type: ExampleType = ExampleType.SUPERFAMILY,
        example_limit: int = 16,
        tab: str = "\t",
        newline: str = "\n",
        comma: str = "\t",
    ) -> str:
        """
        Render one row per order.

        Args:
            example_type: Level whose top groups fill the examples column
            example_limit: Maximum number of examples per row
            tab: Column delimiter
            newline: Row delimiter
            comma: Separator between examples
        """
        rows = [tab.join(TABLE_COLUMNS)]
        for order in self.orders:
            info = self._infos[order]
            examples = [key for key, _ in info.ranked(example_type)[:example_limit]]
            cells = [
                str(order),
                str(info.count(ExampleType.FOLD)),
                str(info.count(ExampleType.SUPERFAMILY)),
                str(info.count(ExampleType.FAMILY)),
                str(info.count(ExampleType.DOMAIN)),
                comma.join(examples),
            ]
            rows.append(tab.join(cells))
        return newline.join(rows) + newline

    def to_dataframe(
        self, example_type: ExampleType = ExampleType.SUPERFAMILY, example_limit: int = 16
    ) -> pd.DataFrame:
        """Same content as to_table, with examples kept as lists."""
        rows = []
        for order in self.orders:
            info = self._infos[order]
            rows.append(
                {
                    "order": order,
                    "N folds": info.count(ExampleType.FOLD),
                    "N superfamilies": info.count(ExampleType.SUPERFAMILY),
                    "N families": info.count(ExampleType.FAMILY),
                    "N domains": info.count(ExampleType.DOMAIN),
                    "examples": [
                        key for key, _ in info.ranked(example_type)[:example_limit]
                    ],
                }
            )
        return pd.DataFrame(rows, columns=TABLE_COLUMNS)

    def summary(self, limit: int = 10) -> str:
        blocks = []
        for order in self.orders:
            blocks.append(
                f"====================== {order} ============================\n"
                + self._infos[order].summary(limit)
                + "=====================================================\n\n"
            )
        return "".join(blocks)

    def __str__(self) -> str:
        return self.summary()
