# src/symorder/core/services/census_service.py
"""Service for estimating symmetry orders over a batch of structures."""

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from tqdm import tqdm

from ..domain.interfaces.order_detector import OrderDetector
from ..domain.models.census_record import CensusRecord, ClassificationPath
from ..domain.models.coordinate_set import CoordinateSet
from ..domain.models.rotation_axis import RotationAxis
from ..exceptions import OrderDetectionFailedError
from ..utils.benchmarking import Timer, TimingStats

logger = logging.getLogger(__name__)


@dataclass
class CensusJob:
    """Inputs for one structure of a census."""

    structure_id: str
    coords_a: CoordinateSet
    coords_b: CoordinateSet
    axis: RotationAxis
    classification: ClassificationPath


def _detect(
    detector: OrderDetector, job: CensusJob
) -> Tuple[Optional[int], Optional[str], float]:
    """Run one detection, returning (order, error message, elapsed seconds)."""
    with Timer(job.structure_id) as timer:
        try:
            order = detector.calculate_order(job.coords_a, job.coords_b, job.axis)
            error = None
        except OrderDetectionFailedError as e:
            order, error = None, str(e)
    return order, error, timer.elapsed()


class CensusService:
    """Service for running an order detector over many structures."""

    def __init__(self, detector: Optional[OrderDetector] = None, max_workers: int = 1):
        """
        Initialize service with an order detection strategy.

        Args:
            detector: Strategy used per structure (PeakCountingOrderDetector by default)
            max_workers: Number of worker processes; 1 runs in-process
        """
        from ..domain.implementations.peak_counting_order_detector import (
            PeakCountingOrderDetector,
        )

        self._detector = detector or PeakCountingOrderDetector()
        self._max_workers = max(1, max_workers)
        self.timings = TimingStats("calculate_order")

    def run(self, jobs: Iterable[CensusJob], progress: bool = True) -> List[CensusRecord]:
        """
        Estimate the order of every job.

        A structure whose detection fails is logged and recorded with
        ``order=None``; the remaining jobs still run. ``timings`` is reset
        at the start of every run.

        Args:
            jobs: Structures to process
            progress: Show a tqdm progress bar

        Returns:
            One CensusRecord per job, in input order
        """
        jobs = list(jobs)
        self.timings = TimingStats("calculate_order")
        if self._max_workers > 1 and len(jobs) > 1:
            with ProcessPoolExecutor(max_workers=self._max_workers) as executor:
                outcomes = list(
                    tqdm(
                        executor.map(_detect, [self._detector] * len(jobs), jobs),
                        total=len(jobs),
                        desc="Detecting symmetry order",
                        disable=not progress,
                    )
                )
        else:
            outcomes = [
                _detect(self._detector, job)
                for job in tqdm(jobs, desc="Detecting symmetry order", disable=not progress)
            ]

        records = []
        for job, (order, error, elapsed) in zip(jobs, outcomes):
            self.timings.add_timing(elapsed)
            if error is not None:
                logger.error(f"Skipping order of {job.structure_id}: {error}")
            else:
                logger.info(f"{job.structure_id}: order {order} ({elapsed:.3f}s)")
            records.append(
                CensusRecord(
                    structure_id=job.structure_id,
                    order=order,
                    classification=job.classification,
                )
            )

        logger.info(str(self.timings))
        return records
