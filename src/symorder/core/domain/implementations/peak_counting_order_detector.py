"""Implementation of order detection by smoothing and counting peaks."""

import math
import logging
from typing import Optional, Tuple

from .deviation_metrics import get_metric
from .loess_smoother import LoessSmoother
from .peak_counter import count_peaks
from .rotation_sampler import sample_rotations
from ..interfaces.order_detector import OrderDetector
from ..models.coordinate_set import CoordinateSet
from ..models.detector_config import DetectorConfig
from ..models.rotation_axis import RotationAxis
from ..models.sample_series import SampleSeries, SmoothedSeries
from ...exceptions import GeometryError, OrderDetectionFailedError, SmoothingError

logger = logging.getLogger(__name__)


class PeakCountingOrderDetector(OrderDetector):
    """Determine order by smoothing the rotation curve and counting its peaks."""

    def __init__(self, config: Optional[DetectorConfig] = None):
        self.config = config or DetectorConfig()

    def calculate_order(
        self, coords_a: CoordinateSet, coords_b: CoordinateSet, axis: RotationAxis
    ) -> int:
        """
        Estimate the order as the number of peaks of the smoothed curve.

        ``config.max_order`` is not applied: C1 cases can show any number of
        peaks, so clipping would need a better fit than peak counting.

        Raises:
            OrderDetectionFailedError: Wrapping any GeometryError or SmoothingError
        """
        _, smoothed = self.sample_curve(coords_a, coords_b, axis)

        logger.info("Counting peaks")
        n_peaks = count_peaks(smoothed.metrics, math.radians(self.config.epsilon))
        logger.info(f"Found {n_peaks} peaks")
        return n_peaks

    def sample_curve(
        self, coords_a: CoordinateSet, coords_b: CoordinateSet, axis: RotationAxis
    ) -> Tuple[SampleSeries, SmoothedSeries]:
        """Return the raw and smoothed rotation curves used for the estimate."""
        config = self.config
        try:
            logger.info("Calculating rotation samples")
            samples = sample_rotations(
                coords_a,
                coords_b,
                axis,
                config.degree_sampling,
                metric=get_metric(config.metric),
            )
            logger.info("Smoothing with LOESS")
            smoother = LoessSmoother(
                config.bandwidth, config.robustness_iterations, config.loess_accuracy
            )
            smoothed = smoother.smooth(samples.angles, samples.metrics)
        except (GeometryError, SmoothingError) as e:
            raise OrderDetectionFailedError(f"Order detection failed: {e}", e) from e
        return samples, smoothed

    def __repr__(self) -> str:
        return f"PeakCountingOrderDetector({self.config})"


def calculate_order(
    coords_a: CoordinateSet,
    coords_b: CoordinateSet,
    axis: RotationAxis,
    config: Optional[DetectorConfig] = None,
) -> int:
    """Estimate the symmetry order with a PeakCountingOrderDetector."""
    return PeakCountingOrderDetector(config).calculate_order(coords_a, coords_b, axis)
