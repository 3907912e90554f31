"""Domain models for sampled and smoothed angle/metric signals."""

from dataclasses import dataclass
import math
import numpy as np

from ...exceptions import GeometryError

# Slack on the 2*pi upper bound for angles computed as radians(k * step)
ANGLE_TOLERANCE = 1e-9


@dataclass(frozen=True)
class SampleSeries:
    """
    Deviation metric sampled at increasing rotation angles (radians).

    Angles start at 0, increase strictly and end at or before 2*pi.

    Raises:
        GeometryError: If the arrays break that invariant or differ in shape
    """

    angles: np.ndarray
    metrics: np.ndarray

    def __post_init__(self):
        angles = np.asarray(self.angles, dtype=float)
        metrics = np.asarray(self.metrics, dtype=float)
        if angles.ndim != 1 or angles.shape != metrics.shape:
            raise GeometryError(
                f"angles and metrics must be 1D of equal length, "
                f"got {angles.shape} and {metrics.shape}"
            )
        if angles.shape[0] == 0:
            raise GeometryError("A series needs at least one sample")
        if angles[0] != 0.0:
            raise GeometryError(f"First angle must be 0, got {angles[0]}")
        if np.any(np.diff(angles) <= 0):
            raise GeometryError("Angles must be strictly increasing")
        if angles[-1] > 2 * math.pi + ANGLE_TOLERANCE:
            raise GeometryError(f"Last angle {angles[-1]} exceeds one revolution")
        object.__setattr__(self, "angles", angles)
        object.__setattr__(self, "metrics", metrics)

    def __len__(self) -> int:
        return self.angles.shape[0]

    def total_variation(self) -> float:
        """Sum of absolute differences between consecutive metrics."""
        return float(np.sum(np.abs(np.diff(self.metrics))))


@dataclass(frozen=True)
class SmoothedSeries(SampleSeries):
    """A SampleSeries whose metrics have been replaced by denoised estimates."""
