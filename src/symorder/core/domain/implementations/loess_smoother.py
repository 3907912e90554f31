"""Robust locally weighted linear regression (LOESS) smoothing.

Each point is replaced by the value at that point of a straight line fitted to
its ``ceil(bandwidth * n)`` nearest neighbours, weighted by the tricube kernel

    w(d) = (1 - (d / d_max)^3)^3

where ``d_max`` is the distance to the farthest neighbour in the window. The
domain is treated as a plain ordered axis, so windows near either end are
one-sided.

Robustness iterations then refit with each neighbour's kernel weight scaled by
a bisquare weight of its residual,

    r_w = (1 - (r / 6m)^2)^2   for r < 6m, else 0

with ``m`` the median absolute residual of the previous pass.
"""

import math
import logging
import numpy as np

from ..models.sample_series import SmoothedSeries
from ...exceptions import SmoothingError

logger = logging.getLogger(__name__)

DEFAULT_BANDWIDTH = 0.1
DEFAULT_ROBUSTNESS_ITERATIONS = 2
DEFAULT_ACCURACY = 1e-12


def tricube(u: np.ndarray) -> np.ndarray:
    u = np.abs(u)
    return np.where(u < 1.0, (1.0 - u**3) ** 3, 0.0)


def bisquare(u: np.ndarray) -> np.ndarray:
    u = np.abs(u)
    return np.where(u < 1.0, (1.0 - u**2) ** 2, 0.0)


class LoessSmoother:
    """Holds LOESS parameters and smooths any number of series with them."""

    def __init__(
        self,
        bandwidth: float = DEFAULT_BANDWIDTH,
        robustness_iterations: int = DEFAULT_ROBUSTNESS_ITERATIONS,
        accuracy: float = DEFAULT_ACCURACY,
    ):
        """
        Initialize the smoother.

        Args:
            bandwidth: Fraction of the points used in each local fit, in (0, 1]
            robustness_iterations: Number of reweighted refits, >= 0
            accuracy: Convergence tolerance; also the variance below which a
                local fit is treated as flat

        Raises:
            SmoothingError: If a parameter is out of range
        """
        if not math.isfinite(bandwidth) or not 0 < bandwidth <= 1:
            raise SmoothingError(f"Bandwidth must be in (0, 1], got {bandwidth}")
        if robustness_iterations < 0:
            raise SmoothingError(
                f"Robustness iterations must be >= 0, got {robustness_iterations}"
            )
        if not math.isfinite(accuracy) or accuracy < 0:
            raise SmoothingError(f"Accuracy must be >= 0, got {accuracy}")
        self.bandwidth = bandwidth
        self.robustness_iterations = robustness_iterations
        self.accuracy = accuracy

    def smooth(self, angles, metrics) -> SmoothedSeries:
        """
        Smooth ``metrics`` sampled at strictly increasing ``angles``.

        Returns:
            SmoothedSeries on the same angle axis

        Raises:
            SmoothingError: On invalid input, too few points for a window, or a
                local fit that cannot be solved
            GeometryError: If the angles do not start at 0 or run past 2*pi
        """
        x = np.asarray(angles, dtype=float)
        y = np.asarray(metrics, dtype=float)
        if x.ndim != 1 or x.shape != y.shape:
            raise SmoothingError(
                f"angles and metrics must be 1D of equal length, "
                f"got {x.shape} and {y.shape}"
            )
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise SmoothingError("Input contains non-finite values")
        if np.any(np.diff(x) <= 0):
            raise SmoothingError("Angles must be strictly increasing")

        n = x.shape[0]
        window = math.ceil(self.bandwidth * n)
        if window < 2:
            raise SmoothingError(
                f"Bandwidth {self.bandwidth} over {n} points leaves {window} "
                f"point(s) per local fit; at least 2 are needed"
            )

        robustness = np.ones(n)
        fitted = self._fit(x, y, window, robustness)
        for iteration in range(self.robustness_iterations):
            residuals = np.abs(y - fitted)
            median = np.median(residuals)
            if median <= self.accuracy:
                logger.debug(f"Exact fit after {iteration} robustness iteration(s)")
                break

            robustness = bisquare(residuals / (6.0 * median))
            refitted = self._fit(x, y, window, robustness)
            scale = np.maximum(np.abs(fitted), np.finfo(float).tiny)
            change = np.max(np.abs(refitted - fitted) / scale)
            fitted = refitted
            if change < self.accuracy:
                logger.debug(f"Converged after {iteration + 1} robustness iteration(s)")
                break

        return SmoothedSeries(angles=x, metrics=fitted)

    def _fit(
        self, x: np.ndarray, y: np.ndarray, window: int, robustness: np.ndarray
    ) -> np.ndarray:
        n = x.shape[0]
        fitted = np.empty(n)
        left, right = 0, window - 1
        for i in range(n):
            # Slide while the next point on the right is nearer than the leftmost
            while right + 1 < n and x[right + 1] - x[i] < x[i] - x[left]:
                left += 1
                right += 1

            xs = x[left : right + 1]
            ys = y[left : right + 1]
            d_max = max(x[i] - x[left], x[right] - x[i])
            weights = tricube(np.abs(xs - x[i]) / d_max) * robustness[left : right + 1]
            total = np.sum(weights)
            if not total > 0:
                raise SmoothingError(
                    f"Local fit at x={x[i]:.6g} has no positive weights"
                )

            mean_x = np.sum(weights * xs) / total
            mean_y = np.sum(weights * ys) / total
            var_x = np.sum(weights * (xs - mean_x) ** 2) / total
            if math.sqrt(var_x) < self.accuracy:
                beta = 0.0
            else:
                beta = np.sum(weights * (xs - mean_x) * (ys - mean_y)) / total / var_x
            fitted[i] = mean_y + beta * (x[i] - mean_x)

        if not np.all(np.isfinite(fitted)):
            raise SmoothingError("Local regression produced non-finite values")
        return fitted


def loess_smooth(
    angles,
    metrics,
    bandwidth: float = DEFAULT_BANDWIDTH,
    robustness_iterations: int = DEFAULT_ROBUSTNESS_ITERATIONS,
    accuracy: float = DEFAULT_ACCURACY,
) -> SmoothedSeries:
    """Smooth a series in one call; see LoessSmoother."""
    return LoessSmoother(bandwidth, robustness_iterations, accuracy).smooth(
        angles, metrics
    )
