"""Sample a deviation metric as a function of rotation angle about an axis."""

import math
import logging
import numpy as np

from .deviation_metrics import DeviationMetric, superposition_distance
from ..models.coordinate_set import CoordinateSet
from ..models.rotation_axis import RotationAxis
from ..models.sample_series import SampleSeries
from ...exceptions import GeometryError

logger = logging.getLogger(__name__)


def sample_rotations(
    coords_a: CoordinateSet,
    coords_b: CoordinateSet,
    axis: RotationAxis,
    step_degrees: float,
    metric: DeviationMetric = superposition_distance,
) -> SampleSeries:
    """
    Rotate ``coords_b`` through one full revolution and measure its deviation.

    Args:
        coords_a: Fixed reference coordinates
        coords_b: Coordinates to rotate, index-matched to ``coords_a``
        axis: Rotation axis
        step_degrees: Angular step, in (0, 360]
        metric: Deviation metric between the rotated set and ``coords_a``

    Returns:
        SampleSeries with floor(360 / step_degrees) + 1 samples, angles in
        radians starting at 0

    Raises:
        GeometryError: On empty or mismatched sets, a degenerate axis or an
            out-of-range step
    """
    if len(coords_a) == 0 or len(coords_b) == 0:
        raise GeometryError("Cannot sample rotations of an empty coordinate set")
    if len(coords_a) != len(coords_b):
        raise GeometryError(
            f"Coordinate sets differ in length ({len(coords_a)} vs {len(coords_b)})"
        )
    if not np.isclose(np.linalg.norm(axis.direction), 1.0):
        raise GeometryError("Axis direction is degenerate")
    if not math.isfinite(step_degrees) or not 0 < step_degrees <= 360:
        raise GeometryError(f"Step must be in (0, 360] degrees, got {step_degrees}")

    n_steps = int(math.floor(360.0 / step_degrees))
    angles = np.radians(np.arange(n_steps + 1) * step_degrees)
    metrics = np.empty(n_steps + 1)
    for k, angle in enumerate(angles):
        metrics[k] = metric(coords_a, axis.rotate(coords_b, angle))

    logger.debug(f"Sampled {len(angles)} rotations at {step_degrees} degree steps")
    return SampleSeries(angles=angles, metrics=metrics)
