"""Deviation metrics between two coordinate sets."""

from typing import Callable, Dict
import numpy as np
from scipy.spatial import cKDTree

from ..models.coordinate_set import CoordinateSet
from ...exceptions import ConfigurationError, GeometryError

DeviationMetric = Callable[[CoordinateSet, CoordinateSet], float]


def _check_pair(a: CoordinateSet, b: CoordinateSet) -> None:
    if len(a) == 0 or len(b) == 0:
        raise GeometryError("Cannot compare empty coordinate sets")
    if len(a) != len(b):
        raise GeometryError(
            f"Coordinate sets differ in length ({len(a)} vs {len(b)})"
        )


def rmsd(a: CoordinateSet, b: CoordinateSet) -> float:
    """Index-wise root-mean-square deviation."""
    _check_pair(a, b)
    diff = a.coordinates - b.coordinates
    return float(np.sqrt(np.mean(np.sum(diff**2, axis=1))))


def superposition_distance(a: CoordinateSet, b: CoordinateSet) -> float:
    """
    Alignment-free distance between two superimposed sets.

    For every point, the distance to the closest point of the other set,
    averaged over the points of both sets. Unlike RMSD it ignores the index
    correspondence, so a symmetric structure rotated onto another of its
    repeats scores zero.
    """
    _check_pair(a, b)
    a_to_b, _ = cKDTree(b.coordinates).query(a.coordinates)
    b_to_a, _ = cKDTree(a.coordinates).query(b.coordinates)
    return float((np.sum(a_to_b) + np.sum(b_to_a)) / (len(a) + len(b)))


METRICS: Dict[str, DeviationMetric] = {
    "superposition": superposition_distance,
    "rmsd": rmsd,
}


def get_metric(name: str) -> DeviationMetric:
    try:
        return METRICS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown deviation metric {name!r}; choose from {sorted(METRICS)}"
        ) from None
