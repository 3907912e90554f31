#!/usr/bin/env python3
# src/symorder/core/domain/models/coordinate_set.py

"""
Domain model representing the matched residues of one half of an alignment.
"""

from typing import Iterable, Sequence, Union
import numpy as np

from ...exceptions import GeometryError


class CoordinateSet:
    """Ordered, immutable collection of 3D points."""

    def __init__(self, coordinates: Union[np.ndarray, Sequence[Sequence[float]]]):
        """
        Initialize a CoordinateSet.

        Args:
            coordinates: Array-like of shape (n_points, 3)

        Raises:
            GeometryError: If the array is not (n, 3) or holds non-finite values
        """
        try:
            coords = np.array(coordinates, dtype=float)
        except (TypeError, ValueError) as e:
            raise GeometryError(f"Invalid coordinates: {e}") from e
        if coords.size == 0:
            coords = coords.reshape(0, 3)
        if coords.ndim != 2 or coords.shape[1] != 3:
            raise GeometryError(
                f"Coordinates must have shape (n, 3), got {coords.shape}"
            )
        if not np.all(np.isfinite(coords)):
            raise GeometryError("Coordinates contain non-finite values")
        coords.setflags(write=False)
        self._coords = coords

    @classmethod
    def from_atoms(cls, atoms: Iterable) -> "CoordinateSet":
        """Build a set from Bio.PDB atoms (anything with get_coord())."""
        return cls([atom.get_coord() for atom in atoms])

    @property
    def coordinates(self) -> np.ndarray:
        """Read-only array of shape (n_points, 3)."""
        return self._coords

    def rotated(self, rotation: np.ndarray, origin: np.ndarray) -> "CoordinateSet":
        """Return a copy rotated by a 3x3 matrix about a fixed origin."""
        origin = np.asarray(origin, dtype=float)
        return CoordinateSet(np.dot(self._coords - origin, rotation.T) + origin)

    def translated(self, shift: Sequence[float]) -> "CoordinateSet":
        return CoordinateSet(self._coords + np.asarray(shift, dtype=float))

    def centroid(self) -> np.ndarray:
        if len(self) == 0:
            raise GeometryError("Centroid of an empty coordinate set is undefined")
        return np.mean(self._coords, axis=0)

    def __len__(self) -> int:
        return self._coords.shape[0]

    def __repr__(self) -> str:
        return f"CoordinateSet(n_points={len(self)})"
