#!/usr/bin/env python3
# src/symorder/core/domain/models/rotation_axis.py

"""
Domain model for the line about which a candidate symmetry is evaluated.
"""

from typing import Optional, Sequence
import numpy as np
from Bio.PDB.vectors import Vector, m2rotaxis, rotaxis2m

from .coordinate_set import CoordinateSet
from ...exceptions import GeometryError

# Rotations smaller than this (radians) do not define an axis.
MIN_AXIS_ANGLE = 1e-6


class RotationAxis:
    """A line in 3D space given by a point and a unit direction."""

    def __init__(
        self,
        point: Sequence[float],
        direction: Sequence[float],
        angle: Optional[float] = None,
    ):
        """
        Initialize a RotationAxis.

        Args:
            point: Any point on the axis
            direction: Direction vector, normalised on construction
            angle: Rotation angle of the superposition the axis came from, if any

        Raises:
            GeometryError: If the direction is zero-length or non-finite
        """
        point = np.asarray(point, dtype=float)
        direction = np.asarray(direction, dtype=float)
        if point.shape != (3,) or direction.shape != (3,):
            raise GeometryError("Axis point and direction must be 3-vectors")
        if not (np.all(np.isfinite(point)) and np.all(np.isfinite(direction))):
            raise GeometryError("Axis point and direction must be finite")
        norm = np.linalg.norm(direction)
        if norm == 0.0:
            raise GeometryError("Axis direction is degenerate (zero length)")
        self.point = point
        self.direction = direction / norm
        self.angle = angle

    @classmethod
    def from_transformation(
        cls, rotation: np.ndarray, translation: Sequence[float]
    ) -> "RotationAxis":
        """
        Derive the screw axis of a rigid superposition x' = R x + t.

        Args:
            rotation: 3x3 rotation matrix
            translation: Translation vector

        Returns:
            RotationAxis whose ``angle`` is the rotation angle of the transform

        Raises:
            GeometryError: If the transform is (nearly) a pure translation
        """
        rotation = np.asarray(rotation, dtype=float)
        translation = np.asarray(translation, dtype=float)
        if rotation.shape != (3, 3):
            raise GeometryError(f"Rotation must be 3x3, got {rotation.shape}")

        angle, axis_vector = m2rotaxis(rotation)
        if angle < MIN_AXIS_ANGLE:
            raise GeometryError("Transformation has no rotational component")
        direction = axis_vector.get_array()

        # Only the component of t perpendicular to the axis locates the line
        perpendicular = translation - np.dot(translation, direction) * direction
        point, *_ = np.linalg.lstsq(np.eye(3) - rotation, perpendicular, rcond=None)
        return cls(point, direction, angle=float(angle))

    def rotation_matrix(self, angle: float) -> np.ndarray:
        """Right-handed rotation matrix for ``angle`` radians about the direction."""
        return rotaxis2m(angle, Vector(*self.direction))

    def rotate(self, coords: CoordinateSet, angle: float) -> CoordinateSet:
        """Return a new CoordinateSet rotated by ``angle`` radians about this axis."""
        return coords.rotated(self.rotation_matrix(angle), self.point)

    def __repr__(self) -> str:
        return (
            f"RotationAxis(point={self.point.tolist()}, "
            f"direction={self.direction.tolist()})"
        )
