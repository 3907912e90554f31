"""Interface for rotational symmetry order detection strategies."""

from abc import ABC, abstractmethod
from ..models.coordinate_set import CoordinateSet
from ..models.rotation_axis import RotationAxis


class OrderDetector(ABC):
    """Abstract base class for order detection strategies."""

    @abstractmethod
    def calculate_order(
        self, coords_a: CoordinateSet, coords_b: CoordinateSet, axis: RotationAxis
    ) -> int:
        """
        Estimate the rotational symmetry order about an axis.

        Args:
            coords_a: Fixed reference coordinates
            coords_b: Coordinates rotated about the axis
            axis: Previously computed symmetry axis

        Returns:
            Estimated order

        Raises:
            OrderDetectionFailedError: If any stage of the estimate fails
        """
        pass
