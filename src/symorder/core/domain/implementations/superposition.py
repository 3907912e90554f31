"""Derive a symmetry axis from the superposition of two equivalent parts."""

import logging
import math

from Bio.SVDSuperimposer import SVDSuperimposer

from ..models.coordinate_set import CoordinateSet
from ..models.rotation_axis import RotationAxis
from ...exceptions import GeometryError

logger = logging.getLogger(__name__)


def superposition_axis(reference: CoordinateSet, mobile: CoordinateSet) -> RotationAxis:
    """
    Superimpose ``mobile`` onto ``reference`` and return the screw axis.

    For two chains of a cyclic homo-oligomer this is the symmetry axis, and
    the axis ``angle`` is close to a multiple of 360 / order degrees.

    Raises:
        GeometryError: If the sets are empty, differ in length, or the
            superposition has no rotational component
    """
    if len(reference) < 3 or len(reference) != len(mobile):
        raise GeometryError(
            f"Superposition needs two sets of equal length >= 3, "
            f"got {len(reference)} and {len(mobile)}"
        )
    superimposer = SVDSuperimposer()
    superimposer.set(reference.coordinates, mobile.coordinates)
    superimposer.run()
    rot, tran = superimposer.get_rotran()
    logger.info(f"Superposition RMSD {superimposer.get_rms():.3f}")

    # get_rotran is right-multiplying: x' = x . rot + tran
    axis = RotationAxis.from_transformation(rot.T, tran)
    logger.info(f"Axis rotation angle {math.degrees(axis.angle):.1f} degrees")
    return axis
