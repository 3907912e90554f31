import math

import numpy as np
import pytest

from symorder.core.domain.implementations.deviation_metrics import rmsd
from symorder.core.domain.implementations.rotation_sampler import sample_rotations
from symorder.core.domain.models.coordinate_set import CoordinateSet
from symorder.core.domain.models.rotation_axis import RotationAxis
from symorder.core.domain.models.sample_series import SampleSeries
from symorder.core.exceptions import GeometryError


@pytest.mark.parametrize("step", [1.0, 7.0, 2.5, 45.0, 360.0])
def test_series_shape(c3_pair, step):
    """N = floor(360 / step) + 1 samples, strictly increasing from 0."""
    coords_a, coords_b, axis = c3_pair
    series = sample_rotations(coords_a, coords_b, axis, step)

    expected = math.floor(360.0 / step) + 1
    assert len(series) == expected
    assert series.metrics.shape == series.angles.shape
    assert series.angles[0] == 0.0
    assert np.all(np.diff(series.angles) > 0)
    assert series.angles[-1] <= 2 * np.pi + 1e-12


def test_angles_are_radians(c3_pair):
    series = sample_rotations(*c3_pair, 90.0)
    assert np.allclose(series.angles, [0, np.pi / 2, np.pi, 3 * np.pi / 2, 2 * np.pi])


def test_c3_curve_has_three_minima(c3_pair):
    """The superposition distance vanishes at every repeat of a C3 set."""
    series = sample_rotations(*c3_pair, 1.0)
    for degrees in (0, 120, 240, 360):
        assert series.metrics[degrees] == pytest.approx(0.0, abs=1e-9)
    for degrees in (60, 180, 300):
        assert series.metrics[degrees] > 1.0
    assert series.metrics[60] == pytest.approx(series.metrics[180])


def test_rmsd_curve_is_single_cycle(z_axis):
    """Index-wise RMSD only reaches zero at the identity rotation."""
    coords = CoordinateSet([[3, 0, 0], [0, 4, 1], [-2, -2, 2]])
    series = sample_rotations(coords, coords, z_axis, 10.0, metric=rmsd)
    assert series.metrics[0] == pytest.approx(0.0)
    assert series.metrics[-1] == pytest.approx(0.0, abs=1e-9)
    assert np.argmax(series.metrics) == 18


def test_inputs_are_not_mutated(c3_pair):
    coords_a, coords_b, axis = c3_pair
    before = coords_b.coordinates.copy()
    sample_rotations(coords_a, coords_b, axis, 30.0)
    assert np.array_equal(coords_b.coordinates, before)


def test_mismatched_lengths(z_axis):
    with pytest.raises(GeometryError):
        sample_rotations(
            CoordinateSet([[1, 0, 0]]), CoordinateSet([[1, 0, 0], [0, 1, 0]]), z_axis, 1.0
        )


def test_empty_sets(z_axis):
    with pytest.raises(GeometryError):
        sample_rotations(CoordinateSet([]), CoordinateSet([]), z_axis, 1.0)


def test_zero_length_axis():
    with pytest.raises(GeometryError):
        RotationAxis([0, 0, 0], [0, 0, 0])


@pytest.mark.parametrize("step", [0.0, -5.0, 400.0, float("nan")])
def test_invalid_step(c3_pair, step):
    with pytest.raises(GeometryError):
        sample_rotations(*c3_pair, step)


class TestSampleSeries:
    """Tests for the sampled series invariant."""

    def test_full_revolution_is_accepted(self):
        series = SampleSeries(np.radians([0.0, 180.0, 360.0]), [1.0, 2.0, 1.0])
        assert len(series) == 3

    @pytest.mark.parametrize(
        "angles, metrics",
        [
            ([0.0, 1.0], [1.0]),
            ([], []),
            ([0.5, 1.0], [1.0, 2.0]),
            ([0.0, 1.0, 1.0], [1.0, 2.0, 3.0]),
            ([0.0, 2.0, 1.0], [1.0, 2.0, 3.0]),
            ([0.0, 7.0], [1.0, 2.0]),
        ],
    )
    def test_broken_invariant(self, angles, metrics):
        with pytest.raises(GeometryError):
            SampleSeries(angles, metrics)
