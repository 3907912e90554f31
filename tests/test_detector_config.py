import dataclasses

import pytest

from symorder.core.domain.models.detector_config import DetectorConfig
from symorder.core.exceptions import ConfigurationError


def test_defaults():
    """Defaults of the peak counting detector."""
    config = DetectorConfig()
    assert config.max_order == 9
    assert config.degree_sampling == 1.0
    assert config.epsilon == 0.000001
    assert config.bandwidth == 0.1
    assert config.robustness_iterations == 2
    assert config.loess_accuracy == 1e-12
    assert config.metric == "superposition"


@pytest.mark.parametrize(
    "changes",
    [
        {"bandwidth": 0},
        {"bandwidth": 1.5},
        {"bandwidth": -0.1},
        {"degree_sampling": 0},
        {"degree_sampling": -1.0},
        {"degree_sampling": 361.0},
        {"robustness_iterations": -1},
        {"robustness_iterations": 1.5},
        {"max_order": 0},
        {"epsilon": -1e-6},
        {"loess_accuracy": float("nan")},
        {"metric": "tm-score"},
    ],
)
def test_invalid_parameters_rejected_at_construction(changes):
    """Out-of-range parameters fail eagerly."""
    with pytest.raises(ConfigurationError):
        DetectorConfig(**changes)


def test_bandwidth_of_one_and_full_turn_step_are_valid():
    config = DetectorConfig(bandwidth=1.0, degree_sampling=360.0)
    assert config.bandwidth == 1.0


def test_config_is_immutable():
    config = DetectorConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.bandwidth = 0.5


def test_with_changes_validates_and_leaves_original_untouched():
    """with_changes is the mutation surface and validates again."""
    config = DetectorConfig()
    changed = config.with_changes(bandwidth=0.2, degree_sampling=2.0)

    assert changed.bandwidth == 0.2
    assert changed.degree_sampling == 2.0
    assert config.bandwidth == 0.1

    with pytest.raises(ConfigurationError):
        config.with_changes(bandwidth=0)
    with pytest.raises(ConfigurationError):
        config.with_changes(no_such_parameter=1)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        DetectorConfig(bandwidth=2)


def test_to_dict():
    assert DetectorConfig(max_order=4).to_dict()["max_order"] == 4
