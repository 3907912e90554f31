#!/usr/bin/env python3
# src/symorder/core/domain/models/detector_config.py

"""
Immutable configuration shared by order detection calls.
"""

from dataclasses import asdict, dataclass, replace
import math
from typing import Any, Dict

from ...exceptions import ConfigurationError

METRIC_NAMES = ("superposition", "rmsd")


@dataclass(frozen=True)
class DetectorConfig:
    """
    Parameters of the peak-counting order detector.

    ``max_order`` and ``epsilon`` are carried for callers and logging but are
    not applied by the detector: the returned order is the raw peak count.
    """

    max_order: int = 9
    degree_sampling: float = 1.0
    epsilon: float = 0.000001
    bandwidth: float = 0.1
    robustness_iterations: int = 2
    loess_accuracy: float = 1e-12
    metric: str = "superposition"

    def __post_init__(self):
        if isinstance(self.max_order, bool) or not isinstance(self.max_order, int):
            raise ConfigurationError(f"max_order must be an int, got {self.max_order!r}")
        if self.max_order < 1:
            raise ConfigurationError(f"max_order must be >= 1, got {self.max_order}")
        if not _is_finite(self.degree_sampling) or not 0 < self.degree_sampling <= 360:
            raise ConfigurationError(
                f"degree_sampling must be in (0, 360], got {self.degree_sampling}"
            )
        if not _is_finite(self.epsilon) or self.epsilon < 0:
            raise ConfigurationError(f"epsilon must be >= 0, got {self.epsilon}")
        if not _is_finite(self.bandwidth) or not 0 < self.bandwidth <= 1:
            raise ConfigurationError(
                f"bandwidth must be in (0, 1], got {self.bandwidth}"
            )
        if (
            isinstance(self.robustness_iterations, bool)
            or not isinstance(self.robustness_iterations, int)
            or self.robustness_iterations < 0
        ):
            raise ConfigurationError(
                f"robustness_iterations must be an int >= 0, "
                f"got {self.robustness_iterations!r}"
            )
        if not _is_finite(self.loess_accuracy) or self.loess_accuracy < 0:
            raise ConfigurationError(
                f"loess_accuracy must be >= 0, got {self.loess_accuracy}"
            )
        if self.metric not in METRIC_NAMES:
            raise ConfigurationError(
                f"metric must be one of {METRIC_NAMES}, got {self.metric!r}"
            )

    def with_changes(self, **changes: Any) -> "DetectorConfig":
        """Return a validated copy with some parameters replaced."""
        try:
            return replace(self, **changes)
        except TypeError as e:
            raise ConfigurationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _is_finite(value: Any) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False
