"""Order detection algorithms."""

from .deviation_metrics import get_metric, rmsd, superposition_distance
from .rotation_sampler import sample_rotations
from .loess_smoother import LoessSmoother, loess_smooth
from .peak_counter import count_peaks
from .superposition import superposition_axis
from .peak_counting_order_detector import PeakCountingOrderDetector, calculate_order

__all__ = [
    "get_metric",
    "rmsd",
    "superposition_distance",
    "sample_rotations",
    "LoessSmoother",
    "loess_smooth",
    "count_peaks",
    "superposition_axis",
    "PeakCountingOrderDetector",
    "calculate_order",
]
