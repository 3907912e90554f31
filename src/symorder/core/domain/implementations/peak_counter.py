"""Count local maxima in a smoothed deviation curve."""

from typing import Sequence


def count_peaks(values: Sequence[float], epsilon: float = 0.0) -> int:
    """
    Count the local maxima passed in a single left-to-right scan.

    A peak is counted when a strict increase is directly followed by a strict
    decrease; equal neighbours end an increase. The first and last samples can
    never be peaks, so a maximum sitting on the 0/360 degree boundary is not
    counted and curves with an odd order may come out one short.

    Args:
        values: Smoothed metric values
        epsilon: Accepted for the peak-significance threshold but not applied

    Returns:
        Number of peaks
    """
    # TODO apply epsilon once a significance rule for shallow peaks is decided
    if len(values) == 0:
        return 0

    n_peaks = 0
    previously_increased = False
    previous = values[0]
    for value in values:
        if previously_increased and value < previous:
            n_peaks += 1
        previously_increased = value > previous
        previous = value
    return n_peaks
