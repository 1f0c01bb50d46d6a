"""Top level for tools."""

from .root_finding import binomzero
from .time_estimators import (
    estimate_time,
    estimate_time_from_count,
    estimate_time_from_distance,
    estimate_times,
    estimate_times_labeled,
    estimate_times_pairwise,
    estimates_to_frame,
    lower,
    middle,
    upper,
)

__all__ = [
    "binomzero",
    "estimate_time",
    "estimate_time_from_count",
    "estimate_time_from_distance",
    "estimate_times",
    "estimate_times_labeled",
    "estimate_times_pairwise",
    "estimates_to_frame",
    "lower",
    "middle",
    "upper",
]
