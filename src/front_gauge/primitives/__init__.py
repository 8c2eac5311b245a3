"""Dominance and distance primitives shared by the indicators.

This package provides core pure functions for comparing objective vectors.
"""

from front_gauge.primitives.distance import (
    minkowski,
    minkowski_matrix,
    nearest_neighbor_distance,
    raw_power,
    raw_power_matrix,
)
from front_gauge.primitives.pareto import dominates, dominates_matrix

__all__ = [
    "dominates",
    "dominates_matrix",
    "minkowski",
    "minkowski_matrix",
    "raw_power",
    "raw_power_matrix",
    "nearest_neighbor_distance",
]
