"""Uniform weight vectors on the unit simplex.

Utility-based indicators (R2, R3) evaluate fronts along a set of directions.
The directions are every vector whose components are drawn from
{0/H, 1/H, ..., H/H} and sum to one, where H is the resolution of the lattice.

This module provides:
- uniform_weight_vectors: enumerate the lattice as a (n_vectors, n_obj) array
- WeightVectorSet: a validated, immutable lattice tied to its (n_obj, H) pair
"""

import itertools
from dataclasses import dataclass

import numpy as np

from front_gauge.exceptions import ConfigurationError

SUM_TOLERANCE = 1e-8
"""Maximum deviation from 1.0 for a candidate tuple to count as a weight vector."""


def validate_resolution(n_obj: int, h: int) -> None:
    """Check that (n_obj, h) defines a usable simplex partition.

    Raises:
        ConfigurationError: If h is not positive or the partition is not valid
            for the number of objectives.
    """
    if n_obj < 1:
        raise ConfigurationError(f"number of objectives must be positive, got {n_obj}")
    if h <= 0 or (n_obj - 1) > (h + n_obj - 1):
        raise ConfigurationError(
            f"Invalid H value {h}. The space partition is not valid for {n_obj} objectives",
            suggestion="H must be a positive integer.",
            details={"h": h, "n_obj": n_obj},
        )


def uniform_weight_vectors(n_obj: int, h: int) -> np.ndarray:
    """Enumerate the weight vectors of resolution h for n_obj objectives.

    All (h+1)^n_obj tuples of the Cartesian product are generated in
    lexicographic order and those summing to 1 (within SUM_TOLERANCE) are kept.

    Args:
        n_obj: Number of objectives (length of each vector).
        h: Number of divisions of each axis.

    Returns:
        Array of shape (n_vectors, n_obj) with non-negative rows summing to 1.

    Raises:
        ConfigurationError: If (n_obj, h) is not a valid partition.

    Examples:
        >>> uniform_weight_vectors(2, 2)
        array([[0. , 1. ],
               [0.5, 0.5],
               [1. , 0. ]])
    """
    validate_resolution(n_obj, h)
    values = [i / h for i in range(h + 1)]

    weights = [
        combination
        for combination in itertools.product(values, repeat=n_obj)
        if abs(sum(combination) - 1.0) < SUM_TOLERANCE
    ]
    return np.array(weights, dtype=np.float64).reshape(-1, n_obj)


@dataclass(frozen=True)
class WeightVectorSet:
    """Immutable set of uniform weight vectors.

    Attributes:
        n_obj: Number of objectives.
        h: Lattice resolution.
        vectors: Weight vectors, shape (n_vectors, n_obj).

    Example:
        >>> ws = WeightVectorSet.build(n_obj=3, h=4)
        >>> len(ws)
        15
    """

    n_obj: int
    h: int
    vectors: np.ndarray

    def __post_init__(self) -> None:
        if not isinstance(self.vectors, np.ndarray):
            raise TypeError(f"vectors must be a numpy array, got {type(self.vectors).__name__}")
        if self.vectors.ndim != 2 or self.vectors.shape[1] != self.n_obj:
            raise ValueError(f"vectors must have shape (n_vectors, {self.n_obj}), got {self.vectors.shape}")
        vectors = self.vectors.copy()
        vectors.setflags(write=False)
        object.__setattr__(self, "vectors", vectors)

    @classmethod
    def build(cls, n_obj: int, h: int) -> "WeightVectorSet":
        """Generate the lattice for (n_obj, h)."""
        return cls(n_obj=n_obj, h=h, vectors=uniform_weight_vectors(n_obj, h))

    def __len__(self) -> int:
        return self.vectors.shape[0]
