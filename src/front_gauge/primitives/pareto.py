"""Pareto dominance primitives.

This module provides the dominance tests shared by the indicators:
- dominates: scalar Pareto dominance check, optionally on a leading subset of objectives
- dominates_matrix: vectorized pairwise dominance between two fronts
"""

import numpy as np


def dominates(
    a: np.ndarray,
    b: np.ndarray,
    n_obj: int | None = None,
    maximize: bool = False,
) -> bool:
    """Check if solution a Pareto-dominates solution b.

    A solution a dominates b if and only if, over the first ``n_obj`` objectives:
      - a is at least as good as b in ALL of them
      - a is strictly better than b in AT LEAST ONE of them

    "Better" means greater when ``maximize`` is True and smaller otherwise.
    A point never dominates itself.

    Args:
        a: Objective values for solution a. Shape (n_obj_total,).
        b: Objective values for solution b. Shape (n_obj_total,).
        n_obj: Number of leading objectives to compare. None compares all of them.
        maximize: Direction of the comparison.

    Returns:
        True if a dominates b, False otherwise.

    Examples:
        >>> dominates(np.array([1.0, 2.0]), np.array([2.0, 3.0]))
        True
        >>> dominates(np.array([1.0, 2.0]), np.array([2.0, 3.0]), maximize=True)
        False
        >>> dominates(np.array([1.0, 5.0]), np.array([2.0, 3.0]), n_obj=1)
        True
    """
    if n_obj is not None:
        a = a[:n_obj]
        b = b[:n_obj]

    if maximize:
        return bool(np.all(a >= b) and np.any(a > b))
    return bool(np.all(a <= b) and np.any(a < b))


def dominates_matrix(
    front_a: np.ndarray,
    front_b: np.ndarray,
    n_obj: int | None = None,
    maximize: bool = False,
) -> np.ndarray:
    """Compute pairwise dominance between two fronts (vectorized).

    Uses broadcasting to compute whether solution i of ``front_a`` dominates
    solution j of ``front_b`` for all pairs (i, j).

    Args:
        front_a: Objective values, shape (n_a, n_obj_total).
        front_b: Objective values, shape (n_b, n_obj_total).
        n_obj: Number of leading objectives to compare. None compares all of them.
        maximize: Direction of the comparison.

    Returns:
        Boolean array of shape (n_a, n_b) where result[i, j] = True iff
        front_a[i] dominates front_b[j].

    Examples:
        >>> a = np.array([[1.0, 1.0], [3.0, 0.0]])
        >>> b = np.array([[2.0, 2.0]])
        >>> dominates_matrix(a, b)
        array([[ True],
               [False]])
    """
    if n_obj is not None:
        front_a = front_a[:, :n_obj]
        front_b = front_b[:, :n_obj]

    # Reshape for broadcasting: (n_a, 1, n_obj) vs (1, n_b, n_obj)
    a = front_a[:, np.newaxis, :]
    b = front_b[np.newaxis, :, :]

    if maximize:
        at_least_as_good = np.all(a >= b, axis=2)
        strictly_better = np.any(a > b, axis=2)
    else:
        at_least_as_good = np.all(a <= b, axis=2)
        strictly_better = np.any(a < b, axis=2)

    return at_least_as_good & strictly_better
