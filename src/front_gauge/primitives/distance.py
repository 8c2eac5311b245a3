"""Minkowski-family distances between objective vectors.

Two flavours are provided because indicators disagree on where the root goes:
- minkowski: the usual (sum |a_i - b_i|^p)^(1/p)
- raw_power: the inner sum only. Generational distance sums these across many
  points and applies the root once, after the sum.

The *_matrix variants compute all pairwise values between two fronts.
"""

import numpy as np


def raw_power(a: np.ndarray, b: np.ndarray, p: float = 2) -> float:
    """Return sum(|a_i - b_i|^p) without the outer root.

    Examples:
        >>> raw_power(np.array([0.0, 0.0]), np.array([1.0, 1.0]))
        2.0
    """
    return float(np.sum(np.abs(a - b) ** p))


def minkowski(a: np.ndarray, b: np.ndarray, p: float = 2) -> float:
    """Return the Minkowski distance of order p between a and b.

    Examples:
        >>> minkowski(np.array([0.0, 0.0]), np.array([3.0, 4.0]))
        5.0
        >>> minkowski(np.array([0.0, 0.0]), np.array([3.0, 4.0]), p=1)
        7.0
    """
    return raw_power(a, b, p) ** (1.0 / p)


def raw_power_matrix(front_a: np.ndarray, front_b: np.ndarray, p: float = 2) -> np.ndarray:
    """Pairwise raw_power values between two fronts.

    Args:
        front_a: Shape (n_a, n_obj).
        front_b: Shape (n_b, n_obj).
        p: Minkowski exponent.

    Returns:
        Array of shape (n_a, n_b) where result[i, j] = raw_power(front_a[i], front_b[j], p).
    """
    diff = np.abs(front_a[:, np.newaxis, :] - front_b[np.newaxis, :, :])
    return np.sum(diff**p, axis=2)


def minkowski_matrix(front_a: np.ndarray, front_b: np.ndarray, p: float = 2) -> np.ndarray:
    """Pairwise Minkowski distances between two fronts, shape (n_a, n_b)."""
    return raw_power_matrix(front_a, front_b, p) ** (1.0 / p)


def nearest_neighbor_distance(point: np.ndarray, points: np.ndarray, p: float = 2) -> float:
    """Distance from point to its nearest neighbour in points.

    Candidates at distance zero are the point itself (or duplicates of it) and
    are not neighbours. If no candidate lies at a nonzero distance, the result
    is 0.0 rather than infinity.

    Args:
        point: Shape (n_obj,).
        points: Shape (n, n_obj). May contain ``point`` itself.
        p: Minkowski exponent (2 = Euclidean).

    Returns:
        Smallest nonzero distance, or 0.0 if there is none.

    Examples:
        >>> pts = np.array([[0.0, 0.0], [3.0, 4.0], [6.0, 8.0]])
        >>> nearest_neighbor_distance(pts[0], pts)
        5.0
        >>> nearest_neighbor_distance(pts[0], pts[:1])
        0.0
    """
    if points.shape[0] == 0:
        return 0.0
    distances = minkowski_matrix(point[np.newaxis, :], points, p)[0]
    distances = distances[distances != 0]
    if distances.size == 0:
        return 0.0
    return float(distances.min())
