"""ZDT Pareto fronts for indicator benchmarking.

The ZDT (Zitzler-Deb-Thiele) test suite has analytically known Pareto fronts,
which makes it a convenient source of true fronts and of approximations at a
controlled distance from them. All problems minimize 2 objectives with
f1 in [0, 1].

References:
    Zitzler, E., Deb, K., & Thiele, L. (2000). Comparison of multiobjective
    evolutionary algorithms: Empirical results. Evolutionary computation, 8(2), 173-195.
"""

from collections.abc import Callable

import numpy as np

from front_gauge import dominates_matrix


def zdt1_front(f1: np.ndarray) -> np.ndarray:
    """ZDT1: convex front, f2 = 1 - sqrt(f1)."""
    return 1 - np.sqrt(f1)


def zdt2_front(f1: np.ndarray) -> np.ndarray:
    """ZDT2: concave front, f2 = 1 - f1^2."""
    return 1 - f1**2


def zdt3_front(f1: np.ndarray) -> np.ndarray:
    """ZDT3: discontinuous front, f2 = 1 - sqrt(f1) - f1 * sin(10 * pi * f1).

    Only the non-dominated parts of the curve belong to the front; callers
    filter them with true_front().
    """
    return 1 - np.sqrt(f1) - f1 * np.sin(10 * np.pi * f1)


# Registry of all ZDT fronts
FRONTS: dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "zdt1": zdt1_front,
    "zdt2": zdt2_front,
    "zdt3": zdt3_front,
}


def _non_dominated(front: np.ndarray) -> np.ndarray:
    dominated = dominates_matrix(front, front).any(axis=0)
    return front[~dominated]


def true_front(name: str, n_points: int) -> np.ndarray:
    """Sample the true front of a ZDT problem (minimization).

    Args:
        name: Problem name, one of FRONTS.
        n_points: Number of f1 samples in [0, 1].

    Returns:
        (n, 2) non-dominated objective vectors, n <= n_points.
    """
    f1 = np.linspace(0.0, 1.0, n_points)
    front = np.column_stack([f1, FRONTS[name](f1)])
    return _non_dominated(front)


def approximate_front(name: str, n_points: int, offset: float, rng: np.random.Generator) -> np.ndarray:
    """Sample a front lying roughly ``offset`` behind the true front.

    Every f2 value is shifted up by offset times a uniform factor in [0.5, 1.5],
    which emulates the distance g(x) - 1 of a partially converged run.
    """
    f1 = np.sort(rng.uniform(0.0, 1.0, n_points))
    f2 = FRONTS[name](f1) + offset * rng.uniform(0.5, 1.5, n_points)
    return _non_dominated(np.column_stack([f1, f2]))
