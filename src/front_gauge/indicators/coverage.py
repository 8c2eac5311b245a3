"""Coverage indicators: how one front compares with another solution by solution.

- TwoSetCoverage: fraction of the second front dominated by the first
- Epsilon: multiplicative epsilon factor between two fronts
"""

from collections.abc import Mapping
from typing import Any

import numpy as np

from front_gauge.fronts import FrontLike
from front_gauge.indicators.base import NOT_COMPUTED, Indicator, Requirement, parse_flag
from front_gauge.primitives import dominates_matrix


def same_solutions(front_a: np.ndarray, front_b: np.ndarray) -> bool:
    """True if both fronts have the same size and every solution of a is in b."""
    if len(front_a) != len(front_b):
        return False
    matches = np.all(front_a[:, np.newaxis, :] == front_b[np.newaxis, :, :], axis=2)
    return bool(matches.any(axis=1).all())


class TwoSetCoverage(Indicator):
    """Two set coverage C(A, B).

    The fraction of solutions in B dominated by at least one solution in A.
    C(A, B) = 1 means every solution of B is dominated by A; C(A, B) = 0
    means none is. The measure is not symmetric, so C(B, A) should be
    considered as well.

    Either front empty gives -1. Two fronts holding the same solutions give
    1.0 by definition.

    Args:
        maximize: Direction used by the dominance test (default True). The
            indicator works on unscaled objectives.
    """

    arity = 2
    requires_max = Requirement.REQUIRED_TRUE
    requires_scaled = Requirement.REQUIRED_FALSE

    def __init__(
        self,
        front: FrontLike | None = None,
        second_front: FrontLike | None = None,
        maximize: bool = True,
    ) -> None:
        super().__init__(front, second_front)
        self.set_maximize(maximize)

    def set_maximize(self, maximize: bool) -> None:
        self.maximize = bool(maximize)
        self._requires_max = Requirement.from_flag(self.maximize)

    def configure(self, settings: Mapping[str, Any]) -> None:
        """Apply settings; understands ``second-pareto-front`` and ``max`` (default True)."""
        super().configure(settings)
        self.set_maximize(parse_flag(settings.get("max", True), "max"))

    def _compute(self) -> float | None:
        front_a, front_b = self._front, self._second_front
        if len(front_a) == 0 or len(front_b) == 0:
            return NOT_COMPUTED
        if same_solutions(front_a, front_b):
            return 1.0

        dominated = dominates_matrix(front_a, front_b, maximize=self.maximize).any(axis=0)
        return np.count_nonzero(dominated) / len(front_b)


class Epsilon(Indicator):
    """Multiplicative epsilon indicator I_eps(A, B).

    For each solution a of the front, the smallest factor needed for some
    solution b of the second front to reach it is

        eps(a) = min_b max_k (b_k / a_k)

    where objectives with a_k = 0 are skipped. The indicator is the largest
    eps(a) over the front. Requires a maximization problem with objectives
    scaled to [0, 1]. Either front empty leaves the sentinel.
    """

    arity = 2
    requires_max = Requirement.REQUIRED_TRUE
    requires_scaled = Requirement.REQUIRED_TRUE

    def _compute(self) -> float | None:
        front_a, front_b = self._front, self._second_front
        if len(front_a) == 0 or len(front_b) == 0:
            return None

        a = front_a[:, np.newaxis, :]
        b = front_b[np.newaxis, :, :]
        with np.errstate(divide="ignore", invalid="ignore"):
            ratios = np.where(a != 0.0, b / a, -np.inf)
        # (n_a, n_b): worst objective ratio of each pair
        pair_eps = ratios.max(axis=2)
        return float(pair_eps.min(axis=1).max())
