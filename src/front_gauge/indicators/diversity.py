"""Diversity indicators: how evenly a front covers its extent.

- Spacing: spread of nearest-neighbour distances within the front
- Spread: Deb's delta for bi-objective fronts
- GeneralizedSpread: delta generalized to any number of objectives
"""

from collections.abc import Mapping
from typing import Any

import numpy as np

from front_gauge.fronts import FrontLike
from front_gauge.indicators.base import Indicator, Requirement, parse_flag
from front_gauge.primitives import minkowski, minkowski_matrix, nearest_neighbor_distance


class Spacing(Indicator):
    """Spacing (SP) of a front.

    For each solution, d_i is the Manhattan distance to its nearest other
    solution. The indicator is the sample standard deviation of the d_i:

        SP = sqrt(sum_i (mean(d) - d_i)^2 / (n - 1))

    Zero means perfectly even spacing. Fronts with fewer than two solutions
    give 0.0. Requires objectives scaled to [0, 1].
    """

    arity = 1
    requires_scaled = Requirement.REQUIRED_TRUE

    def _compute(self) -> float | None:
        front = self._front
        n = len(front)
        if n < 2:
            return 0.0

        distances = minkowski_matrix(front, front, p=1)
        # A solution is not its own neighbour; duplicates elsewhere still are
        np.fill_diagonal(distances, np.inf)
        d = distances.min(axis=1)

        mean = d.mean()
        return float(np.sqrt(np.sum((mean - d) ** 2) / (n - 1)))


def lexicographic_order(front: np.ndarray, maximize: bool = True) -> np.ndarray:
    """Indices that sort a front lexicographically by all objectives.

    Objective 0 is the primary key. The order is ascending when ``maximize``
    is True and descending otherwise. Ties keep their original order.

    Example:
        >>> lexicographic_order(np.array([[1.0, 2.0], [0.0, 5.0], [1.0, 1.0]]))
        array([1, 2, 0])
    """
    keys = front if maximize else -front
    # np.lexsort treats the LAST key as primary
    return np.lexsort(keys.T[::-1])


class Spread(Indicator):
    """Spread (delta) of a front against the true front.

    Both fronts are sorted lexicographically (direction-aware, on private
    copies). With d_f and d_l the Euclidean distances between the first and
    last solutions of the sorted front and of the sorted true front, and d_i
    the distances between consecutive solutions of the sorted front:

        delta = (d_f + d_l + sum_i |d_i - mean(d)|) / (d_f + d_l + (n - 1) * mean(d))

    Zero means an ideal, evenly spread front reaching the extremes. A front
    with at most one solution gives 1.0, and so does a zero denominator
    (every solution sits on both extremes of the true front). An empty true
    front leaves the sentinel.

    Args:
        maximize: Whether objectives are maximized. Controls the sort
            direction and the declared maximization requirement.
    """

    arity = 2
    requires_max = Requirement.REQUIRED_TRUE
    requires_scaled = Requirement.REQUIRED_TRUE

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
        """Apply settings; understands ``second-pareto-front`` and ``max``."""
        super().configure(settings)
        if "max" in settings:
            self.set_maximize(parse_flag(settings["max"], "max"))

    def _compute(self) -> float | None:
        n = len(self._front)
        if n <= 1:
            return 1.0
        if len(self._second_front) == 0:
            return None

        front = self._front[lexicographic_order(self._front, self.maximize)]
        true_front = self._second_front[lexicographic_order(self._second_front, self.maximize)]

        d_first = minkowski(front[0], true_front[0])
        d_last = minkowski(front[-1], true_front[-1])

        d = np.sqrt(np.sum(np.diff(front, axis=0) ** 2, axis=1))
        mean = d.sum() / (n - 1)
        deviation = np.sum(np.abs(d - mean))

        denominator = d_first + d_last + (n - 1) * mean
        if denominator == 0:
            # Every solution coincides with both extremes of the true front
            return 1.0
        return float((d_first + d_last + deviation) / denominator)


class GeneralizedSpread(Spread):
    """Generalized spread for any number of objectives.

    The extremes are taken from the true front: e_k is the true-front solution
    with the largest value of objective k. With nn(x, A) the Euclidean
    distance from x to its nearest solution of the front at a nonzero
    distance, and d_i = nn(a_i, A):

        delta = (sum_k nn(e_k, A) + sum_i |d_i - mean(d)|) / (sum_k nn(e_k, A) + n * mean(d))

    If all solutions coincide (mean(d) = 0) the result is 1.0, as it is for a
    front with at most one solution. An empty true front leaves the sentinel.
    """

    def _compute(self) -> float | None:
        front = self._front
        n = len(front)
        if n <= 1:
            return 1.0
        if len(self._second_front) == 0:
            return None

        true_front = self._second_front
        extremes = true_front[np.argmax(true_front, axis=0)]
        extreme_distance = sum(nearest_neighbor_distance(e, front) for e in extremes)

        d = np.array([nearest_neighbor_distance(a, front) for a in front])
        mean = d.sum() / n
        if mean == 0:
            return 1.0

        deviation = np.sum(np.abs(d - mean))
        return float((extreme_distance + deviation) / (extreme_distance + n * mean))
