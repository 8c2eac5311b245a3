"""Convergence indicators: how close a front lies to the true Pareto front.

- GenerationalDistance: aggregated distance from the front to the true front
- InvertedGenerationalDistance: aggregated distance from the true front to the front
- MaximumError: worst-case distance from the front to the true front
- RelativeProgress: change in generational distance between two moments of a run
"""

import math
from collections.abc import Mapping
from typing import Any

import numpy as np

from front_gauge.exceptions import ConfigurationError
from front_gauge.fronts import FrontLike, TwoFronts
from front_gauge.indicators.base import NOT_COMPUTED, Indicator, Requirement
from front_gauge.primitives import minkowski_matrix, raw_power_matrix


def _validate_p(p: int) -> int:
    if isinstance(p, bool) or not isinstance(p, (int, np.integer)) or p <= 0:
        raise ConfigurationError(f"p must be a positive integer, got {p!r}", details={"p": p})
    return int(p)


class _MinkowskiIndicator(Indicator):
    """Binary indicator parameterized by a Minkowski exponent ``p``."""

    arity = 2
    requires_scaled = Requirement.REQUIRED_TRUE

    def __init__(
        self,
        front: FrontLike | None = None,
        second_front: FrontLike | None = None,
        p: int = 2,
    ) -> None:
        super().__init__(front, second_front)
        self.p = _validate_p(p)

    def configure(self, settings: Mapping[str, Any]) -> None:
        """Apply settings; understands ``second-pareto-front`` and ``p`` (default 2)."""
        super().configure(settings)
        p = settings.get("p", 2)
        try:
            p = int(p)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"p must be a positive integer, got {p!r}", details={"p": p}) from exc
        self.p = _validate_p(p)


class GenerationalDistance(_MinkowskiIndicator):
    """Generational distance (GD) of the front to the true front.

    For every solution of the front, the nearest solution of the true front is
    found with the raw Minkowski sum sum(|a_k - b_k|^p). Those sums are added
    up, the p-th root is taken ONCE over the total, and the result is divided
    by the size of the front:

        GD = (sum_i min_j raw_power(a_i, b_j, p)) ^ (1/p) / |A|

    Requires objectives scaled to [0, 1]. Either front empty leaves the
    sentinel.

    Example:
        >>> GenerationalDistance([[0.0, 0.0]], [[1.0, 1.0]]).calculate()
        1.4142135623730951
    """

    def _compute(self) -> float | None:
        front, true_front = self._front, self._second_front
        if len(front) == 0 or len(true_front) == 0:
            return None
        nearest = raw_power_matrix(front, true_front, self.p).min(axis=1)
        return float(np.sum(nearest) ** (1.0 / self.p) / len(front))


class InvertedGenerationalDistance(_MinkowskiIndicator):
    """Inverted generational distance (IGD).

    Same aggregation as GenerationalDistance with the roles of the fronts
    swapped: for every solution of the true front, the nearest solution of
    the front. The total is still divided by the size of the FRONT, not of
    the true front:

        IGD = (sum_j min_i raw_power(b_j, a_i, p)) ^ (1/p) / |A|

    Requires objectives scaled to [0, 1]. Either front empty leaves the
    sentinel.
    """

    def _compute(self) -> float | None:
        front, true_front = self._front, self._second_front
        if len(front) == 0 or len(true_front) == 0:
            return None
        nearest = raw_power_matrix(true_front, front, self.p).min(axis=1)
        return float(np.sum(nearest) ** (1.0 / self.p) / len(front))


class MaximumError(_MinkowskiIndicator):
    """Maximum Pareto front error (ME).

    The largest Minkowski distance from a solution of the front to its
    nearest solution of the true front. Unlike GD, the root is applied per
    point. An empty front gives -1; an empty true front leaves the sentinel.
    """

    def _compute(self) -> float | None:
        front, true_front = self._front, self._second_front
        if len(front) == 0:
            return NOT_COMPUTED
        if len(true_front) == 0:
            return None
        nearest = minkowski_matrix(front, true_front, self.p).min(axis=1)
        return float(nearest.max())


class RelativeProgress(Indicator):
    """Relative progress (RP) of a run between two moments.

    Fronts: the approximation at an earlier time (front), the approximation
    at a later time (second front) and the true front. With
    g1 = GD(front, true) and gt = GD(second, true):

        RP = ln(g1 / gt)

    Positive values mean the later front is closer to the true front. If both
    distances are zero the result is 0. If gt is zero (and g1 is not) or
    either distance could not be computed, the sentinel is left. If g1 is zero
    and gt is not, the result is -inf.
    """

    arity = 3
    requires_scaled = Requirement.REQUIRED_TRUE

    def _compute(self) -> float | None:
        gd = GenerationalDistance()
        g_1 = gd.calculate(TwoFronts(self._front, self._true_front))
        g_t = gd.calculate(TwoFronts(self._second_front, self._true_front))

        if g_t != 0.0 and g_t != NOT_COMPUTED and g_1 != NOT_COMPUTED:
            if g_1 == 0.0:
                return -math.inf
            return math.log(g_1 / g_t)
        if g_t == 0.0 and g_1 == 0.0:
            return 0.0
        return None
