"""Utility-based indicators: R2 and R3.

Both fronts are scored along a lattice of weight vectors with the weighted
Tchebycheff utility

    u(x, w, ref) = max_i(w_i * |x_i - ref_i|)

and, for each weight vector, the best (lowest) utility over each front is
kept. R2 averages the difference of those utilities and R3 their relative
difference.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from front_gauge.exceptions import ConfigurationError, FrontShapeError
from front_gauge.fronts import FrontLike
from front_gauge.indicators.base import Indicator, Requirement
from front_gauge.weights import WeightVectorSet

R3_ZERO_UTILITY_DIVISOR = 10e-20
"""Divisor used by R3 when the second front's utility is zero."""


def parse_reference_point(value: str | Sequence[float]) -> np.ndarray:
    """Read a reference point given as "0,0,0" or as a sequence of numbers.

    Raises:
        ConfigurationError: If a coordinate is not numeric or the point is empty.
    """
    tokens = value.split(",") if isinstance(value, str) else list(value)
    try:
        point = np.array([float(t) for t in tokens], dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"Error parsing reference point coordinates: {value!r}",
            details={"refPoint": value},
        ) from exc
    if point.size == 0:
        raise ConfigurationError("reference point must have at least one coordinate")
    return point


def tchebycheff_utilities(front: np.ndarray, weights: np.ndarray, ref_point: np.ndarray) -> np.ndarray:
    """Best weighted Tchebycheff utility of a front for every weight vector.

    Args:
        front: Objective values, shape (n_solutions, n_obj).
        weights: Weight vectors, shape (n_vectors, n_obj).
        ref_point: Reference point, shape (n_obj,).

    Returns:
        Array of shape (n_vectors,): min over solutions of max_i(w_i * |x_i - ref_i|).
    """
    gaps = np.abs(front - ref_point)
    # (n_vectors, n_solutions, n_obj) -> max over objectives, min over solutions
    utilities = (weights[:, np.newaxis, :] * gaps[np.newaxis, :, :]).max(axis=2)
    return utilities.min(axis=1)


class R2(Indicator):
    """R2 indicator: mean utility gain of the front over the second front.

        R2 = mean_v (uB[v] - uA[v])

    where uA and uB are the best Tchebycheff utilities of the front and the
    second front for weight vector v. Requires a maximization problem with
    objectives scaled to [0, 1]. Either front empty leaves the sentinel.

    Args:
        ref_point: Reference point, one coordinate per objective.
        h: Resolution of the weight-vector lattice.

    Both arguments may instead come from configure() through the ``refPoint``
    and ``H`` settings.
    """

    arity = 2
    requires_max = Requirement.REQUIRED_TRUE
    requires_scaled = Requirement.REQUIRED_TRUE

    def __init__(
        self,
        front: FrontLike | None = None,
        second_front: FrontLike | None = None,
        ref_point: str | Sequence[float] | None = None,
        h: int | None = None,
    ) -> None:
        super().__init__(front, second_front)
        self.ref_point: np.ndarray | None = None
        self.weights: WeightVectorSet | None = None
        if ref_point is not None or h is not None:
            if ref_point is None or h is None:
                raise ConfigurationError(f"{self.name} needs both ref_point and h")
            self.setup(ref_point, h)

    @property
    def h(self) -> int | None:
        return None if self.weights is None else self.weights.h

    def setup(self, ref_point: str | Sequence[float], h: int) -> None:
        """Set the reference point and build the weight vectors for it.

        Raises:
            ConfigurationError: If the reference point cannot be parsed or h
                is not a valid resolution for its dimension.
        """
        point = parse_reference_point(ref_point)
        if isinstance(h, bool) or not isinstance(h, (int, np.integer)):
            raise ConfigurationError(f"H must be an integer, got {h!r}", details={"H": h})
        self.weights = WeightVectorSet.build(n_obj=point.size, h=int(h))
        self.ref_point = point

    def configure(self, settings: Mapping[str, Any]) -> None:
        """Apply settings; understands ``second-pareto-front``, ``refPoint`` and ``H``."""
        super().configure(settings)
        if "refPoint" not in settings or "H" not in settings:
            raise ConfigurationError(
                f"{self.name} requires the refPoint and H settings",
                details={"keys": sorted(settings)},
            )
        try:
            h = int(settings["H"])
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"H must be an integer, got {settings['H']!r}") from exc
        self.setup(settings["refPoint"], h)

    def _utilities(self) -> tuple[np.ndarray, np.ndarray] | None:
        if self.weights is None or self.ref_point is None:
            raise ConfigurationError(
                f"{self.name} is not configured",
                suggestion="Pass ref_point and h to the constructor or call configure().",
            )
        front, second = self._front, self._second_front
        if len(front) == 0 or len(second) == 0:
            return None
        if front.shape[1] != self.ref_point.size:
            raise FrontShapeError(
                f"reference point has {self.ref_point.size} coordinates but the fronts have "
                f"{front.shape[1]} objectives"
            )
        vectors = self.weights.vectors
        return (
            tchebycheff_utilities(front, vectors, self.ref_point),
            tchebycheff_utilities(second, vectors, self.ref_point),
        )

    def _compute(self) -> float | None:
        utilities = self._utilities()
        if utilities is None:
            return None
        u_a, u_b = utilities
        return float(np.mean(u_b - u_a))


class R3(R2):
    """R3 indicator: mean relative utility gain of the front.

        R3 = mean_v (uB[v] - uA[v]) / uB[v]

    When uB[v] is zero the difference is divided by R3_ZERO_UTILITY_DIVISOR
    instead.
    """

    def _compute(self) -> float | None:
        utilities = self._utilities()
        if utilities is None:
            return None
        u_a, u_b = utilities
        divisor = np.where(u_b != 0.0, u_b, R3_ZERO_UTILITY_DIVISOR)
        return float(np.mean((u_b - u_a) / divisor))
