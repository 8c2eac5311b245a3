"""Base abstractions for quality indicators.

Every indicator stores up to three fronts, declares whether it needs a
maximization formulation and objectives scaled to [0, 1], and caches the
scalar produced by its last calculate() call.

The number of fronts an indicator reads is its ``arity``:

1. **Unary** indicators evaluate one front on its own (Hypervolume, Spacing,
   ONVG).
2. **Binary** indicators compare the front with a second front, usually the
   true Pareto front (GD, IGD, R2, TwoSetCoverage, ...).
3. **Ternary** indicators compare two fronts of the same run against the true
   front (RelativeProgress).

Fronts are attached either through the setters or by passing a FrontSet
(OneFront, TwoFronts, ThreeFronts) to calculate().

Example usage:
    ```python
    gd = GenerationalDistance(p=2)
    gd.set_front(approximation)
    gd.set_second_front(true_front)
    value = gd.calculate()

    # Equivalent, with a tagged front set
    value = gd.calculate(TwoFronts(approximation, true_front))
    ```

When an indicator's preconditions are not met (empty front, zero
denominator) the result is the NOT_COMPUTED sentinel (-1.0) and no exception
is raised. Malformed input raises an IndicatorError subclass instead.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from typing import Any, ClassVar

import numpy as np

from front_gauge.exceptions import ConfigurationError, MissingFrontError
from front_gauge.fronts import FrontLike, FrontSet, OneFront, ThreeFronts, TwoFronts, as_front, check_compatible

logger = logging.getLogger(__name__)

NOT_COMPUTED: float = -1.0
"""Sentinel result meaning "not computed" or "precondition not met"."""


_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0"})


def parse_flag(value: Any, key: str = "flag") -> bool:
    """Read a boolean setting that may arrive as a string from a config file.

    Raises:
        ConfigurationError: If a string value is not a recognized boolean.
    """
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise ConfigurationError(f"{key} must be a boolean, got {value!r}", details={key: value})
    return bool(value)


class Requirement(Enum):
    """Whether an indicator needs a property of the objective space.

    Used for both the maximization and the scaling declarations.
    """

    IRRELEVANT = "irrelevant"
    REQUIRED_TRUE = "required_true"
    REQUIRED_FALSE = "required_false"

    @classmethod
    def from_flag(cls, flag: bool) -> "Requirement":
        """Map a boolean to REQUIRED_TRUE / REQUIRED_FALSE."""
        return cls.REQUIRED_TRUE if flag else cls.REQUIRED_FALSE


class Indicator(ABC):
    """Abstract quality indicator.

    Subclasses set the class attributes below and implement ``_compute``,
    which returns the indicator value or None when the result must stay at
    the sentinel.

    Class Attributes:
        arity: Number of fronts read by the indicator (1, 2 or 3).
        requires_max: Default maximization requirement.
        requires_scaled: Default scaling requirement.

    Example:
        ```python
        class Cardinality(Indicator):
            arity = 1

            def _compute(self) -> float | None:
                return float(len(self.front))
        ```
    """

    arity: ClassVar[int] = 1
    requires_max: ClassVar[Requirement] = Requirement.IRRELEVANT
    requires_scaled: ClassVar[Requirement] = Requirement.IRRELEVANT

    _ROLES: ClassVar[tuple[str, ...]] = ("front", "second front", "true front")

    def __init__(
        self,
        front: FrontLike | None = None,
        second_front: FrontLike | None = None,
        true_front: FrontLike | None = None,
    ) -> None:
        self._front: np.ndarray | None = None
        self._second_front: np.ndarray | None = None
        self._true_front: np.ndarray | None = None
        self._result: float = NOT_COMPUTED
        self._requires_max = type(self).requires_max
        self._requires_scaled = type(self).requires_scaled

        if second_front is not None and self.arity < 2:
            raise TypeError(f"{self.name} is unary and does not take a second front")
        if true_front is not None and self.arity < 3:
            raise TypeError(f"{self.name} does not take a true front")

        if front is not None:
            self.set_front(front)
        if second_front is not None:
            self.set_second_front(second_front)
        if true_front is not None:
            self.set_true_front(true_front)

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Display name of the indicator (the class name)."""
        return type(self).__name__

    def requires_max_problem(self) -> Requirement:
        """Whether the indicator must be fed a maximization formulation."""
        return self._requires_max

    def requires_scaled_objectives(self) -> Requirement:
        """Whether the indicator must be fed objectives scaled to [0, 1]."""
        return self._requires_scaled

    # ------------------------------------------------------------------
    # Fronts and result
    # ------------------------------------------------------------------

    @property
    def front(self) -> np.ndarray | None:
        return self._front

    @property
    def second_front(self) -> np.ndarray | None:
        return self._second_front

    @property
    def true_front(self) -> np.ndarray | None:
        return self._true_front

    @property
    def result(self) -> float:
        """Result of the last calculate() call, or NOT_COMPUTED."""
        return self._result

    def set_front(self, front: FrontLike) -> None:
        """Attach the front under evaluation (validated and copied)."""
        self._front = as_front(front, "front")

    def set_second_front(self, front: FrontLike) -> None:
        """Attach the second front (validated and copied).

        Raises:
            TypeError: If the indicator is unary.
        """
        if self.arity < 2:
            raise TypeError(f"{self.name} is unary and does not take a second front")
        self._second_front = as_front(front, "second front")

    def set_true_front(self, front: FrontLike) -> None:
        """Attach the true front (validated and copied).

        Raises:
            TypeError: If the indicator is not ternary.
        """
        if self.arity < 3:
            raise TypeError(f"{self.name} does not take a true front")
        self._true_front = as_front(front, "true front")

    def attach(self, fronts: FrontSet) -> None:
        """Attach every front carried by a FrontSet.

        Raises:
            TypeError: If the FrontSet carries more fronts than the indicator reads.
        """
        if isinstance(fronts, OneFront):
            self.set_front(fronts.front)
        elif isinstance(fronts, TwoFronts):
            self.set_front(fronts.front)
            self.set_second_front(fronts.second)
        elif isinstance(fronts, ThreeFronts):
            self.set_front(fronts.front)
            self.set_second_front(fronts.second)
            self.set_true_front(fronts.true)
        else:
            raise TypeError(f"fronts must be a OneFront, TwoFronts or ThreeFronts, got {type(fronts).__name__}")

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def configure(self, settings: Mapping[str, Any]) -> None:
        """Apply per-indicator settings.

        The base implementation understands ``second-pareto-front``: the path
        of a file holding the second front, read with load_front(). Subclasses
        extend this with their own keys.

        Args:
            settings: Mapping of setting names to values.
        """
        path = settings.get("second-pareto-front")
        if path is not None and self.arity >= 2:
            from front_gauge.io import load_front

            self.set_second_front(load_front(path))

    # ------------------------------------------------------------------
    # Computation
    # ------------------------------------------------------------------

    def calculate(self, fronts: FrontSet | None = None) -> float:
        """Compute the indicator and cache the result.

        Args:
            fronts: Optional FrontSet to attach before computing. When None the
                currently attached fronts are used.

        Returns:
            The indicator value, or NOT_COMPUTED (-1.0) when the indicator's
            preconditions are not met.

        Raises:
            MissingFrontError: If a front the indicator reads is not attached.
            FrontShapeError: If attached fronts disagree on the number of objectives.
        """
        if fronts is not None:
            self.attach(fronts)

        self._result = NOT_COMPUTED
        attached = self._required_fronts()
        for i in range(1, len(attached)):
            check_compatible(attached[0], attached[i], self._ROLES[0], self._ROLES[i])

        value = self._compute()
        if value is not None:
            self._result = float(value)

        logger.debug("%s computed %r", self.name, self._result)
        return self._result

    def _required_fronts(self) -> list[np.ndarray]:
        fronts = [self._front, self._second_front, self._true_front][: self.arity]
        for role, front in zip(self._ROLES, fronts):
            if front is None:
                raise MissingFrontError(self.name, role)
        return fronts

    @abstractmethod
    def _compute(self) -> float | None:
        """Return the indicator value, or None to leave the sentinel."""
        ...
