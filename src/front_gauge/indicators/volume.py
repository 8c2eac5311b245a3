"""Volume indicators built on the hypervolume engine."""

from front_gauge.exceptions import ConfigurationError
from front_gauge.fronts import FrontLike, OneFront
from front_gauge.hypervolume import hypervolume
from front_gauge.indicators.base import NOT_COMPUTED, Indicator, Requirement


def check_max_steps(max_steps: int | None) -> int | None:
    """Validate a hypervolume step budget; None means unbounded.

    Raises:
        ConfigurationError: If the budget is not a positive integer.
    """
    if max_steps is not None and max_steps <= 0:
        raise ConfigurationError(
            f"max_steps must be positive, got {max_steps}",
            suggestion="Use None for an unbounded computation.",
            details={"max_steps": max_steps},
        )
    return max_steps


class Hypervolume(Indicator):
    """Hypervolume (HV) dominated by a front.

    Measured against the origin on a maximization problem with objectives
    scaled to [0, 1]. An empty front leaves the sentinel.

    Args:
        max_steps: Optional budget on slicing iterations; exceeding it raises
            HypervolumeBudgetExceeded.

    Example:
        >>> Hypervolume([[0.5, 0.5]]).calculate()
        0.25
    """

    arity = 1
    requires_max = Requirement.REQUIRED_TRUE
    requires_scaled = Requirement.REQUIRED_TRUE

    def __init__(self, front: FrontLike | None = None, max_steps: int | None = None) -> None:
        super().__init__(front)
        self.max_steps = check_max_steps(max_steps)

    def _compute(self) -> float | None:
        if len(self._front) == 0:
            return None
        return hypervolume(self._front, self.max_steps)


class HyperareaRatio(Indicator):
    """Hyperarea ratio (HR): HV(front) / HV(second front).

    The second front is usually the true front, so values close to 1 are
    better. If either hypervolume is zero or could not be computed the
    sentinel is left.
    """

    arity = 2
    requires_max = Requirement.REQUIRED_TRUE
    requires_scaled = Requirement.REQUIRED_TRUE

    def __init__(
        self,
        front: FrontLike | None = None,
        second_front: FrontLike | None = None,
        max_steps: int | None = None,
    ) -> None:
        super().__init__(front, second_front)
        self.max_steps = check_max_steps(max_steps)

    def _compute(self) -> float | None:
        hv = Hypervolume(max_steps=self.max_steps)
        hv_front = hv.calculate(OneFront(self._front))
        hv_second = hv.calculate(OneFront(self._second_front))

        if hv_front in (0.0, NOT_COMPUTED) or hv_second in (0.0, NOT_COMPUTED):
            return None
        return hv_front / hv_second
