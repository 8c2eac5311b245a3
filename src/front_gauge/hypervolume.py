"""Exact hypervolume by recursive slicing.

The hypervolume of a front is the volume of objective space it dominates. This
module assumes a maximization problem with objectives scaled to [0, 1], and
measures the volume against the origin, the worst corner of the normalized
space.

The algorithm (Zitzler's recursive slicing) works on the first ``n`` rows and
the first ``m`` objectives of a working copy of the front:

1. Keep only the rows that are non-dominated on the first m-1 objectives.
2. Measure the (m-1)-dimensional slice those rows cover: the largest value of
   objective 0 when m < 3, a recursive call otherwise.
3. Find the lowest value of objective m-1 across the n rows; the slice extends
   from the previous bound up to it.
4. Drop the rows whose objective m-1 does not exceed that bound, and repeat
   until no row is left.

Rows are removed by swapping them past the active prefix, so the working copy
is permuted as the computation proceeds. The caller's array is never touched.
"""

import logging

import numpy as np

from front_gauge.exceptions import HypervolumeBudgetExceeded, HypervolumeError
from front_gauge.primitives import dominates

logger = logging.getLogger(__name__)


class _HypervolumeEngine:
    """Recursive slicing over a private working copy of a front."""

    def __init__(self, front: np.ndarray, max_steps: int | None = None) -> None:
        self.points = np.array(front, dtype=np.float64, copy=True)
        self.max_steps = max_steps
        self.steps = 0

    def _swap(self, i: int, j: int) -> None:
        self.points[[i, j]] = self.points[[j, i]]

    def _tick(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise HypervolumeBudgetExceeded(self.max_steps)

    def filter_nondominated(self, n: int, n_obj: int) -> int:
        """Move the rows non-dominated on the first n_obj objectives to the front.

        Returns:
            Number of non-dominated rows among the first n.
        """
        points = self.points
        i = 0
        while i < n:
            j = i + 1
            while j < n:
                if dominates(points[i], points[j], n_obj, maximize=True):
                    n -= 1
                    self._swap(j, n)
                elif dominates(points[j], points[i], n_obj, maximize=True):
                    n -= 1
                    self._swap(i, n)
                    # Row i was replaced; examine the new row i from scratch
                    i -= 1
                    break
                else:
                    j += 1
            i += 1
        return n

    def lowest_value(self, n: int, objective: int) -> float:
        return float(self.points[:n, objective].min())

    def reduce(self, n: int, objective: int, threshold: float) -> int:
        """Drop the rows whose objective value is <= threshold.

        Returns:
            Number of rows left in the active prefix.
        """
        i = 0
        while i < n:
            if self.points[i, objective] <= threshold:
                n -= 1
                self._swap(i, n)
            else:
                i += 1
        return n

    def volume(self, n: int, n_obj: int) -> float:
        total = 0.0
        bound = 0.0
        while n > 0:
            self._tick()
            n_nondominated = self.filter_nondominated(n, n_obj - 1)

            if n_obj < 3:
                if n_nondominated < 1:
                    raise HypervolumeError("front too small: no non-dominated solution left to slice")
                slice_volume = float(self.points[0, 0])
            else:
                slice_volume = self.volume(n_nondominated, n_obj - 1)

            new_bound = self.lowest_value(n, n_obj - 1)
            total += slice_volume * (new_bound - bound)
            bound = new_bound
            n = self.reduce(n, n_obj - 1, bound)
        return total


def hypervolume(front: np.ndarray, max_steps: int | None = None) -> float:
    """Compute the hypervolume dominated by a front.

    Args:
        front: Objective values, shape (n_solutions, n_objectives). Assumed to
            be maximized and scaled to [0, 1]; the reference point is the origin.
        max_steps: Optional budget on slicing iterations across the whole
            recursion. None means unbounded.

    Returns:
        The dominated volume.

    Raises:
        HypervolumeError: If the front has no solutions or holds non-finite values.
        HypervolumeBudgetExceeded: If max_steps is exceeded.

    Examples:
        >>> hypervolume(np.array([[0.5, 0.5]]))
        0.25
        >>> hypervolume(np.array([[1.0, 0.0], [0.0, 1.0], [0.5, 0.5]]))
        0.25
    """
    if front.ndim != 2 or front.shape[0] == 0 or front.shape[1] == 0:
        raise HypervolumeError(
            "front too small: hypervolume requires at least one solution and one objective",
            details={"shape": front.shape},
        )
    if not np.isfinite(front).all():
        raise HypervolumeError("hypervolume requires finite objective values", details={"shape": front.shape})

    engine = _HypervolumeEngine(front, max_steps)
    value = engine.volume(front.shape[0], front.shape[1])
    logger.debug(
        "hypervolume of %d solutions x %d objectives = %r (%d steps)",
        front.shape[0],
        front.shape[1],
        value,
        engine.steps,
    )
    return value
