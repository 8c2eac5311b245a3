"""Front data structures for indicator computation.

This module provides the representation of the fronts an indicator reads:

- as_front: validate and copy anything matrix-like into a FrontMatrix
- OneFront, TwoFronts, ThreeFronts: the FrontSet tagged union handed to
  Indicator.calculate()

A FrontMatrix is a 2D float64 numpy array of shape (n_solutions, n_objectives).
An empty front is allowed; it has shape (0, n_objectives) or (0, 0).

The FrontSet classes are immutable (frozen dataclasses) and copy their arrays
on construction, so indicators never alias caller data.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from front_gauge.exceptions import FrontShapeError

FrontLike = np.ndarray | Sequence[Sequence[float]]


def as_front(data: FrontLike, name: str = "front") -> np.ndarray:
    """Convert data to a validated FrontMatrix.

    Args:
        data: A 2D numpy array or a sequence of equally long sequences of numbers.
        name: Name used in error messages.

    Returns:
        A new float64 array of shape (n_solutions, n_objectives). The input is
        always copied.

    Raises:
        FrontShapeError: If rows have different lengths, values are not numeric,
            the data is not two-dimensional, or it holds NaN or infinite values.

    Examples:
        >>> as_front([[1, 2], [3, 4]]).shape
        (2, 2)
        >>> as_front([]).shape
        (0, 0)
    """
    if not isinstance(data, np.ndarray):
        try:
            rows = [list(row) for row in data]
        except TypeError as exc:
            raise FrontShapeError(
                f"{name} must be a sequence of solutions, each a sequence of objective values",
                details={"name": name},
            ) from exc
        lengths = {len(row) for row in rows}
        if len(lengths) > 1:
            raise FrontShapeError(
                f"{name} is ragged: rows have {sorted(lengths)} objectives",
                suggestion="Every solution in a front must have the same number of objectives.",
                details={"name": name, "lengths": sorted(lengths)},
            )
        data = rows

    try:
        front = np.array(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise FrontShapeError(f"{name} must contain only numeric values: {exc}", details={"name": name}) from exc

    if front.ndim == 1 and front.size == 0:
        front = front.reshape(0, 0)
    if front.ndim != 2:
        raise FrontShapeError(
            f"{name} must be 2D (n_solutions, n_objectives), got shape {front.shape}",
            details={"name": name, "shape": front.shape},
        )
    if not np.isfinite(front).all():
        rows, cols = np.nonzero(~np.isfinite(front))
        raise FrontShapeError(
            f"{name} contains non-finite objective values (first at row {rows[0]}, objective {cols[0]})",
            suggestion="Remove or repair solutions with NaN or infinite objectives.",
            details={"name": name, "row": int(rows[0]), "objective": int(cols[0])},
        )
    return front


def check_compatible(front: np.ndarray, other: np.ndarray, name: str, other_name: str) -> None:
    """Ensure two non-empty fronts have the same number of objectives.

    Raises:
        FrontShapeError: If both fronts are non-empty and their widths differ.
    """
    if len(front) == 0 or len(other) == 0:
        return
    if front.shape[1] != other.shape[1]:
        raise FrontShapeError(
            f"{name} has {front.shape[1]} objectives but {other_name} has {other.shape[1]}",
            details={name: front.shape, other_name: other.shape},
        )


@dataclass(frozen=True)
class OneFront:
    """A single front, for unary indicators.

    Attributes:
        front: The Pareto front approximation under evaluation.
    """

    front: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "front", as_front(self.front, "front"))


@dataclass(frozen=True)
class TwoFronts:
    """A front plus a second front, for binary indicators.

    Attributes:
        front: The Pareto front approximation under evaluation.
        second: The second front, usually the true (reference) Pareto front.

    Example:
        >>> fs = TwoFronts(front=[[0.0, 0.0]], second=[[1.0, 1.0]])
        >>> fs.second.shape
        (1, 2)
    """

    front: np.ndarray
    second: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "front", as_front(self.front, "front"))
        object.__setattr__(self, "second", as_front(self.second, "second front"))


@dataclass(frozen=True)
class ThreeFronts:
    """Two fronts plus the true front, for ternary indicators.

    Attributes:
        front: The Pareto front approximation at an earlier time.
        second: The Pareto front approximation at a later time.
        true: The true (reference) Pareto front.
    """

    front: np.ndarray
    second: np.ndarray
    true: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "front", as_front(self.front, "front"))
        object.__setattr__(self, "second", as_front(self.second, "second front"))
        object.__setattr__(self, "true", as_front(self.true, "true front"))


FrontSet = OneFront | TwoFronts | ThreeFronts
