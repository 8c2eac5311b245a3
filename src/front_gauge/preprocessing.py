"""Objective-space preprocessing before an indicator is computed.

Indicators declare whether they need a maximization formulation and whether
they need objectives scaled to [0, 1]. Given the direction of the problem that
produced a front, each indicator gets one of four views of it:

1. IDENTITY: the front as is
2. INVERT: objectives negated, turning minimization into maximization or back
3. SCALE: objectives min-max scaled into [0, 1]
4. INVERT_SCALE: negated, then scaled

All functions return new arrays; the input front is never modified.
"""

from enum import Enum

import numpy as np

from front_gauge.exceptions import FrontShapeError
from front_gauge.indicators.base import Indicator, Requirement


class Preprocessing(Enum):
    """View of the front an indicator must be fed."""

    IDENTITY = 1
    INVERT = 2
    SCALE = 3
    INVERT_SCALE = 4


def classify_preprocessing(indicator: Indicator, problem_maximized: bool) -> Preprocessing:
    """Decide which view of the front an indicator needs.

    Inversion is needed when the indicator requires a direction (maximize or
    minimize) that differs from the problem's. Scaling is needed when the
    indicator requires scaled objectives.

    Args:
        indicator: Indicator whose declarations are inspected.
        problem_maximized: Whether the problem that produced the front maximizes.

    Example:
        >>> classify_preprocessing(Hypervolume(), problem_maximized=False)
        <Preprocessing.INVERT_SCALE: 4>
    """
    requires_max = indicator.requires_max_problem()
    scale = indicator.requires_scaled_objectives() is Requirement.REQUIRED_TRUE

    if requires_max is Requirement.IRRELEVANT:
        return Preprocessing.SCALE if scale else Preprocessing.IDENTITY

    invert = (requires_max is Requirement.REQUIRED_TRUE) != bool(problem_maximized)
    if scale:
        return Preprocessing.INVERT_SCALE if invert else Preprocessing.SCALE
    return Preprocessing.INVERT if invert else Preprocessing.IDENTITY


def invert_objectives(front: np.ndarray) -> np.ndarray:
    """Negate every nonzero objective value.

    Zeros are left untouched so that no -0.0 appears in the result.
    """
    front = np.asarray(front, dtype=np.float64)
    return np.where(front != 0.0, -front, front)


def scale_objectives(
    front: np.ndarray,
    lower: np.ndarray | None = None,
    upper: np.ndarray | None = None,
) -> np.ndarray:
    """Min-max scale each objective into [0, 1].

    Args:
        front: Objective values, shape (n_solutions, n_objectives).
        lower: Per-objective lower bounds. Defaults to the front's minima.
        upper: Per-objective upper bounds. Defaults to the front's maxima.

    Returns:
        Scaled copy of the front. Values outside the bounds are clipped to
        [0, 1], and objectives whose bounds coincide map to 1.0.

    Raises:
        FrontShapeError: If a bound does not have one value per objective.
    """
    front = np.asarray(front, dtype=np.float64)
    if front.shape[0] == 0:
        return front.copy()

    n_obj = front.shape[1]
    lower = front.min(axis=0) if lower is None else np.asarray(lower, dtype=np.float64)
    upper = front.max(axis=0) if upper is None else np.asarray(upper, dtype=np.float64)
    if lower.shape != (n_obj,) or upper.shape != (n_obj,):
        raise FrontShapeError(
            f"bounds must have {n_obj} values, got lower {lower.shape} and upper {upper.shape}",
        )

    span = upper - lower
    constant = span == 0.0
    with np.errstate(divide="ignore", invalid="ignore"):
        scaled = np.clip((front - lower) / np.where(constant, 1.0, span), 0.0, 1.0)
    scaled[:, constant] = 1.0
    return scaled


def preprocess(
    front: np.ndarray,
    mode: Preprocessing,
    lower: np.ndarray | None = None,
    upper: np.ndarray | None = None,
) -> np.ndarray:
    """Apply a preprocessing mode to a copy of the front.

    ``lower`` and ``upper`` are bounds of the ORIGINAL objectives. When the
    front is inverted before scaling they are mirrored accordingly.
    """
    if mode is Preprocessing.IDENTITY:
        return np.array(front, dtype=np.float64, copy=True)
    if mode is Preprocessing.INVERT:
        return invert_objectives(front)
    if mode is Preprocessing.SCALE:
        return scale_objectives(front, lower, upper)

    inverted_lower = None if upper is None else -np.asarray(upper, dtype=np.float64)
    inverted_upper = None if lower is None else -np.asarray(lower, dtype=np.float64)
    return scale_objectives(invert_objectives(front), inverted_lower, inverted_upper)
