"""Batch evaluation of several indicators on one front.

evaluate_indicators() feeds every indicator the view of the front it asks for
(see front_gauge.preprocessing), computes them, optionally in parallel, and
collects the results by name. A failing indicator is logged and recorded as
NOT_COMPUTED without stopping the others.

Example:
    ```python
    from front_gauge import create_indicator, evaluate_indicators

    indicators = [
        create_indicator("hypervolume"),
        create_indicator("gd", {"second-pareto-front": "zdt1_true.csv"}),
        create_indicator("spacing"),
    ]
    results = evaluate_indicators(front, indicators, problem_maximized=False)
    # {"Hypervolume": 0.61, "GenerationalDistance": 0.004, "Spacing": 0.02}
    ```
"""

import logging
from collections.abc import Mapping, Sequence

import numpy as np

from front_gauge.exceptions import IndicatorError
from front_gauge.fronts import FrontLike, as_front
from front_gauge.indicators.base import NOT_COMPUTED, Indicator
from front_gauge.preprocessing import Preprocessing, classify_preprocessing, preprocess

logger = logging.getLogger(__name__)


def _evaluate_one(
    name: str,
    indicator: Indicator,
    front: np.ndarray,
    second_front: np.ndarray | None,
    true_front: np.ndarray | None,
) -> float:
    try:
        indicator.set_front(front)
        if second_front is not None and indicator.arity >= 2:
            indicator.set_second_front(second_front)
        if true_front is not None and indicator.arity >= 3:
            indicator.set_true_front(true_front)
        return indicator.calculate()
    except IndicatorError:
        logger.warning("Indicator %s failed; recording %r", name, NOT_COMPUTED, exc_info=True)
        return NOT_COMPUTED


def evaluate_indicators(
    front: FrontLike,
    indicators: Mapping[str, Indicator] | Sequence[Indicator],
    problem_maximized: bool,
    second_front: FrontLike | None = None,
    true_front: FrontLike | None = None,
    lower: np.ndarray | None = None,
    upper: np.ndarray | None = None,
    n_workers: int = 1,
) -> dict[str, float]:
    """Compute several indicators on one front.

    Each indicator receives a private copy of the front, inverted and/or
    scaled as its declarations require. Second and true fronts are attached
    as given, so they must already be expressed in the space the indicator
    expects; indicators that loaded their second front through configure()
    keep it when ``second_front`` is None.

    Args:
        front: The front under evaluation, in the problem's own objective space.
        indicators: Indicators to compute, either as a mapping from label to
            indicator or as a sequence (labelled by Indicator.name). Each entry
            must be a distinct instance, since fronts and results are stored
            on it.
        problem_maximized: Whether the problem that produced the front maximizes.
        second_front: Optional second front for binary and ternary indicators.
        true_front: Optional true front for ternary indicators.
        lower: Per-objective lower bounds used for scaling. Defaults to the
            front's minima.
        upper: Per-objective upper bounds used for scaling. Defaults to the
            front's maxima.
        n_workers: Number of parallel workers (joblib, thread-based). 1 runs
            sequentially; -1 uses all CPU cores.

    Returns:
        Mapping from label to indicator value. Failed indicators map to
        NOT_COMPUTED (-1.0).

    Raises:
        FrontShapeError: If ``front`` is not a valid front.
        ValueError: If n_workers is 0 or an indicator instance appears twice.
    """
    if n_workers == 0:
        raise ValueError("n_workers must be non-zero")

    front = as_front(front, "front")
    second = None if second_front is None else as_front(second_front, "second front")
    true = None if true_front is None else as_front(true_front, "true front")

    if isinstance(indicators, Mapping):
        labelled = list(indicators.items())
    else:
        labelled = [(indicator.name, indicator) for indicator in indicators]

    seen: dict[int, str] = {}
    for name, indicator in labelled:
        if id(indicator) in seen:
            raise ValueError(
                f"Indicators {seen[id(indicator)]!r} and {name!r} are the same instance; "
                "each entry needs its own indicator object"
            )
        seen[id(indicator)] = name

    views: dict[Preprocessing, np.ndarray] = {}
    tasks = []
    for name, indicator in labelled:
        mode = classify_preprocessing(indicator, problem_maximized)
        if mode not in views:
            views[mode] = preprocess(front, mode, lower, upper)
        logger.debug("Indicator %s uses preprocessing %s", name, mode.name)
        tasks.append((name, indicator, views[mode]))

    if n_workers == 1:
        values = [_evaluate_one(name, indicator, view, second, true) for name, indicator, view in tasks]
    else:
        from joblib import Parallel, delayed

        values = Parallel(n_jobs=n_workers, prefer="threads")(
            delayed(_evaluate_one)(name, indicator, view, second, true) for name, indicator, view in tasks
        )

    results = {name: float(value) for (name, _, _), value in zip(tasks, values)}
    logger.info("Evaluated %d indicators on %d solutions", len(results), front.shape[0])
    return results
