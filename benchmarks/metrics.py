"""Reference hypervolume for cross-checking front-gauge.

front-gauge measures the hypervolume of a maximized front scaled to [0, 1]
against the origin. pymoo minimizes and measures against an upper reference
point, so the front is negated and the reference point is the origin.
"""

import numpy as np
from pymoo.indicators.hv import HV


def reference_hypervolume(front: np.ndarray) -> float:
    """Compute the hypervolume of a maximized, scaled front with pymoo.

    Args:
        front: (n, n_obj) objective values, maximized and scaled to [0, 1].

    Returns:
        Volume dominated by the front, measured against the origin.

    Raises:
        ValueError: If the front is empty or not 2D.
    """
    if front.size == 0:
        raise ValueError("front cannot be empty")

    if front.ndim != 2:
        raise ValueError(f"front must be 2D array, got shape {front.shape}")

    indicator = HV(ref_point=np.zeros(front.shape[1]))
    return float(indicator(-front))
