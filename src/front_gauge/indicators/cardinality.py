"""Cardinality indicators: how many solutions a front has, and how many are right.

- ONVG: overall non-dominated vector generation, the size of the front
- ONVGR: ONVG ratio against the true front
- NVA: non-dominated vector addition, the signed size difference of two fronts
- ErrorRatio: fraction of the front that is not in the true front
"""

import numpy as np

from front_gauge.indicators.base import NOT_COMPUTED, Indicator


class ONVG(Indicator):
    """Overall non-dominated vector generation: |A|."""

    arity = 1

    def _compute(self) -> float | None:
        return float(len(self._front))


class ONVGR(Indicator):
    """ONVG ratio: |A| / |B|. An empty second front leaves the sentinel."""

    arity = 2

    def _compute(self) -> float | None:
        n_second = len(self._second_front)
        if n_second == 0:
            return None
        return len(self._front) / n_second


class NVA(Indicator):
    """Non-dominated vector addition: |A| - |B|.

    Typically A is the front after a step of the search and B the front
    before it, so a positive value means solutions were added. The value is
    signed and may itself be -1.0; check that both fronts are attached rather
    than comparing against the sentinel.
    """

    arity = 2

    def _compute(self) -> float | None:
        return float(len(self._front) - len(self._second_front))


class ErrorRatio(Indicator):
    """Error ratio (ER): fraction of the front absent from the true front.

    A solution counts as present only if some true-front solution matches it
    exactly in every objective. Zero means every solution is on the true
    front. Either front empty gives -1.
    """

    arity = 2

    def _compute(self) -> float | None:
        front, true_front = self._front, self._second_front
        if len(front) == 0 or len(true_front) == 0:
            return NOT_COMPUTED

        matches = np.all(front[:, np.newaxis, :] == true_front[np.newaxis, :, :], axis=2)
        n_missing = np.count_nonzero(~matches.any(axis=1))
        return n_missing / len(front)
