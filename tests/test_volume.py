"""Tests for the Hypervolume and HyperareaRatio indicators."""

import numpy as np
import pytest

from front_gauge.exceptions import ConfigurationError, FrontShapeError, HypervolumeBudgetExceeded
from front_gauge.indicators import NOT_COMPUTED, HyperareaRatio, Hypervolume


class TestHypervolumeIndicator:
    def test_unit_point(self) -> None:
        assert Hypervolume([[1.0, 1.0]]).calculate() == pytest.approx(1.0)

    def test_half_point(self) -> None:
        assert Hypervolume([[0.5, 0.5]]).calculate() == pytest.approx(0.25)

    def test_empty_front_leaves_sentinel(self) -> None:
        assert Hypervolume(np.zeros((0, 2))).calculate() == NOT_COMPUTED

    def test_attached_front_is_not_permuted(self) -> None:
        front = np.array([[0.2, 0.8], [0.8, 0.2], [0.1, 0.1]])
        hv = Hypervolume(front)
        hv.calculate()
        np.testing.assert_array_equal(hv.front, front)

    def test_budget_propagates(self) -> None:
        hv = Hypervolume([[0.8, 0.2], [0.2, 0.8]], max_steps=1)
        with pytest.raises(HypervolumeBudgetExceeded):
            hv.calculate()

    @pytest.mark.parametrize("max_steps", [0, -5])
    def test_invalid_budget(self, max_steps: int) -> None:
        with pytest.raises(ConfigurationError, match="max_steps must be positive"):
            Hypervolume(max_steps=max_steps)

    def test_nan_front_rejected_on_attach(self) -> None:
        with pytest.raises(FrontShapeError, match="non-finite"):
            Hypervolume([[0.5, np.nan], [0.2, 0.8]])


class TestHyperareaRatio:
    def test_ratio(self) -> None:
        assert HyperareaRatio([[0.5, 0.5]], [[1.0, 1.0]]).calculate() == pytest.approx(0.25)

    def test_same_front_is_one(self, true_front_2d: np.ndarray) -> None:
        assert HyperareaRatio(true_front_2d[1:-1], true_front_2d[1:-1]).calculate() == pytest.approx(1.0)

    def test_zero_volume_leaves_sentinel(self) -> None:
        """A front lying on the axes has zero volume."""
        assert HyperareaRatio([[1.0, 0.0]], [[1.0, 1.0]]).calculate() == NOT_COMPUTED
        assert HyperareaRatio([[0.5, 0.5]], [[0.0, 1.0]]).calculate() == NOT_COMPUTED

    def test_empty_front_leaves_sentinel(self) -> None:
        assert HyperareaRatio(np.zeros((0, 2)), [[1.0, 1.0]]).calculate() == NOT_COMPUTED

    def test_invalid_budget_rejected_at_construction(self) -> None:
        with pytest.raises(ConfigurationError, match="max_steps must be positive"):
            HyperareaRatio([[0.5, 0.5]], [[1.0, 1.0]], max_steps=0)

    def test_budget_applies_to_both_volumes(self) -> None:
        hr = HyperareaRatio([[0.8, 0.2], [0.2, 0.8]], [[1.0, 1.0]], max_steps=1)
        with pytest.raises(HypervolumeBudgetExceeded):
            hr.calculate()
