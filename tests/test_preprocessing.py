"""Tests for objective preprocessing: classification, inversion and scaling."""

import numpy as np
import pytest

from front_gauge.exceptions import FrontShapeError
from front_gauge.indicators import ONVG, GenerationalDistance, Hypervolume, TwoSetCoverage
from front_gauge.preprocessing import (
    Preprocessing,
    classify_preprocessing,
    invert_objectives,
    preprocess,
    scale_objectives,
)


class TestClassifyPreprocessing:
    """Mapping of indicator declarations and problem direction to a view."""

    @pytest.mark.parametrize("problem_maximized", [True, False])
    def test_no_requirements(self, problem_maximized: bool) -> None:
        assert classify_preprocessing(ONVG(), problem_maximized) is Preprocessing.IDENTITY

    @pytest.mark.parametrize("problem_maximized", [True, False])
    def test_scale_only(self, problem_maximized: bool) -> None:
        assert classify_preprocessing(GenerationalDistance(), problem_maximized) is Preprocessing.SCALE

    @pytest.mark.parametrize(
        ("maximize", "problem_maximized", "expected"),
        [
            (True, True, Preprocessing.IDENTITY),
            (True, False, Preprocessing.INVERT),
            (False, False, Preprocessing.IDENTITY),
            (False, True, Preprocessing.INVERT),
        ],
    )
    def test_direction_only(self, maximize: bool, problem_maximized: bool, expected: Preprocessing) -> None:
        coverage = TwoSetCoverage(maximize=maximize)
        assert classify_preprocessing(coverage, problem_maximized) is expected

    def test_scale_on_maximization_problem(self) -> None:
        assert classify_preprocessing(Hypervolume(), problem_maximized=True) is Preprocessing.SCALE

    def test_invert_and_scale_on_minimization_problem(self) -> None:
        assert classify_preprocessing(Hypervolume(), problem_maximized=False) is Preprocessing.INVERT_SCALE


class TestInvertObjectives:
    def test_negates_values(self) -> None:
        np.testing.assert_array_equal(invert_objectives(np.array([[1.0, -2.0, 3.5]])), [[-1.0, 2.0, -3.5]])

    def test_zero_stays_positive_zero(self) -> None:
        inverted = invert_objectives(np.array([[0.0, 1.0]]))
        assert inverted[0, 0] == 0.0
        assert not np.signbit(inverted[0, 0])

    def test_returns_new_array(self) -> None:
        front = np.array([[1.0, 2.0]])
        invert_objectives(front)
        np.testing.assert_array_equal(front, [[1.0, 2.0]])


class TestScaleObjectives:
    def test_front_bounds(self) -> None:
        front = np.array([[0.0, 10.0], [5.0, 20.0], [10.0, 30.0]])
        np.testing.assert_allclose(scale_objectives(front), [[0.0, 0.0], [0.5, 0.5], [1.0, 1.0]])

    def test_constant_objective_maps_to_one(self) -> None:
        front = np.array([[1.0, 5.0], [2.0, 5.0]])
        np.testing.assert_allclose(scale_objectives(front)[:, 1], [1.0, 1.0])

    def test_explicit_bounds_clip(self) -> None:
        front = np.array([[-1.0, 10.0], [2.5, 30.0]])
        scaled = scale_objectives(front, lower=np.array([0.0, 0.0]), upper=np.array([5.0, 20.0]))
        np.testing.assert_allclose(scaled, [[0.0, 0.5], [0.5, 1.0]])

    def test_bad_bounds_raise(self) -> None:
        with pytest.raises(FrontShapeError, match="bounds must have 2 values"):
            scale_objectives(np.ones((2, 2)), lower=np.zeros(3))

    def test_empty_front(self) -> None:
        assert scale_objectives(np.zeros((0, 2))).shape == (0, 2)

    def test_returns_new_array(self) -> None:
        front = np.array([[0.0, 10.0], [10.0, 30.0]])
        scale_objectives(front)
        np.testing.assert_array_equal(front, [[0.0, 10.0], [10.0, 30.0]])


class TestPreprocess:
    def test_identity_copies(self) -> None:
        front = np.array([[1.0, 2.0]])
        view = preprocess(front, Preprocessing.IDENTITY)
        view[0, 0] = 9.0
        assert front[0, 0] == 1.0

    def test_invert_scale_mirrors_bounds(self) -> None:
        """Inverting then scaling with original bounds equals 1 - scaled."""
        front = np.array([[1.0, 4.0], [3.0, 2.0]])
        lower, upper = np.array([0.0, 0.0]), np.array([4.0, 4.0])
        view = preprocess(front, Preprocessing.INVERT_SCALE, lower, upper)
        np.testing.assert_allclose(view, 1.0 - scale_objectives(front, lower, upper))

    def test_invert_scale_without_bounds(self) -> None:
        front = np.array([[1.0, 4.0], [2.0, 2.0], [4.0, 1.0]])
        view = preprocess(front, Preprocessing.INVERT_SCALE)
        np.testing.assert_allclose(view, [[1.0, 0.0], [2 / 3, 2 / 3], [0.0, 1.0]])
