"""Tests for batch evaluation of indicators."""

import numpy as np
import pytest

from front_gauge import (
    NOT_COMPUTED,
    ONVG,
    GenerationalDistance,
    HyperareaRatio,
    Hypervolume,
    RelativeProgress,
    Spacing,
    create_indicator,
    evaluate_indicators,
)


@pytest.fixture
def minimization_front() -> np.ndarray:
    """A bi-objective minimization front; inverted and scaled it has HV 4/9."""
    return np.array([[1.0, 4.0], [2.0, 2.0], [4.0, 1.0]])


class TestEvaluateIndicators:
    """Tests for evaluate_indicators."""

    def test_sequence_is_labelled_by_name(self, minimization_front: np.ndarray) -> None:
        results = evaluate_indicators(minimization_front, [Hypervolume(), ONVG()], problem_maximized=False)
        assert set(results) == {"Hypervolume", "ONVG"}
        assert results["ONVG"] == 3.0

    def test_mapping_keeps_labels(self, minimization_front: np.ndarray) -> None:
        results = evaluate_indicators(minimization_front, {"hv": Hypervolume()}, problem_maximized=False)
        assert list(results) == ["hv"]

    def test_front_is_inverted_and_scaled(self, minimization_front: np.ndarray) -> None:
        results = evaluate_indicators(minimization_front, [Hypervolume()], problem_maximized=False)
        assert results["Hypervolume"] == pytest.approx(4 / 9)

    def test_explicit_bounds(self, minimization_front: np.ndarray) -> None:
        """With bounds [0, 4] the inverted, scaled front is 1 - f / 4."""
        results = evaluate_indicators(
            minimization_front,
            [Hypervolume()],
            problem_maximized=False,
            lower=np.array([0.0, 0.0]),
            upper=np.array([4.0, 4.0]),
        )
        expected = Hypervolume(1.0 - minimization_front / 4.0).calculate()
        assert results["Hypervolume"] == pytest.approx(expected)

    def test_input_front_is_not_modified(self, minimization_front: np.ndarray) -> None:
        original = minimization_front.copy()
        evaluate_indicators(minimization_front, [Hypervolume(), Spacing()], problem_maximized=False)
        np.testing.assert_array_equal(minimization_front, original)

    def test_results_cached_on_instances(self, minimization_front: np.ndarray) -> None:
        hv = Hypervolume()
        results = evaluate_indicators(minimization_front, [hv], problem_maximized=False)
        assert hv.result == results["Hypervolume"]

    def test_second_front_attached(self) -> None:
        front = np.array([[0.0, 1.0], [1.0, 0.0]])
        results = evaluate_indicators(front, [GenerationalDistance()], problem_maximized=True, second_front=front)
        assert results["GenerationalDistance"] == 0.0

    def test_configured_second_front_is_kept(self, front_file) -> None:
        front = np.array([[0.0, 1.0], [1.0, 0.0]])
        gd = create_indicator("gd", {"second-pareto-front": str(front_file)})
        results = evaluate_indicators(front, [gd], problem_maximized=True)
        assert results["GenerationalDistance"] == 0.0

    def test_true_front_attached_for_ternary(self) -> None:
        front = np.array([[0.0, 1.0], [1.0, 0.0]])
        results = evaluate_indicators(
            front,
            [RelativeProgress()],
            problem_maximized=True,
            second_front=front,
            true_front=front,
        )
        assert results["RelativeProgress"] == 0.0

    def test_failure_is_isolated(self, minimization_front: np.ndarray) -> None:
        """An indicator missing its second front records -1; the others still run."""
        results = evaluate_indicators(
            minimization_front,
            {"gd": GenerationalDistance(), "hv": Hypervolume(max_steps=1), "onvg": ONVG()},
            problem_maximized=False,
        )
        assert results["gd"] == NOT_COMPUTED
        assert results["hv"] == NOT_COMPUTED
        assert results["onvg"] == 3.0

    def test_misconfigured_budget_is_isolated(self) -> None:
        """A budget broken after construction fails only its own indicator."""
        ratio = HyperareaRatio(second_front=[[1.0, 1.0]])
        ratio.max_steps = 0
        results = evaluate_indicators(
            [[0.5, 0.5]],
            {"hr": ratio, "onvg": ONVG()},
            problem_maximized=True,
        )
        assert results == {"hr": NOT_COMPUTED, "onvg": 1.0}

    def test_parallel_matches_sequential(self, rng: np.random.Generator) -> None:
        front = rng.uniform(size=(20, 3))
        true = rng.uniform(size=(30, 3))

        def build():
            return {
                "hv": Hypervolume(),
                "gd": GenerationalDistance(second_front=true),
                "sp": Spacing(),
                "onvg": ONVG(),
            }

        sequential = evaluate_indicators(front, build(), problem_maximized=True)
        parallel = evaluate_indicators(front, build(), problem_maximized=True, n_workers=2)
        assert parallel == pytest.approx(sequential)

    def test_zero_workers_raises(self, minimization_front: np.ndarray) -> None:
        with pytest.raises(ValueError, match="n_workers"):
            evaluate_indicators(minimization_front, [ONVG()], problem_maximized=True, n_workers=0)

    def test_shared_instance_raises(self, minimization_front: np.ndarray) -> None:
        hv = Hypervolume()
        with pytest.raises(ValueError, match="'a' and 'b' are the same instance"):
            evaluate_indicators(minimization_front, {"a": hv, "b": hv}, problem_maximized=False, n_workers=2)
