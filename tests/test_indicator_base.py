"""Tests for the Indicator base class lifecycle.

Covers front attachment (setters and FrontSets), arity checks, the
NOT_COMPUTED sentinel, requirement declarations and file-based settings.
"""

from pathlib import Path

import numpy as np
import pytest

from front_gauge.exceptions import ConfigurationError, FrontShapeError, MissingFrontError
from front_gauge.fronts import OneFront, ThreeFronts, TwoFronts
from front_gauge.indicators import (
    NOT_COMPUTED,
    GenerationalDistance,
    Hypervolume,
    Indicator,
    RelativeProgress,
    Requirement,
)
from front_gauge.indicators.base import parse_flag


class CountingIndicator(Indicator):
    """Unary indicator returning the front size, or the sentinel when empty."""

    arity = 1

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.calls = 0

    def _compute(self) -> float | None:
        self.calls += 1
        if len(self.front) == 0:
            return None
        return float(len(self.front))


class TestLifecycle:
    """Attaching fronts and computing results."""

    def test_result_defaults_to_sentinel(self) -> None:
        assert CountingIndicator().result == NOT_COMPUTED

    def test_setter_then_calculate(self) -> None:
        indicator = CountingIndicator()
        indicator.set_front([[0.0, 1.0], [1.0, 0.0]])
        assert indicator.calculate() == 2.0
        assert indicator.result == 2.0

    def test_constructor_front(self) -> None:
        assert CountingIndicator([[0.5, 0.5]]).calculate() == 1.0

    def test_frontset_is_attached(self) -> None:
        indicator = CountingIndicator()
        assert indicator.calculate(OneFront([[1.0], [2.0], [3.0]])) == 3.0
        assert indicator.front.shape == (3, 1)

    def test_calculate_resets_previous_result(self) -> None:
        """A later calculate() whose preconditions fail reads the sentinel."""
        indicator = CountingIndicator([[1.0, 1.0]])
        assert indicator.calculate() == 1.0
        indicator.set_front(np.zeros((0, 2)))
        assert indicator.calculate() == NOT_COMPUTED
        assert indicator.result == NOT_COMPUTED

    def test_calculate_is_idempotent(self) -> None:
        indicator = CountingIndicator([[1.0], [2.0]])
        assert indicator.calculate() == indicator.calculate()

    def test_setter_copies_front(self) -> None:
        data = np.array([[0.1, 0.2]])
        indicator = CountingIndicator(data)
        data[0, 0] = 5.0
        assert indicator.front[0, 0] == pytest.approx(0.1)

    def test_name_is_class_name(self) -> None:
        assert CountingIndicator().name == "CountingIndicator"
        assert GenerationalDistance().name == "GenerationalDistance"


class TestArity:
    """Indicators reject fronts they do not read and require those they do."""

    def test_unary_rejects_second_front(self) -> None:
        with pytest.raises(TypeError, match="unary"):
            Hypervolume().set_second_front([[1.0, 1.0]])

    def test_binary_rejects_true_front(self) -> None:
        with pytest.raises(TypeError, match="does not take a true front"):
            GenerationalDistance().set_true_front([[1.0, 1.0]])

    def test_unary_rejects_two_fronts(self) -> None:
        with pytest.raises(TypeError):
            CountingIndicator().calculate(TwoFronts([[1.0]], [[1.0]]))

    def test_missing_front_raises(self) -> None:
        with pytest.raises(MissingFrontError, match="requires a front"):
            CountingIndicator().calculate()

    def test_missing_second_front_raises(self) -> None:
        gd = GenerationalDistance()
        gd.set_front([[0.0, 0.0]])
        with pytest.raises(MissingFrontError, match="set_second_front"):
            gd.calculate()

    def test_missing_true_front_raises(self) -> None:
        rp = RelativeProgress()
        rp.set_front([[0.0, 0.0]])
        rp.set_second_front([[0.0, 0.0]])
        with pytest.raises(MissingFrontError, match="true front"):
            rp.calculate()

    def test_ternary_accepts_three_fronts(self) -> None:
        rp = RelativeProgress()
        rp.calculate(ThreeFronts([[0.0, 0.0]], [[0.5, 0.5]], [[1.0, 1.0]]))
        assert rp.true_front.shape == (1, 2)

    def test_mismatched_widths_raise(self) -> None:
        gd = GenerationalDistance([[0.0, 0.0]], [[1.0, 1.0, 1.0]])
        with pytest.raises(FrontShapeError, match="objectives"):
            gd.calculate()

    def test_attach_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="OneFront, TwoFronts or ThreeFronts"):
            CountingIndicator().attach([[1.0]])  # type: ignore[arg-type]


class TestRequirements:
    """Declarations consumed by the preprocessing step."""

    def test_class_defaults(self) -> None:
        indicator = CountingIndicator()
        assert indicator.requires_max_problem() is Requirement.IRRELEVANT
        assert indicator.requires_scaled_objectives() is Requirement.IRRELEVANT

    def test_hypervolume_requires_max_and_scaled(self) -> None:
        hv = Hypervolume()
        assert hv.requires_max_problem() is Requirement.REQUIRED_TRUE
        assert hv.requires_scaled_objectives() is Requirement.REQUIRED_TRUE

    def test_from_flag(self) -> None:
        assert Requirement.from_flag(True) is Requirement.REQUIRED_TRUE
        assert Requirement.from_flag(False) is Requirement.REQUIRED_FALSE


class TestConfigure:
    """Settings shared by every indicator."""

    def test_second_front_from_file(self, front_file: Path) -> None:
        gd = GenerationalDistance()
        gd.configure({"second-pareto-front": str(front_file)})
        assert gd.second_front.shape == (3, 2)
        gd.set_front([[0.0, 1.0]])
        assert gd.calculate() == pytest.approx(0.0)

    def test_unary_ignores_second_front_setting(self, front_file: Path) -> None:
        indicator = CountingIndicator()
        indicator.configure({"second-pareto-front": str(front_file)})
        assert indicator.second_front is None

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("true", True), ("False", False), (" yes ", True), ("0", False), (True, True), (0, False)],
    )
    def test_parse_flag(self, value: object, expected: bool) -> None:
        assert parse_flag(value) is expected

    def test_parse_flag_rejects_unknown_strings(self) -> None:
        with pytest.raises(ConfigurationError, match="max must be a boolean"):
            parse_flag("maybe", "max")
