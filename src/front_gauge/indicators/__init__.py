"""Quality indicators for Pareto front approximations."""

from front_gauge.indicators.base import NOT_COMPUTED, Indicator, Requirement
from front_gauge.indicators.cardinality import NVA, ONVG, ONVGR, ErrorRatio
from front_gauge.indicators.convergence import (
    GenerationalDistance,
    InvertedGenerationalDistance,
    MaximumError,
    RelativeProgress,
)
from front_gauge.indicators.coverage import Epsilon, TwoSetCoverage
from front_gauge.indicators.diversity import GeneralizedSpread, Spacing, Spread
from front_gauge.indicators.utility import R2, R3
from front_gauge.indicators.volume import HyperareaRatio, Hypervolume
from front_gauge.registry import IndicatorRegistry

# Register built-in indicators
IndicatorRegistry.register("hypervolume", Hypervolume)
IndicatorRegistry.register("hyperarea_ratio", HyperareaRatio)
IndicatorRegistry.register("gd", GenerationalDistance)
IndicatorRegistry.register("igd", InvertedGenerationalDistance)
IndicatorRegistry.register("maximum_error", MaximumError)
IndicatorRegistry.register("spacing", Spacing)
IndicatorRegistry.register("error_ratio", ErrorRatio)
IndicatorRegistry.register("two_set_coverage", TwoSetCoverage)
IndicatorRegistry.register("nva", NVA)
IndicatorRegistry.register("onvg", ONVG)
IndicatorRegistry.register("onvgr", ONVGR)
IndicatorRegistry.register("spread", Spread)
IndicatorRegistry.register("generalized_spread", GeneralizedSpread)
IndicatorRegistry.register("relative_progress", RelativeProgress)
IndicatorRegistry.register("r2", R2)
IndicatorRegistry.register("r3", R3)
IndicatorRegistry.register("epsilon", Epsilon)

__all__ = [
    "NOT_COMPUTED",
    "Indicator",
    "Requirement",
    "ErrorRatio",
    "Epsilon",
    "GeneralizedSpread",
    "GenerationalDistance",
    "HyperareaRatio",
    "Hypervolume",
    "InvertedGenerationalDistance",
    "MaximumError",
    "NVA",
    "ONVG",
    "ONVGR",
    "R2",
    "R3",
    "RelativeProgress",
    "Spacing",
    "Spread",
    "TwoSetCoverage",
]
