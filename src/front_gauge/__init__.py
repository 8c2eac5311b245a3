"""front-gauge: quality indicators for multi-objective optimization.

A pure numpy implementation of the classic Pareto front quality indicators:
convergence (GD, IGD, maximum error, relative progress), diversity (spacing,
spread), cardinality (ONVG, ONVGR, NVA, error ratio), coverage (two set
coverage, epsilon), utility (R2, R3) and volume (hypervolume, hyperarea
ratio).

Example (single indicator):
    >>> from front_gauge import GenerationalDistance
    >>> gd = GenerationalDistance(p=2)
    >>> gd.set_front([[0.0, 0.0]])
    >>> gd.set_second_front([[1.0, 1.0]])
    >>> round(gd.calculate(), 6)
    1.414214

Example (batch evaluation by name):
    >>> from front_gauge import create_indicator, evaluate_indicators
    >>> front = [[1.0, 4.0], [2.0, 2.0], [4.0, 1.0]]
    >>> results = evaluate_indicators(
    ...     front,
    ...     {"hv": create_indicator("hypervolume"), "onvg": create_indicator("onvg")},
    ...     problem_maximized=False,
    ... )
    >>> results["onvg"]
    3.0
"""

from front_gauge.evaluation import evaluate_indicators
from front_gauge.exceptions import (
    ConfigurationError,
    FrontFormatError,
    FrontShapeError,
    HypervolumeBudgetExceeded,
    HypervolumeError,
    IndicatorError,
    MissingFrontError,
)
from front_gauge.fronts import FrontSet, OneFront, ThreeFronts, TwoFronts, as_front
from front_gauge.hypervolume import hypervolume
from front_gauge.indicators import (
    NOT_COMPUTED,
    NVA,
    ONVG,
    ONVGR,
    R2,
    R3,
    Epsilon,
    ErrorRatio,
    GeneralizedSpread,
    GenerationalDistance,
    HyperareaRatio,
    Hypervolume,
    Indicator,
    InvertedGenerationalDistance,
    MaximumError,
    RelativeProgress,
    Requirement,
    Spacing,
    Spread,
    TwoSetCoverage,
)
from front_gauge.io import front_from_candidates, load_front
from front_gauge.preprocessing import (
    Preprocessing,
    classify_preprocessing,
    invert_objectives,
    scale_objectives,
)
from front_gauge.primitives import (
    dominates,
    dominates_matrix,
    minkowski,
    nearest_neighbor_distance,
    raw_power,
)
from front_gauge.registry import IndicatorRegistry, create_indicator, list_indicators
from front_gauge.weights import WeightVectorSet, uniform_weight_vectors

__all__ = [
    # Indicator base
    "Indicator",
    "Requirement",
    "NOT_COMPUTED",
    # Convergence indicators
    "GenerationalDistance",
    "InvertedGenerationalDistance",
    "MaximumError",
    "RelativeProgress",
    # Diversity indicators
    "Spacing",
    "Spread",
    "GeneralizedSpread",
    # Cardinality indicators
    "ONVG",
    "ONVGR",
    "NVA",
    "ErrorRatio",
    # Coverage indicators
    "TwoSetCoverage",
    "Epsilon",
    # Utility indicators
    "R2",
    "R3",
    # Volume indicators
    "Hypervolume",
    "HyperareaRatio",
    "hypervolume",
    # Fronts
    "as_front",
    "FrontSet",
    "OneFront",
    "TwoFronts",
    "ThreeFronts",
    "front_from_candidates",
    "load_front",
    # Primitives
    "dominates",
    "dominates_matrix",
    "minkowski",
    "raw_power",
    "nearest_neighbor_distance",
    "uniform_weight_vectors",
    "WeightVectorSet",
    # Registry system
    "IndicatorRegistry",
    "create_indicator",
    "list_indicators",
    # Preprocessing and batch evaluation
    "Preprocessing",
    "classify_preprocessing",
    "invert_objectives",
    "scale_objectives",
    "evaluate_indicators",
    # Errors
    "IndicatorError",
    "FrontShapeError",
    "FrontFormatError",
    "MissingFrontError",
    "ConfigurationError",
    "HypervolumeError",
    "HypervolumeBudgetExceeded",
]
