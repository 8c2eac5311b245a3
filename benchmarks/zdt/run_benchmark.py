"""Benchmark runner for front-gauge indicators on ZDT fronts.

For each ZDT problem and each distance to the true front, this script:
- times the front-gauge hypervolume against pymoo's and checks they agree
- evaluates every built-in indicator on the approximation in one batch

Usage:
    uv run python benchmarks/zdt/run_benchmark.py
"""

import json
import logging
import sys
import time
from collections import defaultdict
from datetime import UTC, datetime
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np

from benchmarks.metrics import reference_hypervolume
from benchmarks.zdt.problems import FRONTS, approximate_front, true_front
from front_gauge import (
    GenerationalDistance,
    InvertedGenerationalDistance,
    create_indicator,
    evaluate_indicators,
    hypervolume,
    invert_objectives,
    scale_objectives,
)

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# Experiment parameters
N_TRUE_POINTS = 500
N_APPROX_POINTS = 100
OFFSETS = [0.5, 0.1, 0.01]
N_RUNS = 10
SEEDS = list(range(N_RUNS))
N_WORKERS = 4

# Bounds of the minimized ZDT objectives used for scaling
LOWER = np.array([0.0, -1.0])
UPPER = np.array([1.0, 2.0])


def to_maximized_unit(front: np.ndarray) -> np.ndarray:
    """Invert and scale a minimized ZDT front into the hypervolume's space."""
    return scale_objectives(invert_objectives(front), -UPPER, -LOWER)


def time_hypervolume(front: np.ndarray) -> tuple[float, float, float, float]:
    """Time both hypervolume implementations on one front.

    Returns:
        Tuple of (hv, hv_reference, elapsed, elapsed_reference).
    """
    start_time = time.perf_counter()
    hv = hypervolume(front)
    elapsed = time.perf_counter() - start_time

    start_time = time.perf_counter()
    hv_reference = reference_hypervolume(front)
    elapsed_reference = time.perf_counter() - start_time

    return hv, hv_reference, elapsed, elapsed_reference


def build_indicators(true: np.ndarray) -> dict:
    """Create the indicators evaluated against a scaled true front."""
    indicators = {
        "HV": create_indicator("hypervolume"),
        "GD": GenerationalDistance(second_front=true),
        "IGD": InvertedGenerationalDistance(second_front=true),
        "ME": create_indicator("maximum_error"),
        "SP": create_indicator("spacing"),
        "GS": create_indicator("generalized_spread"),
        "R2": create_indicator("r2", {"refPoint": "1,1", "H": 20}),
        "ONVG": create_indicator("onvg"),
    }
    indicators["ME"].set_second_front(true)
    indicators["GS"].set_second_front(true)
    indicators["R2"].set_second_front(true)
    return indicators


def run_benchmark() -> dict:
    """Run the full benchmark suite.

    Returns:
        Dictionary containing metadata and results.
    """
    timestamp = datetime.now(UTC).isoformat()

    metadata = {
        "timestamp": timestamp,
        "parameters": {
            "n_true_points": N_TRUE_POINTS,
            "n_approx_points": N_APPROX_POINTS,
            "offsets": OFFSETS,
            "n_runs": N_RUNS,
            "seeds": SEEDS,
            "n_workers": N_WORKERS,
        },
    }

    results = []
    total_runs = len(FRONTS) * len(OFFSETS) * N_RUNS
    current_run = 0

    for problem_name in FRONTS:
        true = to_maximized_unit(true_front(problem_name, N_TRUE_POINTS))

        for offset in OFFSETS:
            for seed in SEEDS:
                current_run += 1
                logger.info(
                    "Running [%d/%d]: %s offset=%s (seed=%d)",
                    current_run,
                    total_runs,
                    problem_name.upper(),
                    offset,
                    seed,
                )

                rng = np.random.default_rng(seed)
                approx = to_maximized_unit(approximate_front(problem_name, N_APPROX_POINTS, offset, rng))

                hv, hv_reference, elapsed, elapsed_reference = time_hypervolume(approx)
                if not np.isclose(hv, hv_reference):
                    logger.warning("  HV mismatch: front-gauge %.6f vs pymoo %.6f", hv, hv_reference)

                values = evaluate_indicators(
                    approx,
                    build_indicators(true),
                    problem_maximized=True,
                    lower=np.zeros(2),
                    upper=np.ones(2),
                    n_workers=N_WORKERS,
                )

                results.append(
                    {
                        "problem": problem_name.upper(),
                        "offset": offset,
                        "seed": seed,
                        "hypervolume": hv,
                        "hypervolume_pymoo": hv_reference,
                        "time_seconds": elapsed,
                        "time_seconds_pymoo": elapsed_reference,
                        "indicators": values,
                    }
                )

                logger.info("  HV: %.4f, Time: %.4fs (pymoo %.4fs)", hv, elapsed, elapsed_reference)

    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print a summary table of the benchmark results.

    Args:
        results: The benchmark results dictionary.
    """
    data = defaultdict(lambda: defaultdict(list))
    for r in results["results"]:
        data[(r["problem"], r["offset"])]["HV"].append(r["hypervolume"])
        data[(r["problem"], r["offset"])]["time"].append(r["time_seconds"])
        data[(r["problem"], r["offset"])]["time_pymoo"].append(r["time_seconds_pymoo"])
        for name, value in r["indicators"].items():
            data[(r["problem"], r["offset"])][name].append(value)

    columns = ["HV", "GD", "IGD", "SP", "R2"]

    print("\n" + "=" * 80)
    print("BENCHMARK SUMMARY")
    print("=" * 80)
    print(f"\nParameters: true points={N_TRUE_POINTS}, approx points={N_APPROX_POINTS}, runs={N_RUNS}")
    print()

    header = f"{'Problem':<8}{'offset':>8}"
    for name in columns:
        header += f"{name:>12}"
    print(header)
    print("-" * (16 + 12 * len(columns)))

    for (problem, offset), values in sorted(data.items()):
        row = f"{problem:<8}{offset:>8}"
        for name in columns:
            row += f"{np.mean(values[name]):>12.4f}"
        print(row)

    print("\nHypervolume timing (mean seconds per front):")
    print(f"{'Problem':<8}{'offset':>8}{'front-gauge':>15}{'pymoo':>15}")
    print("-" * 46)
    for (problem, offset), values in sorted(data.items()):
        print(f"{problem:<8}{offset:>8}{np.mean(values['time']):>15.4f}{np.mean(values['time_pymoo']):>15.4f}")

    print()


def main() -> None:
    """Main entry point for the benchmark."""
    logger.info("Starting ZDT indicator benchmark suite")
    logger.info("Parameters: offsets=%s, runs=%d", OFFSETS, N_RUNS)

    results = run_benchmark()

    # Save results to JSON
    output_path = Path(__file__).parent / "results" / "benchmark_results.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info("Results saved to %s", output_path)

    print_summary(results)


if __name__ == "__main__":
    main()
