"""Shared test fixtures for front-gauge tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- Bi-objective fronts (maximized, scaled to [0, 1]) with a matching true front
- A three-objective front
- A tiny front file on disk
"""

from pathlib import Path

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def true_front_2d() -> np.ndarray:
    """A true front for a maximized bi-objective problem scaled to [0, 1].

    Five evenly spaced points on the line f1 + f2 = 1.
    """
    f1 = np.linspace(0.0, 1.0, 5)
    return np.column_stack([f1, 1.0 - f1])


@pytest.fixture
def approx_front_2d() -> np.ndarray:
    """An approximation lying behind true_front_2d (maximization).

    None of its points is on the true front.
    """
    return np.array(
        [
            [0.1, 0.7],
            [0.4, 0.4],
            [0.7, 0.1],
        ]
    )


@pytest.fixture
def pareto_front_2d() -> np.ndarray:
    """A minimization Pareto front where no solution dominates another."""
    return np.array(
        [
            [1.0, 4.0],
            [2.0, 3.0],
            [3.0, 2.0],
            [4.0, 1.0],
        ]
    )


@pytest.fixture
def three_objective_front() -> np.ndarray:
    """Three mutually non-dominated solutions with three maximized objectives."""
    return np.array(
        [
            [0.8, 0.2, 0.4],
            [0.3, 0.9, 0.1],
            [0.5, 0.5, 0.5],
        ]
    )


@pytest.fixture
def front_file(tmp_path: Path) -> Path:
    """A comma-separated front file with a header line."""
    path = tmp_path / "front.csv"
    path.write_text("f1,f2\n0.0,1.0\n0.5,0.5\n\n1.0,0.0\n", encoding="utf-8")
    return path
