"""Pytest configuration and shared fixtures for qbloch tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- A sample of random points on the unit sphere
"""

import os
from typing import List, Tuple

import numpy as np
import pytest
import torch


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set global random seeds for reproducibility."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture(scope="function")
def sphere_points(rng: np.random.Generator) -> List[Tuple[float, float, float]]:
    """Return random unit Bloch coordinates plus the six axis poles."""
    raw = rng.normal(size=(25, 3))
    raw /= np.linalg.norm(raw, axis=1, keepdims=True)
    points = [tuple(float(c) for c in row) for row in raw]
    points += [
        (1.0, 0.0, 0.0),
        (-1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, -1.0, 0.0),
        (0.0, 0.0, 1.0),
        (0.0, 0.0, -1.0),
    ]
    return points
