"""Shared fixtures for the emergence test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator
from numpy.typing import NDArray

from emergence.config import KernelConfig
from emergence.pheromones.field import PheromoneField, create_field


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def impulse_5x5() -> NDArray[np.float64]:
    """A 5x5 field, all zero except 100 at the centre (index 12)."""
    grid = create_field(5, 5)
    grid[12] = 100.0
    return grid


@pytest.fixture
def small_pheromone_field() -> PheromoneField:
    """An 8x8 pheromone field for fast tests."""
    return PheromoneField(cols=8, rows=8)


@pytest.fixture
def default_config() -> KernelConfig:
    """Default kernel config (no YAML file needed)."""
    return KernelConfig()
