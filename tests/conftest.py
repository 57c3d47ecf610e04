"""
Pytest configuration and fixtures for lifegrid tests.
"""

from typing import Callable

import pytest
import mlx.core as mx

from lifegrid.config import Config
from lifegrid.simulation import Simulation
from lifegrid.state import Grid


@pytest.fixture
def small_config() -> Config:
    """Small board for fast tests."""
    return Config(width=20, height=20, delay_ms=0)


@pytest.fixture
def blank_grid(small_config: Config) -> Grid:
    """Entirely dead grid."""
    return Grid(small_config.width, small_config.height)


@pytest.fixture
def seeded_simulation(small_config: Config) -> Simulation:
    """Randomly populated simulation with a fixed seed."""
    return Simulation(small_config, seed=42)


@pytest.fixture
def make_simulation() -> Callable[[Grid], Simulation]:
    """Factory for simulations whose first generation is exactly the given grid."""
    def _make(grid: Grid) -> Simulation:
        config = Config(width=grid.width, height=grid.height, delay_ms=0)
        return Simulation(config, initial_grid=grid)

    return _make


@pytest.fixture
def rng_key() -> mx.array:
    """Random key for stochastic tests."""
    return mx.random.key(12345)
