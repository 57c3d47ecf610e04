"""
Simulation engine for lifegrid.

Holds the current generation and a write buffer of the same size. Each tick
computes the successor of every cell into the buffer and then swaps the two,
so neighbour counts never see a half-written board.
"""

import time
from typing import Callable, Optional

import mlx.core as mx
import numpy as np
from tqdm import tqdm

from .config import Config
from .render import render_text
from .rules import compute_next_generation, next_cell_state
from .state import Grid, Position, create_random_grid


class Simulation:
    """
    Game of Life simulation manager.

    Attributes:
        config: Simulation configuration
        grid: Current generation
        buffer: Write target for the next generation
        generation: Number of ticks executed
        last_tick_seconds: Wall-clock time of the most recent tick
    """

    def __init__(
        self,
        config: Config,
        seed: Optional[int] = None,
        initial_grid: Optional[Grid] = None,
        key: Optional[mx.array] = None,
    ):
        """
        Initialize simulation.

        Args:
            config: Simulation configuration
            seed: Random seed used when neither key nor initial_grid is given
            initial_grid: Optional pre-populated grid matching config dimensions
            key: Random key for the initial population
        """
        self.config = config
        self.seed = seed
        self.generation = 0
        self.last_tick_seconds = 0.0
        self._initial_key = self._make_key(key)

        if initial_grid is not None:
            if initial_grid.shape != config.shape:
                raise ValueError(
                    f"initial_grid shape {initial_grid.shape} does not match "
                    f"config shape {config.shape}"
                )
            self.grid = initial_grid.copy()
        else:
            self.grid = create_random_grid(config.width, config.height, self._initial_key)

        self.buffer = Grid(config.width, config.height)

    def _make_key(self, key: Optional[mx.array] = None) -> mx.array:
        if key is not None:
            return key
        if self.seed is not None:
            return mx.random.key(self.seed)
        return mx.random.key(time.time_ns() % (2**32))

    def is_alive(self, pos: Position) -> bool:
        """Whether `pos` is alive in the current generation."""
        return self.grid.is_alive(pos)

    def count_living_neighbors(self, pos: Position) -> int:
        """Number of live cells among the eight neighbours of `pos`."""
        return sum(1 for n_pos in pos.neighbours() if self.grid.is_alive(n_pos))

    def next_state(self, pos: Position) -> bool:
        """State of `pos` in the next generation. Reads the current grid only."""
        return next_cell_state(self.grid.is_alive(pos), self.count_living_neighbors(pos))

    def tick(self) -> float:
        """
        Advance simulation by one generation.

        Returns:
            Seconds spent computing the generation
        """
        start = time.perf_counter()

        cells = mx.array(self.grid.as_array())
        successor = compute_next_generation(cells)
        mx.eval(successor)
        self.buffer.load(np.array(successor))

        self.grid, self.buffer = self.buffer, self.grid
        self.generation += 1

        self.last_tick_seconds = time.perf_counter() - start
        return self.last_tick_seconds

    def run(
        self,
        steps: int,
        callback: Optional[Callable[["Simulation"], None]] = None,
        callback_interval: int = 1,
        show_progress: bool = False,
    ) -> None:
        """
        Run simulation for multiple generations.

        Args:
            steps: Number of generations to run
            callback: Optional function called periodically
            callback_interval: How often to call callback
            show_progress: Whether to show progress bar
        """
        iterator = range(steps)
        if show_progress:
            iterator = tqdm(iterator, desc="Simulating")

        for i in iterator:
            self.tick()

            if callback is not None and (i + 1) % callback_interval == 0:
                callback(self)

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset simulation to a fresh random population.

        Args:
            seed: New random seed (reuses the starting key if not provided)
        """
        if seed is not None:
            self.seed = seed
            self._initial_key = self._make_key()

        self.grid = create_random_grid(self.config.width, self.config.height, self._initial_key)
        self.buffer.clear()
        self.generation = 0
        self.last_tick_seconds = 0.0

    def render(self) -> str:
        """Text snapshot of the current generation."""
        return render_text(self.grid)

    def __str__(self) -> str:
        return self.render()
