"""
lifegrid - Conway's Game of Life

A bounded Game of Life board rendered continuously to a text console.
"""

__version__ = "0.1.0"

from .config import Config
from .simulation import Simulation
from .state import Grid, Position, create_random_grid

__all__ = [
    "Config",
    "Grid",
    "Position",
    "Simulation",
    "create_random_grid",
    "__version__",
]
