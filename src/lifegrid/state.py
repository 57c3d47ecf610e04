"""
Grid state representation and initialization for lifegrid.

The board is a dense rectangle of boolean cells covering [0, width] x
[0, height] inclusive. Cells are stored in a flat array addressed by
x * cols + y; any position outside the rectangle reads as dead.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

import mlx.core as mx
import numpy as np


# A cell starts alive when a uniform draw from [0, ALIVE_DRAW_SIDES) hits the top value
ALIVE_DRAW_SIDES = 6


@dataclass(frozen=True)
class Position:
    """A cell coordinate. x selects the row, y the column."""

    x: int
    y: int

    def neighbours(self) -> tuple["Position", ...]:
        """
        The eight Moore-neighbourhood positions of this position.

        Computed arithmetically and not tied to any grid, so the result may
        contain positions outside a particular board.
        """
        x, y = self.x, self.y
        return (
            Position(x + 1, y + 1),
            Position(x + 1, y - 1),
            Position(x - 1, y + 1),
            Position(x - 1, y - 1),
            Position(x + 1, y),
            Position(x, y + 1),
            Position(x - 1, y),
            Position(x, y - 1),
        )


class Grid:
    """
    Live/dead status of every cell on a bounded board.

    Attributes:
        width: Largest row coordinate
        height: Largest column coordinate
        cells: Flat boolean array of length (width + 1) * (height + 1)
    """

    def __init__(self, width: int, height: int, cells: Optional[np.ndarray] = None):
        self.width = width
        self.height = height
        size = (width + 1) * (height + 1)

        if cells is None:
            self.cells = np.zeros(size, dtype=bool)
        else:
            cells = np.asarray(cells, dtype=bool).reshape(-1)
            if cells.size != size:
                raise ValueError(
                    f"expected {size} cells for a {width}x{height} grid, got {cells.size}"
                )
            self.cells = cells.copy()

    @classmethod
    def from_rows(cls, rows: Sequence[str], alive: str = "#") -> "Grid":
        """
        Build a grid from one string per row.

        Every row must have the same length; a character equal to `alive`
        marks a live cell, anything else is dead.
        """
        if not rows:
            raise ValueError("rows must not be empty")
        cols = len(rows[0])
        if cols == 0 or any(len(row) != cols for row in rows):
            raise ValueError("rows must be non-empty and of equal length")

        cells = np.array([[ch == alive for ch in row] for row in rows], dtype=bool)
        return cls(len(rows) - 1, cols - 1, cells)

    @property
    def shape(self) -> tuple[int, int]:
        """Grid dimensions in cells (rows, cols)."""
        return (self.width + 1, self.height + 1)

    @property
    def population(self) -> int:
        """Number of live cells."""
        return int(np.count_nonzero(self.cells))

    def __len__(self) -> int:
        return self.cells.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, population={self.population})"

    def in_bounds(self, pos: Position) -> bool:
        """Whether `pos` lies on the board."""
        return 0 <= pos.x <= self.width and 0 <= pos.y <= self.height

    def _index(self, pos: Position) -> int:
        return pos.x * (self.height + 1) + pos.y

    def is_alive(self, pos: Position) -> bool:
        """Whether the cell at `pos` is alive. Positions off the board are dead."""
        if not self.in_bounds(pos):
            return False
        return bool(self.cells[self._index(pos)])

    def set_alive(self, pos: Position, value: bool) -> None:
        """Overwrite the flag for an on-board position."""
        if not self.in_bounds(pos):
            # A flat index would silently land on another row
            raise IndexError(f"{pos} is outside the {self.width}x{self.height} grid")
        self.cells[self._index(pos)] = value

    def positions(self) -> Iterator[Position]:
        """Every on-board position, row by row."""
        for x in range(self.width + 1):
            for y in range(self.height + 1):
                yield Position(x, y)

    def as_array(self) -> np.ndarray:
        """2-D (rows, cols) view of the cells."""
        return self.cells.reshape(self.shape)

    def load(self, cells: np.ndarray) -> None:
        """Replace every cell with the values from an equally sized array."""
        cells = np.asarray(cells, dtype=bool).reshape(-1)
        if cells.size != self.cells.size:
            raise ValueError(f"expected {self.cells.size} cells, got {cells.size}")
        self.cells[:] = cells

    def clear(self) -> None:
        """Kill every cell."""
        self.cells[:] = False

    def copy(self) -> "Grid":
        """Create an independent copy of the grid."""
        return Grid(self.width, self.height, self.cells)


def create_random_grid(width: int, height: int, key: mx.array) -> Grid:
    """
    Create a grid with each cell independently alive with probability 1/6.

    Args:
        width: Largest row coordinate
        height: Largest column coordinate
        key: Random key driving the draws

    Returns:
        Randomly populated Grid
    """
    draws = mx.random.randint(
        0,
        ALIVE_DRAW_SIDES,
        shape=((width + 1) * (height + 1),),
        key=key,
    )
    alive = draws == ALIVE_DRAW_SIDES - 1
    return Grid(width, height, np.array(alive))
