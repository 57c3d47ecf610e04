"""
Game of Life transition rule.

A cell's next state depends on its own state and the number of live cells
among its eight neighbours (B3/S23). Neighbours beyond the board edge are
dead; the board does not wrap.
"""

import mlx.core as mx


# (dx, dy) offsets of the Moore neighbourhood
NEIGHBOUR_OFFSETS = (
    (1, 1), (1, -1), (-1, 1), (-1, -1),
    (1, 0), (0, 1), (-1, 0), (0, -1),
)


def next_cell_state(alive: bool, living_neighbours: int) -> bool:
    """
    Next state of a single cell.

    Args:
        alive: Whether the cell is currently alive
        living_neighbours: Live cells among its eight neighbours

    Returns:
        True if the cell is alive in the next generation
    """
    if alive:
        # Underpopulation below 2, overpopulation above 3
        return living_neighbours == 2 or living_neighbours == 3
    return living_neighbours == 3


def count_neighbours(cells: mx.array) -> mx.array:
    """
    Count live neighbours for every cell of a board.

    Args:
        cells: Boolean board [rows, cols]

    Returns:
        Neighbour counts [rows, cols] in [0, 8]
    """
    rows, cols = cells.shape

    # Zero border so edge cells see dead cells beyond the board
    padded = mx.pad(cells.astype(mx.int32), [(1, 1), (1, 1)])

    counts = mx.zeros((rows, cols), dtype=mx.int32)
    for dx, dy in NEIGHBOUR_OFFSETS:
        counts = counts + padded[1 + dx:1 + dx + rows, 1 + dy:1 + dy + cols]

    return counts


def compute_next_generation(cells: mx.array) -> mx.array:
    """
    Successor of a whole board.

    Equivalent to applying next_cell_state to every cell against the
    unchanged current board.

    Args:
        cells: Boolean board [rows, cols]

    Returns:
        Boolean board of the next generation [rows, cols]
    """
    counts = count_neighbours(cells)
    alive = cells.astype(mx.bool_)

    birth = mx.logical_and(mx.logical_not(alive), counts == 3)
    survive = mx.logical_and(alive, mx.logical_or(counts == 2, counts == 3))

    return mx.logical_or(birth, survive)
