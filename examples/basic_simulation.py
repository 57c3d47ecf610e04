#!/usr/bin/env python3
"""
Basic lifegrid simulation example.

This script demonstrates:
1. Placing a known pattern on an empty board
2. Running the simulation
3. Measuring the board as it evolves
4. Rendering the result as text
"""

from lifegrid import Config, Grid, Position, Simulation
from lifegrid.metrics import compute_all_metrics, print_metrics_summary


GLIDER = [
    (0, 1),
    (1, 2),
    (2, 0), (2, 1), (2, 2),
]


def main():
    print("=" * 60)
    print("lifegrid - Conway's Game of Life")
    print("Basic Simulation Example")
    print("=" * 60)
    print()

    # Small board with a glider in the top-left corner
    config = Config(width=15, height=30, delay_ms=0)

    grid = Grid(config.width, config.height)
    for x, y in GLIDER:
        grid.set_alive(Position(x, y), True)

    sim = Simulation(config, initial_grid=grid)

    print("Initial board:")
    print(sim.render())
    print()

    def progress_callback(s: Simulation):
        print(f"  Generation {s.generation}: population={s.grid.population}")

    print("Running simulation for 40 generations...")
    sim.run(
        steps=40,
        callback=progress_callback,
        callback_interval=10,
        show_progress=False,
    )
    print()

    print("Final board:")
    print(sim.render())

    print_metrics_summary(compute_all_metrics(sim))

    print("To watch a random board, run:")
    print("  python -m lifegrid.main --width 40 --height 120")
    print()


if __name__ == "__main__":
    main()
