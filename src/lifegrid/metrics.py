"""
Metrics for lifegrid boards.
"""

from .simulation import Simulation
from .state import Grid


def population(grid: Grid) -> int:
    """
    Count live cells.

    Args:
        grid: Grid to measure

    Returns:
        Number of live cells
    """
    return grid.population


def density(grid: Grid) -> float:
    """Fraction of cells that are alive."""
    return grid.population / len(grid)


def compute_all_metrics(sim: Simulation) -> dict:
    """
    Compute all metrics for the current generation.

    Args:
        sim: Simulation to measure

    Returns:
        Dictionary of metric values
    """
    return {
        "generation": sim.generation,
        "cells": len(sim.grid),
        "population": population(sim.grid),
        "density": density(sim.grid),
        "last_tick_ms": sim.last_tick_seconds * 1000.0,
    }


def print_metrics_summary(metrics: dict) -> None:
    """
    Print formatted metrics summary.

    Args:
        metrics: Output from compute_all_metrics
    """
    print("\n=== lifegrid Metrics Summary ===\n")

    print(f"Generation: {metrics['generation']}")

    print("\nPopulation:")
    print(f"  Live cells: {metrics['population']} of {metrics['cells']}")
    print(f"  Density: {metrics['density']:.4f}")

    print("\nTiming:")
    print(f"  Last tick: {metrics['last_tick_ms']:.3f} ms")

    print()
