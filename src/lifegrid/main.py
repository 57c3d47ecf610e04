"""
Command-line interface for lifegrid.

Usage:
    python -m lifegrid.main --help
    python -m lifegrid.main --width 40 --height 120
    python -m lifegrid.main --seed 7 --steps 500 --print-metrics
"""

import argparse
import sys
import time
from typing import Callable, Optional, Sequence, TextIO

from .config import Config
from .metrics import compute_all_metrics, print_metrics_summary
from .render import draw_frame
from .simulation import Simulation


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all options."""
    parser = argparse.ArgumentParser(
        description="lifegrid - Conway's Game of Life in the terminal",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Board options
    parser.add_argument(
        "--width", type=int, default=60,
        help="Largest row coordinate (board has width+1 rows)"
    )
    parser.add_argument(
        "--height", type=int, default=250,
        help="Largest column coordinate (board has height+1 columns)"
    )
    parser.add_argument(
        "--delay-ms", type=int, default=30, dest="delay_ms",
        help="Pause between generations in milliseconds"
    )

    # Run options
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for reproducibility"
    )
    parser.add_argument(
        "--steps", type=int, default=None,
        help="Stop after this many generations (default: run until interrupted)"
    )
    parser.add_argument(
        "--print-metrics", action="store_true",
        help="Print board metrics when the run ends"
    )

    return parser


def run_console(
    sim: Simulation,
    delay: float,
    steps: Optional[int] = None,
    stream: Optional[TextIO] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """
    Draw the simulation to a terminal, one generation per frame.

    Args:
        sim: Simulation to display
        delay: Seconds to pause after each frame
        steps: Number of generations to run (None for infinite)
        stream: Terminal stream to draw on
        sleep: Function used to pause between frames
    """
    if stream is None:
        stream = sys.stdout

    stream.write(sim.render())
    stream.write("\n")
    stream.flush()

    done = 0
    while steps is None or done < steps:
        sim.tick()
        draw_frame(sim.render(), stream)
        done += 1
        sleep(delay)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_args(args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if args.steps is not None and args.steps < 0:
        print(f"Configuration error: steps must be >= 0, got {args.steps}", file=sys.stderr)
        return 1

    sim = Simulation(config, seed=args.seed)

    try:
        run_console(sim, config.delay, steps=args.steps)
    except KeyboardInterrupt:
        return 130

    if args.print_metrics:
        print_metrics_summary(compute_all_metrics(sim))

    return 0


if __name__ == "__main__":
    sys.exit(main())
