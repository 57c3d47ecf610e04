"""
Tests for the command-line driver.
"""

import io

from lifegrid import main as cli
from lifegrid.config import Config
from lifegrid.render import CLEAR_SCREEN
from lifegrid.simulation import Simulation


class TestRunConsole:
    """Tests for the render/advance/sleep loop."""

    def test_bounded_loop(self, small_config):
        """Each generation is cleared, drawn and followed by a pause."""
        sim = Simulation(small_config, seed=1)
        stream = io.StringIO()
        pauses = []

        cli.run_console(sim, 0.03, steps=3, stream=stream, sleep=pauses.append)

        output = stream.getvalue()
        assert sim.generation == 3
        assert pauses == [0.03, 0.03, 0.03]
        assert output.count(CLEAR_SCREEN) == 3
        assert output.endswith(sim.render() + "\n")

    def test_initial_frame_first(self, small_config):
        """The starting board is drawn before any tick."""
        sim = Simulation(small_config, seed=1)
        initial = sim.render()
        stream = io.StringIO()

        cli.run_console(sim, 0.0, steps=0, stream=stream, sleep=lambda s: None)

        assert stream.getvalue() == initial + "\n"
        assert sim.generation == 0


class TestMain:
    """Tests for the main entry point."""

    def test_parser_defaults(self):
        """Parser defaults match Config defaults."""
        args = cli.create_parser().parse_args([])
        config = Config.from_args(args)

        assert config == Config()
        assert args.steps is None
        assert args.seed is None

    def test_bounded_run(self, capsys):
        """A bounded run exits cleanly and prints metrics."""
        code = cli.main([
            "--width", "5", "--height", "5", "--delay-ms", "0",
            "--seed", "3", "--steps", "2", "--print-metrics",
        ])

        out = capsys.readouterr().out
        assert code == 0
        assert CLEAR_SCREEN in out
        assert "Generation: 2" in out

    def test_invalid_config(self, capsys):
        """Bad dimensions are reported on stderr."""
        code = cli.main(["--width", "0"])

        err = capsys.readouterr().err
        assert code == 1
        assert "width" in err

    def test_negative_steps(self, capsys):
        """Negative step counts are rejected."""
        code = cli.main(["--steps", "-1"])

        assert code == 1
        assert "steps" in capsys.readouterr().err

    def test_interrupt(self, monkeypatch):
        """Operator interrupt ends the run."""
        def interrupted(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "run_console", interrupted)

        assert cli.main(["--width", "3", "--height", "3"]) == 130
