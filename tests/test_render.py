"""
Tests for text rendering.
"""

import io

from lifegrid.render import ALIVE_GLYPH, CLEAR_SCREEN, DEAD_GLYPH, draw_frame, render_text
from lifegrid.state import Grid, Position


class TestRenderText:
    """Tests for render_text."""

    def test_glyphs(self):
        """Live cells use the filled glyph, dead cells a space."""
        grid = Grid.from_rows([
            "#.",
            ".#",
        ])

        assert render_text(grid) == f"{ALIVE_GLYPH}{DEAD_GLYPH}\n{DEAD_GLYPH}{ALIVE_GLYPH}"

    def test_dimensions(self):
        """One line per row x, one glyph per column y."""
        grid = Grid(3, 7)
        lines = render_text(grid).split("\n")

        assert len(lines) == 4
        assert all(len(line) == 8 for line in lines)

    def test_row_orientation(self):
        """x selects the line and y the character within it."""
        grid = Grid(2, 4)
        grid.set_alive(Position(1, 3), True)

        lines = render_text(grid).split("\n")

        assert lines[1][3] == ALIVE_GLYPH
        assert lines[0].strip() == ""
        assert lines[2].strip() == ""

    def test_read_only(self, seeded_simulation):
        """Rendering leaves the board untouched."""
        before = seeded_simulation.grid.copy()

        render_text(seeded_simulation.grid)

        assert seeded_simulation.grid == before
        assert seeded_simulation.generation == 0


class TestDrawFrame:
    """Tests for terminal frame output."""

    def test_clears_before_drawing(self):
        """Frames start with the clear-screen sequence."""
        stream = io.StringIO()

        draw_frame("abc", stream)

        assert stream.getvalue() == f"{CLEAR_SCREEN}abc\n"
