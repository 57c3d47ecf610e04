"""
Text rendering for lifegrid.

Turns a grid into console text and writes frames to a terminal stream.
"""

from typing import TextIO

import numpy as np

from .state import Grid


ALIVE_GLYPH = "■"
DEAD_GLYPH = " "

# Erase display, then move the cursor to the top-left corner
CLEAR_SCREEN = "\x1b[2J\x1b[H"


def render_text(grid: Grid) -> str:
    """
    Render a grid as text.

    One line per row x in [0, width], each holding one glyph per column
    y in [0, height]. The grid is only read.

    Args:
        grid: Grid to render

    Returns:
        Rows joined by newlines
    """
    glyphs = np.where(grid.as_array(), ALIVE_GLYPH, DEAD_GLYPH)
    return "\n".join("".join(row) for row in glyphs)


def draw_frame(text: str, stream: TextIO) -> None:
    """
    Clear the terminal and draw one frame.

    Args:
        text: Rendered grid
        stream: Terminal stream to write to
    """
    stream.write(CLEAR_SCREEN)
    stream.write(text)
    stream.write("\n")
    stream.flush()
