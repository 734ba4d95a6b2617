"""Terminal skin: draws frames into a curses window.

Layout: one HUD line ("Level" followed by the level on a red background),
then the grid. Full cells are cyan, half cells blue, the bullet white and
the center crosshair a yellow "+".
"""

import curses
from typing import Any, Dict, Optional

from models import Cell
from ..frame import Frame, FrameSampler
from .base import RingsSkin

# Color pair ids
PAIR_FULL = 1
PAIR_HALF = 2
PAIR_BULLET = 3
PAIR_CROSSHAIR = 4
PAIR_LEVEL = 5

BANNER_LINES = (
    " G4 Terminal  by @scintilla4evr",
    "Press  Space  to shoot,  Ctrl-C  to exit",
)


def init_colors() -> None:
    """Register the color pairs used by TerminalSkin."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(PAIR_FULL, -1, curses.COLOR_CYAN)
    curses.init_pair(PAIR_HALF, -1, curses.COLOR_BLUE)
    curses.init_pair(PAIR_BULLET, -1, curses.COLOR_WHITE)
    curses.init_pair(PAIR_CROSSHAIR, curses.COLOR_YELLOW, -1)
    curses.init_pair(PAIR_LEVEL, curses.COLOR_WHITE, curses.COLOR_RED)


class TerminalSkin(RingsSkin):
    """Curses renderer.

    Args:
        window: curses window to draw into
        sampler: Frame sampler (default: standard grid size)
        top: First screen row used by the skin (rows above stay free for the banner)
        colors: Use color pairs (disable for terminals without color)
    """

    NAME = "terminal"
    DESCRIPTION = "Colored character cells in a curses window"

    def __init__(
        self,
        window: Any,
        sampler: Optional[FrameSampler] = None,
        top: int = 0,
        colors: bool = True,
    ):
        super().__init__(sampler)
        self._window = window
        self._top = top
        self._colors = colors

    def _attr(self, pair: int) -> int:
        return curses.color_pair(pair) if self._colors else curses.A_REVERSE

    def _cell_glyphs(self) -> Dict[Cell, tuple]:
        """Character and attribute for each cell kind."""
        return {
            Cell.EMPTY: (" ", curses.A_NORMAL),
            Cell.FULL: (" ", self._attr(PAIR_FULL)),
            Cell.HALF: (" " if self._colors else ".", self._attr(PAIR_HALF) if self._colors else curses.A_NORMAL),
            Cell.BULLET: (" ", self._attr(PAIR_BULLET)),
            Cell.CROSSHAIR: ("+", curses.color_pair(PAIR_CROSSHAIR) if self._colors else curses.A_BOLD),
        }

    def required_size(self) -> tuple:
        """(rows, columns) the window needs, including the HUD line."""
        width, height = self.sampler.size
        return (self._top + height + 1, width + 1)

    def _put(self, y: int, x: int, text: str, attr: int) -> None:
        try:
            self._window.addstr(y, x, text, attr)
        except curses.error:
            # Text running past the window edge is clipped; curses reports
            # it (and any write to the bottom-right cell) as an error.
            pass

    def draw_banner(self) -> None:
        """Write the title and controls on the rows above the HUD."""
        for row, line in enumerate(BANNER_LINES):
            self._put(row, 0, line, curses.A_NORMAL)

    def render_frame(self, frame: Frame) -> None:
        glyphs = self._cell_glyphs()
        row = self._top

        self._put(row, 0, "Level ", curses.A_NORMAL)
        self._put(row, 6, f" {frame.level} ", self._attr(PAIR_LEVEL))
        self._window.clrtoeol()

        for y, cells in enumerate(frame.rows, start=row + 1):
            for x, cell in enumerate(cells):
                char, attr = glyphs[cell]
                self._put(y, x, char, attr)

        self._window.refresh()
