"""Sampling the playfield into a grid of character cells.

The game never draws itself. A FrameSampler maps every cell of a fixed
grid to a point on the normalized plane and asks the game's entities what
covers that point. Skins then only have to turn cells into output.
"""

from dataclasses import dataclass
from typing import List, Tuple

from models import Cell, Intensity
from games.Rings import config


@dataclass(frozen=True)
class Frame:
    """One sampled frame.

    Attributes:
        level: Level to show in the HUD
        rows: Grid of cells, rows top to bottom
    """
    level: int
    rows: Tuple[Tuple[Cell, ...], ...]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)


_INTENSITY_CELLS = {
    Intensity.HALF: Cell.HALF,
    Intensity.FULL: Cell.FULL,
}


class FrameSampler:
    """Samples a game onto a width x height grid.

    Cell (x, y) maps to the point (2x/(w-1) - 1, 2y/(h-1) - 1), so the
    grid spans [-1, 1] on both axes. With odd dimensions the middle cell
    lands exactly on the origin and is drawn as a crosshair.
    """

    def __init__(self, width: int = config.GRID_WIDTH, height: int = config.GRID_HEIGHT):
        if width < 2 or height < 2:
            raise ValueError(f"Frame must be at least 2x2 cells, got {width}x{height}")
        self._width = width
        self._height = height

    @property
    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def cell_point(self, x: int, y: int) -> Tuple[float, float]:
        """Point on the normalized plane for a cell."""
        return (
            2 * x / (self._width - 1) - 1,
            2 * y / (self._height - 1) - 1,
        )

    def sample_cell(self, items, bullet, x: int, y: int) -> Cell:
        """Composite one cell.

        Items win over the bullet marker, and the bullet marker wins over
        the crosshair. Across items the strongest intensity wins.
        """
        point_x, point_y = self.cell_point(x, y)

        draw = Intensity.NONE
        for item in items:
            test = item.pixel_test(point_x, point_y)
            if test.rank > draw.rank:
                draw = test
                if draw is Intensity.FULL:
                    break

        if draw.is_hit:
            return _INTENSITY_CELLS[draw]
        if bullet.pixel_test(point_x, point_y).is_hit:
            return Cell.BULLET
        if point_x == 0 and point_y == 0:
            return Cell.CROSSHAIR
        return Cell.EMPTY

    def sample(self, game) -> Frame:
        """Sample a whole frame from a RingsMode-like game.

        Args:
            game: Object exposing items, level and aim_bullet()

        Returns:
            The sampled Frame
        """
        items = game.items
        bullet = game.aim_bullet()
        rows: List[Tuple[Cell, ...]] = []
        for y in range(self._height):
            rows.append(tuple(
                self.sample_cell(items, bullet, x, y)
                for x in range(self._width)
            ))
        return Frame(level=game.level, rows=tuple(rows))
