"""Window skin: draws frames as colored cell rectangles with pygame."""

from typing import Optional

import pygame

from models import Cell
from games.Rings import config
from ..frame import Frame, FrameSampler
from .base import RingsSkin

_CELL_COLORS = {
    Cell.FULL: config.CELL_COLORS['full'].as_rgb_tuple,
    Cell.HALF: config.CELL_COLORS['half'].as_rgb_tuple,
    Cell.BULLET: config.CELL_COLORS['bullet'].as_rgb_tuple,
}


class WindowSkin(RingsSkin):
    """Pygame renderer, one rectangle per frame cell.

    Args:
        screen: Surface to draw on (usually the display surface)
        sampler: Frame sampler (default: standard grid size)
        flip: Call pygame.display.flip() after each frame
    """

    NAME = "window"
    DESCRIPTION = "Colored cells in a pygame window"

    def __init__(
        self,
        screen: pygame.Surface,
        sampler: Optional[FrameSampler] = None,
        flip: bool = True,
    ):
        super().__init__(sampler)
        self._screen = screen
        self._flip = flip
        self._font: Optional[pygame.font.Font] = None

    @staticmethod
    def window_size(sampler: FrameSampler) -> tuple:
        """Pixel size of a window that fits the HUD and the grid."""
        width, height = sampler.size
        cell_w, cell_h = config.CELL_SIZE
        return (width * cell_w, height * cell_h + config.HUD_HEIGHT)

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, config.HUD_HEIGHT - 4)
        return self._font

    def render_hud(self, level: int) -> None:
        """Draw the level indicator above the grid."""
        font = self._get_font()
        label = font.render("Level", True, config.HUD_TEXT_COLOR.as_rgb_tuple)
        self._screen.blit(label, (4, 4))

        value = font.render(
            f" {level} ", True,
            config.HUD_TEXT_COLOR.as_rgb_tuple,
            config.CELL_COLORS['level'].as_rgb_tuple,
        )
        self._screen.blit(value, (8 + label.get_width(), 4))

    def render_frame(self, frame: Frame) -> None:
        cell_w, cell_h = config.CELL_SIZE
        self._screen.fill(config.BACKGROUND_COLOR.as_rgb_tuple)
        self.render_hud(frame.level)

        for y, cells in enumerate(frame.rows):
            top = config.HUD_HEIGHT + y * cell_h
            for x, cell in enumerate(cells):
                left = x * cell_w
                if cell in _CELL_COLORS:
                    pygame.draw.rect(self._screen, _CELL_COLORS[cell], (left, top, cell_w, cell_h))
                elif cell == Cell.CROSSHAIR:
                    color = config.CELL_COLORS['crosshair'].as_rgb_tuple
                    cx, cy = left + cell_w // 2, top + cell_h // 2
                    pygame.draw.line(self._screen, color, (left + 1, cy), (left + cell_w - 2, cy))
                    pygame.draw.line(self._screen, color, (cx, top + cell_h // 4), (cx, top + 3 * cell_h // 4))

        if self._flip:
            pygame.display.flip()
