"""
Tests for FrameSampler.

Tests cover:
- Cell to plane mapping
- Crosshair, aim marker and obstacle cells
- Compositing precedence
"""

from types import SimpleNamespace

import pytest

from models import Cell, Intensity
from games.Rings.game.entities import Ball, Bullet
from games.Rings.game.frame import Frame, FrameSampler
from games.Rings.game_mode import RingsMode


class ConstantItem:
    """Entity that reports the same intensity everywhere."""

    def __init__(self, intensity):
        self.intensity = intensity

    def pixel_test(self, x, y):
        return self.intensity


def stub_game(items=(), bullet=None, level=0):
    bullet = bullet or Bullet(0.1, 0.0)
    return SimpleNamespace(items=list(items), level=level, aim_bullet=lambda: bullet)


class TestCellMapping:
    """Test cell_point()."""

    def test_corners_and_center(self):
        """The grid spans [-1, 1] on both axes."""
        sampler = FrameSampler(53, 25)
        assert sampler.cell_point(0, 0) == (-1.0, -1.0)
        assert sampler.cell_point(52, 24) == (1.0, 1.0)
        assert sampler.cell_point(26, 12) == (0.0, 0.0)

    def test_too_small_raises(self):
        """Grids need at least two cells per axis."""
        with pytest.raises(ValueError):
            FrameSampler(1, 25)
        with pytest.raises(ValueError):
            FrameSampler(53, 1)


class TestSampling:
    """Test sample() and sample_cell()."""

    def test_frame_shape(self):
        """The frame has the configured size and carries the level."""
        frame = FrameSampler(53, 25).sample(stub_game(level=3))
        assert isinstance(frame, Frame)
        assert (frame.width, frame.height) == (53, 25)
        assert frame.level == 3

    def test_crosshair_at_origin(self):
        """With nothing covering it, the origin cell is the crosshair."""
        frame = FrameSampler(53, 25).sample(stub_game())
        assert frame.rows[12][26] == Cell.CROSSHAIR
        crosshairs = sum(row.count(Cell.CROSSHAIR) for row in frame.rows)
        assert crosshairs == 1

    def test_even_grid_has_no_crosshair(self):
        """No cell of an even grid lands exactly on the origin."""
        frame = FrameSampler(4, 4).sample(stub_game(bullet=Bullet(5.0, 5.0)))
        assert all(cell == Cell.EMPTY for row in frame.rows for cell in row)

    def test_aim_marker(self):
        """Before shooting, the marker is drawn on the aim line."""
        game = RingsMode(ring_generator=lambda d, dist, rng: [])
        frame = FrameSampler(53, 25).sample(game)
        assert frame.rows[12][29] == Cell.BULLET
        assert frame.rows[12][23] == Cell.EMPTY

    def test_obstacle_cells(self):
        """A ball centered on the origin draws FULL there, HALF on its rim."""
        sampler = FrameSampler(53, 25)
        ball = Ball(0.0, 0.0, 0.3)
        game = stub_game(items=[ball])
        assert sampler.sample_cell(game.items, game.aim_bullet(), 26, 12) == Cell.FULL

        # x = 2 * 34 / 52 - 1 ~= 0.3077 is outside, 33 ~= 0.2692 is inside 90%
        assert sampler.sample_cell(game.items, Bullet(5.0, 5.0), 34, 12) == Cell.EMPTY
        assert sampler.sample_cell(game.items, Bullet(5.0, 5.0), 33, 12) == Cell.FULL

    def test_strongest_item_wins(self):
        """Across items, FULL beats HALF regardless of order."""
        sampler = FrameSampler(5, 5)
        items = [ConstantItem(Intensity.HALF), ConstantItem(Intensity.FULL)]
        assert sampler.sample_cell(items, Bullet(5.0, 5.0), 0, 0) == Cell.FULL

        items = [ConstantItem(Intensity.NONE), ConstantItem(Intensity.HALF)]
        assert sampler.sample_cell(items, Bullet(5.0, 5.0), 0, 0) == Cell.HALF

    def test_items_win_over_bullet(self):
        """An obstacle hides the bullet marker."""
        sampler = FrameSampler(5, 5)
        items = [ConstantItem(Intensity.HALF)]
        assert sampler.sample_cell(items, Bullet(0.0, 0.0), 2, 2) == Cell.HALF

    def test_bullet_wins_over_crosshair(self):
        """A bullet on the origin hides the crosshair."""
        sampler = FrameSampler(5, 5)
        assert sampler.sample_cell([], Bullet(0.0, 0.0), 2, 2) == Cell.BULLET
