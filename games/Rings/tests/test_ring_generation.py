"""
Tests for obstacle ring generation.

Tests cover:
- Slot angle arrangement and shifting
- Seeded determinism
- Obstacle counts per difficulty tier
- Entity composition of generated rings
"""

import random

import pytest

from games.Rings import config
from games.Rings.game.entities import Ball, Bar
from games.Rings.game.ring import generate_angle_arrangement, generate_inner_ring


class FixedRandom:
    """Stand-in for random.Random whose random() always returns the same value."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class TestAngleArrangement:
    """Test generate_angle_arrangement."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6, 7, 8])
    def test_angles_in_unit_range(self, n):
        """Every angle lies in [0, 1)."""
        for seed in range(20):
            for is_small in (True, False):
                angles = generate_angle_arrangement(n, is_small, True, random.Random(seed))
                assert len(angles) == n
                assert all(0.0 <= a < 1.0 for a in angles)

    def test_unshifted_spacing(self):
        """Without shifts, slots are evenly spaced from 0."""
        angles = generate_angle_arrangement(5, True, True, random.Random(1))
        assert angles == pytest.approx([0.0, 0.2, 0.4, 0.6, 0.8])

    def test_four_slots_shift_odd_positions(self):
        """With n == 4, odd slots move by a third of the spacing."""
        up = generate_angle_arrangement(4, True, True, FixedRandom(0.9))
        assert up == pytest.approx([0.0, 0.25 + 1 / 12, 0.5, 0.75 + 1 / 12])

        down = generate_angle_arrangement(4, True, True, FixedRandom(0.1))
        assert down == pytest.approx([0.0, 0.25 - 1 / 12, 0.5, 0.75 - 1 / 12])

    def test_six_slots_large_ring_shift(self):
        """With n == 6 on a large ring, i%3==0 and i%3==1 move in opposite directions."""
        shift = (1 / 6) / 3
        angles = generate_angle_arrangement(6, False, True, FixedRandom(0.9))
        expected = [
            shift,
            1 / 6 - shift,
            2 / 6,
            3 / 6 + shift,
            4 / 6 - shift,
            5 / 6,
        ]
        assert angles == pytest.approx(expected)

    def test_six_slots_small_ring_unshifted(self):
        """Small rings with n == 6 stay evenly spaced."""
        angles = generate_angle_arrangement(6, True, True, FixedRandom(0.9))
        assert angles == pytest.approx([i / 6 for i in range(6)])

    def test_negative_shift_wraps(self):
        """A slot shifted below 0 wraps to just under 1."""
        angles = generate_angle_arrangement(6, False, True, FixedRandom(0.1))
        assert angles[0] == pytest.approx(1 - (1 / 6) / 3)

    def test_easy_flag_does_not_change_layout(self):
        """is_easy is accepted but does not affect the arrangement."""
        easy = generate_angle_arrangement(4, True, True, random.Random(3))
        hard = generate_angle_arrangement(4, True, False, random.Random(3))
        assert easy == hard


class TestInnerRing:
    """Test generate_inner_ring."""

    def test_first_item_is_ball(self):
        """Slot 0 always produces a full-size Ball."""
        for seed in range(50):
            items = generate_inner_ring(1, config.RING_DISTANCE, random.Random(seed))
            assert isinstance(items[0], Ball)
            assert items[0].radius == config.BALL_RADIUS

    def test_seeded_generation_is_deterministic(self):
        """The same seed produces the same ring."""
        a = generate_inner_ring(2, 0.7, random.Random(42))
        b = generate_inner_ring(2, 0.7, random.Random(42))
        assert a == b

    def test_all_items_on_ring_distance(self):
        """Every entity sits at the requested distance."""
        items = generate_inner_ring(3, 0.55, random.Random(7))
        assert all(item.distance == 0.55 for item in items)

    @pytest.mark.parametrize("difficulty,low,high", [(1, 2, 4), (2, 2, 5), (3, 4, 6)])
    def test_slot_count_per_difficulty(self, difficulty, low, high):
        """Full-size balls plus bars equal the slot count, within the tier's range."""
        for seed in range(100):
            items = generate_inner_ring(difficulty, 0.7, random.Random(seed))
            slots = sum(
                1 for item in items
                if isinstance(item, Bar) or item.radius == config.BALL_RADIUS
            )
            assert low <= slots <= high

    def test_unknown_difficulty_raises(self):
        """Tiers other than 1, 2 and 3 are rejected."""
        with pytest.raises(ValueError):
            generate_inner_ring(4, 0.7, random.Random(0))
        with pytest.raises(ValueError):
            generate_inner_ring(0, 0.7, random.Random(0))

    def test_all_balls_with_companions(self):
        """With every roll high, each slot is a Ball and later slots get companions."""
        items = generate_inner_ring(2, 0.7, FixedRandom(0.99))
        # 2 + int(0.99 * 2) = 3 base slots, + round(1.98) = 2 bonus
        balls = [i for i in items if i.radius == config.BALL_RADIUS]
        companions = [i for i in items if i.radius == config.SMALL_BALL_RADIUS]
        assert len(balls) == 5
        assert len(companions) == 2 * 4
        assert not any(isinstance(i, Bar) for i in items)

    def test_no_companions_at_difficulty_one(self):
        """Difficulty 1 never adds companion balls."""
        items = generate_inner_ring(1, 0.7, FixedRandom(0.99))
        assert all(isinstance(i, Ball) and i.radius == config.BALL_RADIUS for i in items)

    def test_bars_span_to_next_slot(self):
        """With every roll low, later slots are bars reaching the next slot."""
        items = generate_inner_ring(1, 0.7, FixedRandom(0.0))
        # 2 slots, no bonus: a ball at slot 0 then a bar from 0.5 to 0.0 (+1)
        assert len(items) == 2
        ball, bar = items
        assert isinstance(ball, Ball)
        assert isinstance(bar, Bar)
        assert bar.angle_start == pytest.approx(0.5)
        assert bar.angle_length == pytest.approx(0.5)

    def test_bar_caps(self):
        """With a cap roll, a bar gets small balls at both ends."""

        class Sequence:
            def __init__(self, values):
                self.values = list(values)

            def random(self):
                return self.values.pop(0)

        # count roll (bonus 0), shift coin, slot 0 ball + companion roll,
        # slot 1 bar + cap roll
        rng = Sequence([0.0, 0.0, 0.9, 0.0, 0.0, 0.9])
        items = generate_inner_ring(1, 0.7, rng)

        assert isinstance(items[1], Bar)
        caps = items[2:]
        assert len(caps) == 2
        assert all(isinstance(c, Ball) and c.radius == config.SMALL_BALL_RADIUS for c in caps)
        assert caps[0].angle == pytest.approx(items[1].angle_start)
        assert caps[1].angle == pytest.approx(items[1].angle_start + items[1].angle_length)
