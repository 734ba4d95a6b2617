"""Procedural generation of obstacle rings.

A ring is an ordered list of entities placed around the center at a
common distance. Slot angles come from generate_angle_arrangement();
each slot then becomes either a Ball (optionally with companions) or a
Bar spanning to the next slot (optionally capped with small Balls).

All randomness is drawn from the rng argument, so a seeded
random.Random reproduces a ring exactly.
"""

import random
from typing import List, Optional

from games.Rings import config
from .entities import Ball, Bar, RingItem

# Lowest obstacle count per difficulty tier (before the random bonus)
_BASE_COUNTS = {
    1: (2, 2),
    2: (2, 3),
    3: (4, 4),
}


def generate_angle_arrangement(
    n: int,
    is_small: bool,
    is_easy: bool,
    rng: Optional[random.Random] = None,
) -> List[float]:
    """Spread n slot angles around the ring.

    Slots start at 0 and are 1/n turns apart. To avoid a perfectly
    symmetric layout, some slots are shifted by a third of the spacing:
    with n == 4 every odd slot moves; with n == 6 on a large ring, slots
    with i % 3 == 0 move one way and slots with i % 3 == 1 the other.
    One coin flip picks the direction for the whole ring.

    Args:
        n: Number of slots
        is_small: True for the inner (small) ring
        is_easy: Difficulty hint; the arrangement does not vary with it
        rng: Random source (default: a fresh unseeded Random)

    Returns:
        n angles in [0, 1), in slot order (not sorted)
    """
    rng = rng or random.Random()
    angle_between = 1 / n
    shift_angle = angle_between / 3
    shift_sign = 1 if rng.random() >= 0.5 else -1

    angles = []
    for i in range(n):
        angle = i * angle_between

        if n == 4 and i % 2:
            angle += shift_sign * shift_angle
        elif n == 6 and not is_small:
            if i % 3 == 0:
                angle += shift_sign * shift_angle
            if i % 3 == 1:
                angle -= shift_sign * shift_angle

        angles.append(angle % 1.0)

    return angles


def _obstacle_count(difficulty: int, rng: random.Random) -> int:
    """Pick the number of slots for a difficulty tier."""
    if difficulty not in _BASE_COUNTS:
        raise ValueError(f"Unknown difficulty tier: {difficulty}")

    low, high = _BASE_COUNTS[difficulty]
    n = low if low == high else low + int(rng.random() * (high - low + 1))
    return n + round(rng.random() * 2)


def generate_inner_ring(
    difficulty: int,
    distance: float,
    rng: Optional[random.Random] = None,
) -> List[RingItem]:
    """Generate the entities of one obstacle ring.

    Args:
        difficulty: Tier 1, 2 or 3; higher tiers add slots and companions
        distance: Distance of the ring from the center
        rng: Random source (default: a fresh unseeded Random)

    Returns:
        Entities in generation order

    Raises:
        ValueError: If difficulty is not a known tier
    """
    rng = rng or random.Random()
    n = _obstacle_count(difficulty, rng)
    angles = generate_angle_arrangement(n, True, difficulty < 3, rng)

    items: List[RingItem] = []
    for i in range(n):
        # Slot 0 is always a ball so every bar has a ball slot before it
        is_ball = rng.random() >= 0.5 or i == 0

        if is_ball:
            items.append(Ball(angles[i], distance, config.BALL_RADIUS))

            roll = rng.random()
            if roll >= 1 - config.COMPANION_CHANCE and difficulty > 1 and i > 0:
                items.append(Ball(angles[i] + config.COMPANION_OFFSET, distance, config.SMALL_BALL_RADIUS))
                items.append(Ball(angles[i] - config.COMPANION_OFFSET, distance, config.SMALL_BALL_RADIUS))
        else:
            angle_start = angles[i]
            angle_length = angles[(i + 1) % n] - angle_start
            if angle_length < 0:
                angle_length += 1

            items.append(Bar(angle_start, angle_length, distance, config.BAR_RADIUS))

            if rng.random() >= 1 - config.BAR_CAP_CHANCE:
                items.append(Ball(angle_start, distance, config.SMALL_BALL_RADIUS))
                items.append(Ball(angle_start + angle_length, distance, config.SMALL_BALL_RADIUS))

    return items
