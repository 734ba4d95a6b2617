"""
Rings Game Mode

The player sits at the center and aims by waiting: the aim turns one way
while the obstacle ring turns the other. A bullet that leaves the
playfield advances the level; a bullet that touches an obstacle sends the
player back to level 0. Each transition replaces the whole ring.
"""
import math
import random
from typing import Callable, List, Optional

from models import Highlight, InputAction
from g4.games import BaseGame, GameState
from g4.games.input import InputEvent
from g4.logging import get_logger, emit_record
from games.Rings import config
from games.Rings.game.entities import Bullet, RingItem
from games.Rings.game.ring import generate_inner_ring

log = get_logger('rings')

# (difficulty, distance, rng) -> entities of one ring
RingGenerator = Callable[[int, float, random.Random], List[RingItem]]


class RingsMode(BaseGame):
    """Rings game mode - shoot through the gaps of a rotating ring.

    Core mechanic: a single "Playing" state.
    - shoot() spawns the only bullet, outward along the current aim
    - hit_test() resolves the bullet once per tick: collision resets,
      escape advances, otherwise the bullet keeps flying
    - advance() rotates ring and aim in opposite directions

    Transitions set a short-lived highlight (NEXT or HIT) that counts down
    in end_frame(); it carries no gameplay effect.
    """

    NAME = "G4 Terminal"
    DESCRIPTION = "Shoot through the rotating ring. Touch it and you start over."
    VERSION = "1.0.0"
    AUTHOR = "@scintilla4evr"

    ARGUMENTS = [
        {
            'name': '--seed',
            'type': str,
            'default': None,
            'help': 'Seed for ring generation (default: random)'
        },
        {
            'name': '--width',
            'type': str,
            'default': None,
            'help': f'Frame width in cells (default: {config.GRID_WIDTH})'
        },
        {
            'name': '--height',
            'type': str,
            'default': None,
            'help': f'Frame height in cells (default: {config.GRID_HEIGHT})'
        },
    ]

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        ring_generator: Optional[RingGenerator] = None,
        **kwargs,  # Accept launcher options the game does not use
    ):
        """Initialize the game and generate the first ring.

        Args:
            seed: Seed for a private random.Random (ignored if rng is given)
            rng: Random source for ring generation
            ring_generator: Replaces generate_inner_ring (tests, custom rings)
        """
        self._rng = rng or random.Random(seed)
        self._ring_generator = ring_generator or generate_inner_ring

        self._items: List[RingItem] = []
        self._level = 0
        self._player_angle = 0.0
        self._bullet: Optional[Bullet] = None

        self._highlight = Highlight.NONE
        self._highlight_timer = 0

        self.start()

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def items(self) -> List[RingItem]:
        """Entities of the current ring."""
        return self._items

    @property
    def level(self) -> int:
        """Current level (0 after a reset)."""
        return self._level

    @property
    def player_angle(self) -> float:
        """Current aim in turns."""
        return self._player_angle

    @property
    def bullet(self) -> Optional[Bullet]:
        """The bullet in flight, if any."""
        return self._bullet

    @property
    def highlight(self) -> Highlight:
        """Feedback from the most recent transition."""
        return self._highlight

    @property
    def highlight_timer(self) -> int:
        """Frames left before the highlight clears."""
        return self._highlight_timer

    @property
    def difficulty(self) -> int:
        """Difficulty tier for the current level."""
        return 2 if self._level > config.HARD_LEVEL_THRESHOLD else 1

    def _get_internal_state(self) -> GameState:
        return GameState.PLAYING

    def get_score(self) -> int:
        """The score is the level reached."""
        return self._level

    # =========================================================================
    # Simulation
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        """Process input events."""
        for event in events:
            if event.action == InputAction.SHOOT:
                self.shoot()

    def update(self, dt: float) -> None:
        """One tick: resolve the bullet, then move everything."""
        self.hit_test()
        self.advance(dt)

    def advance(self, dt: float) -> None:
        """Move ring, bullet and aim forward by dt seconds."""
        dt *= config.TIME_SCALE

        for item in self._items:
            item.advance(dt)

        if self._bullet is not None:
            self._bullet.advance(dt)

        self._player_angle -= dt

    def hit_test(self) -> None:
        """Resolve the bullet against the ring and the play boundary."""
        if self._bullet is None:
            return

        x, y = self._bullet.x, self._bullet.y
        if any(item.pixel_test(x, y).is_hit for item in self._items):
            self.reset_progression()
        elif math.hypot(x, y) > config.PLAY_BOUNDARY:
            self.next_level()

    def shoot(self) -> None:
        """Fire along the current aim, unless a bullet is already flying."""
        if self._bullet is not None:
            return

        self._bullet = Bullet.aimed(
            self._player_angle,
            config.BULLET_SPAWN_DISTANCE,
            config.BULLET_SPEED,
        )
        log.debug("Shot fired at %.3f turns", self._player_angle % 1.0)

    def aim_bullet(self) -> Bullet:
        """The bullet to draw: the live one, or a marker on the aim line."""
        if self._bullet is not None:
            return self._bullet
        return Bullet.aimed(self._player_angle, config.BULLET_SPAWN_DISTANCE, 0.0)

    # =========================================================================
    # Transitions
    # =========================================================================

    def start(self) -> None:
        """Replace the ring with a freshly generated one for the current level."""
        assert self._level >= 0, f"level went negative: {self._level}"
        self._items = list(self._ring_generator(self.difficulty, config.RING_DISTANCE, self._rng))
        log.debug("Generated ring: %d items at difficulty %d", len(self._items), self.difficulty)

    def next_level(self) -> None:
        """The bullet escaped: advance one level."""
        self._bullet = None
        self._level += 1
        self.start()
        self._set_highlight(Highlight.NEXT)

        log.info("Level %d", self._level)
        emit_record('session', {'type': 'next_level', 'level': self._level})

    def reset_progression(self) -> None:
        """The bullet hit the ring: back to level 0."""
        reached = self._level
        self._bullet = None
        self._level = 0
        self.start()
        self._set_highlight(Highlight.HIT)

        log.info("Hit at level %d, progress reset", reached)
        emit_record('session', {'type': 'reset', 'reached_level': reached})

    def _set_highlight(self, highlight: Highlight) -> None:
        self._highlight = highlight
        self._highlight_timer = config.HIGHLIGHT_TICKS

    def end_frame(self) -> None:
        """Count the highlight down; it clears when the timer reaches 0."""
        if self._highlight_timer:
            self._highlight_timer -= 1
            if not self._highlight_timer:
                self._highlight = Highlight.NONE
