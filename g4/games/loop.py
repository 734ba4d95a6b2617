"""
Fixed-rate game loop.

The loop owns one game, one renderer and one input manager. Each tick runs,
strictly in order:

    1. collect input and dispatch it (TERMINATE stops the loop)
    2. game.update(dt)      - collision resolution, then advancement
    3. renderer.draw(game)  - sample the visual state
    4. game.end_frame()     - count down per-frame feedback

run() draws the initial state once before the first tick.

The next tick is only scheduled after the current tick's body returns, so
ticks never overlap. If a tick overruns its slot the schedule is re-based
on the current time instead of running catch-up ticks back to back.
"""

import time
from typing import Callable, List, Optional

from models import InputAction
from g4.logging import get_logger
from g4.games.base_game import BaseGame
from g4.games.input.input_event import InputEvent
from g4.games.input.input_manager import InputManager
from g4.games.renderer import Renderer, NullRenderer

log = get_logger('game_loop')


class GameLoop:
    """Drives a game at a fixed tick rate.

    Args:
        game: Game to drive
        renderer: Renderer sampling the game each tick (default: NullRenderer)
        input_manager: Source of input events (default: no input)
        framerate: Ticks per second
        clock: Monotonic time source in seconds
        sleep: Sleep function in seconds

    Examples:
        >>> loop = GameLoop(game, framerate=30)
        >>> loop.run(max_ticks=3)
        3
    """

    def __init__(
        self,
        game: BaseGame,
        renderer: Optional[Renderer] = None,
        input_manager: Optional[InputManager] = None,
        framerate: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if framerate <= 0:
            raise ValueError(f"framerate must be positive, got {framerate}")

        self._game = game
        self._renderer = renderer or NullRenderer()
        self._input = input_manager or InputManager()
        self._framerate = framerate
        self._dt = 1.0 / framerate
        self._clock = clock
        self._sleep = sleep
        self._running = False
        self._ticks = 0

    @property
    def game(self) -> BaseGame:
        """The game being driven."""
        return self._game

    @property
    def dt(self) -> float:
        """Fixed simulation step in seconds."""
        return self._dt

    @property
    def ticks(self) -> int:
        """Number of ticks executed so far."""
        return self._ticks

    @property
    def is_running(self) -> bool:
        """True while run() is active and no stop was requested."""
        return self._running

    def stop(self) -> None:
        """Request the loop to stop after the current tick."""
        self._running = False

    def _collect_input(self) -> List[InputEvent]:
        self._input.update(self._dt)
        return self._input.get_events()

    def tick(self) -> bool:
        """Run one tick.

        Returns:
            False if a TERMINATE action was received (the tick's
            simulation steps are skipped), True otherwise
        """
        events = self._collect_input()
        if any(e.action == InputAction.TERMINATE for e in events):
            log.info("Terminate requested after %d ticks", self._ticks)
            self._running = False
            return False

        self._game.handle_input(events)
        self._game.update(self._dt)
        self._renderer.draw(self._game)
        self._game.end_frame()
        self._ticks += 1
        return True

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Run ticks at the configured rate until stopped.

        Args:
            max_ticks: Stop after this many ticks (None = until terminated)

        Returns:
            Number of ticks executed during this call
        """
        start_ticks = self._ticks
        self._running = True
        log.info("Game loop started at %.1f ticks/s", self._framerate)

        try:
            # First screen before any input or simulation
            self._renderer.draw(self._game)
            next_deadline = self._clock()

            while self._running:
                if max_ticks is not None and self._ticks - start_ticks >= max_ticks:
                    break

                if not self.tick():
                    break

                next_deadline += self._dt
                delay = next_deadline - self._clock()
                if delay > 0:
                    self._sleep(delay)
                else:
                    log.trace("Tick overran by %.4fs", -delay)
                    next_deadline = self._clock()
        finally:
            self._running = False

        executed = self._ticks - start_ticks
        log.info("Game loop stopped after %d ticks", executed)
        return executed
