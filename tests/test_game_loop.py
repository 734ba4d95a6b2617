"""
Tests for GameLoop.

Tests cover:
- Per-tick ordering of input, update, render and end_frame
- Termination
- Scheduling with a fake clock
"""

from typing import List

import pytest

from models import InputAction
from g4.games import BaseGame, GameLoop, GameState, Renderer
from g4.games.input import InputEvent, InputManager
from g4.games.input.sources import InputSource


class ScriptedSource(InputSource):
    """Input source that replays a list of per-tick event batches."""

    def __init__(self, batches):
        self.batches = list(batches)
        self.pending: List[InputEvent] = []
        self.updates = 0

    def update(self, dt: float) -> None:
        self.updates += 1
        if self.batches:
            for action in self.batches.pop(0):
                self.pending.append(InputEvent(action=action, timestamp=0.0))

    def poll_events(self) -> List[InputEvent]:
        events = self.pending.copy()
        self.pending.clear()
        return events


class RecordingGame(BaseGame):
    """Game that logs every call the loop makes."""

    NAME = "Recording"

    def __init__(self, calls):
        self.calls = calls

    def _get_internal_state(self) -> GameState:
        return GameState.PLAYING

    def get_score(self) -> int:
        return 0

    def handle_input(self, events) -> None:
        self.calls.append(('input', [e.action for e in events]))

    def update(self, dt: float) -> None:
        self.calls.append(('update', dt))

    def end_frame(self) -> None:
        self.calls.append(('end_frame',))


class RecordingRenderer(Renderer):
    def __init__(self, calls):
        self.calls = calls

    def draw(self, game) -> None:
        self.calls.append(('draw',))


class FakeClock:
    """Clock advanced only by sleep() and explicit work."""

    def __init__(self):
        self.now = 100.0
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def make_loop(batches=(), framerate=30.0, clock=None):
    calls = []
    clock = clock or FakeClock()
    loop = GameLoop(
        RecordingGame(calls),
        renderer=RecordingRenderer(calls),
        input_manager=InputManager(ScriptedSource(batches)),
        framerate=framerate,
        clock=clock,
        sleep=clock.sleep,
    )
    return loop, calls, clock


class TestGameLoopConstruction:
    """Test GameLoop setup."""

    @pytest.mark.parametrize("framerate", [0, -1.0])
    def test_non_positive_framerate_raises(self, framerate):
        """The tick rate must be positive."""
        with pytest.raises(ValueError):
            GameLoop(RecordingGame([]), framerate=framerate)

    def test_dt_from_framerate(self):
        """dt is the reciprocal of the framerate."""
        loop, _, _ = make_loop(framerate=25.0)
        assert loop.dt == pytest.approx(0.04)
        assert loop.ticks == 0
        assert not loop.is_running


class TestTick:
    """Test a single tick."""

    def test_tick_order(self):
        """Input, update, draw and end_frame run in that order."""
        loop, calls, _ = make_loop([[InputAction.SHOOT]])
        assert loop.tick() is True
        assert calls == [
            ('input', [InputAction.SHOOT]),
            ('update', pytest.approx(1 / 30)),
            ('draw',),
            ('end_frame',),
        ]
        assert loop.ticks == 1

    def test_terminate_skips_simulation(self):
        """A TERMINATE action stops before the game is touched."""
        loop, calls, _ = make_loop([[InputAction.SHOOT, InputAction.TERMINATE]])
        assert loop.tick() is False
        assert calls == []
        assert loop.ticks == 0

    def test_defaults_without_renderer_or_input(self):
        """A loop without renderer or input still drives the game."""
        calls = []
        loop = GameLoop(RecordingGame(calls))
        assert loop.tick() is True
        assert [c[0] for c in calls] == ['input', 'update', 'end_frame']


class TestRun:
    """Test run() scheduling."""

    def test_max_ticks(self):
        """run(max_ticks) executes exactly that many ticks."""
        loop, calls, clock = make_loop()
        assert loop.run(max_ticks=3) == 3
        assert loop.ticks == 3
        assert not loop.is_running
        assert len(clock.sleeps) == 3
        assert all(s == pytest.approx(1 / 30) for s in clock.sleeps)

    def test_initial_screen_before_first_tick(self):
        """run() draws once before any input is read or the game is updated."""
        loop, calls, _ = make_loop([[InputAction.SHOOT]])
        loop.run(max_ticks=1)
        assert [c[0] for c in calls] == ['draw', 'input', 'update', 'draw', 'end_frame']

    def test_initial_screen_even_when_terminated(self):
        """A session ended on the first tick still showed its first screen."""
        loop, calls, _ = make_loop([[InputAction.TERMINATE]])
        assert loop.run() == 0
        assert calls == [('draw',)]

    def test_terminate_ends_run(self):
        """run() returns once a TERMINATE action arrives."""
        loop, _, _ = make_loop([[], [], [InputAction.TERMINATE]])
        assert loop.run() == 2
        assert not loop.is_running

    def test_stop_from_game(self):
        """stop() during a tick ends the run after that tick."""
        loop, calls, _ = make_loop()

        class Stopper(RecordingRenderer):
            draws = 0

            def draw(self, game):
                super().draw(game)
                self.draws += 1
                # the first draw is the initial screen, the second is tick 1
                if self.draws == 2:
                    loop.stop()

        loop._renderer = Stopper(calls)
        assert loop.run() == 1

    def test_overrun_rebases_schedule(self):
        """A slow tick is not followed by catch-up ticks without sleeping."""
        clock = FakeClock()
        loop, calls, _ = make_loop(clock=clock)

        class SlowRenderer(RecordingRenderer):
            def __init__(self, calls):
                super().__init__(calls)
                self.draws = 0

            def draw(self, game):
                self.draws += 1
                if self.draws == 2:  # tick 1
                    clock.now += 0.5

        loop._renderer = SlowRenderer(calls)
        loop.run(max_ticks=3)

        # first tick overran: no sleep; the next two sleep a full slot each
        assert len(clock.sleeps) == 2
        assert all(s == pytest.approx(1 / 30) for s in clock.sleeps)
