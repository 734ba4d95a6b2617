"""
Terminal keyboard input source.

Reads key codes from a curses window in no-delay mode and converts the
recognized ones into InputEvent models. Unrecognized keys are dropped.
"""

import time
from typing import Any, Dict, List, Optional

from models import InputAction
from g4.games.input.input_event import InputEvent
from g4.games.input.sources.base import InputSource

# Raw key codes as returned by curses getch()
KEY_SPACE = ord(' ')
KEY_CTRL_C = 3  # ETX, delivered as a key when the terminal is in raw mode

KEY_ACTIONS: Dict[int, InputAction] = {
    KEY_SPACE: InputAction.SHOOT,
    KEY_CTRL_C: InputAction.TERMINATE,
}


def action_for_key(key: int) -> Optional[InputAction]:
    """Map a raw key code to an action.

    Args:
        key: Key code from curses getch() (-1 means no key)

    Returns:
        The mapped InputAction, or None for keys the game ignores

    Examples:
        >>> action_for_key(ord(' '))
        <InputAction.SHOOT: 'shoot'>
        >>> action_for_key(ord('x')) is None
        True
    """
    return KEY_ACTIONS.get(key)


class CursesKeyboardSource(InputSource):
    """Keyboard input from a curses window.

    The window must be in no-delay mode so getch() returns -1 instead of
    blocking when no key is waiting.

    Attributes:
        _window: curses window to read from
        _event_queue: Events collected since last poll
    """

    def __init__(self, window: Any):
        """Initialize the keyboard source.

        Args:
            window: curses window (anything with a getch() method)
        """
        self._window = window
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Return collected events and clear the queue."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Drain every pending key from the window.

        Args:
            dt: Delta time in seconds since last update (unused)
        """
        while True:
            key = self._window.getch()
            if key == -1:
                break
            action = action_for_key(key)
            if action is not None:
                self._event_queue.append(
                    InputEvent(action=action, timestamp=time.monotonic())
                )
