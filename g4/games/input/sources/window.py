"""
Pygame window keyboard input source.

Converts pygame key and quit events into InputEvent models for the
window renderer.
"""

import time
from typing import List

import pygame

from models import InputAction
from g4.games.input.input_event import InputEvent
from g4.games.input.sources.base import InputSource


class PygameKeyboardSource(InputSource):
    """Keyboard input from the pygame event queue.

    Space shoots; Ctrl-C or closing the window terminates.

    Examples:
        >>> import pygame
        >>> pygame.init()
        >>> source = PygameKeyboardSource()
        >>> source.update(0.033)
        >>> events = source.poll_events()
    """

    def __init__(self):
        """Initialize the window keyboard source."""
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Return collected events and clear the queue."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect recognized actions.

        Args:
            dt: Delta time in seconds since last update (unused)
        """
        for event in pygame.event.get():
            action = None
            if event.type == pygame.QUIT:
                action = InputAction.TERMINATE
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    action = InputAction.SHOOT
                elif event.key == pygame.K_c and event.mod & pygame.KMOD_CTRL:
                    action = InputAction.TERMINATE

            if action is not None:
                self._event_queue.append(
                    InputEvent(action=action, timestamp=time.monotonic())
                )
