"""Base class for Rings skins.

Skins handle ALL rendering - the game only manages state. Every skin
samples the game through the same FrameSampler, so terminal and window
output always agree cell for cell.
"""

from abc import abstractmethod
from typing import Optional

from g4.games.renderer import Renderer
from ..frame import Frame, FrameSampler


class RingsSkin(Renderer):
    """Renderer that samples a frame and hands it to render_frame()."""

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def __init__(self, sampler: Optional[FrameSampler] = None):
        self._sampler = sampler or FrameSampler()
        self._last_frame: Optional[Frame] = None

    @property
    def sampler(self) -> FrameSampler:
        return self._sampler

    @property
    def last_frame(self) -> Optional[Frame]:
        """Most recently drawn frame."""
        return self._last_frame

    def draw(self, game) -> None:
        frame = self._sampler.sample(game)
        self.render_frame(frame)
        self._last_frame = frame

    @abstractmethod
    def render_frame(self, frame: Frame) -> None:
        """Output one sampled frame.

        Args:
            frame: Frame to render
        """
        pass
