"""Shared pytest fixtures."""

import os
from typing import Any, Dict, List

import pytest

# pygame tests run without a display
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from g4.logging import LogSink, register_sink, close_all_sinks


class RecordingSink(LogSink):
    """Sink that keeps records in memory."""

    def __init__(self):
        self.records: List[Dict[str, Any]] = []
        self.closed = False

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        self.records.append({'module': module, **record})

    def flush(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def session_sink():
    """Capture 'session' records for the duration of a test."""
    sink = RecordingSink()
    register_sink('session', sink)
    yield sink
    close_all_sinks()
