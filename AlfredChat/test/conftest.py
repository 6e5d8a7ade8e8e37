"""
Test configuration and fixtures for AlfredChat tests.

Provides:
- Fresh session state and input handlers
- A scripted event source and a recording display for driving the chat loop
- A mocked curses screen
"""

import curses
from typing import Iterable, List, Union
from unittest.mock import DEFAULT, MagicMock, patch

import pytest

from AlfredChat.core.client import EventSource
from AlfredChat.core.client.input import InputHandler, KeyEvent, KeyKind
from AlfredChat.core.client.ui import Viewport
from AlfredChat.core.session import SessionState


class ScriptedEventSource(EventSource):
    """Replays a fixed list of key events, then fails if read again."""

    def __init__(self, events: Iterable[KeyEvent]):
        self._events = list(events)
        self.consumed = 0

    @property
    def remaining(self) -> int:
        return len(self._events) - self.consumed

    async def read_event(self) -> KeyEvent:
        if self.consumed >= len(self._events):
            raise AssertionError("chat loop read past the end of the script")
        event = self._events[self.consumed]
        self.consumed += 1
        return event


class RecordingDisplay:
    """Collects every view the chat loop draws."""

    def __init__(self):
        self.views: List[str] = []

    def update_display(self, view: str) -> None:
        self.views.append(view)


def keys(*items: Union[str, KeyKind]) -> List[KeyEvent]:
    """Build events: strings become typed characters, kinds stay as they are."""
    events = []
    for item in items:
        if isinstance(item, KeyKind):
            events.append(KeyEvent(item))
        elif item == " ":
            events.append(KeyEvent(KeyKind.SPACE))
        else:
            events.append(KeyEvent.chars(item))
    return events


@pytest.fixture
def session_state() -> SessionState:
    """Provide an empty session."""
    return SessionState()


@pytest.fixture
def viewport() -> Viewport:
    return Viewport()


@pytest.fixture
def handler(session_state: SessionState, viewport: Viewport) -> InputHandler:
    """Provide an input handler over the empty session."""
    return InputHandler(session_state, viewport=viewport)


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def stdscr() -> MagicMock:
    """Provide a stand-in curses window of 10 rows by 40 columns."""
    screen = MagicMock()
    screen.getmaxyx.return_value = (10, 40)
    return screen


@pytest.fixture
def curses_calls():
    """Patch the curses functions that need a real terminal."""
    with patch.multiple(
        curses,
        raw=DEFAULT,
        noecho=DEFAULT,
        set_escdelay=DEFAULT,
        has_colors=DEFAULT,
        start_color=DEFAULT,
        use_default_colors=DEFAULT,
        init_pair=DEFAULT,
        color_pair=DEFAULT,
    ) as mocks:
        mocks["has_colors"].return_value = False
        mocks["color_pair"].side_effect = lambda n: n << 8
        yield mocks


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as driving the whole chat loop"
    )
