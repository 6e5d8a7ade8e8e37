"""
Curses-based chat client for AlfredChat.
Runs the line editor: read a key, apply it, redraw, until the user quits.
"""

import asyncio
import curses
import sys
from abc import ABC, abstractmethod
from typing import Optional

from AlfredChat.core.logging import get_logger
from AlfredChat.core.session import SessionState

from .input import InputHandler, InputResult, KeyCode, KeyEvent, KeyKind, translate_key
from .responder import Responder
from .ui import CursesRenderer, Viewport, render_view
from .utils import REFRESH_RATE_HZ, TerminalSessionError

__all__ = ['EventSource', 'CursesEventSource', 'CursesClient']

logger = get_logger(__name__)


class EventSource(ABC):
    """Supplies key events to the chat loop, one at a time."""

    @abstractmethod
    async def read_event(self) -> KeyEvent:
        """Wait for the next key event."""


class CursesEventSource(EventSource):
    """
    Reads key presses from a non-blocking curses window.
    Yields to the event loop between polls and never gives up waiting.
    """

    def __init__(self, stdscr, poll_interval: float = 1 / REFRESH_RATE_HZ):
        self._stdscr = stdscr
        self._poll_interval = poll_interval

    async def read_event(self) -> KeyEvent:
        while True:
            try:
                key = self._stdscr.get_wch()
            except KeyboardInterrupt:
                return KeyEvent(KeyKind.INTERRUPT)
            except curses.error:
                # No input available
                await asyncio.sleep(self._poll_interval)
                continue
            if key == KeyCode.ESCAPE:
                return self._read_after_escape()
            return translate_key(key)

    def _read_after_escape(self) -> KeyEvent:
        """
        Tell a lone Esc from an Alt combination.

        Terminals send Alt+key as Esc followed at once by the key, so a key
        already waiting after Esc is taken as that key with Alt held.
        """
        try:
            key = self._stdscr.get_wch()
        except KeyboardInterrupt:
            return KeyEvent(KeyKind.INTERRUPT)
        except curses.error:
            return KeyEvent(KeyKind.ESCAPE)
        logger.debug("Alt combination read as %r", key)
        return translate_key(key)


class CursesClient:
    """
    Terminal chat client.
    Owns the session state and drives it from key events.
    """

    def __init__(self, responder: Optional[Responder] = None):
        """
        Initialize the client with an empty session.

        Args:
            responder: Produces Alfred's replies; echoes by default
        """
        self.state = SessionState()
        self.viewport = Viewport()
        self.handler = InputHandler(self.state, responder, self.viewport)

    async def run_loop(self, source: EventSource, display) -> None:
        """
        Process events until a quit signal arrives.

        Args:
            source: Where key events come from
            display: Anything with ``update_display(view)``
        """
        display.update_display(render_view(self.state))

        while self.handler.is_running:
            event = await source.read_event()
            result = await self.handler.process_event(event)
            if result is InputResult.QUIT:
                break
            display.update_display(render_view(self.state))

        logger.info("Chat loop finished with %d transcript lines", len(self.state.transcript))

    async def async_run(self, stdscr) -> None:
        """Asynchronous main method for curses client."""
        renderer = CursesRenderer(stdscr, self.viewport)
        await self.run_loop(CursesEventSource(stdscr), renderer)

    def run(self) -> None:
        """
        Start the curses-based client and block until the user quits.

        Raises:
            TerminalSessionError: No terminal is attached, or curses fails
        """
        if not (sys.stdin.isatty() and sys.stdout.isatty()):
            raise TerminalSessionError("could not open a terminal: stdin and stdout must be a TTY")

        try:
            curses.wrapper(lambda stdscr: asyncio.run(self.async_run(stdscr)))
        except curses.error as e:
            raise TerminalSessionError(f"terminal I/O failed: {e}") from e
        except OSError as e:
            raise TerminalSessionError(f"terminal I/O failed: {e}") from e
