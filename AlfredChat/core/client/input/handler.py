"""
Input handler for processing key events in the chat client.
Applies each key event to the session state.
"""

from enum import Enum, auto
from typing import Optional

from AlfredChat.core.logging import get_logger
from AlfredChat.core.session import SessionState

from .key_mappings import KeyEvent, KeyKind
from ..responder import Responder, EchoResponder
from ..ui.viewport import Viewport, ScrollDirection

logger = get_logger(__name__)


class InputResult(Enum):
    """Result of processing a key event."""
    HANDLED = auto()
    SUBMIT = auto()
    QUIT = auto()


_SCROLL_DIRECTIONS = {
    KeyKind.SCROLL_UP: ScrollDirection.UP,
    KeyKind.SCROLL_DOWN: ScrollDirection.DOWN,
    KeyKind.SCROLL_PAGE_UP: ScrollDirection.PAGE_UP,
    KeyKind.SCROLL_PAGE_DOWN: ScrollDirection.PAGE_DOWN,
    KeyKind.SCROLL_HOME: ScrollDirection.HOME,
    KeyKind.SCROLL_END: ScrollDirection.END,
}


class InputHandler:
    """
    Handles key events for the chat client.
    Edits the input buffer, commits lines to the transcript and stops on quit.
    """

    def __init__(
        self,
        state: SessionState,
        responder: Optional[Responder] = None,
        viewport: Optional[Viewport] = None
    ):
        """
        Initialize input handler.

        Args:
            state: Session state to mutate
            responder: Produces the reply to each committed line
            viewport: Scrolled by navigation keys, if given
        """
        self._state = state
        self._responder = responder or EchoResponder()
        self._viewport = viewport
        self._running: bool = True

    @property
    def input_buffer(self) -> str:
        """Get current input buffer content."""
        return self._state.input_buffer

    @property
    def is_running(self) -> bool:
        """Check if handler is running."""
        return self._running

    async def process_event(self, event: KeyEvent) -> InputResult:
        """
        Process a single key event.

        Once the handler has stopped, further events are ignored.

        Args:
            event: The key event

        Returns:
            InputResult indicating the outcome
        """
        if not self._running:
            return InputResult.QUIT

        match event.kind:
            case KeyKind.INTERRUPT | KeyKind.ESCAPE:
                logger.info("Quit requested (%s)", event.kind.name)
                self._running = False
                return InputResult.QUIT

            case KeyKind.ENTER:
                return await self._commit()

            case KeyKind.SPACE:
                self._state.insert(" ")

            case KeyKind.BACKSPACE:
                self._state.backspace()

            case KeyKind.RUNES:
                self._state.insert(event.runes)

            case kind if kind in _SCROLL_DIRECTIONS:
                if self._viewport is not None:
                    self._viewport.scroll(_SCROLL_DIRECTIONS[kind])

            case _:
                pass

        return InputResult.HANDLED

    async def _commit(self) -> InputResult:
        """Commit the input buffer along with its reply."""
        text = self._state.input_buffer
        if not text:
            return InputResult.HANDLED

        reply = await self._responder.respond(text)
        self._state.record_exchange(text, reply)
        logger.debug("Committed line of %d characters", len(text))

        if self._viewport is not None:
            self._viewport.scroll(ScrollDirection.END)
        return InputResult.SUBMIT

    def stop(self) -> None:
        """Stop the input handler."""
        self._running = False
