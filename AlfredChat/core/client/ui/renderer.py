"""
Curses UI renderer for the terminal chat interface.
Handles all screen drawing and display operations.
"""

import curses
from typing import Optional

from AlfredChat.core.logging import get_logger
from AlfredChat.core.message import Role

from .view import prompt_line_index
from .viewport import Viewport
from ..utils.constants import ESCAPE_DELAY_MS
from ..utils.exceptions import RenderError

logger = get_logger(__name__)


class CursesRenderer:
    """
    Handles all curses rendering operations.
    Manages screen layout, colors, and display updates.
    """

    def __init__(self, stdscr, viewport: Optional[Viewport] = None):
        """
        Initialize renderer with curses window.

        Args:
            stdscr: Main curses window object
            viewport: Scroll state shared with the input handler
        """
        self._stdscr = stdscr
        self._viewport = viewport or Viewport()
        self._height: int = 0
        self._width: int = 0
        self._colors: bool = False
        self._init_curses()

    def _init_curses(self) -> None:
        """Initialize curses settings and configuration."""
        # Raw mode delivers Ctrl+C as a key instead of a signal
        curses.raw()
        curses.noecho()
        curses.set_escdelay(ESCAPE_DELAY_MS)
        self._stdscr.keypad(True)
        self._stdscr.nodelay(True)

        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            self._init_color_pairs()
            self._colors = True

        self._update_dimensions()
        logger.debug("Curses initialized (%dx%d, colors=%s)", self._width, self._height, self._colors)

    def _init_color_pairs(self) -> None:
        """Initialize color pairs for different line types."""
        curses.init_pair(1, curses.COLOR_GREEN, -1)   # Alfred lines
        curses.init_pair(2, curses.COLOR_CYAN, -1)    # User lines
        curses.init_pair(3, curses.COLOR_YELLOW, -1)  # Help line

    def _update_dimensions(self) -> None:
        """Update stored screen dimensions."""
        self._height, self._width = self._stdscr.getmaxyx()

    def clear(self) -> None:
        """Clear the screen."""
        self._stdscr.erase()

    def refresh(self) -> None:
        """Refresh the screen."""
        try:
            self._stdscr.refresh()
        except curses.error as e:
            raise RenderError("Failed to refresh the screen", {"error": str(e)}) from e

    def _get_line_color(self, line: str, is_help: bool) -> Optional[int]:
        """
        Determine color pair for a line of the view.

        Returns:
            Color pair number or None for default
        """
        if not self._colors:
            return None
        if is_help:
            return 3
        if line.startswith(f"{Role.USER.label}: "):
            return 2
        if line.startswith(f"{Role.ASSISTANT.label}: "):
            return 1
        return None

    def _draw_line(self, row: int, line: str, color_pair: Optional[int]) -> None:
        display_line = line[:max(0, self._width - 1)]
        try:
            if color_pair:
                self._stdscr.addstr(row, 0, display_line, curses.color_pair(color_pair))
            else:
                self._stdscr.addstr(row, 0, display_line)
        except curses.error:
            # Ignore errors for edge cases
            pass

    def update_display(self, view: str) -> None:
        """
        Redraw the entire screen from a rendered view.

        Args:
            view: Output of ``render_view``
        """
        self.clear()
        self._update_dimensions()

        lines = view.split("\n")
        visible = self._viewport.visible(lines, self._height)
        offset = self._viewport.offset
        help_index = len(lines) - 1

        for row, line in enumerate(visible):
            self._draw_line(row, line, self._get_line_color(line, offset + row == help_index))

        prompt_row = prompt_line_index(lines) - offset
        if 0 <= prompt_row < len(visible):
            cursor_col = min(len(lines[prompt_row + offset]), max(0, self._width - 1))
            try:
                self._stdscr.move(prompt_row, cursor_col)
            except curses.error:
                pass

        self.refresh()
