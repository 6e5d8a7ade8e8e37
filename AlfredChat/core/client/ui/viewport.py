"""
Viewport management for the terminal client.
Decides which lines of the rendered view fit on screen and handles scrolling.
"""

from enum import Enum
from typing import List


class ScrollDirection(Enum):
    """Direction for scrolling operations."""
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


class Viewport:
    """
    Scroll state over the lines of the rendered view.
    Follows the bottom of the view (prompt and help) until the user scrolls up.
    """

    def __init__(self):
        self._offset: int = 0
        self._auto_scroll: bool = True
        self._height: int = 0
        self._line_count: int = 0

    @property
    def offset(self) -> int:
        """Index of the first visible line."""
        return self._offset

    @property
    def auto_scroll(self) -> bool:
        """Get auto-scroll state."""
        return self._auto_scroll

    @property
    def max_offset(self) -> int:
        return max(0, self._line_count - self._height)

    def visible(self, lines: List[str], height: int) -> List[str]:
        """
        Get the lines that fit on screen.

        Args:
            lines: Every line of the rendered view
            height: Number of rows available

        Returns:
            The visible slice of ``lines``
        """
        self._height = max(0, height)
        self._line_count = len(lines)

        if self._auto_scroll:
            self._offset = self.max_offset
        else:
            self._offset = min(self._offset, self.max_offset)

        return lines[self._offset:self._offset + self._height]

    def scroll(self, direction: ScrollDirection) -> None:
        """
        Scroll the view, measured against the last drawn screen.

        Args:
            direction: Direction to scroll
        """
        max_offset = self.max_offset

        match direction:
            case ScrollDirection.UP:
                if self._offset > 0:
                    self._offset -= 1
                self._auto_scroll = self._offset >= max_offset

            case ScrollDirection.DOWN:
                if self._offset < max_offset:
                    self._offset += 1
                if self._offset >= max_offset:
                    self._auto_scroll = True

            case ScrollDirection.PAGE_UP:
                self._offset = max(0, self._offset - self._height)
                self._auto_scroll = self._offset >= max_offset

            case ScrollDirection.PAGE_DOWN:
                self._offset = min(max_offset, self._offset + self._height)
                if self._offset >= max_offset:
                    self._auto_scroll = True

            case ScrollDirection.HOME:
                self._offset = 0
                self._auto_scroll = max_offset == 0

            case ScrollDirection.END:
                self._offset = max_offset
                self._auto_scroll = True
