"""
Key code mappings and event definitions for input handling.
Maps what curses reports for a key press onto the events the chat loop handles.
"""

import curses
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class KeyCode:
    """Characters curses delivers for control keys in raw mode."""
    CTRL_C = "\x03"
    BACKSPACE = "\x08"
    ENTER = "\n"
    ENTER_ALT = "\r"
    ESCAPE = "\x1b"
    SPACE = " "
    BACKSPACE_ALT = "\x7f"


class KeyKind(Enum):
    """Kinds of key event the chat loop distinguishes."""
    # Leaving
    INTERRUPT = auto()
    ESCAPE = auto()

    # Editing
    ENTER = auto()
    SPACE = auto()
    BACKSPACE = auto()
    RUNES = auto()

    # Navigation
    SCROLL_UP = auto()
    SCROLL_DOWN = auto()
    SCROLL_PAGE_UP = auto()
    SCROLL_PAGE_DOWN = auto()
    SCROLL_HOME = auto()
    SCROLL_END = auto()

    RESIZE = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyEvent:
    """
    A single key press.

    Attributes:
        kind: What the key means to the chat loop
        runes: Printable text carried by a RUNES event, empty otherwise
    """
    kind: KeyKind
    runes: str = ""

    @classmethod
    def chars(cls, text: str) -> 'KeyEvent':
        """Build a RUNES event for typed text."""
        return cls(KeyKind.RUNES, text)


_CHAR_KINDS = {
    KeyCode.CTRL_C: KeyKind.INTERRUPT,
    KeyCode.ESCAPE: KeyKind.ESCAPE,
    KeyCode.ENTER: KeyKind.ENTER,
    KeyCode.ENTER_ALT: KeyKind.ENTER,
    KeyCode.SPACE: KeyKind.SPACE,
    KeyCode.BACKSPACE: KeyKind.BACKSPACE,
    KeyCode.BACKSPACE_ALT: KeyKind.BACKSPACE,
}

_SPECIAL_KINDS = {
    curses.KEY_ENTER: KeyKind.ENTER,
    curses.KEY_BACKSPACE: KeyKind.BACKSPACE,
    curses.KEY_DC: KeyKind.BACKSPACE,
    curses.KEY_UP: KeyKind.SCROLL_UP,
    curses.KEY_DOWN: KeyKind.SCROLL_DOWN,
    curses.KEY_PPAGE: KeyKind.SCROLL_PAGE_UP,
    curses.KEY_NPAGE: KeyKind.SCROLL_PAGE_DOWN,
    curses.KEY_HOME: KeyKind.SCROLL_HOME,
    curses.KEY_END: KeyKind.SCROLL_END,
    curses.KEY_RESIZE: KeyKind.RESIZE,
}


def translate_key(key: Union[int, str]) -> KeyEvent:
    """
    Map a key reported by curses to a key event.

    Args:
        key: A character from ``get_wch`` or a key code from ``getch``/``get_wch``

    Returns:
        Corresponding key event
    """
    if isinstance(key, int):
        if 0 <= key < 256:
            # getch reports plain characters as their code
            return translate_key(chr(key))
        return KeyEvent(_SPECIAL_KINDS.get(key, KeyKind.OTHER))

    kind = _CHAR_KINDS.get(key)
    if kind is not None:
        return KeyEvent(kind)

    if key and key.isprintable():
        return KeyEvent.chars(key)

    return KeyEvent(KeyKind.OTHER)

