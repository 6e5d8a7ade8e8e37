"""
Utility functions and shared components for the terminal client.
"""

from .constants import (
    TITLE,
    INPUT_PROMPT,
    HELP_TEXT,
    REFRESH_RATE_HZ,
    ESCAPE_DELAY_MS,
    ERROR_PREFIX,
)
from .exceptions import ClientError, TerminalSessionError, RenderError

__all__ = [
    'ClientError',
    'TerminalSessionError',
    'RenderError',
    'TITLE',
    'INPUT_PROMPT',
    'HELP_TEXT',
    'REFRESH_RATE_HZ',
    'ESCAPE_DELAY_MS',
    'ERROR_PREFIX',
]
