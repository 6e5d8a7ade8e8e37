"""
Text view of the chat session.
"""

from typing import List

from AlfredChat.core.session import SessionState

from ..utils.constants import TITLE, INPUT_PROMPT, HELP_TEXT

# The prompt is followed by a blank line and the help line
PROMPT_LINE_FROM_END = 3


def render_view(state: SessionState) -> str:
    """
    Render the whole screen for the given state.

    Title, blank line, one line per transcript entry, blank line, the prompt
    with the current input, blank line, help line.
    """
    view = f"{TITLE}\n\n"

    for entry in state.transcript:
        view += entry + "\n"

    view += f"\n{INPUT_PROMPT}{state.input_buffer}"
    view += f"\n\n{HELP_TEXT}"
    return view


def prompt_line_index(lines: List[str]) -> int:
    """Index of the prompt line within the split view."""
    return len(lines) - PROMPT_LINE_FROM_END
