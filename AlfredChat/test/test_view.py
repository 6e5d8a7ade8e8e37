"""
Unit tests for the text view.
"""

from AlfredChat.core.client.ui import render_view
from AlfredChat.core.client.ui.view import prompt_line_index
from AlfredChat.core.session import SessionState


def test_empty_session():
    assert render_view(SessionState()) == (
        "Alfred CLI Chat\n"
        "\n"
        "\n"
        "> \n"
        "\n"
        "Press Esc or Ctrl+C to quit."
    )


def test_transcript_and_input():
    state = SessionState(transcript=["You: hi", "Alfred: hi"], input_buffer="next")

    assert render_view(state) == (
        "Alfred CLI Chat\n"
        "\n"
        "You: hi\n"
        "Alfred: hi\n"
        "\n"
        "> next\n"
        "\n"
        "Press Esc or Ctrl+C to quit."
    )


def test_rendering_is_pure():
    state = SessionState(transcript=["You: a", "Alfred: a"], input_buffer="b")

    first = render_view(state)
    second = render_view(state)

    assert first == second
    assert state == SessionState(transcript=["You: a", "Alfred: a"], input_buffer="b")


def test_prompt_line_index():
    lines = render_view(SessionState(transcript=["You: a", "Alfred: a"], input_buffer="xy")).split("\n")
    assert lines[prompt_line_index(lines)] == "> xy"
