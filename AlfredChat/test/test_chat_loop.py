"""
Integration tests for the chat loop.
Drives CursesClient.run_loop with scripted key events and a recording display.
"""

import pytest

from AlfredChat.core.client import CursesClient
from AlfredChat.core.client.input import KeyKind
from AlfredChat.core.client.ui import render_view
from AlfredChat.core.session import SessionState

from .conftest import RecordingDisplay, ScriptedEventSource, keys

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_hi_enter_escape(display):
    client = CursesClient()
    source = ScriptedEventSource(keys("h", "i", KeyKind.ENTER, KeyKind.ESCAPE))

    await client.run_loop(source, display)

    assert client.state.transcript == ["You: hi", "Alfred: hi"]
    assert client.state.input_buffer == ""
    assert display.views[-1].endswith("You: hi\nAlfred: hi\n\n> \n\nPress Esc or Ctrl+C to quit.")


@pytest.mark.asyncio
async def test_typed_then_erased_line_is_not_committed(display):
    client = CursesClient()
    source = ScriptedEventSource(keys("a", KeyKind.BACKSPACE, KeyKind.ENTER, KeyKind.INTERRUPT))

    await client.run_loop(source, display)

    assert client.state.transcript == []
    assert client.state.input_buffer == ""


@pytest.mark.asyncio
async def test_renders_once_at_start_and_after_every_event(display):
    client = CursesClient()
    source = ScriptedEventSource(keys("a", KeyKind.OTHER, KeyKind.BACKSPACE, KeyKind.ESCAPE))

    await client.run_loop(source, display)

    # Initial view plus one per event before the quit
    assert len(display.views) == 4
    assert display.views[0] == render_view(SessionState())
    assert "> a" in display.views[1]
    assert display.views[1] == display.views[2]


@pytest.mark.asyncio
async def test_quit_stops_reading_events(display):
    client = CursesClient()
    source = ScriptedEventSource(keys("x", KeyKind.ESCAPE, "y", KeyKind.ENTER))

    await client.run_loop(source, display)

    assert source.remaining == 2
    assert client.state.input_buffer == "x"
    assert not client.handler.is_running
    assert "> x" in display.views[-1]


@pytest.mark.asyncio
async def test_conversation_keeps_insertion_order():
    client = CursesClient()
    display = RecordingDisplay()
    source = ScriptedEventSource(keys(
        "o", "n", "e", KeyKind.ENTER,
        "t", "w", "o", " ", "2", KeyKind.ENTER,
        KeyKind.INTERRUPT,
    ))

    await client.run_loop(source, display)

    assert client.state.transcript == [
        "You: one", "Alfred: one",
        "You: two 2", "Alfred: two 2",
    ]
    assert display.views[-1] == render_view(client.state)
