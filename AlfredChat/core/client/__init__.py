"""
Client module for AlfredChat application.
Provides the curses chat client and its runner.
"""

from .curses_client import CursesClient, CursesEventSource, EventSource
from .responder import Responder, EchoResponder
from .runner import run_client

__all__ = [
    'CursesClient', 'CursesEventSource', 'EventSource',
    'Responder', 'EchoResponder',
    'run_client',
]
