"""
Input handling module for the terminal client.
Provides key translation and key event processing.
"""

from .handler import InputHandler, InputResult
from .key_mappings import KeyCode, KeyEvent, KeyKind, translate_key

__all__ = ['InputHandler', 'InputResult', 'KeyCode', 'KeyEvent', 'KeyKind', 'translate_key']
