"""
UI module for the curses-based client.
Provides the text view, scrolling and screen rendering.
"""

from .renderer import CursesRenderer
from .view import render_view
from .viewport import Viewport, ScrollDirection

__all__ = ['CursesRenderer', 'render_view', 'Viewport', 'ScrollDirection']
