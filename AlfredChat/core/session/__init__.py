"""
Session state owned by the chat loop.
"""

from .state import SessionState

__all__ = ['SessionState']
