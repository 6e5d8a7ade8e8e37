"""
Message model shared by the session state and the responders.
"""

from .models import Message, Role

__all__ = ['Message', 'Role']
