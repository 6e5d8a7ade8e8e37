"""
Message model for AlfredChat application.
Defines the roles that can speak in a conversation and how a line of the
transcript is written.
"""

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    """
    Enumeration of conversation roles, valued by their transcript label.
    """
    USER = "You"
    ASSISTANT = "Alfred"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Message:
    """
    A single chat message.

    Attributes:
        role (Role): Who said it
        content (str): What was said, verbatim
    """
    role: Role
    content: str

    def format(self) -> str:
        """Format message as a transcript line."""
        return f"{self.role.label}: {self.content}"
