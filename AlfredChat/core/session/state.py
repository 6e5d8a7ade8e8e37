"""
Session state for the chat loop.
Holds the transcript and the line being edited for the lifetime of the process.
"""

from dataclasses import dataclass, field
from typing import List

from AlfredChat.core.message import Message, Role


@dataclass
class SessionState:
    """
    Mutable record threaded through the chat loop.

    Attributes:
        transcript: Committed lines in display order; only ever appended to
        input_buffer: The uncommitted line
    """
    transcript: List[str] = field(default_factory=list)
    input_buffer: str = ""

    def insert(self, text: str) -> None:
        """Append typed characters to the input buffer."""
        self.input_buffer += text

    def backspace(self) -> None:
        """Drop the last character of the input buffer, if there is one."""
        if self.input_buffer:
            self.input_buffer = self.input_buffer[:-1]

    def record_exchange(self, user_text: str, reply: str) -> None:
        """
        Append one user line and its reply, then clear the input buffer.

        Args:
            user_text: The committed line
            reply: The assistant's answer to it
        """
        self.transcript.append(Message(Role.USER, user_text).format())
        self.transcript.append(Message(Role.ASSISTANT, reply).format())
        self.input_buffer = ""
