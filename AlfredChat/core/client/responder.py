"""
Responders produce Alfred's side of the conversation.
"""

from abc import ABC, abstractmethod


class Responder(ABC):
    """Turns a committed user line into Alfred's reply."""

    @abstractmethod
    async def respond(self, text: str) -> str:
        """
        Produce the reply to a user line.

        Args:
            text: The committed line, verbatim

        Returns:
            Reply content, without the speaker label
        """


class EchoResponder(Responder):
    """Placeholder that answers with the user's own words."""

    async def respond(self, text: str) -> str:
        return text
