"""
Custom exceptions for the terminal client.
"""


class ClientError(Exception):
    """Base exception for client errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class TerminalSessionError(ClientError):
    """Exception raised when the terminal session cannot be started or driven."""
    pass


class RenderError(TerminalSessionError):
    """Exception raised for rendering-related errors."""
    pass
