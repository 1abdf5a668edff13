"""
Custom exceptions for the terminal.
"""

from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class TerminalError(BaseAppError):
    """Base exception for errors detected while interpreting a command.

    The message is already user-facing and is shown verbatim in the transcript.
    """

    pass


class CommandNotFoundError(TerminalError):
    """Exception raised when no registered command matches a name."""

    def __init__(self, name: str, hint: Optional[str] = None):
        self.name = name
        message = f"{name}: comando non trovato"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)


class DuplicateCommandError(TerminalError):
    """Exception raised when registering a command name twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Command already registered: {name}")


class MissingOperandError(TerminalError):
    """Exception raised when a required argument is absent."""

    pass


class InvalidTargetError(TerminalError):
    """Exception raised for an unknown destination (e.g. an unknown cd target)."""

    pass


class TransportError(BaseAppError):
    """Exception raised by a transport when a remote call fails.

    ``status`` follows the HTTP convention, with 0 meaning the backend could not
    be reached at all.
    """

    def __init__(self, message: str, status: int = 0, url: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.url = url

    @classmethod
    def from_status(
        cls, status: int, message: str, url: Optional[str] = None
    ) -> "TransportError":
        """Build the taxonomy member matching an HTTP status code."""
        if status == 0:
            return TransportUnreachableError(message, status, url)
        if status == 404:
            return RemoteNotFoundError(message, status, url)
        if status >= 500:
            return RemoteServerError(message, status, url)
        return RemoteOtherError(message, status, url)


class TransportUnreachableError(TransportError):
    """The backend could not be reached (network-level failure)."""

    pass


class RemoteNotFoundError(TransportError):
    """The backend answered 404."""

    pass


class RemoteServerError(TransportError):
    """The backend answered with a 5xx status."""

    pass


class RemoteOtherError(TransportError):
    """Any other non-success answer, including an unreadable body."""

    pass
