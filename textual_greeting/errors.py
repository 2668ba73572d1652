"""Error types for textual-greeting."""

from __future__ import annotations

UNKNOWN_ERROR = "Unknown error"


class OperationFailedError(Exception):
    """Raised by a gateway when an operation could not complete."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message
        if message is None:
            super().__init__()
        else:
            super().__init__(message)


def failure_message(exc: BaseException, default: str = UNKNOWN_ERROR) -> str:
    """
    Human-readable message for a failure.

    Args:
        exc: The caught exception.
        default: Used when the exception carries no message.

    Returns:
        The exception's message, or ``default`` if it is missing or empty.
    """
    return str(exc) or default
