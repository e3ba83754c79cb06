"""
PersistenceError - Raised when the store fails for any other reason.
Maps to: HTTP 500 Internal Server Error
"""

from chatroom.domain.exceptions.base import DomainError


class PersistenceError(DomainError):
    """Catch-all for store failures, the cause is kept on __cause__."""

    def __init__(self, message: str = "Error accessing the store"):
        super().__init__(message)
