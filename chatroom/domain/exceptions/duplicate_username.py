"""
DuplicateUsernameError - Raised when the store rejects a username that is taken.
Maps to: HTTP 409 Conflict
"""

from chatroom.domain.exceptions.base import DomainError


class DuplicateUsernameError(DomainError):
    """Raised by repositories only when the store's unique constraint fires."""

    def __init__(self, message: str = "Username already exists"):
        super().__init__(message)
