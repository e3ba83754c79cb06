"""
InvalidCredentialsError - Raised when a login does not match a stored account.
Maps to: HTTP 401 Unauthorized
"""

from chatroom.domain.exceptions.base import DomainError


class InvalidCredentialsError(DomainError):
    """Unknown username and wrong password share this one error."""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)
