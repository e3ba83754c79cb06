"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by the application handlers and caught by the
presentation layer, which maps them to HTTP status codes.
"""

from chatroom.domain.exceptions.base import DomainError
from chatroom.domain.exceptions.entity_not_found import EntityNotFoundError
from chatroom.domain.exceptions.invalid_credentials import InvalidCredentialsError
from chatroom.domain.exceptions.duplicate_username import DuplicateUsernameError
from chatroom.domain.exceptions.persistence_error import PersistenceError

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "InvalidCredentialsError",
    "DuplicateUsernameError",
    "PersistenceError",
]
