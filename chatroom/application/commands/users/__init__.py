"""User commands."""

from .register_user import RegisterUserCommand, RegisterUserHandler
from .update_user import UpdateUserCommand, UpdateUserHandler
from .delete_user import DeleteUserCommand, DeleteUserHandler

__all__ = [
    "RegisterUserCommand",
    "RegisterUserHandler",
    "UpdateUserCommand",
    "UpdateUserHandler",
    "DeleteUserCommand",
    "DeleteUserHandler",
]
