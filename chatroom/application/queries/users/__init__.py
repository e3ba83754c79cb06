"""User queries."""

from .get_user import GetUserQuery, GetUserHandler
from .login_user import LoginUserQuery, LoginUserHandler

__all__ = [
    "GetUserQuery",
    "GetUserHandler",
    "LoginUserQuery",
    "LoginUserHandler",
]
