"""
Login User Query - Check a username/password pair against the store.

Passwords are stored and compared in plaintext (see DESIGN.md). The
comparison goes through hmac.compare_digest so timing does not leak how
much of the password matched; the stored format is unchanged.

An unknown username and a wrong password raise the same
InvalidCredentialsError so callers cannot tell which one happened.
"""

import hmac
import logging
from dataclasses import dataclass
from chatroom.application.common.interfaces import Query, QueryHandler
from chatroom.application.dto.user import SafeUserDTO
from chatroom.domain.exceptions import InvalidCredentialsError, PersistenceError
from chatroom.domain.ports.repositories import UserRepository
from chatroom.domain.value_objects.username import Username

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginUserQuery(Query[SafeUserDTO]):
    username: Username
    password: str


class LoginUserHandler(QueryHandler[SafeUserDTO]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: LoginUserQuery) -> SafeUserDTO:
        try:
            user = await self._user_repository.get_by_username(query.username)
        except Exception as e:
            logger.exception(f"[LoginUser] Failed to load user '{query.username}'")
            raise PersistenceError("Error during login") from e

        if not user or not hmac.compare_digest(
            user.password.encode("utf-8"), query.password.encode("utf-8")
        ):
            logger.info(f"[LoginUser] Rejected login for '{query.username}'")
            raise InvalidCredentialsError()

        return SafeUserDTO.from_entity(user)
