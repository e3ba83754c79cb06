"""Get User Query - Look up one account by username."""

import logging
from dataclasses import dataclass
from chatroom.application.common.interfaces import Query, QueryHandler
from chatroom.application.dto.user import SafeUserDTO
from chatroom.domain.exceptions import EntityNotFoundError, PersistenceError
from chatroom.domain.ports.repositories import UserRepository
from chatroom.domain.value_objects.username import Username

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetUserQuery(Query[SafeUserDTO]):
    username: Username


class GetUserHandler(QueryHandler[SafeUserDTO]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetUserQuery) -> SafeUserDTO:
        try:
            user = await self._user_repository.get_by_username(query.username)
        except Exception as e:
            logger.exception(f"[GetUser] Failed to load user '{query.username}'")
            raise PersistenceError("Error retrieving user") from e

        if not user:
            raise EntityNotFoundError("User not found")
        return SafeUserDTO.from_entity(user)
