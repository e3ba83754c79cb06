"""Update User Command - partial merge of mutable user fields."""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping
from chatroom.application.common.interfaces import Command, CommandHandler
from chatroom.application.dto.user import SafeUserDTO
from chatroom.domain.exceptions import EntityNotFoundError, PersistenceError
from chatroom.domain.ports.repositories import UserRepository
from chatroom.domain.value_objects.username import Username

logger = logging.getLogger(__name__)

# id, username and date_joined never change after registration
UPDATABLE_FIELDS = frozenset({"password"})


@dataclass(frozen=True)
class UpdateUserCommand(Command[SafeUserDTO]):
    username: Username
    fields: Mapping[str, Any] = field(default_factory=dict)


class UpdateUserHandler(CommandHandler[SafeUserDTO]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: UpdateUserCommand) -> SafeUserDTO:
        updates = {k: v for k, v in command.fields.items() if k in UPDATABLE_FIELDS}
        ignored = set(command.fields) - UPDATABLE_FIELDS
        if ignored:
            logger.debug(f"[UpdateUser] Ignoring immutable fields {sorted(ignored)}")

        try:
            if updates:
                user = await self._user_repository.update_by_username(
                    command.username, updates
                )
            else:
                # Nothing to change, answer with the current record
                user = await self._user_repository.get_by_username(command.username)
        except Exception as e:
            logger.exception(f"[UpdateUser] Failed to update user '{command.username}'")
            raise PersistenceError("Error updating user") from e

        if not user:
            raise EntityNotFoundError("User not found")

        logger.info(
            f"[UpdateUser] Updated {sorted(updates)} for user '{command.username}'"
        )
        return SafeUserDTO.from_entity(user)
