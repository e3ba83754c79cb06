"""Delete User Command."""

import logging
from dataclasses import dataclass
from chatroom.application.common.interfaces import Command, CommandHandler
from chatroom.application.dto.user import SafeUserDTO
from chatroom.domain.exceptions import EntityNotFoundError, PersistenceError
from chatroom.domain.ports.repositories import UserRepository
from chatroom.domain.value_objects.username import Username

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteUserCommand(Command[SafeUserDTO]):
    username: Username


class DeleteUserHandler(CommandHandler[SafeUserDTO]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: DeleteUserCommand) -> SafeUserDTO:
        try:
            deleted = await self._user_repository.delete_by_username(command.username)
        except Exception as e:
            logger.exception(f"[DeleteUser] Failed to delete user '{command.username}'")
            raise PersistenceError("Error deleting user") from e

        if not deleted:
            raise EntityNotFoundError("User not found")

        logger.info(f"[DeleteUser] Deleted user '{command.username}'")
        return SafeUserDTO.from_entity(deleted)
