"""
Register User Command.

- Command: @dataclass(frozen=True) holding the already-validated credentials
- Handler: creates the User entity and inserts it through UserRepository
- Returns: SafeUserDTO of the created account

A taken username is only reported when the store itself rejects the insert
(DuplicateUsernameError from the repository); there is no pre-check.
"""

import logging
from dataclasses import dataclass
from chatroom.application.common.interfaces import Command, CommandHandler
from chatroom.application.dto.user import SafeUserDTO
from chatroom.domain.entities.user import User
from chatroom.domain.exceptions import DuplicateUsernameError, PersistenceError
from chatroom.domain.ports.repositories import UserRepository
from chatroom.domain.value_objects.username import Username

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisterUserCommand(Command[SafeUserDTO]):
    username: Username
    password: str


class RegisterUserHandler(CommandHandler[SafeUserDTO]):
    _user_repository: UserRepository

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: RegisterUserCommand) -> SafeUserDTO:
        user = User.register(username=command.username, password=command.password)
        try:
            created = await self._user_repository.create(user)
        except DuplicateUsernameError:
            logger.info(f"[RegisterUser] Username '{command.username}' already exists")
            raise
        except Exception as e:
            logger.exception(f"[RegisterUser] Failed to save user '{command.username}'")
            raise PersistenceError("Error when saving user") from e

        logger.info(f"[RegisterUser] Registered user '{created.username}'")
        return SafeUserDTO.from_entity(created)
