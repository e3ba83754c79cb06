"""
Add Message Command.

Input is validated at the HTTP boundary; the handler only persists it.
Broadcasting the new message is left to the caller so a failed save never
notifies subscribers.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from chatroom.application.common.interfaces import Command, CommandHandler
from chatroom.application.dto.message import MessageDTO
from chatroom.domain.entities.message import Message
from chatroom.domain.exceptions import PersistenceError
from chatroom.domain.ports.repositories import MessageRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddMessageCommand(Command[MessageDTO]):
    msg: str
    msg_from: str
    msg_date_time: datetime


class AddMessageHandler(CommandHandler[MessageDTO]):
    _message_repository: MessageRepository

    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: AddMessageCommand) -> MessageDTO:
        message = Message.create(
            msg=command.msg,
            msg_from=command.msg_from,
            msg_date_time=command.msg_date_time,
        )
        try:
            saved = await self._message_repository.create(message)
        except Exception as e:
            logger.exception(f"[AddMessage] Failed to save message from '{command.msg_from}'")
            raise PersistenceError("Error saving message") from e

        logger.debug(f"[AddMessage] Saved message {saved.id} from '{saved.msg_from}'")
        return MessageDTO.from_entity(saved)
