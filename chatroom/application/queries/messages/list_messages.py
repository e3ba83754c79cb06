"""List Messages Query - the whole chat history, oldest first."""

import logging
from dataclasses import dataclass
from chatroom.application.common.interfaces import Query, QueryHandler
from chatroom.application.dto.message import MessageDTO
from chatroom.domain.ports.repositories import MessageRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListMessagesQuery(Query[list[MessageDTO]]):
    pass


class ListMessagesHandler(QueryHandler[list[MessageDTO]]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: ListMessagesQuery) -> list[MessageDTO]:
        """
        Return every message ascending by msg_date_time.

        A store failure is logged and answered with an empty list instead of
        an error, so the chat window still renders.
        """
        try:
            messages = await self._message_repository.list_all()
        except Exception:
            logger.warning("[ListMessages] Store failure, returning no messages", exc_info=True)
            return []

        return [MessageDTO.from_entity(m) for m in messages]
