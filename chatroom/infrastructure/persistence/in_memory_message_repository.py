"""
In-memory Message Repository.

Messages are frozen dataclasses, so the list can hand them out directly.
"""

from chatroom.domain.entities.message import Message
from chatroom.domain.ports.repositories import MessageRepository


class InMemoryMessageRepository(MessageRepository):
    def __init__(self):
        self._messages: list[Message] = []

    async def create(self, message: Message) -> Message:
        self._messages.append(message)
        return message

    async def list_all(self) -> list[Message]:
        # sorted() is stable, so equal timestamps keep insertion order
        return sorted(self._messages, key=lambda m: m.msg_date_time)
