"""
Message Repository Port - Interface for message persistence.
Implementations:
    chatroom/infrastructure/persistence/prisma_message_repository.py
    chatroom/infrastructure/persistence/in_memory_message_repository.py
"""

from abc import ABC, abstractmethod

from chatroom.domain.entities.message import Message


class MessageRepository(ABC):
    @abstractmethod
    async def create(self, message: Message) -> Message: ...

    @abstractmethod
    async def list_all(self) -> list[Message]:
        """Every stored message, earliest msg_date_time first."""
        ...
