"""
Prisma Message Repository Implementation.

Prisma Message Model (from prisma/schema.prisma):
    model Message {
        id            String   @id @default(uuid())
        msg           String
        msg_from      String
        msg_date_time DateTime
    }

Mapping:
- Prisma: id (str) ←→ Domain: id (MessageId)
- Other fields map directly
"""

from typing import TYPE_CHECKING
from chatroom.domain.entities.message import Message
from chatroom.domain.ports.repositories import MessageRepository
from chatroom.domain.value_objects.message_id import MessageId

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Message as PrismaMessage


class PrismaMessageRepository(MessageRepository):
    _prisma: "Prisma"

    def __init__(self, prisma: "Prisma"):
        self._prisma = prisma

    def _to_entity(self, record: "PrismaMessage") -> Message:
        """Map Prisma record to domain entity."""
        return Message(
            id=MessageId(record.id),
            msg=record.msg,
            msg_from=record.msg_from,
            msg_date_time=record.msg_date_time,
        )

    async def create(self, message: Message) -> Message:
        record = await self._prisma.message.create(
            data={
                "id": message.id.value,
                "msg": message.msg,
                "msg_from": message.msg_from,
                "msg_date_time": message.msg_date_time,
            }
        )
        return self._to_entity(record)

    async def list_all(self) -> list[Message]:
        """All messages, oldest msg_date_time first (uses the msg_date_time index)."""
        records = await self._prisma.message.find_many(
            order={"msg_date_time": "asc"},
        )
        return [self._to_entity(record) for record in records]
