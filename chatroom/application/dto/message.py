"""Message DTOs for API request/response."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from chatroom.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to clients and broadcast to subscribers."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    msg: str
    msg_from: str
    msg_date_time: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            msg=message.msg,
            msg_from=message.msg_from,
            msg_date_time=message.msg_date_time,
        )
