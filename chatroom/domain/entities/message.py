"""
Message Entity - A single chat message posted to the room.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4
from chatroom.domain.value_objects.message_id import MessageId


@dataclass(frozen=True)
class Message:
    id: MessageId
    msg: str
    msg_from: str
    msg_date_time: datetime

    def __post_init__(self):
        if not self.msg or not self.msg.strip():
            raise ValueError("Message text cannot be empty")
        if not self.msg_from or not self.msg_from.strip():
            raise ValueError("Message sender cannot be empty")

    @classmethod
    def create(cls, msg: str, msg_from: str, msg_date_time: datetime) -> Message:
        """Factory method to create a new Message with a generated ID."""
        return cls(
            id=MessageId(str(uuid4())),
            msg=msg,
            msg_from=msg_from,
            msg_date_time=msg_date_time,
        )
