from chatroom.domain.entities.user import User
from chatroom.domain.entities.message import Message

__all__ = ["User", "Message"]
