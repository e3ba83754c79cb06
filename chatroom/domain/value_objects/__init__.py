"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Is immutable (frozen dataclass)
- Validates itself on creation
"""

from chatroom.domain.value_objects.user_id import UserId
from chatroom.domain.value_objects.message_id import MessageId
from chatroom.domain.value_objects.username import Username

__all__ = [
    "UserId",
    "MessageId",
    "Username",
]
