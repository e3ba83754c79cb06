"""
DTOs - Data Transfer Objects

- user.py    → SafeUserDTO (a User without its password)
- message.py → MessageDTO

These are different from domain entities: DTOs are what leaves the
application layer, entities are for business logic.
"""

from chatroom.application.dto.user import SafeUserDTO
from chatroom.application.dto.message import MessageDTO

__all__ = [
    "SafeUserDTO",
    "MessageDTO",
]
