"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the handlers need
- Does NOT specify implementation (Prisma, in-memory, etc.)
"""

from chatroom.domain.ports.repositories.user_repository import UserRepository
from chatroom.domain.ports.repositories.message_repository import MessageRepository

__all__ = [
    "UserRepository",
    "MessageRepository",
]
