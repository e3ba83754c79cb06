"""
Persistence Layer - Store implementations of the repository ports.

The Prisma repositories are imported from their own modules so that the
in-memory store works without a generated Prisma client.
"""

from chatroom.infrastructure.persistence.in_memory_user_repository import (
    InMemoryUserRepository,
)
from chatroom.infrastructure.persistence.in_memory_message_repository import (
    InMemoryMessageRepository,
)

__all__ = [
    "InMemoryUserRepository",
    "InMemoryMessageRepository",
]
