"""
User Repository Port - Interface for user persistence.
Implementations:
    chatroom/infrastructure/persistence/prisma_user_repository.py
    chatroom/infrastructure/persistence/in_memory_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
from chatroom.domain.entities.user import User
from chatroom.domain.value_objects.username import Username


class UserRepository(ABC):
    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateUsernameError: the store's unique constraint on username fired
        """
        ...

    @abstractmethod
    async def get_by_username(self, username: Username) -> Optional[User]: ...

    @abstractmethod
    async def delete_by_username(self, username: Username) -> Optional[User]:
        """Remove the user and return the record as it was, None if absent."""
        ...

    @abstractmethod
    async def update_by_username(
        self, username: Username, fields: dict[str, Any]
    ) -> Optional[User]:
        """Merge `fields` into the stored user and return the updated record."""
        ...
