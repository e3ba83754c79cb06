"""
In-memory User Repository.

Keeps users in a dict keyed by username, which doubles as the unique
constraint. Used when STORE_BACKEND=memory and by the test suite.

Records are copied on the way in and out so callers never hold a live
reference into the store.
"""

from dataclasses import replace
from typing import Any, Optional

from chatroom.domain.entities.user import User
from chatroom.domain.exceptions import DuplicateUsernameError
from chatroom.domain.ports.repositories import UserRepository
from chatroom.domain.value_objects.username import Username

IMMUTABLE_FIELDS = frozenset({"id", "username", "date_joined"})


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self._users: dict[str, User] = {}

    async def create(self, user: User) -> User:
        # No await between the check and the insert, so this is atomic on the loop
        if user.username.value in self._users:
            raise DuplicateUsernameError()
        self._users[user.username.value] = replace(user)
        return replace(user)

    async def get_by_username(self, username: Username) -> Optional[User]:
        user = self._users.get(username.value)
        return replace(user) if user else None

    async def delete_by_username(self, username: Username) -> Optional[User]:
        return self._users.pop(username.value, None)

    async def update_by_username(
        self, username: Username, fields: dict[str, Any]
    ) -> Optional[User]:
        user = self._users.get(username.value)
        if not user:
            return None

        changes = {k: v for k, v in fields.items() if k not in IMMUTABLE_FIELDS}
        updated = replace(user, **changes)
        self._users[username.value] = updated
        return replace(updated)
