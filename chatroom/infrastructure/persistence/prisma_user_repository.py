"""
Prisma User Repository Implementation.

- Implements UserRepository port from domain layer
- Uses Prisma client for database operations
- Maps between Prisma models and domain entities
- All methods are async

Prisma User Model (from prisma/schema.prisma):
    model User {
        id          String   @id @default(uuid())
        username    String   @unique
        password    String
        date_joined DateTime @default(now())
    }

Mapping:
- Prisma: id (str) ←→ Domain: id (UserId)
- Prisma: username (str) ←→ Domain: username (Username)
- Other fields map directly

The @unique index on username is the only source of DuplicateUsernameError:
Prisma raises UniqueViolationError when it fires and create() translates it.
Every other Prisma error propagates to the handler.
"""

from typing import TYPE_CHECKING, Any, Optional
from prisma.errors import UniqueViolationError
from chatroom.domain.entities.user import User
from chatroom.domain.exceptions import DuplicateUsernameError
from chatroom.domain.ports.repositories import UserRepository
from chatroom.domain.value_objects.user_id import UserId
from chatroom.domain.value_objects.username import Username

if TYPE_CHECKING:
    # Generated by `prisma generate`; only needed for annotations
    from prisma import Prisma
    from prisma.models import User as PrismaUser

IMMUTABLE_FIELDS = frozenset({"id", "username", "date_joined"})


class PrismaUserRepository(UserRepository):
    """
    Prisma implementation of UserRepository.

    Handles persistence of User entities via Prisma.
    """

    _prisma: "Prisma"

    def __init__(self, prisma: "Prisma"):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(self, record: "PrismaUser") -> User:
        """Map Prisma record to domain entity."""
        return User(
            id=UserId(record.id),
            username=Username(record.username),
            password=record.password,
            date_joined=record.date_joined,
        )

    async def create(self, user: User) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateUsernameError: username is already taken
        """
        try:
            record = await self._prisma.user.create(
                data={
                    "id": user.id.value,
                    "username": user.username.value,
                    "password": user.password,
                    "date_joined": user.date_joined,
                }
            )
        except UniqueViolationError as e:
            raise DuplicateUsernameError() from e
        return self._to_entity(record)

    async def get_by_username(self, username: Username) -> Optional[User]:
        record = await self._prisma.user.find_unique(
            where={"username": username.value}
        )
        return self._to_entity(record) if record else None

    async def delete_by_username(self, username: Username) -> Optional[User]:
        """Delete by username. Prisma returns None when nothing matched."""
        record = await self._prisma.user.delete(where={"username": username.value})
        return self._to_entity(record) if record else None

    async def update_by_username(
        self, username: Username, fields: dict[str, Any]
    ) -> Optional[User]:
        data = {k: v for k, v in fields.items() if k not in IMMUTABLE_FIELDS}
        if not data:
            return await self.get_by_username(username)

        record = await self._prisma.user.update(
            where={"username": username.value},
            data=data,
        )
        return self._to_entity(record) if record else None
