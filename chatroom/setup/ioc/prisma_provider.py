"""
Prisma store provider.

Requires a generated client: prisma generate --schema prisma/schema.prisma
"""

from collections.abc import AsyncIterator
import logging

from dishka import Provider, Scope, provide
from prisma import Prisma

from chatroom.domain.ports.repositories import MessageRepository, UserRepository
from chatroom.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from chatroom.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)

logger = logging.getLogger(__name__)


class PrismaStoreProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterator[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE, shared across all requests
        - Disconnected when the container is closed at shutdown
        """
        prisma = Prisma()
        await prisma.connect()
        logger.info("[Prisma] Connected")
        yield prisma
        await prisma.disconnect()
        logger.info("[Prisma] Disconnected")

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        """
        - Return type is ABSTRACT (UserRepository)
        - Implementation is CONCRETE (PrismaUserRepository)
        - Scope.REQUEST = new instance per HTTP request
        """
        return PrismaUserRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)
