"""
Dishka DI Container Setup.

- AppProvider registers the command/query handlers and the Broadcaster
- A store provider maps the repository ports to one store backend:
    InMemoryStoreProvider  (STORE_BACKEND=memory)
    PrismaStoreProvider    (STORE_BACKEND=prisma, chatroom/setup/ioc/prisma_provider.py)

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)

Flow:
  Container → provides → InMemoryUserRepository → to → RegisterUserHandler
                                    ↓
                            uses UserRepository interface
"""

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from chatroom.application.commands.messages import AddMessageHandler
from chatroom.application.commands.users import (
    DeleteUserHandler,
    RegisterUserHandler,
    UpdateUserHandler,
)
from chatroom.application.queries.messages import ListMessagesHandler
from chatroom.application.queries.users import GetUserHandler, LoginUserHandler
from chatroom.domain.ports.broadcaster import Broadcaster
from chatroom.domain.ports.repositories import MessageRepository, UserRepository
from chatroom.infrastructure.persistence import (
    InMemoryMessageRepository,
    InMemoryUserRepository,
)


class AppProvider(Provider):
    """
    Application dependency provider.

    The Broadcaster instance is passed in because the WebSocket route and the
    lifespan need the same object outside of a dishka request scope.
    """

    def __init__(self, broadcaster: Broadcaster):
        super().__init__()
        self._broadcaster = broadcaster

    # ==================== REALTIME ====================

    @provide(scope=Scope.APP)
    def get_broadcaster(self) -> Broadcaster:
        return self._broadcaster

    # ==================== USER HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_register_user_handler(
        self, user_repository: UserRepository
    ) -> RegisterUserHandler:
        """
        - Parameter asks for UserRepository (abstract)
        - Dishka resolves it from whichever store provider is installed
        """
        return RegisterUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_login_user_handler(
        self, user_repository: UserRepository
    ) -> LoginUserHandler:
        return LoginUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_user_handler(self, user_repository: UserRepository) -> GetUserHandler:
        return GetUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_user_handler(
        self, user_repository: UserRepository
    ) -> UpdateUserHandler:
        return UpdateUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_handler(
        self, user_repository: UserRepository
    ) -> DeleteUserHandler:
        return DeleteUserHandler(user_repository)

    # ==================== MESSAGE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_add_message_handler(
        self, message_repository: MessageRepository
    ) -> AddMessageHandler:
        return AddMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(
        self, message_repository: MessageRepository
    ) -> ListMessagesHandler:
        return ListMessagesHandler(message_repository)


class InMemoryStoreProvider(Provider):
    """
    In-process store. Scope.APP so every request sees the same records.
    """

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        return InMemoryMessageRepository()


def store_provider(backend: str) -> Provider:
    """Pick the store provider for STORE_BACKEND."""
    if backend == "memory":
        return InMemoryStoreProvider()
    if backend == "prisma":
        # Imported here so the memory store runs without a generated Prisma client
        from chatroom.setup.ioc.prisma_provider import PrismaStoreProvider

        return PrismaStoreProvider()
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}. Use 'prisma' or 'memory'.")


def create_container(broadcaster: Broadcaster, *providers: Provider) -> AsyncContainer:
    """
    Create and configure the DI container.

    `providers` supply the repository ports; the handlers and the
    Broadcaster always come from AppProvider.
    """
    return make_async_container(AppProvider(broadcaster), *providers)
