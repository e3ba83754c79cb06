import os
import sys

# Tests always run against the in-memory store
os.environ["STORE_BACKEND"] = "memory"

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

import pytest
from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient

from chatroom.domain.ports.repositories import MessageRepository, UserRepository
from chatroom.fastapi_app import create_fastapi_app
from chatroom.infrastructure.persistence import (
    InMemoryMessageRepository,
    InMemoryUserRepository,
)
from chatroom.infrastructure.realtime import WebSocketBroadcaster
from tests.fakes import FailingMessageRepository, FailingUserRepository


class FixedStoreProvider(Provider):
    """Serves the exact repository instances a test hands in."""

    def __init__(self, user_repository: UserRepository, message_repository: MessageRepository):
        super().__init__()
        self._user_repository = user_repository
        self._message_repository = message_repository

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return self._user_repository

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        return self._message_repository


@pytest.fixture()
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture()
def message_repository():
    return InMemoryMessageRepository()


@pytest.fixture()
def broadcaster():
    return WebSocketBroadcaster(max_queue_size=100)


@pytest.fixture()
def app(user_repository, message_repository, broadcaster):
    """Create a new FastAPI app instance for each test, backed by in-memory stores."""
    return create_fastapi_app(
        FixedStoreProvider(user_repository, message_repository),
        broadcaster=broadcaster,
    )


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app (lifespan not started)."""
    return TestClient(app)


@pytest.fixture()
def failing_client(broadcaster):
    """A test client whose stores fail on every call."""
    app = create_fastapi_app(
        FixedStoreProvider(FailingUserRepository(), FailingMessageRepository()),
        broadcaster=broadcaster,
    )
    return TestClient(app)
