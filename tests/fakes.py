"""Test doubles shared by the test modules."""

from chatroom.domain.ports.repositories import MessageRepository, UserRepository


class FailingUserRepository(UserRepository):
    """Every call fails the way an unreachable database would."""

    async def create(self, user):
        raise RuntimeError("DB error")

    async def get_by_username(self, username):
        raise RuntimeError("DB error")

    async def delete_by_username(self, username):
        raise RuntimeError("DB error")

    async def update_by_username(self, username, fields):
        raise RuntimeError("DB error")


class FailingMessageRepository(MessageRepository):
    async def create(self, message):
        raise RuntimeError("DB error")

    async def list_all(self):
        raise RuntimeError("DB error")


class FakeWebSocket:
    """Records frames sent by the broadcaster."""

    def __init__(self, fail: bool = False):
        self.accepted = False
        self.frames: list[dict] = []
        self._fail = fail

    async def accept(self):
        self.accepted = True

    async def send_json(self, data):
        if self._fail:
            raise RuntimeError("connection closed")
        self.frames.append(data)
