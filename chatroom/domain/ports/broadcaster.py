"""
Broadcaster Port - Publish a named event to every connected subscriber.
Implementation: chatroom/infrastructure/realtime/websocket_broadcaster.py
"""

from abc import ABC, abstractmethod
from typing import Any


class Broadcaster(ABC):
    @abstractmethod
    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        """
        Hand an event off for delivery and return immediately.

        There is no acknowledgment channel; callers must not depend on
        delivery having happened (or succeeded) when this returns.
        """
        ...
