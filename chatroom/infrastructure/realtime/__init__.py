from chatroom.infrastructure.realtime.websocket_broadcaster import (
    BroadcastEvent,
    WebSocketBroadcaster,
)

__all__ = ["BroadcastEvent", "WebSocketBroadcaster"]
