"""
Realtime Router - WebSocket endpoint that subscribes a client to broadcasts.

Clients connect to /socket and receive every emitted event as JSON:
    {"event": "messageUpdate", "data": {"msg": {...}}}

Anything the client sends is ignored.
"""

from logging import getLogger
from fastapi import APIRouter, WebSocket

from chatroom.infrastructure.realtime import WebSocketBroadcaster

logger = getLogger(__name__)

router = APIRouter(tags=["realtime"])


@router.websocket("/socket")
async def socket(websocket: WebSocket):
    broadcaster: WebSocketBroadcaster = websocket.app.state.broadcaster
    await broadcaster.connect(websocket)
    try:
        # Inbound frames (text or bytes) are read and discarded
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        broadcaster.disconnect(websocket)
