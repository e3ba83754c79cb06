"""
WebSocket Broadcaster - fans events out to every connected WebSocket client.

DATA FLOW:
    emit() ──put_nowait──► asyncio.Queue ──► dispatcher task ──send_json──► subscribers

- emit() never awaits, so the HTTP response path does not wait on delivery
- The dispatcher task is started/stopped by the FastAPI lifespan
- Frames look like {"event": "messageUpdate", "data": {...}}
- A subscriber whose send fails is dropped; there is no retry or ack
"""

import asyncio
import contextlib
import logging
from dataclasses import dataclass
from typing import Any, Optional

from starlette.websockets import WebSocket

from chatroom.domain.ports.broadcaster import Broadcaster

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BroadcastEvent:
    name: str
    payload: dict[str, Any]

    def to_frame(self) -> dict[str, Any]:
        return {"event": self.name, "data": self.payload}


class WebSocketBroadcaster(Broadcaster):
    def __init__(self, max_queue_size: int = 0):
        self._subscribers: set[WebSocket] = set()
        self._queue: asyncio.Queue[BroadcastEvent] = asyncio.Queue(maxsize=max_queue_size)
        self._dispatcher: Optional[asyncio.Task] = None

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    # ==================== SUBSCRIBERS ====================

    async def connect(self, websocket: WebSocket) -> None:
        # Sending before the handshake completes fails, so only accepted
        # sockets are subscribers
        await websocket.accept()
        self._subscribers.add(websocket)
        logger.info(f"[Broadcaster] Subscriber connected ({self.subscriber_count} total)")

    def disconnect(self, websocket: WebSocket) -> None:
        self._subscribers.discard(websocket)
        logger.info(f"[Broadcaster] Subscriber left ({self.subscriber_count} total)")

    # ==================== PUBLISH ====================

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        try:
            self._queue.put_nowait(BroadcastEvent(event_name, payload))
        except asyncio.QueueFull:
            logger.warning(f"[Broadcaster] Queue full, dropping '{event_name}' event")

    async def deliver(self, event: BroadcastEvent) -> None:
        """Send one event to every current subscriber."""
        frame = event.to_frame()
        for websocket in list(self._subscribers):
            try:
                await websocket.send_json(frame)
            except Exception as e:
                logger.warning(f"[Broadcaster] Dropping subscriber after failed send: {e}")
                self._subscribers.discard(websocket)

    # ==================== LIFECYCLE ====================

    async def _dispatch_loop(self) -> None:
        while True:
            event = await self._queue.get()
            try:
                await self.deliver(event)
            finally:
                self._queue.task_done()

    def start(self) -> None:
        if self._dispatcher is None or self._dispatcher.done():
            self._dispatcher = asyncio.create_task(self._dispatch_loop())
            logger.info("[Broadcaster] Dispatcher started")

    async def stop(self) -> None:
        if self._dispatcher is None:
            return
        self._dispatcher.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._dispatcher
        self._dispatcher = None
        logger.info("[Broadcaster] Dispatcher stopped")
