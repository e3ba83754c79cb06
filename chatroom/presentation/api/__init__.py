"""
API Routers - FastAPI endpoint definitions.
"""

from chatroom.presentation.api.users import router as users_router
from chatroom.presentation.api.messages import router as messages_router
from chatroom.presentation.api.realtime import router as realtime_router

__all__ = [
    "users_router",
    "messages_router",
    "realtime_router",
]
