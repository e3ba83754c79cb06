"""
Messages API Router - post and list chat messages.

On a successful POST the new message is handed to the Broadcaster
(fire-and-forget) so every connected WebSocket client receives:
    {"event": "messageUpdate", "data": {"msg": {...MessageDTO...}}}
"""

from logging import getLogger
from typing import Any
from fastapi import APIRouter, Body, status
from dishka.integrations.fastapi import FromDishka, inject

from chatroom.application.commands.messages import (
    AddMessageCommand,
    AddMessageHandler,
)
from chatroom.application.queries.messages import (
    ListMessagesHandler,
    ListMessagesQuery,
)
from chatroom.application.dto.message import MessageDTO
from chatroom.config.settings import get_config
from chatroom.domain.exceptions import DomainError
from chatroom.domain.ports.broadcaster import Broadcaster
from chatroom.presentation.errors import to_http_exception
from chatroom.presentation.schemas import (
    INVALID_MESSAGE_REQUEST,
    AddMessageRequest,
    validate_body,
)

logger = getLogger(__name__)


# ==================== ROUTER ====================

router = APIRouter(prefix="/message", tags=["message"])


# ==================== ENDPOINTS ====================


@router.post(
    "/addMessage",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_message(
    handler: FromDishka[AddMessageHandler],
    broadcaster: FromDishka[Broadcaster],
    body: Any = Body(default=None),
):
    """Validate, save, then notify subscribers of the new message."""
    request = validate_body(AddMessageRequest, body, INVALID_MESSAGE_REQUEST)
    to_add = request.message_to_add
    command = AddMessageCommand(
        msg=to_add.msg,
        msg_from=to_add.msg_from,
        msg_date_time=to_add.msg_date_time,
    )
    try:
        message = await handler.execute(command)
    except DomainError as e:
        raise to_http_exception(e) from e

    broadcaster.emit(
        get_config().BROADCAST_EVENT,
        {"msg": message.model_dump(mode="json", by_alias=True)},
    )
    return message


@router.get(
    "/getMessages",
    response_model=list[MessageDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def get_messages(
    handler: FromDishka[ListMessagesHandler],
):
    """All messages, earliest msgDateTime first. Never fails; [] on store errors."""
    return await handler.execute(ListMessagesQuery())
