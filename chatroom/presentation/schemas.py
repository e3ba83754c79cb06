"""
Request schemas and the shared body-validation helper.

Route bodies are received untyped and validated here with an explicit
per-route error message, so a bad body answers 400 {"error": "..."} before
any handler or store is touched.

Rules carried by NonBlankStr:
- the value must already be a JSON string (numbers are not coerced)
- empty and whitespace-only strings are rejected
- the value itself is passed on unchanged (not stripped)
"""

import logging
from datetime import datetime, timezone
from typing import Annotated, Any, TypeVar

from fastapi import HTTPException, status
from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    StrictStr,
    ValidationError,
)
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

INVALID_USER_BODY = "Invalid user body"
INVALID_MESSAGE_REQUEST = "Invalid message request"


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty or whitespace")
    return value


def _as_utc(value: datetime) -> datetime:
    # Date-only and offset-less inputs are read as UTC so all stored
    # timestamps compare against each other
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


NonBlankStr = Annotated[StrictStr, AfterValidator(_not_blank)]
Instant = Annotated[datetime, AfterValidator(_as_utc)]


class UserCredentialsRequest(BaseModel):
    """Body of register, login and reset-password."""

    username: NonBlankStr
    password: NonBlankStr


class MessageToAdd(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    msg: NonBlankStr
    msg_from: NonBlankStr
    msg_date_time: Instant


class AddMessageRequest(BaseModel):
    """
    Body of POST /message/addMessage:
    {"messageToAdd": {"msg": "...", "msgFrom": "...", "msgDateTime": "ISO-8601"}}
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message_to_add: MessageToAdd


SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_body(schema: type[SchemaT], payload: Any, error: str) -> SchemaT:
    """
    Validate a raw JSON body against `schema`.

    Raises:
        HTTPException 400 with `error` as detail when the body does not fit
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        logger.info(f"[Validation] {schema.__name__} rejected: {e.error_count()} error(s)")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error) from e
