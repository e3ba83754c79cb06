"""
Users API Router - account management endpoints.

- Receives handlers via Dependency Injection (Dishka)
- Thin layer: validates the body, builds a Command/Query, maps errors
- Every success body is a SafeUserDTO (no password)

Flow:
  HTTP Request → validate_body → Command/Query → Handler → UserRepository
                                          ↓
  HTTP Response ← SafeUserDTO / {"error": ...} ←
"""

from logging import getLogger
from typing import Any
from fastapi import APIRouter, Body, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject

from chatroom.application.commands.users import (
    DeleteUserCommand,
    DeleteUserHandler,
    RegisterUserCommand,
    RegisterUserHandler,
    UpdateUserCommand,
    UpdateUserHandler,
)
from chatroom.application.queries.users import (
    GetUserHandler,
    GetUserQuery,
    LoginUserHandler,
    LoginUserQuery,
)
from chatroom.application.dto.user import SafeUserDTO
from chatroom.domain.exceptions import DomainError
from chatroom.domain.value_objects.username import Username
from chatroom.presentation.errors import to_http_exception
from chatroom.presentation.schemas import (
    INVALID_USER_BODY,
    UserCredentialsRequest,
    validate_body,
)

logger = getLogger(__name__)


def _path_username(username: str) -> Username:
    """A blank path segment can never name an existing user."""
    try:
        return Username(username)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        ) from e


# ==================== ROUTER ====================

router = APIRouter(prefix="/user", tags=["user"])


# ==================== ENDPOINTS ====================


@router.post(
    "/register",
    response_model=SafeUserDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def register_user(
    handler: FromDishka[RegisterUserHandler],
    body: Any = Body(default=None),
):
    """Create a new account. 409 if the username is taken."""
    request = validate_body(UserCredentialsRequest, body, INVALID_USER_BODY)
    command = RegisterUserCommand(
        username=Username(request.username),
        password=request.password,
    )
    try:
        return await handler.execute(command)
    except DomainError as e:
        raise to_http_exception(e) from e


@router.post(
    "/login",
    response_model=SafeUserDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def login_user(
    handler: FromDishka[LoginUserHandler],
    body: Any = Body(default=None),
):
    """Check credentials. Unknown user and wrong password both answer 401."""
    request = validate_body(UserCredentialsRequest, body, INVALID_USER_BODY)
    query = LoginUserQuery(
        username=Username(request.username),
        password=request.password,
    )
    try:
        return await handler.execute(query)
    except DomainError as e:
        raise to_http_exception(e) from e


@router.patch(
    "/reset-password",
    response_model=SafeUserDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def reset_password(
    handler: FromDishka[UpdateUserHandler],
    body: Any = Body(default=None),
):
    """
    Replace a user's password.

    Request: {"username": "alice", "password": "new-password"}
    Response: the updated SafeUserDTO (dateJoined unchanged)
    """
    request = validate_body(UserCredentialsRequest, body, INVALID_USER_BODY)
    command = UpdateUserCommand(
        username=Username(request.username),
        fields={"password": request.password},
    )
    try:
        return await handler.execute(command)
    except DomainError as e:
        raise to_http_exception(e) from e


@router.get(
    "/{username}",
    response_model=SafeUserDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_user(
    username: str,
    handler: FromDishka[GetUserHandler],
):
    """Get user by username."""
    try:
        return await handler.execute(GetUserQuery(username=_path_username(username)))
    except DomainError as e:
        raise to_http_exception(e) from e


@router.delete(
    "/{username}",
    response_model=SafeUserDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_user(
    username: str,
    handler: FromDishka[DeleteUserHandler],
):
    """Delete user by username and return the removed account."""
    try:
        return await handler.execute(
            DeleteUserCommand(username=_path_username(username))
        )
    except DomainError as e:
        raise to_http_exception(e) from e
