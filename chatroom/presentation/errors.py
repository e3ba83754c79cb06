"""
Domain error → HTTP status mapping shared by every router.

Routes switch purely on the error type; the message of the domain error
becomes the {"error": ...} body.
"""

from fastapi import HTTPException, status

from chatroom.domain.exceptions import (
    DomainError,
    DuplicateUsernameError,
    EntityNotFoundError,
    InvalidCredentialsError,
    PersistenceError,
)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    DuplicateUsernameError: status.HTTP_409_CONFLICT,
    PersistenceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_exception(error: DomainError) -> HTTPException:
    status_code = STATUS_BY_ERROR.get(
        type(error), status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return HTTPException(status_code=status_code, detail=str(error))
