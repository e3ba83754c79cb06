"""User DTOs for API responses."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from chatroom.domain.entities.user import User


class SafeUserDTO(BaseModel):
    """Safe projection of a User. There is deliberately no password field."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    username: str
    date_joined: datetime

    @classmethod
    def from_entity(cls, user: User) -> "SafeUserDTO":
        return cls(
            id=user.id.value,
            username=user.username.value,
            date_joined=user.date_joined,
        )
