"""
UserId Value Object - Identity of a chat account.

Assigned once at registration and never changed; the username, not the id,
is what the HTTP routes look users up by.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserId:
    value: str

    def __post_init__(self):
        try:
            UUID(self.value)
        except (TypeError, ValueError, AttributeError) as e:
            raise ValueError(f"Invalid user id: {self.value!r}") from e

    def __str__(self) -> str:
        return self.value
