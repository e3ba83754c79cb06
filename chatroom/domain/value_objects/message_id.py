"""
MessageId Value Object - Identity of a posted chat message.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class MessageId:
    value: str

    def __post_init__(self):
        try:
            UUID(self.value)
        except (TypeError, ValueError, AttributeError) as e:
            raise ValueError(f"Invalid message id: {self.value!r}") from e

    def __str__(self) -> str:
        return self.value
