"""
User Entity - A chat account.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4
from chatroom.domain.value_objects.user_id import UserId
from chatroom.domain.value_objects.username import Username


@dataclass
class User:
    id: UserId
    username: Username
    # Stored as given; see DESIGN.md for the plaintext decision
    password: str
    date_joined: datetime

    def __post_init__(self):
        if not self.password or not self.password.strip():
            raise ValueError("Password cannot be empty")

    @classmethod
    def register(cls, username: Username, password: str) -> User:
        """Factory method for a brand-new account joined now."""
        return cls(
            id=UserId(str(uuid4())),
            username=username,
            password=password,
            date_joined=datetime.now(timezone.utc),
        )
