"""
Username Value Object - The unique login name of a user.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Username:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError(f"Invalid username: {self.value!r}")

    def __str__(self) -> str:
        return self.value
