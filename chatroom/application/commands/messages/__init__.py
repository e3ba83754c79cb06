"""Message commands."""

from .add_message import AddMessageCommand, AddMessageHandler

__all__ = [
    "AddMessageCommand",
    "AddMessageHandler",
]
