"""
Unit tests for the message command/query handlers.

Run with: pytest tests/test_message_handlers.py -v
"""

import asyncio
from datetime import datetime, timezone

import pytest

from chatroom.application.commands.messages import AddMessageCommand, AddMessageHandler
from chatroom.application.queries.messages import ListMessagesHandler, ListMessagesQuery
from chatroom.domain.exceptions import PersistenceError
from tests.fakes import FailingMessageRepository

JUNE_4 = datetime(2024, 6, 4, tzinfo=timezone.utc)
JUNE_5 = datetime(2024, 6, 5, tzinfo=timezone.utc)


def add(repo, msg, msg_from, when):
    command = AddMessageCommand(msg=msg, msg_from=msg_from, msg_date_time=when)
    return asyncio.run(AddMessageHandler(repo).execute(command))


def test_add_message_returns_saved_message(message_repository):
    message = add(message_repository, "Hello", "User1", JUNE_4)

    assert message.msg == "Hello"
    assert message.msg_from == "User1"
    assert message.msg_date_time == JUNE_4
    assert message.id


def test_add_message_store_failure():
    with pytest.raises(PersistenceError) as exc_info:
        add(FailingMessageRepository(), "Hello", "User1", JUNE_4)
    assert str(exc_info.value) == "Error saving message"


def test_list_is_ordered_by_date_not_insertion(message_repository):
    add(message_repository, "Hi", "User2", JUNE_5)
    add(message_repository, "Hello", "User1", JUNE_4)

    messages = asyncio.run(ListMessagesHandler(message_repository).execute(ListMessagesQuery()))

    assert [m.msg for m in messages] == ["Hello", "Hi"]
    assert [m.msg_date_time for m in messages] == [JUNE_4, JUNE_5]


def test_list_keeps_insertion_order_for_equal_dates(message_repository):
    add(message_repository, "first", "User1", JUNE_4)
    add(message_repository, "second", "User2", JUNE_4)

    messages = asyncio.run(ListMessagesHandler(message_repository).execute(ListMessagesQuery()))

    assert [m.msg for m in messages] == ["first", "second"]


def test_list_store_failure_degrades_to_empty():
    messages = asyncio.run(
        ListMessagesHandler(FailingMessageRepository()).execute(ListMessagesQuery())
    )
    assert messages == []
