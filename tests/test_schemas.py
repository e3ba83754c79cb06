"""Unit tests for request body validation."""

from datetime import datetime, timezone

import pytest
from fastapi import HTTPException

from chatroom.presentation.schemas import (
    AddMessageRequest,
    UserCredentialsRequest,
    validate_body,
)


def test_valid_credentials_are_kept_unstripped():
    request = validate_body(
        UserCredentialsRequest, {"username": " alice ", "password": "p1"}, "bad"
    )
    assert request.username == " alice "


@pytest.mark.parametrize("value", ["", " \t\n", 5, None, ["alice"]])
def test_username_must_be_a_non_blank_string(value):
    with pytest.raises(HTTPException) as exc_info:
        validate_body(UserCredentialsRequest, {"username": value, "password": "p1"}, "bad")
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "bad"


def test_message_timestamps_are_timezone_aware():
    request = validate_body(
        AddMessageRequest,
        {"messageToAdd": {"msg": "m", "msgFrom": "f", "msgDateTime": "2024-06-04T12:30:00"}},
        "bad",
    )
    assert request.message_to_add.msg_date_time == datetime(
        2024, 6, 4, 12, 30, tzinfo=timezone.utc
    )


def test_epoch_timestamp_is_accepted():
    request = validate_body(
        AddMessageRequest,
        {"messageToAdd": {"msg": "m", "msgFrom": "f", "msgDateTime": 1717459200}},
        "bad",
    )
    assert request.message_to_add.msg_date_time == datetime(2024, 6, 4, tzinfo=timezone.utc)
