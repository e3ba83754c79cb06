"""
API tests for the /message endpoints.

Run with: pytest tests/test_messages_api.py -v
"""

import pytest

HELLO = {"msg": "Hello", "msgFrom": "User1", "msgDateTime": "2024-06-04T00:00:00Z"}
HI = {"msg": "Hi", "msgFrom": "User2", "msgDateTime": "2024-06-05T00:00:00Z"}


def add(client, message):
    return client.post("/message/addMessage", json={"messageToAdd": message})


class TestAddMessage:
    def test_creates_message(self, client):
        res = add(client, HELLO)

        assert res.status_code == 201
        body = res.json()
        assert set(body) == {"id", "msg", "msgFrom", "msgDateTime"}
        assert body["msg"] == "Hello"
        assert body["msgFrom"] == "User1"
        assert body["msgDateTime"].startswith("2024-06-04T00:00:00")

    def test_queues_broadcast_on_success(self, client, broadcaster):
        add(client, HELLO)

        assert broadcaster.pending == 1

    @pytest.mark.parametrize(
        "message",
        [
            {**HELLO, "msg": ""},
            {**HELLO, "msg": "   "},
            {**HELLO, "msgFrom": ""},
            {**HELLO, "msgDateTime": "not a date"},
            {"msg": "Hello", "msgFrom": "User1"},
            {**HELLO, "msg": 42},
        ],
    )
    def test_invalid_message_is_rejected_before_store(
        self, client, message_repository, broadcaster, message
    ):
        res = add(client, message)

        assert res.status_code == 400
        assert res.json() == {"error": "Invalid message request"}
        assert message_repository._messages == []
        assert broadcaster.pending == 0

    @pytest.mark.parametrize("body", [{}, {"messageToAdd": "Hello"}, None])
    def test_missing_message_to_add(self, client, body):
        res = client.post("/message/addMessage", json=body)

        assert res.status_code == 400
        assert res.json() == {"error": "Invalid message request"}

    def test_date_only_is_read_as_utc_midnight(self, client):
        res = add(client, {**HELLO, "msgDateTime": "2024-06-04"})

        assert res.status_code == 201
        assert res.json()["msgDateTime"].startswith("2024-06-04T00:00:00")

    def test_store_failure(self, failing_client, broadcaster):
        res = add(failing_client, HELLO)

        assert res.status_code == 500
        assert res.json() == {"error": "Error saving message"}
        assert broadcaster.pending == 0


class TestGetMessages:
    def test_empty(self, client):
        res = client.get("/message/getMessages")

        assert res.status_code == 200
        assert res.json() == []

    def test_sorted_by_date_regardless_of_insertion(self, client):
        add(client, HI)
        add(client, HELLO)

        res = client.get("/message/getMessages")
        assert res.status_code == 200
        assert [m["msg"] for m in res.json()] == ["Hello", "Hi"]

    def test_mixed_offsets_sort_by_instant(self, client):
        add(client, {**HELLO, "msgDateTime": "2024-06-04T10:00:00+02:00"})  # 08:00 UTC
        add(client, {**HI, "msgDateTime": "2024-06-04T09:00:00Z"})

        res = client.get("/message/getMessages")
        assert [m["msg"] for m in res.json()] == ["Hello", "Hi"]

    def test_store_failure_returns_empty_list(self, failing_client):
        res = failing_client.get("/message/getMessages")

        assert res.status_code == 200
        assert res.json() == []
