"""
Unit tests for the user command/query handlers.

Run with: pytest tests/test_user_handlers.py -v
"""

import asyncio

import pytest

from chatroom.application.commands.users import (
    DeleteUserCommand,
    DeleteUserHandler,
    RegisterUserCommand,
    RegisterUserHandler,
    UpdateUserCommand,
    UpdateUserHandler,
)
from chatroom.application.queries.users import (
    GetUserHandler,
    GetUserQuery,
    LoginUserHandler,
    LoginUserQuery,
)
from chatroom.domain.exceptions import (
    DuplicateUsernameError,
    EntityNotFoundError,
    InvalidCredentialsError,
    PersistenceError,
)
from chatroom.domain.value_objects.username import Username
from tests.fakes import FailingUserRepository


def register(repo, username="user1", password="password"):
    command = RegisterUserCommand(username=Username(username), password=password)
    return asyncio.run(RegisterUserHandler(repo).execute(command))


class TestRegisterUser:
    def test_returns_safe_projection(self, user_repository):
        user = register(user_repository)

        assert user.username == "user1"
        assert user.date_joined.tzinfo is not None
        assert "password" not in user.model_dump(by_alias=True)
        assert set(user.model_dump(by_alias=True)) == {"id", "username", "dateJoined"}

    def test_persists_the_account(self, user_repository):
        created = register(user_repository)

        stored = asyncio.run(user_repository.get_by_username(Username("user1")))
        assert stored.id.value == created.id
        assert stored.password == "password"

    def test_duplicate_username_is_distinct_error(self, user_repository):
        register(user_repository)

        with pytest.raises(DuplicateUsernameError) as exc_info:
            register(user_repository, password="other")
        assert str(exc_info.value) == "Username already exists"

    def test_store_failure_becomes_persistence_error(self):
        with pytest.raises(PersistenceError) as exc_info:
            register(FailingUserRepository())
        assert str(exc_info.value) == "Error when saving user"
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestLoginUser:
    def test_valid_credentials(self, user_repository):
        created = register(user_repository)

        user = asyncio.run(
            LoginUserHandler(user_repository).execute(
                LoginUserQuery(username=Username("user1"), password="password")
            )
        )
        assert user == created

    @pytest.mark.parametrize(
        "username,password",
        [("user1", "wrong"), ("nobody", "password")],
    )
    def test_bad_credentials_share_one_error(self, user_repository, username, password):
        register(user_repository)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            asyncio.run(
                LoginUserHandler(user_repository).execute(
                    LoginUserQuery(username=Username(username), password=password)
                )
            )
        assert str(exc_info.value) == "Invalid username or password"

    def test_store_failure(self):
        with pytest.raises(PersistenceError):
            asyncio.run(
                LoginUserHandler(FailingUserRepository()).execute(
                    LoginUserQuery(username=Username("user1"), password="password")
                )
            )


class TestGetAndDeleteUser:
    def test_get_existing(self, user_repository):
        created = register(user_repository)

        user = asyncio.run(
            GetUserHandler(user_repository).execute(GetUserQuery(Username("user1")))
        )
        assert user == created

    def test_get_missing(self, user_repository):
        with pytest.raises(EntityNotFoundError) as exc_info:
            asyncio.run(
                GetUserHandler(user_repository).execute(GetUserQuery(Username("ghost")))
            )
        assert str(exc_info.value) == "User not found"

    def test_delete_then_get_is_not_found(self, user_repository):
        created = register(user_repository)

        deleted = asyncio.run(
            DeleteUserHandler(user_repository).execute(DeleteUserCommand(Username("user1")))
        )
        assert deleted == created

        with pytest.raises(EntityNotFoundError):
            asyncio.run(
                GetUserHandler(user_repository).execute(GetUserQuery(Username("user1")))
            )

    def test_delete_missing(self, user_repository):
        with pytest.raises(EntityNotFoundError):
            asyncio.run(
                DeleteUserHandler(user_repository).execute(DeleteUserCommand(Username("ghost")))
            )

    def test_get_store_failure(self):
        with pytest.raises(PersistenceError) as exc_info:
            asyncio.run(
                GetUserHandler(FailingUserRepository()).execute(GetUserQuery(Username("a")))
            )
        assert str(exc_info.value) == "Error retrieving user"


class TestUpdateUser:
    def test_password_is_the_only_change(self, user_repository):
        created = register(user_repository)

        updated = asyncio.run(
            UpdateUserHandler(user_repository).execute(
                UpdateUserCommand(Username("user1"), {"password": "new-password"})
            )
        )
        assert updated == created

        stored = asyncio.run(user_repository.get_by_username(Username("user1")))
        assert stored.password == "new-password"
        assert stored.date_joined == created.date_joined
        assert stored.id.value == created.id

    def test_immutable_fields_are_ignored(self, user_repository):
        created = register(user_repository)

        updated = asyncio.run(
            UpdateUserHandler(user_repository).execute(
                UpdateUserCommand(
                    Username("user1"),
                    {"username": "someone-else", "date_joined": None, "password": "p2"},
                )
            )
        )
        assert updated.username == "user1"
        assert updated.date_joined == created.date_joined

    def test_blank_password_is_rejected_by_store(self, user_repository):
        register(user_repository)

        with pytest.raises(ValueError):
            asyncio.run(
                user_repository.update_by_username(Username("user1"), {"password": "  "})
            )

        stored = asyncio.run(user_repository.get_by_username(Username("user1")))
        assert stored.password == "password"

    def test_no_changes_returns_current_user(self, user_repository):
        created = register(user_repository)

        updated = asyncio.run(
            UpdateUserHandler(user_repository).execute(UpdateUserCommand(Username("user1"), {}))
        )
        assert updated == created

    def test_missing_user(self, user_repository):
        with pytest.raises(EntityNotFoundError):
            asyncio.run(
                UpdateUserHandler(user_repository).execute(
                    UpdateUserCommand(Username("ghost"), {"password": "x"})
                )
            )

    def test_store_failure(self):
        with pytest.raises(PersistenceError) as exc_info:
            asyncio.run(
                UpdateUserHandler(FailingUserRepository()).execute(
                    UpdateUserCommand(Username("user1"), {"password": "x"})
                )
            )
        assert str(exc_info.value) == "Error updating user"
