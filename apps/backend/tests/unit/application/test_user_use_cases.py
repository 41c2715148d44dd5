"""
Name: User Use Case Tests

Responsibilities:
  - Validate user CRUD use cases over the in-memory adapters
  - Cover storage signal translation (unique email, missing, has reviews)
"""

from __future__ import annotations

from unittest.mock import Mock
from uuid import uuid4

import pytest

from feedback.application.usecases import (
    CreateUserInput,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    UserErrorCode,
)
from feedback.crosscutting.exceptions import DatabaseError
from feedback.domain.entities import UserPatch
from feedback.domain.storage_errors import RecordNotFoundError

pytestmark = pytest.mark.unit


def test_create_user_returns_user(user_repository):
    result = CreateUserUseCase(user_repository).execute(
        CreateUserInput(name="Carol", email="carol@example.com")
    )

    assert result.error is None
    assert result.user.name == "Carol"
    assert result.user.created_at is not None


def test_create_user_duplicate_email_is_conflict(user_repository, alice):
    result = CreateUserUseCase(user_repository).execute(
        CreateUserInput(name="Other", email=alice.email)
    )

    assert result.user is None
    assert result.error.code == UserErrorCode.CONFLICT
    assert result.error.message == "Email already in use"


def test_create_user_database_error_propagates():
    users = Mock()
    users.create_user.side_effect = DatabaseError("connection refused")

    with pytest.raises(DatabaseError):
        CreateUserUseCase(users).execute(CreateUserInput(name="X", email="x@e.com"))


def test_list_users_ordered_by_name(user_repository):
    for name in ("Zoe", "Ana", "Mia"):
        user_repository.create_user(name=name, email=f"{name.lower()}@example.com")

    result = ListUsersUseCase(user_repository).execute()

    assert [u.name for u in result.users] == ["Ana", "Mia", "Zoe"]


def test_get_user_includes_reviews_most_recent_first(
    user_repository, review_repository, alice, bob
):
    older = review_repository.create_review(user_id=alice.id, score=2)
    newer = review_repository.create_review(user_id=alice.id, score=5)
    review_repository.create_review(user_id=bob.id, score=1)

    result = GetUserUseCase(user_repository, review_repository).execute(alice.id)

    assert result.error is None
    assert result.detail.user.id == alice.id
    assert [r.id for r in result.detail.reviews] == [newer.id, older.id]


def test_get_user_missing_is_not_found(user_repository, review_repository):
    missing = uuid4()

    result = GetUserUseCase(user_repository, review_repository).execute(missing)

    assert result.error.code == UserErrorCode.NOT_FOUND
    assert result.error.resource_id == missing
    assert result.error.message == f"User with ID {missing} not found"


def test_update_user_applies_partial_patch(user_repository, alice):
    result = UpdateUserUseCase(user_repository).execute(
        alice.id, UserPatch(name="Alicia")
    )

    assert result.user.name == "Alicia"
    assert result.user.email == alice.email


def test_update_user_email_taken_is_conflict(user_repository, alice, bob):
    result = UpdateUserUseCase(user_repository).execute(
        alice.id, UserPatch(email=bob.email)
    )

    assert result.error.code == UserErrorCode.CONFLICT


def test_update_user_same_email_is_not_conflict(user_repository, alice):
    result = UpdateUserUseCase(user_repository).execute(
        alice.id, UserPatch(email=alice.email)
    )

    assert result.error is None


def test_update_user_missing_is_not_found(user_repository):
    result = UpdateUserUseCase(user_repository).execute(uuid4(), UserPatch(name="X"))

    assert result.error.code == UserErrorCode.NOT_FOUND


def test_delete_user_without_reviews(user_repository, alice):
    result = DeleteUserUseCase(user_repository).execute(alice.id)

    assert result.deleted is True
    assert user_repository.get_user(alice.id) is None


def test_delete_user_with_reviews_is_conflict(user_repository, review_repository, alice):
    review_repository.create_review(user_id=alice.id, score=3)

    result = DeleteUserUseCase(user_repository).execute(alice.id)

    assert result.deleted is False
    assert result.error.code == UserErrorCode.CONFLICT
    assert result.error.message == "User has reviews and cannot be removed"
    assert user_repository.get_user(alice.id) is not None


def test_delete_user_missing_is_not_found():
    users = Mock()
    users.delete_user.side_effect = RecordNotFoundError("gone")

    result = DeleteUserUseCase(users).execute(uuid4())

    assert result.error.code == UserErrorCode.NOT_FOUND
