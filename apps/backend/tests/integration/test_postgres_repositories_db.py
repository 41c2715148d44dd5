"""
Name: Postgres Repository Integration Tests

Responsibilities:
  - Verify real constraint behavior (UNIQUE email, FK RESTRICT, score CHECK)
  - Verify ordering and user summaries produced by SQL joins
"""

from __future__ import annotations

from uuid import uuid4

import pytest

from feedback.crosscutting.exceptions import DatabaseError
from feedback.domain.entities import ReviewPatch, UserPatch
from feedback.domain.storage_errors import (
    ForeignKeyViolationError,
    RecordNotFoundError,
    UniqueViolationError,
)
from feedback.infrastructure.repositories.postgres import (
    PostgresReviewRepository,
    PostgresUserRepository,
)

pytestmark = [pytest.mark.integration, pytest.mark.usefixtures("clean_tables")]


@pytest.fixture
def users() -> PostgresUserRepository:
    return PostgresUserRepository()


@pytest.fixture
def reviews() -> PostgresReviewRepository:
    return PostgresReviewRepository()


def test_user_crud_roundtrip(users):
    created = users.create_user(name="Ana", email="ana@example.com")

    updated = users.update_user(created.id, fields=UserPatch(name="Ana Maria"))
    users.delete_user(created.id)

    assert updated.name == "Ana Maria"
    assert updated.email == "ana@example.com"
    assert users.get_user(created.id) is None


def test_duplicate_email_raises_unique_violation(users):
    users.create_user(name="Ana", email="ana@example.com")

    with pytest.raises(UniqueViolationError) as exc_info:
        users.create_user(name="Other", email="ana@example.com")

    assert exc_info.value.constraint == "uq_users_email"


def test_review_with_unknown_user_raises_fk_violation(reviews):
    with pytest.raises(ForeignKeyViolationError):
        reviews.create_review(user_id=uuid4(), score=3)


def test_delete_user_with_reviews_is_restricted(users, reviews):
    user = users.create_user(name="Ana", email="ana@example.com")
    reviews.create_review(user_id=user.id, score=4)

    with pytest.raises(ForeignKeyViolationError):
        users.delete_user(user.id)


def test_score_check_constraint(users, reviews):
    user = users.create_user(name="Ana", email="ana@example.com")

    with pytest.raises(DatabaseError):
        reviews.create_review(user_id=user.id, score=9)


def test_reviews_listed_most_recent_first_with_summary(users, reviews):
    user = users.create_user(name="Ana", email="ana@example.com")
    first = reviews.create_review(user_id=user.id, score=1)
    second = reviews.create_review(user_id=user.id, score=2, comment="ok")

    listed = reviews.list_reviews()

    assert [r.id for r in listed] == [second.id, first.id]
    assert listed[0].user.email == "ana@example.com"


def test_update_review_moves_author(users, reviews):
    ana = users.create_user(name="Ana", email="ana@example.com")
    bob = users.create_user(name="Bob", email="bob@example.com")
    review = reviews.create_review(user_id=ana.id, score=3)

    updated = reviews.update_review(review.id, fields=ReviewPatch(user_id=bob.id))

    assert updated.user_id == bob.id
    assert updated.user.name == "Bob"
    assert updated.score == 3


def test_update_and_delete_missing_review(reviews):
    with pytest.raises(RecordNotFoundError):
        reviews.update_review(uuid4(), fields=ReviewPatch(score=2))
    with pytest.raises(RecordNotFoundError):
        reviews.delete_review(uuid4())
