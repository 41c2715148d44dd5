"""
Name: Domain Entities Unit Tests

Responsibilities:
  - Test User, Review and patch value objects
  - Verify defaults, summaries and immutability

Collaborators:
  - feedback.domain.entities: Domain entities being tested
  - pytest: Test framework

Notes:
  - Pure unit tests (no external dependencies)
"""

from dataclasses import FrozenInstanceError
from uuid import uuid4

import pytest

from feedback.domain.entities import Review, ReviewPatch, User, UserPatch


@pytest.mark.unit
class TestUser:
    """Test suite for User entity."""

    def test_to_summary_keeps_identity_fields(self):
        """R: Summary exposes id, name and email only."""
        user = User(id=uuid4(), name="Ana", email="ana@example.com")

        summary = user.to_summary()

        assert summary.id == user.id
        assert summary.name == "Ana"
        assert summary.email == "ana@example.com"

    def test_summary_is_immutable(self):
        summary = User(id=uuid4(), name="Ana", email="a@e.com").to_summary()

        with pytest.raises(FrozenInstanceError):
            summary.name = "Other"  # type: ignore[misc]


@pytest.mark.unit
class TestReview:
    def test_defaults(self):
        review = Review(id=uuid4(), user_id=uuid4(), score=3)

        assert review.comment is None
        assert review.user is None
        assert review.created_at is None


@pytest.mark.unit
class TestPatches:
    def test_empty_review_patch(self):
        assert ReviewPatch().is_empty() is True
        assert ReviewPatch(score=1).is_empty() is False
        assert ReviewPatch(comment="").is_empty() is False

    def test_review_patch_is_immutable(self):
        patch = ReviewPatch(score=2)

        with pytest.raises(FrozenInstanceError):
            patch.score = 3  # type: ignore[misc]

    def test_empty_user_patch(self):
        assert UserPatch().is_empty() is True
        assert UserPatch(email="x@e.com").is_empty() is False
