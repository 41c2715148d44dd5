"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define persistence contracts for Users and Reviews (ports).
- Keep the application layer independent from PostgreSQL / in-memory storage.
- Document which storage signals each write may raise.

Collaborators
- domain.entities: User, Review, ReviewPatch, UserPatch
- domain.storage_errors: ForeignKeyViolationError, RecordNotFoundError,
  UniqueViolationError
- infrastructure.repositories: postgres / in_memory implementations

Constraints
- Pure interfaces only: no side effects, no infrastructure imports, no SQL.
- Reviews returned from create/update/list/get(include_user=True) carry
  their UserSummary.

Notes
- We use typing.Protocol for structural subtyping ("duck typing").
"""

from typing import List, Optional, Protocol
from uuid import UUID

from .entities import Review, ReviewPatch, User, UserPatch


class UserRepository(Protocol):
    """R: Interface for user persistence."""

    def get_user(self, user_id: UUID) -> Optional[User]:
        """R: Return the user or None."""
        ...

    def list_users(self) -> List[User]:
        """R: All users ordered by name ASC."""
        ...

    def create_user(self, *, name: str, email: str) -> User:
        """
        R: Persist a new user.

        Raises:
            UniqueViolationError: email already in use
        """
        ...

    def update_user(self, user_id: UUID, *, fields: UserPatch) -> User:
        """
        R: Apply a partial update.

        Raises:
            RecordNotFoundError: user does not exist
            UniqueViolationError: email already in use
        """
        ...

    def delete_user(self, user_id: UUID) -> None:
        """
        R: Hard-delete a user.

        Raises:
            RecordNotFoundError: user does not exist
            ForeignKeyViolationError: user still has reviews
        """
        ...


class ReviewRepository(Protocol):
    """R: Interface for review persistence."""

    def get_review(
        self, review_id: UUID, *, include_user: bool = False
    ) -> Optional[Review]:
        """R: Return the review (optionally with its UserSummary) or None."""
        ...

    def list_reviews(self) -> List[Review]:
        """R: All reviews, created_at DESC, each with its UserSummary."""
        ...

    def list_reviews_by_user(self, user_id: UUID) -> List[Review]:
        """R: Reviews of one user, created_at DESC."""
        ...

    def create_review(
        self, *, user_id: UUID, score: int, comment: Optional[str] = None
    ) -> Review:
        """
        R: Persist a review and return it with its UserSummary.

        Raises:
            ForeignKeyViolationError: user_id does not reference a user
        """
        ...

    def update_review(self, review_id: UUID, *, fields: ReviewPatch) -> Review:
        """
        R: Apply a partial update and return the post-update review.

        Raises:
            RecordNotFoundError: review does not exist
            ForeignKeyViolationError: new user_id does not reference a user
        """
        ...

    def delete_review(self, review_id: UUID) -> None:
        """
        R: Hard-delete a review.

        Raises:
            RecordNotFoundError: review does not exist
        """
        ...
