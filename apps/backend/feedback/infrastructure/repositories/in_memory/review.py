"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/review.py
============================================================
Class: InMemoryReviewRepository

Responsibilities:
  - CRUD de reviews en memoria (tests / local dev).
  - Enforce de la FK user_id -> users.id (ForeignKeyViolationError).
  - update/delete de id inexistente -> RecordNotFoundError.
  - Enriquecer con UserSummary (equivalente al JOIN de Postgres).
  - Ordering: created_at DESC (desempate por orden de inserción).

Collaborators:
  - InMemoryDatabase
  - domain.repositories.ReviewRepository
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional
from uuid import UUID, uuid4

from ....domain.entities import Review, ReviewPatch
from ....domain.storage_errors import ForeignKeyViolationError, RecordNotFoundError
from .store import InMemoryDatabase

_FK_CONSTRAINT = "fk_reviews_user_id__users"


class InMemoryReviewRepository:
    """Repositorio in-memory, thread-safe, para Reviews."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    # =========================================================
    # Helpers internos
    # =========================================================
    def _with_user(self, review: Review) -> Review:
        user = self._db.users.get(review.user_id)
        return replace(review, user=user.to_summary() if user else None)

    def _sorted(self, items: Iterable[Review]) -> List[Review]:
        return sorted(
            items,
            key=lambda r: (r.created_at, self._db.insertion_seq.get(r.id, 0)),
            reverse=True,
        )

    def _ensure_user(self, user_id: UUID) -> None:
        if user_id not in self._db.users:
            raise ForeignKeyViolationError(
                f"user {user_id} does not exist", constraint=_FK_CONSTRAINT
            )

    # =========================================================
    # Public API
    # =========================================================
    def get_review(
        self, review_id: UUID, *, include_user: bool = False
    ) -> Optional[Review]:
        with self._db.lock:
            review = self._db.reviews.get(review_id)
            if review is None:
                return None
            return self._with_user(review) if include_user else replace(review)

    def list_reviews(self) -> List[Review]:
        with self._db.lock:
            return [self._with_user(r) for r in self._sorted(self._db.reviews.values())]

    def list_reviews_by_user(self, user_id: UUID) -> List[Review]:
        with self._db.lock:
            owned = (r for r in self._db.reviews.values() if r.user_id == user_id)
            return [replace(r) for r in self._sorted(owned)]

    def create_review(
        self, *, user_id: UUID, score: int, comment: Optional[str] = None
    ) -> Review:
        with self._db.lock:
            self._ensure_user(user_id)
            now = self._db.now()
            review = Review(
                id=uuid4(),
                user_id=user_id,
                score=score,
                comment=comment,
                created_at=now,
                updated_at=now,
            )
            self._db.reviews[review.id] = review
            self._db.insertion_seq[review.id] = self._db.next_seq()
            return self._with_user(review)

    def update_review(self, review_id: UUID, *, fields: ReviewPatch) -> Review:
        with self._db.lock:
            current = self._db.reviews.get(review_id)
            if current is None:
                raise RecordNotFoundError(f"review {review_id} not found")
            if fields.user_id is not None:
                self._ensure_user(fields.user_id)

            updated = replace(
                current,
                user_id=fields.user_id if fields.user_id is not None else current.user_id,
                score=fields.score if fields.score is not None else current.score,
                comment=fields.comment if fields.comment is not None else current.comment,
                updated_at=self._db.now(),
            )
            self._db.reviews[review_id] = updated
            return self._with_user(updated)

    def delete_review(self, review_id: UUID) -> None:
        with self._db.lock:
            if self._db.reviews.pop(review_id, None) is None:
                raise RecordNotFoundError(f"review {review_id} not found")
            self._db.insertion_seq.pop(review_id, None)
