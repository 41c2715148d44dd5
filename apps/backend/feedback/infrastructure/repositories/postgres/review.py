"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/review.py
============================================================
Class: PostgresReviewRepository

Responsibilities:
  - CRUD de `reviews` con SQL parametrizado.
  - Devolver cada review con su UserSummary (JOIN users) en una sola query,
    incluso para INSERT/UPDATE (CTE + RETURNING).
  - Señales:
      * FK user_id           -> ForeignKeyViolationError (vía base)
      * UPDATE/DELETE sin fila -> RecordNotFoundError

Collaborators:
  - PostgresRepository
  - Tablas reviews, users (001_users_reviews)

Constraints / Notes:
  - Listados: created_at DESC, id DESC.
============================================================
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID, uuid4

from ....domain.entities import Review, ReviewPatch, UserSummary
from ....domain.storage_errors import RecordNotFoundError
from .base import PostgresRepository

_REVIEW_COLUMNS = "r.id, r.user_id, r.score, r.comment, r.created_at, r.updated_at"
_SUMMARY_COLUMNS = "u.id, u.name, u.email"
_ORDER_BY = "ORDER BY r.created_at DESC, r.id DESC"


def _row_to_review(row: tuple) -> Review:
    review = Review(
        id=row[0],
        user_id=row[1],
        score=row[2],
        comment=row[3],
        created_at=row[4],
        updated_at=row[5],
    )
    if len(row) > 6 and row[6] is not None:
        review.user = UserSummary(id=row[6], name=row[7], email=row[8])
    return review


class PostgresReviewRepository(PostgresRepository):
    """R: Implementación PostgreSQL del repositorio de Reviews."""

    def get_review(
        self, review_id: UUID, *, include_user: bool = False
    ) -> Optional[Review]:
        if include_user:
            query = f"""
                SELECT {_REVIEW_COLUMNS}, {_SUMMARY_COLUMNS}
                FROM reviews r
                JOIN users u ON u.id = r.user_id
                WHERE r.id = %s
            """
        else:
            query = f"SELECT {_REVIEW_COLUMNS} FROM reviews r WHERE r.id = %s"

        row = self._fetchone(
            query=query,
            params=(review_id,),
            context_msg="PostgresReviewRepository: Failed to get review",
            extra={"review_id": str(review_id)},
        )
        return _row_to_review(row) if row else None

    def list_reviews(self) -> List[Review]:
        rows = self._fetchall(
            query=f"""
                SELECT {_REVIEW_COLUMNS}, {_SUMMARY_COLUMNS}
                FROM reviews r
                JOIN users u ON u.id = r.user_id
                {_ORDER_BY}
            """,
            params=(),
            context_msg="PostgresReviewRepository: Failed to list reviews",
            extra={},
        )
        return [_row_to_review(r) for r in rows]

    def list_reviews_by_user(self, user_id: UUID) -> List[Review]:
        rows = self._fetchall(
            query=f"""
                SELECT {_REVIEW_COLUMNS}
                FROM reviews r
                WHERE r.user_id = %s
                {_ORDER_BY}
            """,
            params=(user_id,),
            context_msg="PostgresReviewRepository: Failed to list user reviews",
            extra={"user_id": str(user_id)},
        )
        return [_row_to_review(r) for r in rows]

    def create_review(
        self, *, user_id: UUID, score: int, comment: Optional[str] = None
    ) -> Review:
        row = self._fetchone(
            query=f"""
                WITH r AS (
                    INSERT INTO reviews (id, user_id, score, comment, created_at, updated_at)
                    VALUES (%s, %s, %s, %s, now(), now())
                    RETURNING *
                )
                SELECT {_REVIEW_COLUMNS}, {_SUMMARY_COLUMNS}
                FROM r
                JOIN users u ON u.id = r.user_id
            """,
            params=(uuid4(), user_id, score, comment),
            context_msg="PostgresReviewRepository: Failed to create review",
            extra={"user_id": str(user_id)},
        )
        return _row_to_review(row)

    def update_review(self, review_id: UUID, *, fields: ReviewPatch) -> Review:
        assignments: list[str] = ["updated_at = now()"]
        params: list[object] = []

        if fields.user_id is not None:
            assignments.append("user_id = %s")
            params.append(fields.user_id)
        if fields.score is not None:
            assignments.append("score = %s")
            params.append(fields.score)
        if fields.comment is not None:
            assignments.append("comment = %s")
            params.append(fields.comment)

        params.append(review_id)
        row = self._fetchone(
            query=f"""
                WITH r AS (
                    UPDATE reviews
                    SET {", ".join(assignments)}
                    WHERE id = %s
                    RETURNING *
                )
                SELECT {_REVIEW_COLUMNS}, {_SUMMARY_COLUMNS}
                FROM r
                JOIN users u ON u.id = r.user_id
            """,
            params=params,
            context_msg="PostgresReviewRepository: Failed to update review",
            extra={"review_id": str(review_id)},
        )
        if row is None:
            raise RecordNotFoundError(f"review {review_id} not found")
        return _row_to_review(row)

    def delete_review(self, review_id: UUID) -> None:
        row = self._fetchone(
            query="DELETE FROM reviews WHERE id = %s RETURNING id",
            params=(review_id,),
            context_msg="PostgresReviewRepository: Failed to delete review",
            extra={"review_id": str(review_id)},
        )
        if row is None:
            raise RecordNotFoundError(f"review {review_id} not found")
