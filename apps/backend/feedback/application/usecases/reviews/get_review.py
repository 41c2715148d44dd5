"""
USE CASE: Get Review

Devuelve una review (con el resumen de su autor) o NOT_FOUND(Review).
"""

from __future__ import annotations

from uuid import UUID

from ....domain.repositories import ReviewRepository
from .review_results import ReviewResult, review_not_found


class GetReviewUseCase:
    def __init__(self, review_repository: ReviewRepository) -> None:
        self._reviews = review_repository

    def execute(self, review_id: UUID) -> ReviewResult:
        review = self._reviews.get_review(review_id, include_user=True)
        if review is None:
            return ReviewResult(error=review_not_found(review_id))
        return ReviewResult(review=review)
