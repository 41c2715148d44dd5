"""
USE CASE: List Reviews

Devuelve todas las reviews, más recientes primero, cada una con el resumen
de su autor. Sin filtros ni paginación.
"""

from __future__ import annotations

from ....domain.repositories import ReviewRepository
from .review_results import ReviewListResult


class ListReviewsUseCase:
    def __init__(self, review_repository: ReviewRepository) -> None:
        self._reviews = review_repository

    def execute(self) -> ReviewListResult:
        return ReviewListResult(reviews=self._reviews.list_reviews())
