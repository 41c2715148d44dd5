"""
===============================================================================
REVIEW USE CASES PACKAGE (Public API / Exports)
===============================================================================

Punto único de importación para los casos de uso de Reviews, sus inputs y
sus resultados tipados.
===============================================================================
"""

from .create_review import CreateReviewInput, CreateReviewUseCase
from .delete_review import DeleteReviewUseCase
from .get_review import GetReviewUseCase
from .list_reviews import ListReviewsUseCase
from .review_results import (
    DeleteReviewResult,
    ReviewError,
    ReviewErrorCode,
    ReviewListResult,
    ReviewResult,
)
from .update_review import UpdateReviewUseCase

__all__ = [
    "CreateReviewInput",
    "CreateReviewUseCase",
    "DeleteReviewResult",
    "DeleteReviewUseCase",
    "GetReviewUseCase",
    "ListReviewsUseCase",
    "ReviewError",
    "ReviewErrorCode",
    "ReviewListResult",
    "ReviewResult",
    "UpdateReviewUseCase",
]
