"""
===============================================================================
TARJETA CRC — feedback/interfaces/api/http/routers/reviews.py
===============================================================================

Class/Module:
    Review Router

Responsibilities:
    - Exponer CRUD HTTP de Reviews.
    - Convertir requests HTTP -> inputs de casos de uso (ReviewPatch, etc.).
    - Traducir ReviewError -> RFC7807.
    - Mapear entidades -> DTOs camelCase.

Collaborators:
    - feedback.application.usecases (reviews)
    - feedback.container (factories DI)
    - schemas.reviews (DTOs Pydantic)
    - error_mapping.raise_review_error

Patterns:
    - Controller / Router
    - Adapter (HTTP -> UseCase)
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from feedback.application.usecases import (
    CreateReviewInput,
    CreateReviewUseCase,
    DeleteReviewUseCase,
    GetReviewUseCase,
    ListReviewsUseCase,
    UpdateReviewUseCase,
)
from feedback.container import (
    get_create_review_use_case,
    get_delete_review_use_case,
    get_get_review_use_case,
    get_list_reviews_use_case,
    get_update_review_use_case,
)
from feedback.domain.entities import Review, ReviewPatch

from ..error_mapping import raise_review_error
from ..schemas.base import MessageRes
from ..schemas.reviews import CreateReviewReq, ReviewRes, UpdateReviewReq, UserSummaryRes

router = APIRouter(prefix="/reviews", tags=["reviews"])

REVIEW_REMOVED_MESSAGE = "Review removed successfully"


def to_review_res(review: Review) -> ReviewRes:
    """Mapea entidad de dominio -> DTO HTTP."""
    user = None
    if review.user is not None:
        user = UserSummaryRes(
            id=review.user.id, name=review.user.name, email=review.user.email
        )
    return ReviewRes(
        id=review.id,
        user_id=review.user_id,
        score=review.score,
        comment=review.comment,
        created_at=review.created_at,
        updated_at=review.updated_at,
        user=user,
    )


@router.post("", response_model=ReviewRes, status_code=status.HTTP_201_CREATED)
def create_review(
    req: CreateReviewReq,
    use_case: CreateReviewUseCase = Depends(get_create_review_use_case),
):
    result = use_case.execute(
        CreateReviewInput(user_id=req.user_id, score=req.score, comment=req.comment)
    )
    if result.error is not None:
        raise_review_error(result.error)
    return to_review_res(result.review)


@router.get("", response_model=list[ReviewRes])
def list_reviews(
    use_case: ListReviewsUseCase = Depends(get_list_reviews_use_case),
):
    result = use_case.execute()
    return [to_review_res(r) for r in result.reviews]


@router.get("/{review_id}", response_model=ReviewRes)
def get_review(
    review_id: UUID,
    use_case: GetReviewUseCase = Depends(get_get_review_use_case),
):
    result = use_case.execute(review_id)
    if result.error is not None:
        raise_review_error(result.error)
    return to_review_res(result.review)


@router.patch("/{review_id}", response_model=ReviewRes)
def update_review(
    review_id: UUID,
    req: UpdateReviewReq,
    use_case: UpdateReviewUseCase = Depends(get_update_review_use_case),
):
    patch = ReviewPatch(user_id=req.user_id, score=req.score, comment=req.comment)
    result = use_case.execute(review_id, patch)
    if result.error is not None:
        raise_review_error(result.error)
    return to_review_res(result.review)


@router.delete("/{review_id}", response_model=MessageRes)
def delete_review(
    review_id: UUID,
    use_case: DeleteReviewUseCase = Depends(get_delete_review_use_case),
):
    result = use_case.execute(review_id)
    if result.error is not None:
        raise_review_error(result.error)
    return MessageRes(message=REVIEW_REMOVED_MESSAGE)
