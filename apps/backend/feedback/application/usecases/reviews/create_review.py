"""
===============================================================================
USE CASE: Create Review
===============================================================================

Business Goal:
    Registrar la review de un usuario existente y avisar a los consumidores
    (review.created) para que recalculen agregados sin hacer polling.

Invariantes:
    - El usuario debe existir antes de escribir (NOT_FOUND(User)).
    - Si el usuario desaparece entre el chequeo y la escritura, la FK del
      storage lo detecta -> INVALID_REFERENCE(User).
    - Un único evento, y solo si la escritura tuvo éxito.
    - Fallas del publisher se propagan (la review ya quedó persistida).

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    CreateReviewUseCase

Collaborators:
    - UserRepository.get_user
    - ReviewRepository.create_review
    - EventPublisher.publish
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from ....crosscutting.logger import logger
from ....domain.events import review_created
from ....domain.repositories import ReviewRepository, UserRepository
from ....domain.services import EventPublisher
from ....domain.storage_errors import ForeignKeyViolationError
from .review_results import ReviewResult, invalid_user_reference, user_not_found


@dataclass(frozen=True)
class CreateReviewInput:
    user_id: UUID
    score: int
    comment: Optional[str] = None


class CreateReviewUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        review_repository: ReviewRepository,
        event_publisher: EventPublisher,
    ) -> None:
        self._users = user_repository
        self._reviews = review_repository
        self._publisher = event_publisher

    def execute(self, input_data: CreateReviewInput) -> ReviewResult:
        if self._users.get_user(input_data.user_id) is None:
            return ReviewResult(error=user_not_found(input_data.user_id))

        try:
            review = self._reviews.create_review(
                user_id=input_data.user_id,
                score=input_data.score,
                comment=input_data.comment,
            )
        except ForeignKeyViolationError:
            logger.warning(
                "review rejected by user foreign key",
                extra={"user_id": str(input_data.user_id)},
            )
            return ReviewResult(error=invalid_user_reference())

        event = review_created(input_data.user_id, input_data.score)
        self._publisher.publish(event.topic, event)

        logger.info(
            "review created",
            extra={"review_id": str(review.id), "event_id": str(event.event_id)},
        )
        return ReviewResult(review=review)
