"""
===============================================================================
USE CASE: Delete Review
===============================================================================

Business Goal:
    Eliminar una review y publicar review.deleted con el autor y score que
    tenía antes de borrarse.

Invariantes:
    - Review inexistente -> NOT_FOUND(Review); sin borrado ni evento.
    - Si desaparece entre la lectura y el borrado -> NOT_FOUND(Review).
    - Un único evento tras el borrado exitoso.

Collaborators:
    - ReviewRepository.get_review / delete_review
    - EventPublisher.publish
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from ....crosscutting.logger import logger
from ....domain.events import review_deleted
from ....domain.repositories import ReviewRepository
from ....domain.services import EventPublisher
from ....domain.storage_errors import RecordNotFoundError
from .review_results import DeleteReviewResult, review_not_found


class DeleteReviewUseCase:
    def __init__(
        self,
        review_repository: ReviewRepository,
        event_publisher: EventPublisher,
    ) -> None:
        self._reviews = review_repository
        self._publisher = event_publisher

    def execute(self, review_id: UUID) -> DeleteReviewResult:
        snapshot = self._reviews.get_review(review_id)
        if snapshot is None:
            return DeleteReviewResult(deleted=False, error=review_not_found(review_id))

        try:
            self._reviews.delete_review(review_id)
        except RecordNotFoundError:
            logger.warning(
                "review vanished before delete", extra={"review_id": str(review_id)}
            )
            return DeleteReviewResult(deleted=False, error=review_not_found(review_id))

        event = review_deleted(snapshot.user_id, snapshot.score)
        self._publisher.publish(event.topic, event)

        logger.info(
            "review deleted",
            extra={"review_id": str(review_id), "event_id": str(event.event_id)},
        )
        return DeleteReviewResult(deleted=True)
