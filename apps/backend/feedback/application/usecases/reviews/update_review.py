"""
===============================================================================
USE CASE: Update Review
===============================================================================

Business Goal:
    Aplicar un patch parcial a una review y publicar review.updated con los
    valores nuevos y, cuando corresponda, los anteriores (deltas), para que
    los consumidores ajusten agregados del usuario viejo y del nuevo.

Orden de pasos (observable por los colaboradores):
    1) Si el patch trae user_id, verificar que el usuario exista.
    2) Tomar snapshot de la review actual (pre-update).
    3) Persistir el patch (RecordNotFound -> NOT_FOUND, FK -> INVALID_REFERENCE).
    4) Calcular deltas contra el snapshot.
    5) Publicar un único evento.

Regla de deltas:
    old_user_id = snapshot.user_id  si patch.user_id != snapshot.user_id
    old_score   = snapshot.score    si patch.score   != snapshot.score

    La comparación usa el valor crudo del patch: un campo omitido (None)
    siempre difiere del valor guardado, así que el valor anterior se reporta
    igual. Los consumidores actuales dependen de este contrato.

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    UpdateReviewUseCase

Collaborators:
    - UserRepository.get_user
    - ReviewRepository.get_review / update_review
    - EventPublisher.publish
===============================================================================
"""

from __future__ import annotations

from typing import Optional, Tuple
from uuid import UUID

from ....crosscutting.logger import logger
from ....domain.entities import Review, ReviewPatch
from ....domain.events import review_updated
from ....domain.repositories import ReviewRepository, UserRepository
from ....domain.services import EventPublisher
from ....domain.storage_errors import ForeignKeyViolationError, RecordNotFoundError
from .review_results import (
    ReviewResult,
    invalid_user_reference,
    review_not_found,
    user_not_found,
)


class UpdateReviewUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        review_repository: ReviewRepository,
        event_publisher: EventPublisher,
    ) -> None:
        self._users = user_repository
        self._reviews = review_repository
        self._publisher = event_publisher

    def execute(self, review_id: UUID, patch: ReviewPatch) -> ReviewResult:
        # 1) Nuevo autor debe existir (antes de tocar la review).
        if patch.user_id is not None and self._users.get_user(patch.user_id) is None:
            return ReviewResult(error=user_not_found(patch.user_id))

        # 2) Snapshot pre-update.
        current = self._reviews.get_review(review_id)
        if current is None:
            return ReviewResult(error=review_not_found(review_id))

        # 3) Persistir.
        try:
            updated = self._reviews.update_review(review_id, fields=patch)
        except RecordNotFoundError:
            logger.warning(
                "review vanished before update", extra={"review_id": str(review_id)}
            )
            return ReviewResult(error=review_not_found(review_id))
        except ForeignKeyViolationError:
            logger.warning(
                "review update rejected by user foreign key",
                extra={"review_id": str(review_id)},
            )
            return ReviewResult(error=invalid_user_reference())

        # 4) Deltas + 5) evento.
        old_user_id, old_score = self._deltas(patch, current)
        event = review_updated(
            updated.user_id,
            updated.score,
            old_user_id=old_user_id,
            old_score=old_score,
        )
        self._publisher.publish(event.topic, event)

        logger.info(
            "review updated",
            extra={"review_id": str(review_id), "event_id": str(event.event_id)},
        )
        return ReviewResult(review=updated)

    @staticmethod
    def _deltas(
        patch: ReviewPatch, current: Review
    ) -> Tuple[Optional[UUID], Optional[int]]:
        old_user_id = current.user_id if patch.user_id != current.user_id else None
        old_score = current.score if patch.score != current.score else None
        return old_user_id, old_score
