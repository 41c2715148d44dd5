"""
===============================================================================
TARJETA CRC — domain/events.py
===============================================================================

Módulo:
    Eventos de dominio de Reviews (review.created / updated / deleted)

Responsabilidades:
    - Definir ReviewEvent como hecho inmutable (eventId, type, timestamp, payload).
    - Construir eventos con factories (id y timestamp frescos por evento).
    - Serializar al contrato de mensajería (camelCase, old* omitidos si faltan).

Colaboradores:
    - application/usecases/reviews: construyen y emiten eventos.
    - domain.services.EventPublisher: recibe el evento ya construido.

Notas:
    - El topic de publicación coincide con el valor de ReviewEventType.
    - timestamp = momento de emisión (UTC), no el de la entidad.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID, uuid4


class ReviewEventType(str, Enum):
    CREATED = "review.created"
    UPDATED = "review.updated"
    DELETED = "review.deleted"


@dataclass(frozen=True)
class ReviewEventPayload:
    user_id: UUID
    score: int
    old_user_id: Optional[UUID] = None
    old_score: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"userId": str(self.user_id), "score": self.score}
        if self.old_user_id is not None:
            data["oldUserId"] = str(self.old_user_id)
        if self.old_score is not None:
            data["oldScore"] = self.old_score
        return data


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 en UTC con milisegundos y sufijo Z (2025-01-01T00:00:00.000Z)."""
    return (
        value.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


@dataclass(frozen=True)
class ReviewEvent:
    type: ReviewEventType
    payload: ReviewEventPayload
    event_id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=_utcnow)

    @property
    def topic(self) -> str:
        return self.type.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "eventId": str(self.event_id),
            "type": self.type.value,
            "timestamp": format_timestamp(self.timestamp),
            "payload": self.payload.to_dict(),
        }


# -----------------------------------------------------------------------------
# Factories
# -----------------------------------------------------------------------------


def review_created(user_id: UUID, score: int) -> ReviewEvent:
    return ReviewEvent(
        type=ReviewEventType.CREATED,
        payload=ReviewEventPayload(user_id=user_id, score=score),
    )


def review_updated(
    user_id: UUID,
    score: int,
    *,
    old_user_id: Optional[UUID] = None,
    old_score: Optional[int] = None,
) -> ReviewEvent:
    return ReviewEvent(
        type=ReviewEventType.UPDATED,
        payload=ReviewEventPayload(
            user_id=user_id,
            score=score,
            old_user_id=old_user_id,
            old_score=old_score,
        ),
    )


def review_deleted(user_id: UUID, score: int) -> ReviewEvent:
    return ReviewEvent(
        type=ReviewEventType.DELETED,
        payload=ReviewEventPayload(user_id=user_id, score=score),
    )
