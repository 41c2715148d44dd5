"""
===============================================================================
REVIEW USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Review Use Case Results

Business Goal:
    Contrato estable de resultados y errores esperables para los casos de uso
    de Reviews:
      - recursos no encontrados (User / Review)
      - referencias inválidas detectadas por el storage (FK)

Why (Context / Intención):
    - Los errores de negocio se devuelven tipados; la API los mapea a HTTP.
    - Lo inesperado (DatabaseError, EventPublishError, ...) NO se devuelve:
      se propaga como excepción.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    review_results models (module)

Responsibilities:
    - ReviewErrorCode: categorías estables.
    - ReviewError: code + message + resource (+ resource_id).
    - ReviewResult / ReviewListResult / DeleteReviewResult.

Collaborators:
    - domain.entities.Review
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List
from uuid import UUID

from ....domain.entities import Review

RESOURCE_USER = "User"
RESOURCE_REVIEW = "Review"


class ReviewErrorCode(str, Enum):
    """
    Códigos:
      - NOT_FOUND: la review o el usuario referenciado no existe.
      - INVALID_REFERENCE: el storage rechazó la escritura por FK.
    """

    NOT_FOUND = "NOT_FOUND"
    INVALID_REFERENCE = "INVALID_REFERENCE"


@dataclass(frozen=True)
class ReviewError:
    """
    Error de caso de uso.

    - resource: "User" o "Review" (qué entidad falta / es inválida)
    - resource_id: id ofensivo, cuando se conoce
    """

    code: ReviewErrorCode
    message: str
    resource: str | None = None
    resource_id: UUID | None = None


@dataclass
class ReviewResult:
    """Éxito: review != None. Falla: error != None."""

    review: Review | None = None
    error: ReviewError | None = None


@dataclass
class ReviewListResult:
    reviews: List[Review] = field(default_factory=list)
    error: ReviewError | None = None


@dataclass
class DeleteReviewResult:
    deleted: bool
    error: ReviewError | None = None


def user_not_found(user_id: UUID) -> ReviewError:
    return ReviewError(
        code=ReviewErrorCode.NOT_FOUND,
        message=f"User with ID {user_id} not found",
        resource=RESOURCE_USER,
        resource_id=user_id,
    )


def review_not_found(review_id: UUID) -> ReviewError:
    return ReviewError(
        code=ReviewErrorCode.NOT_FOUND,
        message=f"Review with ID {review_id} not found",
        resource=RESOURCE_REVIEW,
        resource_id=review_id,
    )


def invalid_user_reference() -> ReviewError:
    return ReviewError(
        code=ReviewErrorCode.INVALID_REFERENCE,
        message="Invalid user",
        resource=RESOURCE_USER,
    )
