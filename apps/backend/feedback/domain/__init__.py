"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio

Responsabilidades:
    - Centralizar exports para imports limpios en application/interfaces.

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - No importar infraestructura aquí.
===============================================================================
"""

from .entities import Review, ReviewPatch, User, UserPatch, UserSummary, UserWithReviews
from .events import ReviewEvent, ReviewEventPayload, ReviewEventType
from .repositories import ReviewRepository, UserRepository
from .services import EventPublisher
from .storage_errors import (
    ForeignKeyViolationError,
    RecordNotFoundError,
    StorageSignal,
    UniqueViolationError,
)

__all__ = [
    "EventPublisher",
    "ForeignKeyViolationError",
    "RecordNotFoundError",
    "Review",
    "ReviewEvent",
    "ReviewEventPayload",
    "ReviewEventType",
    "ReviewPatch",
    "ReviewRepository",
    "StorageSignal",
    "UniqueViolationError",
    "User",
    "UserPatch",
    "UserRepository",
    "UserSummary",
    "UserWithReviews",
]
