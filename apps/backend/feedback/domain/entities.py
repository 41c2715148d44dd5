"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (User, UserSummary, Review, ReviewPatch)

Responsabilidades:
    - Definir estructuras centrales del negocio (sin infraestructura).
    - Proveer la proyección UserSummary que acompaña a cada Review.

Colaboradores:
    - domain.repositories: persisten/recuperan estas entidades.
    - application/usecases: construyen/consumen estas entidades.
    - interfaces/api: serializan DTOs basados en estas entidades.

Principios:
    - Sin dependencias a DB/Redis/FastAPI.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID


@dataclass(frozen=True)
class UserSummary:
    """Proyección denormalizada del autor de una review."""

    id: UUID
    name: str
    email: str


@dataclass
class User:
    """Usuario que escribe reviews. El email es único globalmente."""

    id: UUID
    name: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_summary(self) -> UserSummary:
        return UserSummary(id=self.id, name=self.name, email=self.email)


@dataclass
class Review:
    """
    Review de un usuario (score 1..5 + comentario opcional).

    `user` se completa en toda lectura/escritura que se devuelve al caller.
    """

    id: UUID
    user_id: UUID
    score: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user: Optional[UserSummary] = None


@dataclass
class UserWithReviews:
    """Usuario junto a sus reviews (más recientes primero)."""

    user: User
    reviews: List[Review] = field(default_factory=list)


@dataclass(frozen=True)
class ReviewPatch:
    """
    Cambios parciales sobre una review.

    None significa "campo no enviado". `comment` no puede volver a NULL
    mediante un patch.
    """

    user_id: Optional[UUID] = None
    score: Optional[int] = None
    comment: Optional[str] = None

    def is_empty(self) -> bool:
        return self.user_id is None and self.score is None and self.comment is None


@dataclass(frozen=True)
class UserPatch:
    """Cambios parciales sobre un usuario (None = no enviado)."""

    name: Optional[str] = None
    email: Optional[str] = None

    def is_empty(self) -> bool:
        return self.name is None and self.email is None
