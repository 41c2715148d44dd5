"""
===============================================================================
TARJETA CRC — schemas/reviews.py
===============================================================================

Módulo:
    Schemas HTTP para Reviews

Responsabilidades:
    - DTOs de request/response para /reviews.
    - Validar userId (UUID), score (entero 1..5) y comment (<= max_comment_chars).

Colaboradores:
    - crosscutting.config.get_settings (límites)
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Optional
from uuid import UUID

from feedback.crosscutting.config import get_settings
from pydantic import BeforeValidator, Field

from .base import CamelModel, CamelRequest, PatchRequest

_settings = get_settings()


def _whole_number(v: Any) -> Any:
    # JSON no distingue 5 de 5.0; strings y bools no son scores.
    if isinstance(v, float) and v.is_integer():
        return int(v)
    return v


Score = Annotated[
    int,
    BeforeValidator(_whole_number),
    Field(strict=True, ge=1, le=5, description="Score 1..5"),
]


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class CreateReviewReq(CamelRequest):
    user_id: UUID
    score: Score
    comment: Optional[str] = Field(default=None, max_length=_settings.max_comment_chars)


class UpdateReviewReq(PatchRequest):
    """Patch parcial: solo se aplican los campos enviados."""

    user_id: Optional[UUID] = None
    score: Optional[Score] = None
    comment: Optional[str] = Field(default=None, max_length=_settings.max_comment_chars)


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class UserSummaryRes(CamelModel):
    id: UUID
    name: str
    email: str


class ReviewRes(CamelModel):
    id: UUID
    user_id: UUID
    score: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user: Optional[UserSummaryRes] = None
