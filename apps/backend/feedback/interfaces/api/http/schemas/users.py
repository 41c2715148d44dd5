"""
===============================================================================
TARJETA CRC — schemas/users.py
===============================================================================

Módulo:
    Schemas HTTP para Users

Responsabilidades:
    - DTOs de request/response para /users.
    - Validar name (1..max_name_chars) y email (válido, <= max_email_chars).

Colaboradores:
    - crosscutting.config.get_settings (límites)
    - schemas.reviews.ReviewRes (detalle de usuario)
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from feedback.crosscutting.config import get_settings
from pydantic import EmailStr, Field, field_validator

from .base import CamelModel, CamelRequest, PatchRequest
from .reviews import ReviewRes

_settings = get_settings()


def _check_email_length(v: Optional[str]) -> Optional[str]:
    if v is not None and len(v) > _settings.max_email_chars:
        raise ValueError(
            f"email must be at most {_settings.max_email_chars} characters"
        )
    return v


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class CreateUserReq(CamelRequest):
    name: str = Field(..., min_length=1, max_length=_settings.max_name_chars)
    email: EmailStr

    @field_validator("email")
    @classmethod
    def email_max_length(cls, v: str) -> str:
        return _check_email_length(v)


class UpdateUserReq(PatchRequest):
    """Patch parcial: solo se aplican los campos enviados."""

    name: Optional[str] = Field(
        default=None, min_length=1, max_length=_settings.max_name_chars
    )
    email: Optional[EmailStr] = None

    @field_validator("email")
    @classmethod
    def email_max_length(cls, v: Optional[str]) -> Optional[str]:
        return _check_email_length(v)


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class UserRes(CamelModel):
    id: UUID
    name: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserDetailRes(UserRes):
    reviews: list[ReviewRes] = Field(default_factory=list)
