"""
===============================================================================
TARJETA CRC — schemas/base.py
===============================================================================

Responsabilidades:
    - Configuración común de DTOs: JSON en camelCase (alias), aceptando
      también snake_case al construir desde Python.

Colaboradores:
    - schemas.users / schemas.reviews
===============================================================================
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base para responses (serializa con alias camelCase)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelRequest(BaseModel):
    """Base para requests: strip de strings y sin campos desconocidos."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="forbid",
    )


class PatchRequest(CamelRequest):
    """Base para PATCH: un campo se omite o se envía con valor, nunca `null`."""

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("must be omitted or have a value, not null")
        return v


class MessageRes(BaseModel):
    """Acknowledgement de borrado."""

    message: str
