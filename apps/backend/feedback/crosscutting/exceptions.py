"""
===============================================================================
MÓDULO: Fallas de infraestructura (no son resultados de negocio)
===============================================================================

Los adapters (Postgres, Redis) las lanzan y nadie en application las
captura: llegan hasta api/exception_handlers.py, que responde 503 / 502 /
500 sin exponer la causa original.

Cada falla lleva un `error_id` que aparece tanto en el log como en el body
de la respuesta, para poder cruzarlos.
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class FeedbackError(Exception):
    """Base de las fallas internas del servicio."""

    error_code = "FEEDBACK_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_id = error_id if error_id else uuid4().hex
        self.original_error = original_error

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.error_code}, error_id={self.error_id})"


class DatabaseError(FeedbackError):
    """Postgres no respondió o la query falló (fuera de las señales de storage)."""

    error_code = "DATABASE_ERROR"


class EventPublishError(FeedbackError):
    """El broker rechazó o no recibió un evento de review."""

    error_code = "EVENT_PUBLISH_ERROR"
