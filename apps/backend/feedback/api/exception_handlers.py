"""
===============================================================================
TARJETA CRC — feedback/api/exception_handlers.py (Manejo Centralizado de Excepciones)
===============================================================================

Responsabilidades:
  - Convertir toda excepción que escape de un router en problem+json.
  - Body/path inválido -> 400 VALIDATION_ERROR (no el 422 de FastAPI).
  - Fallas de infraestructura -> 503 / 502 / 500 con error_id.
  - Ocultar el mensaje de excepciones no tipadas en producción.

Colaboradores:
  - crosscutting.error_responses
  - crosscutting.exceptions
  - crosscutting.config.get_settings
===============================================================================
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    validation_error,
)
from ..crosscutting.exceptions import DatabaseError, EventPublishError, FeedbackError
from ..crosscutting.logger import logger

Handler = Callable[[Request, Exception], Awaitable[JSONResponse]]

# Orden de registro irrelevante: Starlette resuelve por MRO de la excepción.
_INFRASTRUCTURE_FAILURES: tuple[tuple[type[FeedbackError], ErrorCode, int], ...] = (
    (DatabaseError, ErrorCode.DATABASE_ERROR, 503),
    (EventPublishError, ErrorCode.EVENT_PUBLISH_ERROR, 502),
    (FeedbackError, ErrorCode.INTERNAL_ERROR, 500),
)


def _field_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    fields = []
    for item in exc.errors():
        path = ".".join(str(p) for p in item.get("loc", ()) if p != "body")
        fields.append({"field": path or "body", "msg": item.get("msg", "")})
    return fields


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problem = validation_error("Validation failed", _field_errors(exc))
    return await app_exception_handler(request, problem)


def _infrastructure_handler(code: ErrorCode, status_code: int) -> Handler:
    async def handle(request: Request, exc: FeedbackError) -> JSONResponse:
        request_id = getattr(request.state, "request_id", None)
        logger.error(
            "Infrastructure failure",
            extra={
                "code": code.value,
                "error_id": exc.error_id,
                "detail": exc.message,
                "request_id": request_id,
            },
        )
        problem = AppHTTPException(
            status_code,
            code,
            exc.message,
            errors=[{"error_id": exc.error_id, "request_id": request_id}],
        )
        return await app_exception_handler(request, problem)

    return handle


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    logger.error(
        "Unhandled exception",
        exc_info=exc,
        extra={"request_id": request_id},
    )

    if get_settings().is_production() or not str(exc):
        detail = "Internal error."
    else:
        detail = str(exc)
    return await app_exception_handler(
        request, AppHTTPException(500, ErrorCode.INTERNAL_ERROR, detail)
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    for exc_type, code, status_code in _INFRASTRUCTURE_FAILURES:
        app.add_exception_handler(exc_type, _infrastructure_handler(code, status_code))
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
