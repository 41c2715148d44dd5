"""
===============================================================================
MÓDULO: Problem Details (RFC 7807) para toda respuesta de error
===============================================================================

Cualquier error HTTP del servicio sale con el mismo cuerpo:

    {"type", "title", "status", "detail", "code", "instance", "errors"}

y media type `application/problem+json`. `code` es el contrato estable con
los clientes; `title` y `type` se derivan de él.

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  Catálogo ErrorCode + AppHTTPException

Responsabilidades:
  - Enumerar los códigos que un cliente puede recibir
  - Serializar una AppHTTPException a dict (build_problem)
  - Exponer atajos para los errores que usan los routers

Colaboradores:
  - crosscutting/middleware.py (413 antes de llegar a FastAPI)
  - api/exception_handlers.py (errores internos → HTTP)
  - interfaces/api/http/error_mapping.py (errores de use case → HTTP)
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REFERENCE = "INVALID_REFERENCE"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    EVENT_PUBLISH_ERROR = "EVENT_PUBLISH_ERROR"

    @property
    def title(self) -> str:
        # VALIDATION_ERROR -> "Validation Error"
        return self.value.replace("_", " ").title()

    @property
    def type_uri(self) -> str:
        return f"about:blank/{self.value.lower()}"


class ErrorDetail(BaseModel):
    """Cuerpo problem+json. `errors` lleva detalle por campo o ids de correlación."""

    type: str = "about:blank"
    title: str
    status: int
    detail: str
    code: ErrorCode
    instance: str | None = None
    errors: list[dict[str, Any]] | None = None


def _documented(status_text: str) -> dict[str, Any]:
    return {
        "description": f"{status_text} (RFC7807)",
        "model": ErrorDetail,
        "content": {
            PROBLEM_JSON_MEDIA_TYPE: {
                "schema": {"$ref": "#/components/schemas/ErrorDetail"}
            }
        },
    }


OPENAPI_ERROR_RESPONSES = {
    status: _documented(text)
    for status, text in (
        ("400", "Bad Request"),
        ("404", "Not Found"),
        ("409", "Conflict"),
        ("413", "Payload Too Large"),
        ("default", "Error"),
    )
}


class AppHTTPException(HTTPException):
    """HTTPException con `code` estable y lista opcional de `errors`."""

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        detail: str,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.code = code
        self.errors = errors


# Atajos usados por routers, middleware y handlers.


def validation_error(
    detail: str, errors: list[dict[str, Any]] | None = None
) -> AppHTTPException:
    return AppHTTPException(400, ErrorCode.VALIDATION_ERROR, detail, errors)


def invalid_reference(resource: str) -> AppHTTPException:
    return AppHTTPException(400, ErrorCode.INVALID_REFERENCE, f"Invalid {resource}")


def not_found(resource: str, identifier: str) -> AppHTTPException:
    return AppHTTPException(
        404, ErrorCode.NOT_FOUND, f"{resource} with ID {identifier} not found"
    )


def conflict(detail: str) -> AppHTTPException:
    return AppHTTPException(409, ErrorCode.CONFLICT, detail)


def payload_too_large(max_bytes: int) -> AppHTTPException:
    return AppHTTPException(
        413,
        ErrorCode.PAYLOAD_TOO_LARGE,
        f"Request body exceeds {max_bytes} bytes",
    )


def internal_error(detail: str = "An unexpected error occurred") -> AppHTTPException:
    return AppHTTPException(500, ErrorCode.INTERNAL_ERROR, detail)


def build_problem(
    exc: AppHTTPException, *, instance: str | None, request_id: str | None
) -> dict[str, Any]:
    errors = list(exc.errors or [])
    already_tagged = any("request_id" in item for item in errors)
    if request_id and not already_tagged:
        errors.append({"request_id": request_id})

    body = ErrorDetail(
        type=exc.code.type_uri,
        title=exc.code.title,
        status=exc.status_code,
        detail=str(exc.detail),
        code=exc.code,
        instance=instance,
        errors=errors or None,
    )
    return body.model_dump(mode="json", exclude_none=True)


async def app_exception_handler(
    request: Request, exc: AppHTTPException
) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    return JSONResponse(
        build_problem(exc, instance=str(request.url), request_id=request_id),
        status_code=exc.status_code,
        headers=exc.headers,
        media_type=PROBLEM_JSON_MEDIA_TYPE,
    )
