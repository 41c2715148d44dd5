"""
===============================================================================
TARJETA CRC — error_mapping.py (UseCase Error -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir errores tipados de casos de uso a AppHTTPException.
  - Centralizar el mapeo para que los routers no lo dupliquen.

Reglas:
  - NOT_FOUND         -> 404 (resource + id)
  - INVALID_REFERENCE -> 400
  - CONFLICT          -> 409

Colaboradores:
  - application.usecases (ReviewError, UserError)
  - crosscutting.error_responses
===============================================================================
"""

from __future__ import annotations

from typing import NoReturn

from feedback.application.usecases import (
    ReviewError,
    ReviewErrorCode,
    UserError,
    UserErrorCode,
)
from feedback.crosscutting.error_responses import (
    conflict,
    internal_error,
    invalid_reference,
    not_found,
)


def raise_review_error(error: ReviewError) -> NoReturn:
    if error.code == ReviewErrorCode.NOT_FOUND:
        raise not_found(error.resource or "Review", str(error.resource_id or "-"))
    if error.code == ReviewErrorCode.INVALID_REFERENCE:
        raise invalid_reference(error.resource or "User")
    # Fallback (no debería ocurrir)
    raise internal_error(error.message)


def raise_user_error(error: UserError) -> NoReturn:
    if error.code == UserErrorCode.NOT_FOUND:
        raise not_found(error.resource or "User", str(error.resource_id or "-"))
    if error.code == UserErrorCode.CONFLICT:
        raise conflict(error.message)
    raise internal_error(error.message)
