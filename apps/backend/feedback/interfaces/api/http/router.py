"""
Router raíz HTTP: agrupa /users y /reviews y documenta en OpenAPI las
respuestas problem+json comunes a todas las rutas.
"""

from __future__ import annotations

from fastapi import APIRouter

from ....crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from .routers import reviews, users

router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)
for feature in (users, reviews):
    router.include_router(feature.router)

__all__ = ["router"]
