"""
===============================================================================
MÓDULO: Middlewares HTTP
===============================================================================

RequestContextMiddleware
  Asigna un X-Request-Id (el del cliente si es razonable, si no uno nuevo),
  lo deja en request.state y en el ContextVar de logging, lo devuelve en la
  respuesta y registra log + métricas al terminar.

BodyLimitMiddleware (ASGI puro)
  Responde 413 problem+json cuando el body supera `max_body_bytes`, sea por
  Content-Length declarado o contando los chunks recibidos.

Colaboradores:
  - feedback/context.py
  - crosscutting/metrics.py
  - crosscutting/error_responses.py
===============================================================================
"""

from __future__ import annotations

import json
import time
from typing import Awaitable, Callable
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from ..context import bind_request, release_request
from .error_responses import PROBLEM_JSON_MEDIA_TYPE, build_problem, payload_too_large
from .logger import logger
from .metrics import record_request_metrics

REQUEST_ID_HEADER = "X-Request-Id"
_REQUEST_ID_MAX_LEN = 128
_UNLOGGED_PATHS = frozenset({"/health", "/healthz", "/metrics"})


def _accept_request_id(raw: str | None) -> str:
    candidate = (raw or "").strip()
    if candidate and len(candidate) <= _REQUEST_ID_MAX_LEN:
        return candidate
    return str(uuid4())


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = _accept_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        path, method = request.url.path, request.method
        token = bind_request(request_id=request_id, method=method, path=path)

        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Request crashed")
            raise
        else:
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            elapsed = time.perf_counter() - started
            record_request_metrics(
                endpoint=path,
                method=method,
                status_code=status_code,
                latency_seconds=elapsed,
            )
            if path not in _UNLOGGED_PATHS:
                logger.info(
                    "Request handled",
                    extra={"status_code": status_code, "latency_ms": round(elapsed * 1000, 2)},
                )
            release_request(token)


class _LimitExceeded(Exception):
    pass


class BodyLimitMiddleware:
    """Corta requests con body mayor a `max_bytes` (default: Settings.max_body_bytes)."""

    def __init__(self, app: ASGIApp, max_bytes: int | None = None):
        if max_bytes is None:
            from .config import get_settings

            max_bytes = get_settings().max_body_bytes
        self.app = app
        self.max_bytes = max_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = None
        for name, value in scope.get("headers", []):
            if name.lower() == b"content-length":
                declared = value.decode("latin-1")
                break
        if declared is not None and declared.isdigit() and int(declared) > self.max_bytes:
            logger.warning(
                "Body rejected by Content-Length",
                extra={"content_length": int(declared), "max_bytes": self.max_bytes},
            )
            await self._reject(scope, send)
            return

        seen = 0
        response_started = False

        async def counting_receive() -> Message:
            nonlocal seen
            message = await receive()
            if message["type"] == "http.request":
                seen += len(message.get("body") or b"")
                if seen > self.max_bytes:
                    raise _LimitExceeded
            return message

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            response_started = response_started or message["type"] == "http.response.start"
            await send(message)

        try:
            await self.app(scope, counting_receive, tracking_send)
        except _LimitExceeded:
            if response_started:
                raise
            logger.warning(
                "Body rejected while streaming",
                extra={"received_bytes": seen, "max_bytes": self.max_bytes},
            )
            await self._reject(scope, send)

    async def _reject(self, scope: Scope, send: Send) -> None:
        # RequestContextMiddleware corre antes y deja el id en scope["state"].
        request_id = scope.get("state", {}).get("request_id") or str(uuid4())
        problem = build_problem(
            payload_too_large(self.max_bytes),
            instance=scope.get("path", ""),
            request_id=request_id,
        )
        await send(
            {
                "type": "http.response.start",
                "status": 413,
                "headers": [
                    (b"content-type", PROBLEM_JSON_MEDIA_TYPE.encode()),
                    (REQUEST_ID_HEADER.lower().encode(), request_id.encode()),
                ],
            }
        )
        await send({"type": "http.response.body", "body": json.dumps(problem).encode()})
