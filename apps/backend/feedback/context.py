"""
===============================================================================
TARJETA CRC — feedback/context.py (Contexto por request)
===============================================================================

Responsabilidades:
  - Guardar request_id / method / path del request en curso (ContextVar).
  - Permitir que el logger los agregue sin recibirlos por parámetro.

Colaboradores:
  - feedback.crosscutting.middleware: bind_request() / release_request().
  - feedback.crosscutting.logger: current_log_fields().
===============================================================================
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class RequestContext:
    request_id: str
    method: str
    path: str


_current: ContextVar[RequestContext | None] = ContextVar(
    "feedback_request_context", default=None
)


def bind_request(*, request_id: str, method: str, path: str) -> Token:
    return _current.set(RequestContext(request_id=request_id, method=method, path=path))


def release_request(token: Token) -> None:
    _current.reset(token)


def current_log_fields() -> dict[str, str]:
    """Campos del request actual para el log; vacío fuera de un request."""
    ctx = _current.get()
    if ctx is None:
        return {}
    return {key: value for key, value in asdict(ctx).items() if value}
