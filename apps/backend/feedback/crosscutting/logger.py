"""
===============================================================================
MÓDULO: Logging estructurado
===============================================================================

Una línea JSON por evento de log. Cada línea incluye el contexto del request
en curso (request_id, method, path) y los `extra=` del llamador, con emails,
URLs de conexión y secretos reemplazados por un marcador.

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  JsonLogFormatter + configure_logging()

Responsabilidades:
  - Serializar LogRecord a JSON
  - Redactar y acotar valores extra
  - Elegir nivel y formato desde Settings

Colaboradores:
  - feedback/context.py
  - crosscutting/config.py (log_level, log_json)
===============================================================================
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from ..context import current_log_fields

LOGGER_NAME = "feedback-api"

REDACTED = "[redacted]"
_REDACTED_KEYS = frozenset(
    {"email", "password", "secret", "token", "authorization", "database_url", "redis_url"}
)
_MAX_TEXT = 2_000
_MAX_NESTING = 3
_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Todo lo que trae un LogRecord vacío no es "extra" del llamador.
_BUILTIN_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def scrub(value: Any, key: str = "", level: int = 0) -> Any:
    """Versión loggeable de `value`: sin secretos, strings cortos, anidación acotada."""
    if key.lower() in _REDACTED_KEYS:
        return REDACTED
    if isinstance(value, (bool, int, float)) or value is None:
        return value
    if isinstance(value, str):
        return value if len(value) <= _MAX_TEXT else f"{value[:_MAX_TEXT]}..."
    if level >= _MAX_NESTING:
        return "..."
    if isinstance(value, dict):
        return {str(k): scrub(v, str(k), level + 1) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [scrub(v, key, level + 1) for v in value]
    return str(value)


class JsonLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "where": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        entry.update(current_log_fields())
        entry.update(
            (name, scrub(value, name))
            for name, value in vars(record).items()
            if name not in _BUILTIN_ATTRS
        )
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


def _level_and_format() -> tuple[str, bool]:
    from .config import get_settings

    try:
        settings = get_settings()
    except ValidationError:
        # Sin DATABASE_URL al importar (scripts, alembic): defaults.
        return "INFO", True
    return settings.log_level.upper(), settings.log_json


def configure_logging(name: str = LOGGER_NAME) -> logging.Logger:
    log = logging.getLogger(name)
    level, as_json = _level_and_format()
    log.setLevel(_LEVELS.get(level, logging.INFO))

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        if as_json:
            handler.setFormatter(JsonLogFormatter())
        else:
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
            )
        log.addHandler(handler)

    return log


logger = configure_logging()
