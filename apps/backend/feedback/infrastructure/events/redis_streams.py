"""
===============================================================================
ARCHIVO: infrastructure/events/redis_streams.py
===============================================================================

CRC CARD (Class)
-------------------------------------------------------------------------------
Clase:
    RedisStreamEventPublisher (Adapter)

Responsabilidades:
    - Implementar el puerto `EventPublisher` sobre Redis Streams.
    - Un stream por topic: `<prefix><topic>` (ej. feedback:review.updated).
    - Cada entrada lleva `topic`, `event_id`, `type` y el evento serializado
      en JSON (`data`), listo para consumer groups (XREADGROUP).
    - Envolver cualquier falla de redis en EventPublishError (fail loud).

Colaboradores:
    - domain.services.EventPublisher
    - domain.events.ReviewEvent
    - crosscutting.exceptions.EventPublishError
    - crosscutting.metrics / crosscutting.logger

Patrones:
    - Adapter: traduce el puerto del dominio a XADD.
    - Sin reintentos: la entrega at-least-once es responsabilidad de los
      consumidores del stream.
===============================================================================
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from ...crosscutting.exceptions import EventPublishError
from ...crosscutting.logger import logger
from ...crosscutting.metrics import record_review_event_failed, record_review_event_published
from ...domain.events import ReviewEvent


@dataclass(frozen=True)
class RedisStreamConfig:
    """Configuración del adaptador.

    stream_prefix:
        Prefijo de los streams (un stream por topic).
    maxlen:
        Tope aproximado de entradas por stream (0 = sin tope).
    """

    stream_prefix: str = "feedback:"
    maxlen: int = 10_000


class RedisStreamEventPublisher:
    """Publica ReviewEvents en Redis Streams."""

    def __init__(self, *, redis: Any, config: RedisStreamConfig) -> None:
        # `redis` se inyecta desde el contenedor para compartir conexión.
        self._redis = redis
        self._config = config

    def stream_name(self, topic: str) -> str:
        return f"{self._config.stream_prefix}{topic}"

    def publish(self, topic: str, event: ReviewEvent) -> None:
        stream = self.stream_name(topic)
        fields = {
            "topic": topic,
            "event_id": str(event.event_id),
            "type": event.type.value,
            "data": json.dumps(event.to_dict(), separators=(",", ":")),
        }
        xadd_kwargs: dict[str, Any] = {}
        if self._config.maxlen > 0:
            xadd_kwargs = {"maxlen": self._config.maxlen, "approximate": True}

        try:
            entry_id = self._redis.xadd(stream, fields, **xadd_kwargs)
        except Exception as exc:
            record_review_event_failed(event.type.value)
            logger.exception(
                "Error publishing review event",
                extra={"stream": stream, "event_id": str(event.event_id)},
            )
            raise EventPublishError(
                f"Could not publish {topic} event",
                original_error=exc,
            ) from exc

        record_review_event_published(event.type.value)
        logger.info(
            "Review event published",
            extra={
                "stream": stream,
                "event_id": str(event.event_id),
                "entry_id": entry_id.decode() if isinstance(entry_id, bytes) else entry_id,
            },
        )
