"""
============================================================
TARJETA CRC — infrastructure/events/in_memory.py
============================================================
Class: InMemoryEventPublisher

Responsibilities:
  - Registrar (topic, event) publicados, en orden (tests / local dev).
  - Exponer helpers de inspección para asserts.

Collaborators:
  - domain.services.EventPublisher
============================================================
"""

from __future__ import annotations

from threading import Lock
from typing import List, Tuple

from ...crosscutting.logger import logger
from ...crosscutting.metrics import record_review_event_published
from ...domain.events import ReviewEvent


class InMemoryEventPublisher:
    def __init__(self) -> None:
        self._lock = Lock()
        self._published: List[Tuple[str, ReviewEvent]] = []

    def publish(self, topic: str, event: ReviewEvent) -> None:
        with self._lock:
            self._published.append((topic, event))
        record_review_event_published(event.type.value)
        logger.debug(
            "Review event recorded in memory",
            extra={"topic": topic, "event_id": str(event.event_id)},
        )

    @property
    def published(self) -> List[Tuple[str, ReviewEvent]]:
        with self._lock:
            return list(self._published)

    def events_for(self, topic: str) -> List[ReviewEvent]:
        return [event for t, event in self.published if t == topic]

    def clear(self) -> None:
        with self._lock:
            self._published.clear()
