"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/store.py
============================================================
Class: InMemoryDatabase

Responsibilities:
  - Mantener las "tablas" users y reviews en memoria, bajo un único Lock.
  - Permitir que ambos repositorios verifiquen constraints cruzadas
    (FK reviews.user_id -> users.id con RESTRICT, UNIQUE users.email).

Collaborators:
  - InMemoryUserRepository
  - InMemoryReviewRepository

Notes:
  - RLock: los repos pueden anidar operaciones bajo el mismo lock.
  - insertion_seq desempata reviews creadas en el mismo instante.
============================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from itertools import count
from threading import RLock
from typing import Dict
from uuid import UUID

from ....domain.entities import Review, User


@dataclass
class InMemoryDatabase:
    users: Dict[UUID, User] = field(default_factory=dict)
    reviews: Dict[UUID, Review] = field(default_factory=dict)
    insertion_seq: Dict[UUID, int] = field(default_factory=dict)
    lock: RLock = field(default_factory=RLock)
    _counter: count = field(default_factory=count)

    @staticmethod
    def now() -> datetime:
        """Fuente única de tiempo (UTC)."""
        return datetime.now(timezone.utc)

    def next_seq(self) -> int:
        return next(self._counter)

    def user_has_reviews(self, user_id: UUID) -> bool:
        return any(r.user_id == user_id for r in self.reviews.values())

    def email_taken(self, email: str, *, exclude: UUID | None = None) -> bool:
        return any(
            u.email == email and u.id != exclude for u in self.users.values()
        )

    def clear(self) -> None:
        with self.lock:
            self.users.clear()
            self.reviews.clear()
            self.insertion_seq.clear()
