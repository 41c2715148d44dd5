"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/user.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - CRUD de usuarios en memoria (tests / local dev).
  - Emular las señales del storage real:
      * email duplicado      -> UniqueViolationError
      * update/delete de id inexistente -> RecordNotFoundError
      * delete con reviews   -> ForeignKeyViolationError (RESTRICT)
  - Ordering determinístico alineado con Postgres (name ASC).

Collaborators:
  - InMemoryDatabase (tablas compartidas con reviews)
  - domain.repositories.UserRepository

Constraints / Notes:
  - Copias defensivas: los callers nunca reciben la instancia almacenada.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional
from uuid import UUID, uuid4

from ....domain.entities import User, UserPatch
from ....domain.storage_errors import (
    ForeignKeyViolationError,
    RecordNotFoundError,
    UniqueViolationError,
)
from .store import InMemoryDatabase


class InMemoryUserRepository:
    """Repositorio in-memory, thread-safe, para Users."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    @property
    def db(self) -> InMemoryDatabase:
        return self._db

    def get_user(self, user_id: UUID) -> Optional[User]:
        with self._db.lock:
            user = self._db.users.get(user_id)
            return replace(user) if user else None

    def list_users(self) -> List[User]:
        with self._db.lock:
            users = [replace(u) for u in self._db.users.values()]
        return sorted(users, key=lambda u: (u.name, str(u.id)))

    def create_user(self, *, name: str, email: str) -> User:
        with self._db.lock:
            if self._db.email_taken(email):
                raise UniqueViolationError(
                    "duplicate email", constraint="uq_users_email"
                )
            now = self._db.now()
            user = User(
                id=uuid4(), name=name, email=email, created_at=now, updated_at=now
            )
            self._db.users[user.id] = user
            return replace(user)

    def update_user(self, user_id: UUID, *, fields: UserPatch) -> User:
        with self._db.lock:
            current = self._db.users.get(user_id)
            if current is None:
                raise RecordNotFoundError(f"user {user_id} not found")
            if fields.email is not None and self._db.email_taken(
                fields.email, exclude=user_id
            ):
                raise UniqueViolationError(
                    "duplicate email", constraint="uq_users_email"
                )

            updated = replace(
                current,
                name=fields.name if fields.name is not None else current.name,
                email=fields.email if fields.email is not None else current.email,
                updated_at=self._db.now(),
            )
            self._db.users[user_id] = updated
            return replace(updated)

    def delete_user(self, user_id: UUID) -> None:
        with self._db.lock:
            if user_id not in self._db.users:
                raise RecordNotFoundError(f"user {user_id} not found")
            if self._db.user_has_reviews(user_id):
                raise ForeignKeyViolationError(
                    "user is still referenced by reviews",
                    constraint="fk_reviews_user_id__users",
                )
            del self._db.users[user_id]
