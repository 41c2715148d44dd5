"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/user.py
============================================================
Class: PostgresUserRepository

Responsibilities:
  - CRUD de `users` con SQL parametrizado.
  - Señales:
      * UNIQUE(email)        -> UniqueViolationError (vía base)
      * FK RESTRICT en delete -> ForeignKeyViolationError (vía base)
      * UPDATE/DELETE sin fila -> RecordNotFoundError
  - Mapear filas -> domain.entities.User.

Collaborators:
  - PostgresRepository (helpers + traducción de errores)
  - Tabla users (001_users_reviews)

Constraints / Notes:
  - Listado ordenado por name ASC (id como desempate).
  - Las columnas del SET se eligen acá, nunca desde input.
============================================================
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID, uuid4

from ....domain.entities import User, UserPatch
from ....domain.storage_errors import RecordNotFoundError
from .base import PostgresRepository

_USER_COLUMNS = "id, name, email, created_at, updated_at"


def _row_to_user(row: tuple) -> User:
    return User(
        id=row[0],
        name=row[1],
        email=row[2],
        created_at=row[3],
        updated_at=row[4],
    )


class PostgresUserRepository(PostgresRepository):
    """R: Implementación PostgreSQL del repositorio de Users."""

    def get_user(self, user_id: UUID) -> Optional[User]:
        row = self._fetchone(
            query=f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s",
            params=(user_id,),
            context_msg="PostgresUserRepository: Failed to get user",
            extra={"user_id": str(user_id)},
        )
        return _row_to_user(row) if row else None

    def list_users(self) -> List[User]:
        rows = self._fetchall(
            query=f"SELECT {_USER_COLUMNS} FROM users ORDER BY name ASC, id ASC",
            params=(),
            context_msg="PostgresUserRepository: Failed to list users",
            extra={},
        )
        return [_row_to_user(r) for r in rows]

    def create_user(self, *, name: str, email: str) -> User:
        row = self._fetchone(
            query=f"""
                INSERT INTO users (id, name, email, created_at, updated_at)
                VALUES (%s, %s, %s, now(), now())
                RETURNING {_USER_COLUMNS}
            """,
            params=(uuid4(), name, email),
            context_msg="PostgresUserRepository: Failed to create user",
            extra={},
        )
        return _row_to_user(row)

    def update_user(self, user_id: UUID, *, fields: UserPatch) -> User:
        assignments: list[str] = ["updated_at = now()"]
        params: list[object] = []

        if fields.name is not None:
            assignments.append("name = %s")
            params.append(fields.name)
        if fields.email is not None:
            assignments.append("email = %s")
            params.append(fields.email)

        params.append(user_id)
        row = self._fetchone(
            query=f"""
                UPDATE users
                SET {", ".join(assignments)}
                WHERE id = %s
                RETURNING {_USER_COLUMNS}
            """,
            params=params,
            context_msg="PostgresUserRepository: Failed to update user",
            extra={"user_id": str(user_id)},
        )
        if row is None:
            raise RecordNotFoundError(f"user {user_id} not found")
        return _row_to_user(row)

    def delete_user(self, user_id: UUID) -> None:
        row = self._fetchone(
            query="DELETE FROM users WHERE id = %s RETURNING id",
            params=(user_id,),
            context_msg="PostgresUserRepository: Failed to delete user",
            extra={"user_id": str(user_id)},
        )
        if row is None:
            raise RecordNotFoundError(f"user {user_id} not found")
