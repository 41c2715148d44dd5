"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/base.py
============================================================
Class: PostgresRepository (base)

Responsibilities:
  - Resolver el pool (inyectado o global).
  - Ejecutar SQL parametrizado con manejo de errores consistente.
  - Traducir violaciones de constraints de psycopg a señales de dominio:
      * psycopg.errors.ForeignKeyViolation -> ForeignKeyViolationError
      * psycopg.errors.UniqueViolation     -> UniqueViolationError
  - Todo lo demás -> DatabaseError (log + raise from).

Collaborators:
  - psycopg / psycopg_pool
  - domain.storage_errors
  - crosscutting.exceptions.DatabaseError
  - crosscutting.logger
============================================================
"""

from __future__ import annotations

from typing import Iterable, Optional

from psycopg import errors as pg_errors
from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.storage_errors import ForeignKeyViolationError, UniqueViolationError


def _constraint_name(exc: pg_errors.Error) -> str | None:
    diag = getattr(exc, "diag", None)
    return getattr(diag, "constraint_name", None) if diag is not None else None


class PostgresRepository:
    """R: Helpers compartidos por los repositorios Postgres."""

    def __init__(self, pool: Optional[ConnectionPool] = None):
        # R: Pool inyectable para tests; en producción se obtiene por factory global.
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ...db.pool import get_pool

        return get_pool()

    def _run(
        self,
        *,
        query: str,
        params: Iterable[object],
        context_msg: str,
        extra: dict,
        fetch: str,
    ):
        try:
            pool = self._get_pool()
            with pool.connection() as conn:
                cursor = conn.execute(query, tuple(params))
                if fetch == "one":
                    return cursor.fetchone()
                return cursor.fetchall()
        except pg_errors.ForeignKeyViolation as exc:
            raise ForeignKeyViolationError(
                f"{context_msg}: foreign key violation",
                constraint=_constraint_name(exc),
            ) from exc
        except pg_errors.UniqueViolation as exc:
            raise UniqueViolationError(
                f"{context_msg}: unique violation",
                constraint=_constraint_name(exc),
            ) from exc
        except Exception as exc:
            logger.exception(context_msg, extra={**extra, "error": str(exc)})
            raise DatabaseError(f"{context_msg}: {exc}", original_error=exc) from exc

    def _fetchone(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> tuple | None:
        return self._run(
            query=query, params=params, context_msg=context_msg, extra=extra, fetch="one"
        )

    def _fetchall(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> list[tuple]:
        return self._run(
            query=query, params=params, context_msg=context_msg, extra=extra, fetch="all"
        )

    def ping(self) -> bool:
        """R: SELECT 1 (healthz)."""
        row = self._fetchone(
            query="SELECT 1",
            params=(),
            context_msg="Postgres ping failed",
            extra={},
        )
        return row is not None
