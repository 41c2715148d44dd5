"""
===============================================================================
TARJETA CRC — domain/storage_errors.py
===============================================================================

Módulo:
    Señales de storage distinguibles por la capa de aplicación

Responsabilidades:
    - Representar las violaciones que los use cases traducen a errores de
      negocio (independientes de Postgres / in-memory):
        * ForeignKeyViolationError -> referencia inválida / user con reviews
        * RecordNotFoundError      -> registro ausente al actualizar/borrar
        * UniqueViolationError     -> email duplicado

Colaboradores:
    - infrastructure.repositories.*: las lanzan.
    - application.usecases.*: las capturan y traducen.

Notas:
    - Cualquier otra falla de storage NO es una señal: se propaga como
      crosscutting.exceptions.DatabaseError.
===============================================================================
"""

from __future__ import annotations


class StorageSignal(Exception):
    """Base de señales de storage."""

    def __init__(self, message: str, *, constraint: str | None = None) -> None:
        super().__init__(message)
        self.constraint = constraint


class ForeignKeyViolationError(StorageSignal):
    """La escritura violó una foreign key."""


class RecordNotFoundError(StorageSignal):
    """El registro a actualizar/borrar no existe."""


class UniqueViolationError(StorageSignal):
    """La escritura violó una restricción UNIQUE."""
