"""
============================================================
TARJETA CRC
============================================================
Class: feedback.infrastructure.repositories (Package exports)

Responsibilities:
- Exponer implementaciones concretas (Postgres e InMemory) en un único
  punto de importación para container.py.
============================================================
"""

from .in_memory import InMemoryDatabase, InMemoryReviewRepository, InMemoryUserRepository
from .postgres import PostgresReviewRepository, PostgresUserRepository

__all__ = [
    # Postgres
    "PostgresReviewRepository",
    "PostgresUserRepository",
    # In-memory
    "InMemoryDatabase",
    "InMemoryReviewRepository",
    "InMemoryUserRepository",
]
