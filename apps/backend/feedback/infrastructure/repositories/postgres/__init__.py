"""Postgres implementations (persistencia real, SQL crudo)."""

from .review import PostgresReviewRepository
from .user import PostgresUserRepository

__all__ = ["PostgresReviewRepository", "PostgresUserRepository"]
