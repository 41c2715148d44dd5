"""Pool de conexiones PostgreSQL (psycopg_pool)."""

from .errors import PoolStateError, PoolAlreadyInitializedError, PoolNotInitializedError
from .pool import close_pool, get_pool, init_pool, reset_pool

__all__ = [
    "PoolStateError",
    "PoolAlreadyInitializedError",
    "PoolNotInitializedError",
    "close_pool",
    "get_pool",
    "init_pool",
    "reset_pool",
]
