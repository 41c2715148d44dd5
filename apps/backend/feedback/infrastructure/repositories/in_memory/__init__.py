"""In-memory implementations (tests / local dev). No persisten tras reiniciar."""

from .review import InMemoryReviewRepository
from .store import InMemoryDatabase
from .user import InMemoryUserRepository

__all__ = ["InMemoryDatabase", "InMemoryReviewRepository", "InMemoryUserRepository"]
