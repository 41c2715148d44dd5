"""
===============================================================================
TARJETA CRC — feedback/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer repositorios, publisher y casos de uso siguiendo DIP.
  - Exponer factories para FastAPI (Depends).
  - Mantener singletons con lru_cache para recursos compartidos.
  - Decidir adapters según Settings (in-memory en test; Postgres/Redis en runtime).

Colaboradores:
  - feedback.crosscutting.config.get_settings
  - feedback.domain.* (puertos)
  - feedback.infrastructure.* (implementaciones)
  - feedback.application.usecases.* (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
  - Este archivo NO depende de FastAPI (solo expone factories).
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from redis import Redis

from .application.usecases import (
    CreateReviewUseCase,
    CreateUserUseCase,
    DeleteReviewUseCase,
    DeleteUserUseCase,
    GetReviewUseCase,
    GetUserUseCase,
    ListReviewsUseCase,
    ListUsersUseCase,
    UpdateReviewUseCase,
    UpdateUserUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import ReviewRepository, UserRepository
from .domain.services import EventPublisher
from .infrastructure.events import (
    InMemoryEventPublisher,
    RedisStreamConfig,
    RedisStreamEventPublisher,
)
from .infrastructure.repositories import (
    InMemoryDatabase,
    InMemoryReviewRepository,
    InMemoryUserRepository,
    PostgresReviewRepository,
    PostgresUserRepository,
)

# =============================================================================
# Helpers internos
# =============================================================================


def _is_test_env() -> bool:
    """app_env ∈ {"test", "testing", "ci"} => in-memory adapters."""
    return get_settings().is_test()


def uses_postgres() -> bool:
    """True si los repositorios activos necesitan el pool de Postgres."""
    return not _is_test_env()


# =============================================================================
# Repositorios (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_in_memory_database() -> InMemoryDatabase:
    """Tablas compartidas por los repos in-memory (FK y UNIQUE cruzadas)."""
    return InMemoryDatabase()


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    """Repositorio de users (in-memory en test; Postgres en runtime)."""
    if _is_test_env():
        return InMemoryUserRepository(get_in_memory_database())
    return PostgresUserRepository()


@lru_cache(maxsize=1)
def get_review_repository() -> ReviewRepository:
    """Repositorio de reviews (in-memory en test; Postgres en runtime)."""
    if _is_test_env():
        return InMemoryReviewRepository(get_in_memory_database())
    return PostgresReviewRepository()


# =============================================================================
# Servicios externos (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_redis() -> Redis:
    settings = get_settings()
    return Redis.from_url(
        settings.redis_url,
        socket_connect_timeout=2,
        socket_timeout=5,
        health_check_interval=30,
    )


@lru_cache(maxsize=1)
def get_event_publisher() -> EventPublisher:
    """Publisher de eventos de review (Redis Streams, o memoria en test)."""
    settings = get_settings()
    if _is_test_env() or settings.events_backend == "memory":
        return InMemoryEventPublisher()

    config = RedisStreamConfig(
        stream_prefix=settings.events_stream_prefix,
        maxlen=settings.events_stream_maxlen,
    )
    return RedisStreamEventPublisher(redis=get_redis(), config=config)


# =============================================================================
# Casos de uso: Reviews (factory por request)
# =============================================================================


def get_create_review_use_case() -> CreateReviewUseCase:
    return CreateReviewUseCase(
        user_repository=get_user_repository(),
        review_repository=get_review_repository(),
        event_publisher=get_event_publisher(),
    )


def get_list_reviews_use_case() -> ListReviewsUseCase:
    return ListReviewsUseCase(review_repository=get_review_repository())


def get_get_review_use_case() -> GetReviewUseCase:
    return GetReviewUseCase(review_repository=get_review_repository())


def get_update_review_use_case() -> UpdateReviewUseCase:
    return UpdateReviewUseCase(
        user_repository=get_user_repository(),
        review_repository=get_review_repository(),
        event_publisher=get_event_publisher(),
    )


def get_delete_review_use_case() -> DeleteReviewUseCase:
    return DeleteReviewUseCase(
        review_repository=get_review_repository(),
        event_publisher=get_event_publisher(),
    )


# =============================================================================
# Casos de uso: Users (factory por request)
# =============================================================================


def get_create_user_use_case() -> CreateUserUseCase:
    return CreateUserUseCase(user_repository=get_user_repository())


def get_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(user_repository=get_user_repository())


def get_get_user_use_case() -> GetUserUseCase:
    return GetUserUseCase(
        user_repository=get_user_repository(),
        review_repository=get_review_repository(),
    )


def get_update_user_use_case() -> UpdateUserUseCase:
    return UpdateUserUseCase(user_repository=get_user_repository())


def get_delete_user_use_case() -> DeleteUserUseCase:
    return DeleteUserUseCase(user_repository=get_user_repository())


def reset_container() -> None:
    """Limpia los singletons (tests)."""
    for factory in (
        get_in_memory_database,
        get_user_repository,
        get_review_repository,
        get_redis,
        get_event_publisher,
    ):
        factory.cache_clear()
