"""
Postgres-backed fixtures. Enabled with RUN_INTEGRATION=1; otherwise every
test marked `integration` is skipped and nothing here touches a database.

The schema comes from the real Alembic migrations (head), applied once per
session. `clean_tables` empties both tables before a test.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from psycopg import connect

from feedback.crosscutting.config import get_settings
from feedback.infrastructure.db.pool import close_pool, init_pool

ENABLED = os.getenv("RUN_INTEGRATION") == "1"
BACKEND_DIR = Path(__file__).resolve().parents[2]

# The root conftest seeds a placeholder URL; integration runs need a real one.
LOCAL_DATABASE_URL = "postgresql://{user}:{password}@{host}:{port}/{db}".format(
    user=os.getenv("POSTGRES_USER", "postgres"),
    password=os.getenv("POSTGRES_PASSWORD", "postgres"),
    host=os.getenv("POSTGRES_HOST", "localhost"),
    port=os.getenv("POSTGRES_PORT", "5432"),
    db=os.getenv("POSTGRES_DB", "feedback"),
)

if ENABLED and os.environ.get("DATABASE_URL", "").startswith("postgresql://test:test@"):
    os.environ["DATABASE_URL"] = LOCAL_DATABASE_URL
    get_settings.cache_clear()


def pytest_collection_modifyitems(config, items) -> None:
    if ENABLED:
        return
    skip = pytest.mark.skip(reason="integration tests need RUN_INTEGRATION=1")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def migrated_database() -> str:
    alembic_cfg = Config(str(BACKEND_DIR / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
    command.upgrade(alembic_cfg, "head")
    return get_settings().database_url


@pytest.fixture(scope="session")
def db_pool(migrated_database):
    settings = get_settings()
    pool = init_pool(
        migrated_database,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    yield pool
    close_pool()


@pytest.fixture
def clean_tables(db_pool):
    with connect(get_settings().database_url, autocommit=True) as conn:
        conn.execute("TRUNCATE reviews, users")
    yield
