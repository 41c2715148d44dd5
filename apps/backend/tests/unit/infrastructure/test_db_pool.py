"""
Name: Connection Pool Singleton Tests

Responsibilities:
  - init/get/close/reset lifecycle of the process-wide pool
  - statement_timeout applied to every new connection
"""

from unittest.mock import MagicMock, patch

import pytest

from feedback.infrastructure.db import pool as db_pool
from feedback.infrastructure.db.errors import (
    PoolAlreadyInitializedError,
    PoolNotInitializedError,
)

pytestmark = pytest.mark.unit

URL = "postgresql://feedback@localhost/feedback"


@pytest.fixture
def fake_pool_cls():
    db_pool.reset_pool()
    with patch.object(db_pool, "ConnectionPool") as pool_cls:
        pool_cls.return_value = MagicMock(name="ConnectionPool()")
        yield pool_cls
    db_pool.reset_pool()


def test_init_builds_pool_with_sizes(fake_pool_cls):
    created = db_pool.init_pool(URL, min_size=2, max_size=10)

    assert created is fake_pool_cls.return_value
    kwargs = fake_pool_cls.call_args.kwargs
    assert (kwargs["conninfo"], kwargs["min_size"], kwargs["max_size"]) == (URL, 2, 10)
    assert db_pool.get_pool() is created


def test_second_init_is_rejected(fake_pool_cls):
    db_pool.init_pool(URL, min_size=1, max_size=2)

    with pytest.raises(PoolAlreadyInitializedError, match="already initialized"):
        db_pool.init_pool(URL, min_size=1, max_size=2)

    assert fake_pool_cls.call_count == 1


def test_get_before_init_fails():
    db_pool.reset_pool()

    with pytest.raises(PoolNotInitializedError, match="not initialized"):
        db_pool.get_pool()


def test_close_is_idempotent(fake_pool_cls):
    db_pool.init_pool(URL, min_size=1, max_size=2)

    db_pool.close_pool()
    db_pool.close_pool()

    fake_pool_cls.return_value.close.assert_called_once()
    assert db_pool.is_pool_initialized() is False


def test_reset_allows_a_fresh_init(fake_pool_cls):
    db_pool.init_pool(URL, min_size=1, max_size=2)
    db_pool.reset_pool()

    db_pool.init_pool(URL, min_size=3, max_size=4)

    assert fake_pool_cls.call_args.kwargs["min_size"] == 3


def test_reset_survives_close_failure(fake_pool_cls):
    fake_pool_cls.return_value.close.side_effect = RuntimeError("already broken")
    db_pool.init_pool(URL, min_size=1, max_size=2)

    db_pool.reset_pool()

    assert db_pool.is_pool_initialized() is False


@pytest.mark.parametrize(
    "timeout_ms, expected_sql",
    [(1500, "SET statement_timeout = 1500"), (0, None)],
)
def test_new_connections_get_statement_timeout(fake_pool_cls, timeout_ms, expected_sql):
    db_pool.init_pool(URL, min_size=1, max_size=2, statement_timeout_ms=timeout_ms)
    configure = fake_pool_cls.call_args.kwargs["configure"]
    conn = MagicMock()

    configure(conn)

    if expected_sql is None:
        conn.execute.assert_not_called()
    else:
        conn.execute.assert_called_once_with(expected_sql)
        conn.commit.assert_called_once()
