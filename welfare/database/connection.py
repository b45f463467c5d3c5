from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg_pool import ConnectionPool

from welfare.config.settings import Settings
from welfare.database.exceptions import PoolNotInitializedError

_pool: ConnectionPool | None = None


def build_conninfo(settings: Settings) -> str:
    return (
        f"host={settings.db_host} "
        f"port={settings.db_port} "
        f"dbname={settings.db_database} "
        f"user={settings.db_username} "
        f"password={settings.db_password}"
    )


def init_pool(settings: Settings) -> None:
    """Initialize the global connection pool from settings.

    Opening waits for the first connection so an unreachable database fails here
    instead of on the first query.
    """
    global _pool  # noqa: PLW0603
    pool = ConnectionPool(build_conninfo(settings), min_size=1, max_size=10, open=False)
    pool.open(wait=True, timeout=10)
    _pool = pool


def close_pool() -> None:
    """Close the global connection pool."""
    global _pool  # noqa: PLW0603
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Yield a connection from the pool. Caller manages commit/rollback."""
    if _pool is None:
        raise PoolNotInitializedError("Connection pool not initialized. Call init_pool() first.")
    with _pool.connection() as conn:
        yield conn
