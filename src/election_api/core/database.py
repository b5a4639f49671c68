"""Async database engine and session management.

Provides async engine creation and session factory helpers using
SQLAlchemy 2.x with asyncpg (PostgreSQL) or aiosqlite (SQLite).  Engines
are owned by whoever creates them; the application stores its engine and
session factory on ``app.state`` rather than in module globals.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from election_api.core.exceptions import StorageError


def build_engine(database_url: str, *, schema: str | None = None, **kwargs: object) -> AsyncEngine:
    """Create an async engine for the given connection string.

    Args:
        database_url: Async SQLAlchemy connection string.
        schema: Optional PostgreSQL schema for isolated environments.
        **kwargs: Additional arguments passed to create_async_engine.

    Returns:
        The created async engine.
    """
    if schema is not None:
        connect_args = kwargs.pop("connect_args", {})
        if not isinstance(connect_args, dict):
            msg = "connect_args must be a dict"
            raise TypeError(msg)
        connect_args["options"] = f"-c search_path={schema},public"
        kwargs["connect_args"] = connect_args
    # An in-memory SQLite database only lives as long as its single connection
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        kwargs.setdefault("poolclass", StaticPool)
    # Only set pool defaults for connection-pooled engines (not SQLite/StaticPool)
    uses_static_pool = kwargs.get("poolclass") is StaticPool or "sqlite" in database_url
    if not uses_static_pool:
        kwargs.setdefault("pool_size", 10)
        kwargs.setdefault("max_overflow", 5)
        kwargs.setdefault("pool_pre_ping", True)
    engine = create_async_engine(database_url, **kwargs)
    if database_url.startswith("sqlite"):
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    """SQLite ignores foreign keys unless enabled per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Return a session factory bound to ``engine``."""
    return async_sessionmaker(engine, expire_on_commit=False)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise driver and ORM failures inside the block as StorageError.

    Args:
        operation: Short description of the query, used in the log line
            and the error message.

    Raises:
        StorageError: If the block raises any SQLAlchemyError.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Storage failure while {operation}: {e}")
        msg = f"Storage failure while {operation}"
        raise StorageError(msg) from e
