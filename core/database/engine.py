"""
Database Engine Management Module.

Provides a singleton AsyncEngine for the application.
Uses configuration from core.app_context.ConfigLoader.

Connections are not pooled (NullPool): every session opens its own
connection and closes it when the session ends.

SQLite Configuration:
    Every new SQLite connection runs:
    - PRAGMA foreign_keys = ON  (SQLite ships with FK enforcement off)
    - PRAGMA journal_mode = WAL (readers do not block the loader)
"""

import logging
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from core.app_context import ConfigLoader

_logger = logging.getLogger(__name__)

# Global engine instance (singleton)
_engine: AsyncEngine | None = None


def _configure_sqlite_connection(dbapi_connection: Any, connection_record: Any) -> None:
    """Enable foreign key enforcement and WAL journaling on a new connection."""
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.execute("PRAGMA journal_mode = WAL")
    finally:
        cursor.close()


def _require_existing_sqlite_file(database_url: str) -> str:
    """
    Rewrite a SQLite file URL to open the file in ``mode=rw`` URI mode.

    SQLite creates a missing database file on connect unless it is opened
    through a URI without the create flag. Other URLs, in-memory databases
    and URLs that already use URI mode are returned unchanged.
    """
    url = make_url(database_url)
    database = url.database
    if (
        url.get_backend_name() != "sqlite"
        or not database
        or database == ":memory:"
        or url.query.get("uri")
    ):
        return database_url

    url = url.set(
        database=f"file:{database}",
        query={**url.query, "mode": "rw", "uri": "true"},
    )
    return url.render_as_string(hide_password=False)


def build_engine(database_url: str, echo: bool = False, must_exist: bool = False) -> AsyncEngine:
    """
    Create an async engine for ``database_url``.

    Args:
        database_url: SQLAlchemy URL, e.g. ``sqlite+aiosqlite:///directory.sqlite``.
        echo: Enable SQLAlchemy echo mode for debugging.
        must_exist: Fail to connect instead of creating a missing SQLite file.

    Returns:
        AsyncEngine: A new engine. The caller owns it and must dispose it.
    """
    if must_exist:
        database_url = _require_existing_sqlite_file(database_url)

    engine = create_async_engine(
        database_url,
        echo=echo,
        poolclass=NullPool,
    )

    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _configure_sqlite_connection)

    _logger.debug(f"Database engine created for {engine.url!r}")
    return engine


def get_engine() -> AsyncEngine:
    """
    Get or create the async database engine (singleton).

    Returns:
        AsyncEngine: SQLAlchemy async engine instance.
    """
    global _engine

    if _engine is None:
        config_loader = ConfigLoader()
        config_loader.load()
        database_url = config_loader.get("database.url")

        # The query side only reads; it must not create an empty database.
        _engine = build_engine(str(database_url), must_exist=True)

    return _engine


async def close_engine() -> None:
    """
    Close the database engine and release all connections.

    Should be called during application shutdown.
    """
    global _engine

    if _engine is not None:
        await _engine.dispose()
        _engine = None
