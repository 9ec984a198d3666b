"""
Core Database Package.

Provides centralized database management for the directory.
Loader and query service should use these components instead of creating
their own connections.
"""

from core.database.base import Base
from core.database.engine import build_engine, get_engine, close_engine
from core.database.session import (
    get_session_factory,
    get_db_session,
    close_db_connections,
    DBSession,
)

__all__ = [
    # Base
    "Base",
    # Engine
    "build_engine",
    "get_engine",
    "close_engine",
    # Session
    "get_session_factory",
    "get_db_session",
    "close_db_connections",
    "DBSession",
]
