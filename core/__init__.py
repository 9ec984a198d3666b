"""Core module - configuration, logging, database and Content API components."""
from core.app_context import ConfigLoader
from core.logging_config import setup_logging
from core import database

__all__ = [
    "ConfigLoader",
    "setup_logging",
    "database",
]
