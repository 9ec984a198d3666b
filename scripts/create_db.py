"""
Create the directory database from the Content API.

Fetches departments and people and loads them into DATABASE_URL.

Usage:
    python scripts/create_db.py [--reset] [--log-level DEBUG]

Exit status:
    0  load completed
    1  Content API failure (configuration, network, GraphQL error, bad payload)
    2  constraint violation (duplicate ids, unknown parent or department)
    3  other database failure
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.content_api import ContentApiError
from core.logging_config import setup_logging
from services.directory_loader import LoaderDatabaseError, LoaderIntegrityError, run_loader

logger = logging.getLogger("create_db")

EXIT_OK = 0
EXIT_CONTENT_API = 1
EXIT_INTEGRITY = 2
EXIT_DATABASE = 3


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load the organization directory database.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop and recreate DEPARTMENTS and PEOPLE before loading",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: INFO)",
    )
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    try:
        result = await run_loader(reset=args.reset)
    except ContentApiError as e:
        logger.error(f"Content API failure: {e}")
        return EXIT_CONTENT_API
    except LoaderIntegrityError as e:
        logger.error(f"Constraint violation: {e}")
        return EXIT_INTEGRITY
    except LoaderDatabaseError as e:
        logger.error(f"Database failure: {e}")
        return EXIT_DATABASE

    logger.info(
        f"Directory database created: {result.departments_loaded} departments, "
        f"{result.people_loaded} people in {result.duration_ms}ms"
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
