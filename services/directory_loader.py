"""
Directory Loader Service.

Loads departments and people from the Content API into the local
directory database.

The load runs as two independent all-or-nothing transactions:
    1. Departments. The parent self-reference is DEFERRABLE INITIALLY
       DEFERRED, so rows may arrive in any order; the whole batch is also
       checked for dangling parents before anything is written.
    2. People. Each person's department is resolved by looking up the
       department whose name matches the name the feed reports.

A failure in step 2 does not undo step 1.

Rows are appended. Loading into a populated database fails with a primary
key violation unless ``reset=True`` is passed, which drops and recreates
both tables first.
"""

import logging
import time
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import bindparam, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from core.app_context import ConfigLoader
from core.content_api import ContentApiClient, DepartmentNode, PersonNode
from core.database import Base, build_engine
from core.http_client import create_standalone_http_client
from core.models import Department, Person

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================


class LoaderError(Exception):
    """Base exception for directory load failures."""
    pass


class LoaderIntegrityError(LoaderError):
    """Raised when a batch violates a primary key, NOT NULL or foreign key constraint."""
    pass


class DepartmentHierarchyError(LoaderIntegrityError):
    """Raised when departments reference parents that exist nowhere."""

    def __init__(self, dangling_parent_ids: List[str]) -> None:
        self.dangling_parent_ids = dangling_parent_ids
        super().__init__(
            f"Unknown parent department id(s): {', '.join(dangling_parent_ids)}"
        )


class LoaderDatabaseError(LoaderError):
    """Raised for database failures other than constraint violations."""
    pass


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class LoadResult:
    """Result of a directory load."""

    departments_loaded: int = 0
    people_loaded: int = 0
    duration_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "departments_loaded": self.departments_loaded,
            "people_loaded": self.people_loaded,
            "duration_ms": self.duration_ms,
        }


# =============================================================================
# Row Staging
# =============================================================================


def build_department_rows(departments: Iterable[DepartmentNode]) -> List[Dict[str, Any]]:
    """Map department nodes to insert parameters. A missing parent becomes NULL."""
    return [
        {
            "dept_id": department.id,
            "dept_name": department.name,
            "dept_parent_id": (department.parent.id if department.parent else None) or None,
        }
        for department in departments
    ]


def build_person_rows(people: Iterable[PersonNode]) -> List[Dict[str, Any]]:
    """Map person nodes to insert parameters. ``title`` is not stored."""
    return [
        {
            "person_id": person.id,
            "person_name": person.name,
            "person_avatar_url": (person.avatar.url if person.avatar else None) or None,
            "department_name": person.department.name if person.department else None,
        }
        for person in people
    ]


def validate_department_hierarchy(
    rows: List[Dict[str, Any]],
    existing_ids: Iterable[str] = (),
) -> None:
    """
    Check that every parent in the batch resolves.

    A parent resolves if it is another row of the same batch or a department
    already stored. Order inside the batch does not matter.

    Raises:
        DepartmentHierarchyError: Listing every parent id that does not resolve.
    """
    known_ids = set(existing_ids) | {row["dept_id"] for row in rows}
    dangling = sorted(
        {
            row["dept_parent_id"]
            for row in rows
            if row["dept_parent_id"] is not None and row["dept_parent_id"] not in known_ids
        }
    )
    if dangling:
        raise DepartmentHierarchyError(dangling)


def find_duplicate_names(names: Iterable[str]) -> List[str]:
    """Return names that occur more than once, sorted."""
    counts = Counter(names)
    return sorted(name for name, count in counts.items() if count > 1)


def warn_duplicate_names(rows: List[Dict[str, Any]], existing_names: Iterable[str] = ()) -> List[str]:
    """
    Log batch department names that are already taken.

    A name counts as a duplicate if it occurs twice in the batch or is
    already used by a stored department.

    Returns:
        The duplicate names, sorted.
    """
    batch_names = [row["dept_name"] for row in rows]
    in_batch = set(batch_names)
    duplicates = [
        name
        for name in find_duplicate_names(list(existing_names) + batch_names)
        if name in in_batch
    ]
    if duplicates:
        # People are resolved by department name; duplicates make that ambiguous.
        logger.warning(
            f"Duplicate department names, people in these departments may be "
            f"assigned to the wrong one: {duplicates}"
        )
    return duplicates


# =============================================================================
# Loader
# =============================================================================


class DirectoryLoader:
    """
    Loads a directory snapshot into the database.

    Args:
        engine: Async engine of the target database. The caller owns it.
        content_client: Content API client. Only needed by ``run()``.

    Example:
        loader = DirectoryLoader(engine, ContentApiClient(http_client))
        result = await loader.run()
    """

    def __init__(
        self,
        engine: AsyncEngine,
        content_client: Optional[ContentApiClient] = None,
    ) -> None:
        self._engine = engine
        self._content_client = content_client

    async def ensure_tables(self, reset: bool = False) -> None:
        """
        Create DEPARTMENTS and PEOPLE if they do not exist.

        Args:
            reset: Drop both tables first. Existing rows are lost.
        """
        tables = [Department.__table__, Person.__table__]

        async with self._engine.begin() as conn:
            if reset:
                logger.warning("Dropping directory tables before load")
                await conn.run_sync(
                    lambda sync_conn: Base.metadata.drop_all(sync_conn, tables=tables)
                )
            await conn.run_sync(
                lambda sync_conn: Base.metadata.create_all(sync_conn, tables=tables)
            )

    async def load_departments(self, departments: Iterable[DepartmentNode]) -> int:
        """
        Insert all departments in one transaction.

        Returns:
            Number of departments inserted.

        Raises:
            DepartmentHierarchyError: A parent id resolves to no department.
            LoaderIntegrityError: The batch violates a table constraint.
            LoaderDatabaseError: Any other database failure.
        """
        rows = build_department_rows(departments)
        if not rows:
            logger.info("No departments to load")
            return 0

        stmt = insert(Department).values(
            {
                Department.id: bindparam("dept_id"),
                Department.name: bindparam("dept_name"),
                Department.parent_id: bindparam("dept_parent_id"),
            }
        )

        try:
            async with self._engine.begin() as conn:
                existing = (await conn.execute(select(Department.id, Department.name))).all()
                validate_department_hierarchy(rows, [dept_id for dept_id, _ in existing])
                warn_duplicate_names(rows, [name for _, name in existing])
                await conn.execute(stmt, rows)
        except IntegrityError as e:
            raise LoaderIntegrityError(f"Department load rolled back: {e.orig}") from e
        except SQLAlchemyError as e:
            raise LoaderDatabaseError(f"Department load failed: {e}") from e

        logger.info(f"Loaded {len(rows)} departments")
        return len(rows)

    async def load_people(self, people: Iterable[PersonNode]) -> int:
        """
        Insert all people in one transaction.

        Each person's DEPARTMENT_ID is the id of the department whose NAME
        equals the department name reported for that person. An unmatched
        name yields NULL and aborts the batch on the NOT NULL constraint.

        Returns:
            Number of people inserted.

        Raises:
            LoaderIntegrityError: The batch violates a table constraint.
            LoaderDatabaseError: Any other database failure.
        """
        rows = build_person_rows(people)
        if not rows:
            logger.info("No people to load")
            return 0

        department_lookup = (
            select(Department.id)
            .where(Department.name == bindparam("department_name"))
            .scalar_subquery()
        )
        stmt = insert(Person).values(
            {
                Person.id: bindparam("person_id"),
                Person.name: bindparam("person_name"),
                Person.avatar_url: bindparam("person_avatar_url"),
                Person.department_id: department_lookup,
            }
        )

        try:
            async with self._engine.begin() as conn:
                await conn.execute(stmt, rows)
        except IntegrityError as e:
            raise LoaderIntegrityError(f"People load rolled back: {e.orig}") from e
        except SQLAlchemyError as e:
            raise LoaderDatabaseError(f"People load failed: {e}") from e

        logger.info(f"Loaded {len(rows)} people")
        return len(rows)

    async def run(self, reset: bool = False) -> LoadResult:
        """
        Fetch the directory and load it.

        Args:
            reset: Drop and recreate the tables before loading.

        Returns:
            LoadResult with row counts and duration.
        """
        if self._content_client is None:
            raise ValueError("content_client is required to run a full load")

        start_time = time.time()
        result = LoadResult()

        snapshot = await self._content_client.fetch_directory()

        try:
            await self.ensure_tables(reset=reset)
        except SQLAlchemyError as e:
            raise LoaderDatabaseError(f"Could not create directory tables: {e}") from e

        result.departments_loaded = await self.load_departments(snapshot.all_departments)
        result.people_loaded = await self.load_people(snapshot.all_people)
        result.duration_ms = round((time.time() - start_time) * 1000, 2)

        return result


async def run_loader(reset: bool = False, database_url: Optional[str] = None) -> LoadResult:
    """
    Run a full load with resources scoped to this call.

    The engine and HTTP client are released before returning, whether the
    load succeeded or not.

    Args:
        reset: Drop and recreate the tables before loading.
        database_url: Target database. Defaults to DATABASE_URL from config.
    """
    if database_url is None:
        config = ConfigLoader()
        config.load()
        database_url = config.get("database.url")

    engine = build_engine(str(database_url))
    try:
        async with create_standalone_http_client() as http_client:
            loader = DirectoryLoader(engine, ContentApiClient(http_client=http_client))
            return await loader.run(reset=reset)
    finally:
        await engine.dispose()
