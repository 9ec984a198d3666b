"""
People Search Service.

Looks up people by a name substring and joins each match to its department.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.models import Department, Person
from core.schemas import AvatarOut, DepartmentOut, PersonResult

logger = logging.getLogger(__name__)


async def search_people(session: AsyncSession, search: str = "") -> list[PersonResult]:
    """
    Find people whose name contains ``search``.

    The term is sent as a bound parameter and LIKE wildcards in it are
    escaped, so ``%`` and ``_`` match literally. Matching follows SQLite
    LIKE, which is case-insensitive for ASCII letters. People without a
    matching department row are excluded (inner join). Result order is
    not defined.

    Args:
        session: Database session.
        search: Name substring. Empty returns everyone.

    Returns:
        List of PersonResult.
    """
    stmt = select(
        Person.id.label("person_id"),
        Person.name.label("person_name"),
        Person.avatar_url.label("avatar_url"),
        Department.id.label("department_id"),
        Department.name.label("department_name"),
    ).join(Department, Person.department_id == Department.id)

    if search:
        stmt = stmt.where(Person.name.contains(search, autoescape=True))

    result = await session.execute(stmt)
    people = [
        PersonResult(
            id=row.person_id,
            name=row.person_name,
            avatar=AvatarOut(url=row.avatar_url),
            department=DepartmentOut(id=row.department_id, name=row.department_name),
        )
        for row in result
    ]

    logger.debug(f"People search {search!r} matched {len(people)} record(s)")
    return people
