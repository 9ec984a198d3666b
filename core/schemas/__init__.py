"""
Core Schemas Package.

Provides the Pydantic models returned by the HTTP API.
"""

from core.schemas.people import (
    AvatarOut,
    DepartmentOut,
    PersonResult,
    PeopleSearchResponse,
)

__all__ = [
    "AvatarOut",
    "DepartmentOut",
    "PersonResult",
    "PeopleSearchResponse",
]
