"""
People Search Schemas.

Pydantic models for the people search endpoint.
"""

from pydantic import BaseModel, Field


class AvatarOut(BaseModel):
    """Avatar image of a person."""

    url: str | None = Field(default=None, description="Avatar image URL")


class DepartmentOut(BaseModel):
    """Department a person belongs to."""

    id: str = Field(..., description="Department identifier")
    name: str = Field(..., description="Department name")


class PersonResult(BaseModel):
    """A person joined to their department."""

    id: str = Field(..., description="Person identifier")
    name: str = Field(..., description="Person name")
    avatar: AvatarOut = Field(default_factory=AvatarOut)
    department: DepartmentOut


class PeopleSearchResponse(BaseModel):
    """Response for people search."""

    results: list[PersonResult] = Field(default_factory=list)
