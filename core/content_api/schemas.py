"""
Content API payload schemas.

Pydantic models for the ``allDepartments`` / ``allPeople`` query result.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DepartmentRef(BaseModel):
    """Reference to a parent department."""

    id: str
    name: str | None = None


class DepartmentNode(BaseModel):
    """A department as returned by ``allDepartments``."""

    id: str
    name: str
    parent: DepartmentRef | None = None


class Avatar(BaseModel):
    url: str | None = None


class DepartmentName(BaseModel):
    """The only department field the people query exposes."""

    name: str | None = None


class PersonNode(BaseModel):
    """A person as returned by ``allPeople``."""

    id: str
    name: str
    title: str | None = None
    avatar: Avatar | None = None
    department: DepartmentName | None = None


class DirectorySnapshot(BaseModel):
    """One page of departments and people fetched in a single query."""

    model_config = ConfigDict(populate_by_name=True)

    all_departments: list[DepartmentNode] = Field(
        default_factory=list, alias="allDepartments"
    )
    all_people: list[PersonNode] = Field(default_factory=list, alias="allPeople")

    @field_validator("all_departments", "all_people", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        # GraphQL answers null for a collection the token cannot read
        return [] if value is None else value
