"""
Person Model.

SQLAlchemy model for people loaded from the Content API.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from core.database.base import Base


class Person(Base):
    """
    People table loaded from the Content API.

    People are inserted after all departments have been committed, so the
    department foreign key is checked immediately.

    Attributes:
        id: Content API record identifier (Primary Key).
        name: Display name.
        avatar_url: Avatar image URL, if the person has one.
        department_id: Identifier of the person's department.
    """

    __tablename__ = "PEOPLE"

    id: Mapped[str] = mapped_column("ID", String(10), primary_key=True)
    name: Mapped[str] = mapped_column("NAME", String(255), nullable=False)
    avatar_url: Mapped[str | None] = mapped_column(
        "AVATAR_URL", String(255), nullable=True, default=None
    )
    department_id: Mapped[str] = mapped_column(
        "DEPARTMENT_ID",
        String(10),
        ForeignKey("DEPARTMENTS.ID", link_to_name=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Person(id={self.id}, name={self.name}, department={self.department_id})>"
