"""
Department Model.

SQLAlchemy model for departments loaded from the Content API.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from core.database.base import Base


class Department(Base):
    """
    Department table loaded from the Content API.

    Departments form a tree through ``parent_id``. The feed does not list
    parents before their children, so the self-reference is declared
    DEFERRABLE INITIALLY DEFERRED: it is checked when the load transaction
    commits, not when each row is inserted.

    Attributes:
        id: Content API record identifier (Primary Key).
        name: Department name. People reference departments by this value.
        parent_id: Identifier of the parent department, or None for a root.
    """

    __tablename__ = "DEPARTMENTS"

    id: Mapped[str] = mapped_column("ID", String(10), primary_key=True)
    name: Mapped[str] = mapped_column("NAME", String(255), nullable=False)
    parent_id: Mapped[str | None] = mapped_column(
        "PARENT",
        String(10),
        ForeignKey(
            "DEPARTMENTS.ID",
            link_to_name=True,
            deferrable=True,
            initially="DEFERRED",
        ),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Department(id={self.id}, name={self.name}, parent={self.parent_id})>"
