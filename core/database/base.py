"""
Database Base Model Module.

Defines the declarative base shared by all directory models.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Declarative base class for all SQLAlchemy models.

    All directory tables register on ``Base.metadata``.
    """
    pass
