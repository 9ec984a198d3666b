"""
Core Models Package.

Exports the directory database models.
"""

from core.models.department import Department
from core.models.person import Person

__all__ = ["Department", "Person"]
