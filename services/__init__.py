"""
Directory services.

- directory_loader: loads the Content API snapshot into the database
- people_search: name search over the loaded directory
"""

from services.directory_loader import (
    DepartmentHierarchyError,
    DirectoryLoader,
    LoaderDatabaseError,
    LoaderError,
    LoaderIntegrityError,
    LoadResult,
    run_loader,
)
from services.people_search import search_people

__all__ = [
    "DirectoryLoader",
    "LoadResult",
    "run_loader",
    "LoaderError",
    "LoaderIntegrityError",
    "DepartmentHierarchyError",
    "LoaderDatabaseError",
    "search_people",
]
