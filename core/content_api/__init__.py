"""
Content API Package.

GraphQL client, settings and payload schemas for the headless CMS that
owns the organization directory.
"""

from core.content_api.client import DIRECTORY_QUERY, PAGE_SIZE, ContentApiClient
from core.content_api.config import ContentApiSettings, get_content_api_settings
from core.content_api.exceptions import (
    ContentApiConfigurationError,
    ContentApiConnectionError,
    ContentApiError,
    ContentApiQueryError,
    ContentApiResponseError,
)
from core.content_api.schemas import (
    Avatar,
    DepartmentName,
    DepartmentNode,
    DepartmentRef,
    DirectorySnapshot,
    PersonNode,
)

__all__ = [
    # Client
    "ContentApiClient",
    "DIRECTORY_QUERY",
    "PAGE_SIZE",
    # Config
    "ContentApiSettings",
    "get_content_api_settings",
    # Exceptions
    "ContentApiError",
    "ContentApiConfigurationError",
    "ContentApiConnectionError",
    "ContentApiQueryError",
    "ContentApiResponseError",
    # Schemas
    "Avatar",
    "DepartmentName",
    "DepartmentNode",
    "DepartmentRef",
    "DirectorySnapshot",
    "PersonNode",
]
