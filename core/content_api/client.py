"""
Content API HTTP client.

Low-level GraphQL client for the headless-CMS Content Delivery API.

Design Principles:
    ContentApiClient requires httpx.AsyncClient via EXPLICIT dependency injection.
    The HTTP client lifecycle is managed by the caller.

    Usage:
        from core.http_client import create_standalone_http_client

        async with create_standalone_http_client() as http_client:
            client = ContentApiClient(http_client=http_client)
            snapshot = await client.fetch_directory()
"""

import logging
import time
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from core.content_api.config import ContentApiSettings, get_content_api_settings
from core.content_api.exceptions import (
    ContentApiConfigurationError,
    ContentApiConnectionError,
    ContentApiQueryError,
    ContentApiResponseError,
)
from core.content_api.schemas import DirectorySnapshot

logger = logging.getLogger(__name__)


# Upstream page size; only the first page is fetched.
PAGE_SIZE = 100

DIRECTORY_QUERY = f"""query {{
  allDepartments(first: {PAGE_SIZE}) {{
    name
    id
    parent {{
      name
      id
    }}
  }}

  allPeople(first: {PAGE_SIZE}) {{
    id
    name
    title
    avatar {{
      url
    }}
    department {{
      name
    }}
  }}
}}"""


class ContentApiClient:
    """
    GraphQL client for the Content API.

    Args:
        http_client: Shared httpx.AsyncClient (required).
        settings: Content API settings. Loaded from the environment if omitted.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Optional[ContentApiSettings] = None,
    ) -> None:
        if http_client is None:
            raise ValueError(
                "http_client is required. Use create_standalone_http_client() "
                "to obtain one."
            )

        self._client = http_client
        self._settings = settings or get_content_api_settings()

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for Content API requests."""
        return {
            "Authorization": f"Bearer {self._settings.api_token.get_secret_value()}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def is_configured(self) -> bool:
        """Check if the client has a token and endpoint."""
        return self._settings.is_configured()

    async def execute(self, query: str) -> Dict[str, Any]:
        """
        Execute a GraphQL query and return its ``data`` object.

        Args:
            query: GraphQL document.

        Returns:
            The ``data`` member of the GraphQL response.

        Raises:
            ContentApiConfigurationError: If no API token is configured.
            ContentApiConnectionError: On transport errors or non-2xx responses.
            ContentApiQueryError: If the response carries GraphQL errors.
            ContentApiResponseError: If the body is not a GraphQL response.
        """
        if not self.is_configured():
            raise ContentApiConfigurationError(
                "Content API is not configured. Set DATO_API_TOKEN."
            )

        payload: Dict[str, Any] = {"query": query}

        start_time = time.time()
        try:
            response = await self._client.post(
                self._settings.endpoint,
                json=payload,
                headers=self._get_headers(),
                timeout=self._settings.timeout_seconds,
            )
        except httpx.HTTPError as e:
            logger.error(f"Content API request to {self._settings.endpoint} failed: {e}")
            raise ContentApiConnectionError(f"Content API request failed: {e}") from e

        elapsed = time.time() - start_time
        logger.debug(f"Content API responded {response.status_code} in {elapsed:.2f} seconds")

        if response.status_code >= 400:
            # Avoid dumping huge bodies; include a small snippet.
            body = response.text[:500]
            raise ContentApiConnectionError(
                f"Content API returned HTTP {response.status_code}: {body}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ContentApiResponseError("Content API returned a non-JSON body") from e

        if not isinstance(body, dict):
            raise ContentApiResponseError("Content API returned an unexpected body")

        errors = body.get("errors")
        if errors:
            messages = [
                str(error.get("message", error)) if isinstance(error, dict) else str(error)
                for error in errors
            ]
            raise ContentApiQueryError(messages)

        data = body.get("data")
        if not isinstance(data, dict):
            raise ContentApiResponseError("Content API response has no data")

        return data

    async def fetch_directory(self) -> DirectorySnapshot:
        """
        Fetch the first page of departments and people in one query.

        Returns:
            DirectorySnapshot with ``all_departments`` and ``all_people``.
        """
        logger.info(f"Fetching directory from {self._settings.endpoint}")
        data = await self.execute(DIRECTORY_QUERY)

        try:
            snapshot = DirectorySnapshot.model_validate(data)
        except ValidationError as e:
            raise ContentApiResponseError(f"Malformed directory payload: {e}") from e

        logger.info(
            f"Fetched {len(snapshot.all_departments)} departments "
            f"and {len(snapshot.all_people)} people"
        )
        return snapshot
