"""
HTTP Client Lifecycle Management.

Provides a scope-bound httpx.AsyncClient for code that talks to external
APIs. The client lifecycle is bound to the context manager: it is created
on entry and closed on exit, success or failure.

Usage:
    async with create_standalone_http_client() as client:
        api = ContentApiClient(http_client=client)
        snapshot = await api.fetch_directory()
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_standalone_http_client(
    timeout: float = 30.0,
    max_connections: int = 10,
    max_keepalive_connections: int = 5,
    keepalive_expiry: float = 30.0,
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    Create an HTTP client bound to the caller's scope.

    Args:
        timeout: Request timeout in seconds.
        max_connections: Maximum concurrent connections.
        max_keepalive_connections: Maximum keep-alive connections.
        keepalive_expiry: Keep-alive connection expiry in seconds.

    Yields:
        httpx.AsyncClient instance bound to the caller's event loop.
    """
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max_keepalive_connections,
        keepalive_expiry=keepalive_expiry,
    )

    client = httpx.AsyncClient(
        timeout=timeout,
        limits=limits,
        follow_redirects=True,
    )

    logger.debug(
        f"Standalone HTTP client created (timeout={timeout}s, "
        f"max_connections={max_connections})"
    )

    try:
        yield client
    finally:
        await client.aclose()
        logger.debug("Standalone HTTP client closed")
