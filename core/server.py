"""
FastAPI Application Factory.

Creates and configures the FastAPI application for the directory query service.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.app_context import ConfigLoader
from core.database import close_db_connections

_logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Release database connections on shutdown."""
    _logger.info("Starting directory query service...")
    yield
    _logger.info("Shutting down directory query service...")
    await close_db_connections()


def create_app(
    config: ConfigLoader | None = None,
    title: str = "Organization Directory API",
    description: str = "Search people and their departments",
    version: str = "1.0.0",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Loaded configuration. Loaded from the environment if omitted.
        title: API title for OpenAPI documentation.
        description: API description for OpenAPI documentation.
        version: API version string.

    Returns:
        Configured FastAPI application instance.
    """
    from api.people import router as people_router

    if config is None:
        config = ConfigLoader()
        config.load()

    app = FastAPI(title=title, description=description, version=version, lifespan=lifespan)

    # CORS: BASE_URL, plus localhost origins in debug mode
    allowed_origins: list[str] = []
    base_url = config.get("server.base_url", "")
    if base_url:
        allowed_origins.append(base_url)
    if config.get("app.debug", False):
        allowed_origins.extend([
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ])

    if allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_credentials=False,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    app.include_router(people_router, prefix="/api")

    @app.get("/health", tags=["System"])
    async def health() -> dict:
        return {"status": "ok"}

    return app
