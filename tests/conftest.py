"""
Pytest Configuration and Shared Fixtures.

Provides common test fixtures for the directory loader and query service.
"""

import pytest
import pytest_asyncio
from unittest.mock import MagicMock
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture
def mock_env_vars(monkeypatch, tmp_path):
    """Set up mock environment variables for testing."""
    env_vars = {
        "SERVER_HOST": "127.0.0.1",
        "SERVER_PORT": "8000",
        "BASE_URL": "https://test.example.com",
        "APP_DEBUG": "true",
        "APP_LOG_LEVEL": "DEBUG",
        "DATABASE_URL": f"sqlite+aiosqlite:///{tmp_path / 'env.sqlite'}",
        "DATO_API_TOKEN": "test-dato-token",
        "CONTENT_API_URL": "https://cms.test/graphql",
        "CONTENT_API_TIMEOUT_SECONDS": "5",
    }

    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)

    from core.content_api.config import get_content_api_settings
    get_content_api_settings.cache_clear()
    yield env_vars
    get_content_api_settings.cache_clear()


@pytest.fixture
def config_loader(mock_env_vars):
    """Create a ConfigLoader instance with mock environment."""
    from core.app_context import ConfigLoader

    loader = ConfigLoader()
    loader.load()
    return loader


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest.fixture
def mock_httpx_response_factory() -> Callable[..., MagicMock]:
    """
    Factory fixture for creating mock httpx responses.

    Returns a callable that creates mock responses with customizable properties.
    """
    def _create_response(
        status_code: int = 200,
        json_data: dict | list | None = None,
        text: str | None = None,
        json_error: Exception | None = None,
    ) -> MagicMock:
        mock_response = MagicMock()
        mock_response.status_code = status_code
        if json_error is not None:
            mock_response.json.side_effect = json_error
        else:
            mock_response.json.return_value = json_data if json_data is not None else {}
        mock_response.text = text or str(json_data)
        return mock_response

    return _create_response


# =============================================================================
# Content API Fixtures
# =============================================================================


@pytest.fixture
def directory_payload() -> dict:
    """
    GraphQL ``data`` object for a small directory.

    Child departments are listed before their parent on purpose.
    """
    return {
        "allDepartments": [
            {"id": "eng-web", "name": "Web", "parent": {"id": "eng", "name": "Engineering"}},
            {"id": "eng", "name": "Engineering", "parent": None},
            {"id": "eng-api", "name": "API", "parent": {"id": "eng", "name": "Engineering"}},
            {"id": "ops", "name": "Operations", "parent": None},
        ],
        "allPeople": [
            {
                "id": "p1",
                "name": "Anna Smith",
                "title": "Engineering Manager",
                "avatar": {"url": "https://img.test/anna.png"},
                "department": {"name": "Engineering"},
            },
            {
                "id": "p2",
                "name": "Juan Perez",
                "title": "Frontend Engineer",
                "avatar": None,
                "department": {"name": "Web"},
            },
            {
                "id": "p3",
                "name": "Bob Lee",
                "title": "SRE",
                "avatar": {"url": None},
                "department": {"name": "Operations"},
            },
            {
                "id": "p4",
                "name": "Sam_Reed",
                "title": "API Engineer",
                "avatar": {"url": "https://img.test/sam.png"},
                "department": {"name": "API"},
            },
        ],
    }


@pytest.fixture
def directory_snapshot(directory_payload):
    """DirectorySnapshot parsed from ``directory_payload``."""
    from core.content_api import DirectorySnapshot

    return DirectorySnapshot.model_validate(directory_payload)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """Async engine bound to an empty SQLite file."""
    from core.database import build_engine

    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'directory.sqlite'}")
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def loaded_engine(db_engine, directory_snapshot):
    """Test engine with ``directory_snapshot`` loaded."""
    from services.directory_loader import DirectoryLoader

    loader = DirectoryLoader(db_engine)
    await loader.ensure_tables()
    await loader.load_departments(directory_snapshot.all_departments)
    await loader.load_people(directory_snapshot.all_people)
    return db_engine
