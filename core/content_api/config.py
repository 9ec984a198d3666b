"""
Content API Configuration.

Manages environment variables for the headless-CMS GraphQL endpoint.
"""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ENDPOINT = "https://graphql.datocms.com/"


class ContentApiSettings(BaseSettings):
    """
    Content API settings loaded from environment variables.

    The API token is read from DATO_API_TOKEN and kept as a SecretStr so
    it never shows up in reprs or logs.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_token: Annotated[
        SecretStr,
        Field(
            default=SecretStr(""),
            description="Read-only API token for the Content Delivery API",
            validation_alias="DATO_API_TOKEN",
        ),
    ] = SecretStr("")

    endpoint: Annotated[
        str,
        Field(
            default=DEFAULT_ENDPOINT,
            description="GraphQL endpoint URL",
            validation_alias="CONTENT_API_URL",
        ),
    ] = DEFAULT_ENDPOINT

    timeout_seconds: Annotated[
        float,
        Field(
            default=30.0,
            description="HTTP timeout for Content API requests",
            validation_alias="CONTENT_API_TIMEOUT_SECONDS",
        ),
    ] = 30.0

    def is_configured(self) -> bool:
        """Check if the token and endpoint are set."""
        return bool(self.api_token.get_secret_value() and self.endpoint)


@lru_cache
def get_content_api_settings() -> ContentApiSettings:
    """
    Get cached Content API settings.

    Returns:
        ContentApiSettings: Settings instance, loaded once per process.
    """
    return ContentApiSettings()
