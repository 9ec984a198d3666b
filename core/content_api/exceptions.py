"""
Content API exceptions.

Custom exception classes for Content API configuration and request errors.
"""


class ContentApiError(Exception):
    """Base exception for Content API errors."""
    pass


class ContentApiConfigurationError(ContentApiError):
    """Raised when the Content API token or endpoint is missing."""
    pass


class ContentApiConnectionError(ContentApiError):
    """
    Raised when the Content API cannot be reached or answers with a
    non-success HTTP status.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ContentApiQueryError(ContentApiError):
    """
    Raised when the GraphQL response carries an ``errors`` array.

    Examples:
        - Unknown field in the query document
        - Invalid or expired API token
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = messages
        super().__init__("; ".join(messages) or "Unknown GraphQL error")


class ContentApiResponseError(ContentApiError):
    """Raised when the response body does not match the expected shape."""
    pass
