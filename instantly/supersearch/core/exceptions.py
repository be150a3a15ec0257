"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class EnrichmentError(Exception):
    """Base exception for all library errors.

    ``item_index`` identifies the input item being processed when the error
    was raised from a batch execution.
    """

    def __init__(self, message: str, item_index: int | None = None) -> None:
        super().__init__(message)
        self.item_index = item_index


class ProviderError(EnrichmentError):
    """Error returned by the Instantly API, or a failure to reach it."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class AuthenticationError(ProviderError):
    """API key missing, invalid, or lacking the required scope."""

    pass


class RateLimitError(ProviderError):
    """Provider rate limit exceeded."""

    def __init__(
        self,
        message: str,
        retry_after: float = 60,
        response: Any = None,
        status_code: int = 429,
    ) -> None:
        super().__init__(message, status_code=status_code, response=response)
        self.retry_after = retry_after


class ValidationError(EnrichmentError):
    """Client-side parameter validation failure."""

    pass
