"""Provider-specific exception types.

All of them extend :class:`~uimarkup.providers.base.ProviderError` so the
repair loop can treat any provider failure as one failed attempt.
"""

from typing import Optional

from .base import ProviderError


class ProviderConfigError(ProviderError):
    """Raised when provider configuration is invalid or missing."""


class ProviderAuthError(ProviderError):
    """Raised when the API key is missing or rejected."""


class ProviderRateLimitError(ProviderError):
    """Raised on HTTP 429, carrying the server's retry hint when present."""

    def __init__(self, message: str, *, retry_after: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ProviderAPIError(ProviderError):
    """Raised when the provider answers with an error or an unusable payload."""

    def __init__(self, message: str, *, retryable: bool = False, **kwargs):
        super().__init__(message, **kwargs)
        self.retryable = retryable


class ProviderTimeoutError(ProviderError):
    """Raised when a request exceeds the configured timeout."""

    def __init__(self, message: str, *, timeout_seconds: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.timeout_seconds = timeout_seconds


def error_from_status(
    status_code: int,
    *,
    provider: str,
    model: Optional[str],
    detail: str = "",
    retry_after: Optional[str] = None,
) -> ProviderError:
    """Map an HTTP error status to the matching provider exception."""
    suffix = f": {detail}" if detail else ""
    if status_code in (401, 403):
        return ProviderAuthError(
            f"{provider} API authentication failed{suffix}",
            provider=provider,
            model=model,
            status_code=status_code,
        )
    if status_code == 429:
        try:
            seconds = int(retry_after) if retry_after else None
        except ValueError:
            seconds = None
        return ProviderRateLimitError(
            f"{provider} API rate limit exceeded{suffix}",
            retry_after=seconds or 60,
            provider=provider,
            model=model,
            status_code=status_code,
        )
    return ProviderAPIError(
        f"{provider} API error (status {status_code}){suffix}",
        retryable=status_code >= 500,
        provider=provider,
        model=model,
        status_code=status_code,
    )


__all__ = [
    "ProviderConfigError",
    "ProviderAuthError",
    "ProviderRateLimitError",
    "ProviderAPIError",
    "ProviderTimeoutError",
    "error_from_status",
]
