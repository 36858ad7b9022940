from __future__ import annotations

from dataclasses import dataclass


class MollieError(Exception):
    """Base error type for the Mollie SDK."""


class ConfigError(MollieError):
    """Raised when configuration cannot be loaded or validated."""


class BaseURLError(ConfigError):
    """Raised when the configured base URL cannot be used to build requests.

    The check runs while the request is being built, so no network call is
    made when this error is raised.
    """

    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = base_url
        super().__init__(f"malformed base url {base_url!r}, it must be absolute and end with a trailing slash")


class AuthError(MollieError):
    """Raised when no usable API token is available."""


class RequestError(MollieError):
    """Raised when an HTTP request cannot be completed."""


class DecodeError(RequestError):
    """Raised when a response body cannot be decoded into the expected shape."""


@dataclass(slots=True)
class APIError(RequestError):
    """Represents a non-success Mollie API response."""

    status_code: int
    title: str
    detail: str | None = None
    field: str | None = None
    documentation_url: str | None = None
    body: str | None = None

    def __str__(self) -> str:
        message = f"HTTP {self.status_code}: {self.title}"
        if self.detail:
            message = f"{message} ({self.detail})"
        if self.field:
            message = f"{message} [field: {self.field}]"
        return message
