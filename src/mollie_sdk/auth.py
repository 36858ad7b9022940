from __future__ import annotations

from enum import StrEnum

from mollie_sdk.constants import API_TOKEN_PREFIXES
from mollie_sdk.errors import AuthError


class TokenKind(StrEnum):
    LIVE = "live"
    TEST = "test"
    ORGANIZATION = "organization"
    UNKNOWN = "unknown"


def token_kind(token: str) -> TokenKind:
    """Classify a Mollie token by its prefix.

    Example:
        >>> token_kind("test_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM")
        <TokenKind.TEST: 'test'>
    """

    for prefix, kind in API_TOKEN_PREFIXES.items():
        if token.startswith(prefix):
            return TokenKind(kind)
    return TokenKind.UNKNOWN


def is_organization_token(token: str) -> bool:
    return token_kind(token) is TokenKind.ORGANIZATION


def authorization_header(token: str | None) -> dict[str, str]:
    """Return the bearer header for a token, failing before any I/O when absent."""

    if not token:
        raise AuthError("an API token is required; set MOLLIE_API_TOKEN or configure a profile")
    return {"Authorization": f"Bearer {token}"}
