from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    SerializationInfo,
    field_serializer,
)

from mollie_sdk.constants import DEFAULT_BASE_URL, DEFAULT_REQUEST_TIMEOUT


class ProfileConfig(BaseModel):
    """Resolved profile configuration used for API requests."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("api_token", "apiToken", "api_key", "apiKey", "token"),
    )
    base_url: str = Field(default=DEFAULT_BASE_URL, validation_alias=AliasChoices("base_url", "baseUrl"))
    testmode: bool = Field(default=False, validation_alias=AliasChoices("testmode", "testMode"))
    request_timeout_seconds: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        validation_alias=AliasChoices("request_timeout_seconds", "requestTimeoutSeconds"),
    )
    verify_ssl: bool = Field(default=True, validation_alias=AliasChoices("verify_ssl", "verifySsl"))

    @field_serializer("api_token", when_used="json")
    def _dump_api_token(self, value: SecretStr | None, info: SerializationInfo) -> str | None:
        if value is None:
            return None
        # Only config files get the raw token; every other dump stays masked.
        if info.context and info.context.get("reveal_secrets"):
            return value.get_secret_value()
        return str(value)


class SDKConfig(BaseModel):
    """Root configuration model holding named profiles."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    version: str = "1"
    default_profile: str | None = Field(
        default=None,
        validation_alias=AliasChoices("default_profile", "defaultProfile"),
    )
    profiles: dict[str, ProfileConfig] = Field(default_factory=dict)


class ResolvedConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str
    path: Path | None = None
    data: SDKConfig


ConfigInput = SDKConfig | dict[str, Any]
