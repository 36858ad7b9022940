from __future__ import annotations

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeSettings(BaseSettings):
    """Environment-driven runtime overrides for client/profile resolution.

    The config file location (``MOLLIE_CONFIG``) is read by the config loader.
    """

    model_config = SettingsConfigDict(
        env_prefix="MOLLIE_",
        extra="ignore",
        populate_by_name=True,
        case_sensitive=False,
    )

    profile: str | None = Field(default=None, validation_alias=AliasChoices("MOLLIE_PROFILE"))

    api_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("MOLLIE_API_TOKEN", "MOLLIE_ORG_TOKEN", "MOLLIE_API_KEY"),
    )
    base_url: str | None = Field(default=None, validation_alias=AliasChoices("MOLLIE_BASE_URL"))
    testmode: bool | None = Field(default=None, validation_alias=AliasChoices("MOLLIE_TESTMODE"))

    request_timeout_seconds: float | None = Field(
        default=None,
        validation_alias=AliasChoices("MOLLIE_REQUEST_TIMEOUT_SECONDS", "MOLLIE_TIMEOUT"),
    )
    verify_ssl: bool | None = Field(default=None, validation_alias=AliasChoices("MOLLIE_VERIFY_SSL"))
