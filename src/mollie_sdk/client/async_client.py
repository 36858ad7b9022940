from __future__ import annotations

from collections.abc import Mapping
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import httpx

from mollie_sdk.config import ConfigInput, ProfileConfig, SDKConfig, load_config
from mollie_sdk.errors import ConfigError
from mollie_sdk.http import MollieTransport
from mollie_sdk.services import OnboardingService, OrganizationsService
from mollie_sdk.settings import RuntimeSettings

JsonObject = dict[str, Any]
RequestParams = Mapping[str, str | int | float | bool]


def _secret_to_str(value: object) -> str | None:
    if value is None:
        return None
    getter = getattr(value, "get_secret_value", None)
    if callable(getter):
        secret = getter()
        return str(secret) if secret else None
    raw = str(value)
    return raw if raw else None


class AsyncMollieClient:
    """Async Mollie SDK client.

    Example:
        >>> import asyncio
        >>> from mollie_sdk import AsyncMollieClient
        >>> async def demo() -> None:
        ...     async with AsyncMollieClient(api_token="test_xxx") as client:
        ...         _ = await client.organizations.get_current()
        >>> asyncio.run(demo())
    """

    def __init__(
        self,
        config: ConfigInput | None = None,
        *,
        config_path: str | Path | None = None,
        profile: str | None = None,
        api_token: str | None = None,
        base_url: str | None = None,
        testmode: bool | None = None,
        request_timeout_seconds: float | None = None,
        verify_ssl: bool | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._runtime = RuntimeSettings()
        resolved = load_config(config, config_path=config_path)
        self.config: SDKConfig = resolved.data

        self._profile_name, resolved_profile = self._resolve_profile(profile=profile)

        self.api_token = (
            api_token or _secret_to_str(self._runtime.api_token) or _secret_to_str(resolved_profile.api_token)
        )
        self.base_url = base_url or self._runtime.base_url or resolved_profile.base_url
        self.testmode = (
            testmode
            if testmode is not None
            else (self._runtime.testmode if self._runtime.testmode is not None else resolved_profile.testmode)
        )
        self.request_timeout_seconds = (
            request_timeout_seconds
            if request_timeout_seconds is not None
            else (
                self._runtime.request_timeout_seconds
                if self._runtime.request_timeout_seconds is not None
                else resolved_profile.request_timeout_seconds
            )
        )
        self.verify_ssl = (
            verify_ssl
            if verify_ssl is not None
            else (self._runtime.verify_ssl if self._runtime.verify_ssl is not None else resolved_profile.verify_ssl)
        )

        self._transport = MollieTransport(
            base_url=self.base_url,
            api_token=self.api_token,
            timeout=self.request_timeout_seconds,
            verify_tls=self.verify_ssl,
            testmode=self.testmode,
            http_client=http_client,
        )

        self._organizations: OrganizationsService | None = None
        self._onboarding: OnboardingService | None = None

    def _resolve_profile(self, *, profile: str | None) -> tuple[str, ProfileConfig]:
        selected = profile or self._runtime.profile or self.config.default_profile or "default"

        profile_config = self.config.profiles.get(selected)
        if profile_config is None:
            if selected != "default" and (profile is not None or self._runtime.profile is not None):
                raise ConfigError(f"profile '{selected}' not found")
            profile_config = ProfileConfig()

        return selected, profile_config

    @property
    def profile_name(self) -> str:
        return self._profile_name

    @property
    def transport(self) -> MollieTransport:
        return self._transport

    @property
    def organizations(self) -> OrganizationsService:
        if self._organizations is None:
            self._organizations = OrganizationsService(self)
        return self._organizations

    @property
    def onboarding(self) -> OnboardingService:
        if self._onboarding is None:
            self._onboarding = OnboardingService(self)
        return self._onboarding

    async def __aenter__(self) -> AsyncMollieClient:
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: RequestParams | None = None,
        json_data: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> JsonObject:
        return await self._transport.request_json(
            method,
            path,
            params=params,
            json_data=json_data,
            timeout=timeout,
        )

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: RequestParams | None = None,
        json_data: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        request = self._transport.build_request(method, path, params=params, json_data=json_data, timeout=timeout)
        return await self._transport.send(request)


@asynccontextmanager
async def connect(*args: Any, **kwargs: Any):
    client = AsyncMollieClient(*args, **kwargs)
    try:
        yield client
    finally:
        await client.aclose()
