"""Blocking facade over :class:`AsyncMollieClient`.

``client.organizations`` and ``client.onboarding`` block until the response is
decoded. The native coroutine services stay reachable as ``aorganizations``
and ``aonboarding`` for callers already inside an event loop.
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

from mollie_sdk.client.async_client import AsyncMollieClient
from mollie_sdk.models import Onboarding, OnboardingData, Organization, OrganizationPartnerStatus
from mollie_sdk.services import OnboardingService, OrganizationsService

T = TypeVar("T")


class _LoopRunner:
    """Drive every blocking call on one event loop so the pooled httpx client stays usable."""

    def __init__(self) -> None:
        self._runner: asyncio.Runner | None = asyncio.Runner()

    def __call__(self, coro: Coroutine[Any, Any, T]) -> T:
        if self._runner is None:
            coro.close()
            raise RuntimeError("sync client is closed")
        if _loop_is_running():
            coro.close()
            raise RuntimeError("blocking Mollie calls cannot run inside an active event loop; use the a* services")
        return self._runner.run(coro)

    def close(self) -> None:
        if self._runner is not None:
            self._runner.close()
            self._runner = None


def _loop_is_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class SyncOrganizationsService:
    def __init__(self, service: OrganizationsService, run: _LoopRunner) -> None:
        self._service = service
        self._run = run

    def get(self, organization_id: str, *, timeout: float | None = None) -> Organization:
        return self._run(self._service.get(organization_id, timeout=timeout))

    def get_current(self, *, timeout: float | None = None) -> Organization:
        return self._run(self._service.get_current(timeout=timeout))

    def get_partner_status(self, *, timeout: float | None = None) -> OrganizationPartnerStatus:
        return self._run(self._service.get_partner_status(timeout=timeout))


class SyncOnboardingService:
    def __init__(self, service: OnboardingService, run: _LoopRunner) -> None:
        self._service = service
        self._run = run

    def get_status(self, *, timeout: float | None = None) -> Onboarding:
        return self._run(self._service.get_status(timeout=timeout))

    def submit(self, data: OnboardingData, *, timeout: float | None = None) -> None:
        self._run(self._service.submit(data, timeout=timeout))


class MollieClient:
    """Blocking Mollie client; accepts the same arguments as :class:`AsyncMollieClient`."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._async = AsyncMollieClient(*args, **kwargs)
        self._run = _LoopRunner()
        self._closed = False

        self.organizations = SyncOrganizationsService(self._async.organizations, self._run)
        self.onboarding = SyncOnboardingService(self._async.onboarding, self._run)

    @property
    def aorganizations(self) -> OrganizationsService:
        return self._async.organizations

    @property
    def aonboarding(self) -> OnboardingService:
        return self._async.onboarding

    @property
    def profile_name(self) -> str:
        return self._async.profile_name

    @property
    def base_url(self) -> str:
        return self._async.base_url

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            await self._async.aclose()
        finally:
            self._run.close()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._run(self._async.aclose())
        finally:
            self._run.close()

    async def __aenter__(self) -> MollieClient:
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()

    def __enter__(self) -> MollieClient:
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()
