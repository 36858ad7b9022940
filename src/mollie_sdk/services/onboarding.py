from __future__ import annotations

from mollie_sdk.constants import ONBOARDING_PATH
from mollie_sdk.models.onboarding import Onboarding, OnboardingData
from mollie_sdk.services.base import ServiceBase


class OnboardingService(ServiceBase):
    """Onboarding API operations for the current organization."""

    async def get_status(self, *, timeout: float | None = None) -> Onboarding:
        data = await self._client._request_json("GET", ONBOARDING_PATH, timeout=timeout)
        return self._decode(Onboarding, data)

    async def submit(self, data: OnboardingData, *, timeout: float | None = None) -> None:
        """Submit onboarding data; the API acknowledges without a response body."""

        await self._client._send("POST", ONBOARDING_PATH, json_data=data.to_api(), timeout=timeout)
