from __future__ import annotations

from mollie_sdk.constants import ORGANIZATIONS_PATH
from mollie_sdk.models.organizations import Organization, OrganizationPartnerStatus
from mollie_sdk.services.base import ServiceBase


class OrganizationsService(ServiceBase):
    """Organization API operations."""

    async def get(self, organization_id: str, *, timeout: float | None = None) -> Organization:
        """Retrieve an organization by its id."""

        return await self._get(f"{ORGANIZATIONS_PATH}/{organization_id}", timeout=timeout)

    async def get_current(self, *, timeout: float | None = None) -> Organization:
        """Retrieve the organization the current token belongs to."""

        return await self._get(f"{ORGANIZATIONS_PATH}/me", timeout=timeout)

    async def get_partner_status(self, *, timeout: float | None = None) -> OrganizationPartnerStatus:
        """Retrieve partner program details of the current organization.

        See: https://docs.mollie.com/reference/v2/organizations-api/get-partner
        """

        data = await self._client._request_json("GET", f"{ORGANIZATIONS_PATH}/me/partner", timeout=timeout)
        return self._decode(OrganizationPartnerStatus, data)

    async def _get(self, path: str, *, timeout: float | None) -> Organization:
        data = await self._client._request_json("GET", path, timeout=timeout)
        return self._decode(Organization, data)
