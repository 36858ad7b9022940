from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import Field

from mollie_sdk.models.common import Address, Link, MollieModel


class OnboardingStatus(StrEnum):
    NEEDS_DATA = "needs-data"
    IN_REVIEW = "in-review"
    COMPLETED = "completed"


class OnboardingLinks(MollieModel):
    self_: Link | None = Field(default=None, alias="self")
    dashboard: Link | None = None
    organization: Link | None = None
    documentation: Link | None = None


class Onboarding(MollieModel):
    """Onboarding state of the current organization."""

    resource: str | None = None
    name: str | None = None
    signedUpAt: datetime | None = None
    status: OnboardingStatus | None = None
    canReceivePayments: bool | None = None
    canReceiveSettlements: bool | None = None
    links: OnboardingLinks | None = Field(default=None, alias="_links")


class OnboardingOrganization(MollieModel):
    name: str | None = None
    address: Address | None = None
    registrationNumber: str | None = None
    vatNumber: str | None = None
    vatRegulation: str | None = None


class OnboardingProfile(MollieModel):
    name: str | None = None
    url: str | None = None
    email: str | None = None
    description: str | None = None
    phone: str | None = None
    businessCategory: str | None = None


class OnboardingData(MollieModel):
    """Payload for submitting onboarding data.

    Example:
        >>> data = OnboardingData()
        >>> data.organization.name = "Testing Org. B.V."
    """

    organization: OnboardingOrganization = Field(default_factory=OnboardingOrganization)
    profile: OnboardingProfile = Field(default_factory=OnboardingProfile)
