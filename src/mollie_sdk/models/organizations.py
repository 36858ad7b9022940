from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import AliasChoices, Field

from mollie_sdk.models.common import Address, Link, MollieModel


class OrganizationLinks(MollieModel):
    self_: Link | None = Field(default=None, alias="self")
    chargebacks: Link | None = None
    customers: Link | None = None
    dashboard: Link | None = None
    invoices: Link | None = None
    payments: Link | None = None
    profiles: Link | None = None
    refunds: Link | None = None
    settlements: Link | None = None
    documentation: Link | None = None


class Organization(MollieModel):
    resource: str | None = None
    id: str | None = None
    name: str | None = None
    email: str | None = None
    locale: str | None = None
    address: Address | None = None
    registrationNumber: str | None = None
    vatNumber: str | None = None
    vatRegulation: str | None = None
    links: OrganizationLinks | None = Field(default=None, alias="_links")


class PartnerType(StrEnum):
    OAUTH = "oauth"
    SIGNUP_LINK = "signuplink"
    USER_AGENT = "useragent"


class UserAgentToken(MollieModel):
    """Time limited access token issued to user-agent partners."""

    token: str
    startsAt: datetime | None = None
    endsAt: datetime | None = None


class OrganizationPartnerLinks(MollieModel):
    self_: Link | None = Field(default=None, alias="self")
    documentation: Link | None = None
    signuplink: Link | None = None


class OrganizationPartnerStatus(MollieModel):
    resource: str | None = None
    isCommissionPartner: bool | None = None
    partnerContractUpdateAvailable: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("partnerContractUpdateAvailable", "partnerContractUpdate_available"),
        serialization_alias="partnerContractUpdateAvailable",
    )
    partnerType: PartnerType | None = None
    userAgentTokens: list[UserAgentToken] | None = None
    partnerContractSignedAt: datetime | None = None
    links: OrganizationPartnerLinks | None = Field(default=None, alias="_links")
