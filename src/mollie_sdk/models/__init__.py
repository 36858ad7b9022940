from mollie_sdk.models.common import Address, Link, MollieModel
from mollie_sdk.models.onboarding import (
    Onboarding,
    OnboardingData,
    OnboardingLinks,
    OnboardingOrganization,
    OnboardingProfile,
    OnboardingStatus,
)
from mollie_sdk.models.organizations import (
    Organization,
    OrganizationLinks,
    OrganizationPartnerLinks,
    OrganizationPartnerStatus,
    PartnerType,
    UserAgentToken,
)

__all__ = [
    "Address",
    "Link",
    "MollieModel",
    "Onboarding",
    "OnboardingData",
    "OnboardingLinks",
    "OnboardingOrganization",
    "OnboardingProfile",
    "OnboardingStatus",
    "Organization",
    "OrganizationLinks",
    "OrganizationPartnerLinks",
    "OrganizationPartnerStatus",
    "PartnerType",
    "UserAgentToken",
]
