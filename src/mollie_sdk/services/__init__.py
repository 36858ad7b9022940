from mollie_sdk.services.onboarding import OnboardingService
from mollie_sdk.services.organizations import OrganizationsService

__all__ = [
    "OnboardingService",
    "OrganizationsService",
]
