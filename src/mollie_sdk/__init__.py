from mollie_sdk.client import AsyncMollieClient, MollieClient, connect
from mollie_sdk.config.models import ProfileConfig, SDKConfig
from mollie_sdk.constants import SDK_VERSION
from mollie_sdk.errors import (
    APIError,
    AuthError,
    BaseURLError,
    ConfigError,
    DecodeError,
    MollieError,
    RequestError,
)
from mollie_sdk.models import (
    Onboarding,
    OnboardingData,
    OnboardingStatus,
    Organization,
    OrganizationPartnerStatus,
    PartnerType,
    UserAgentToken,
)

__version__ = SDK_VERSION

__all__ = [
    "__version__",
    "APIError",
    "AsyncMollieClient",
    "AuthError",
    "BaseURLError",
    "ConfigError",
    "DecodeError",
    "MollieClient",
    "MollieError",
    "Onboarding",
    "OnboardingData",
    "OnboardingStatus",
    "Organization",
    "OrganizationPartnerStatus",
    "PartnerType",
    "ProfileConfig",
    "RequestError",
    "SDKConfig",
    "UserAgentToken",
    "connect",
]
