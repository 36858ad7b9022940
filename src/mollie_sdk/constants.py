from __future__ import annotations

DEFAULT_BASE_URL = "https://api.mollie.com/"
DEFAULT_CONFIG_DIR = "~/.config/mollie"
DEFAULT_REQUEST_TIMEOUT = 30.0

SDK_VERSION = "0.1.0"
USER_AGENT = f"mollie-partner-sdk-python/{SDK_VERSION}"

ORGANIZATIONS_PATH = "v2/organizations"
ONBOARDING_PATH = "v2/onboarding/me"

API_TOKEN_PREFIXES = {
    "live_": "live",
    "test_": "test",
    "access_": "organization",
}
