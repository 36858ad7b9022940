from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

TOKEN = "token_X12b31ggg23"
BASE_URL = "https://api.mollie.test/"

Handler = Callable[[httpx.Request], httpx.Response]

ORGANIZATION = {
    "resource": "organization",
    "id": "org_12345678",
    "name": "Mollie B.V.",
    "email": "info@mollie.com",
    "locale": "nl_NL",
    "address": {
        "streetAndNumber": "Keizersgracht 126",
        "postalCode": "1015 CW",
        "city": "Amsterdam",
        "country": "NL",
    },
    "registrationNumber": "30204462",
    "vatNumber": "NL815839091B01",
    "vatRegulation": "dutch",
    "_links": {
        "self": {
            "href": "https://api.mollie.com/v2/organizations/org_12345678",
            "type": "application/hal+json",
        },
        "dashboard": {
            "href": "https://mollie.com/dashboard/org_12345678",
            "type": "text/html",
        },
        "documentation": {
            "href": "https://docs.mollie.com/reference/v2/organizations-api/get-organization",
            "type": "text/html",
        },
    },
}

PARTNER_STATUS = {
    "resource": "partner",
    "partnerType": "oauth",
    "isCommissionPartner": True,
    "userAgentTokens": [
        {"token": "unique-token", "startsAt": "2018-03-20T13:13:37+00:00", "endsAt": None},
        {"token": "another-token", "startsAt": "2018-02-20T13:13:37+00:00", "endsAt": "2018-03-20T13:13:37+00:00"},
    ],
    "partnerContractSignedAt": "2018-03-20T13:13:37+00:00",
    "partnerContractUpdateAvailable": True,
    "_links": {
        "self": {
            "href": "https://api.mollie.com/v2/organizations/me/partner",
            "type": "application/hal+json",
        },
        "documentation": {
            "href": "https://docs.mollie.com/reference/v2/organizations-api/get-partner",
            "type": "text/html",
        },
        "signuplink": {
            "href": "https://www.mollie.com/dashboard/signup/myCode?lang=en",
            "type": "text/html",
        },
    },
}

ONBOARDING = {
    "resource": "onboarding",
    "name": "Mollie B.V.",
    "signedUpAt": "2018-12-20T10:49:08+00:00",
    "status": "completed",
    "canReceivePayments": True,
    "canReceiveSettlements": True,
    "_links": {
        "self": {
            "href": "https://api.mollie.com/v2/onboarding/me",
            "type": "application/hal+json",
        },
        "dashboard": {
            "href": "https://www.mollie.com/dashboard/onboarding",
            "type": "text/html",
        },
        "organization": {
            "href": "https://api.mollie.com/v2/organization/org_12345",
            "type": "application/hal+json",
        },
    },
}


def config(url: str = BASE_URL, token: str | None = TOKEN) -> dict[str, Any]:
    profile: dict[str, Any] = {"base_url": url}
    if token is not None:
        profile["api_token"] = token
    return {"default_profile": "default", "profiles": {"default": profile}}


def invalid_json_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=b'{"id": "org_1", invalid}', headers={"Content-Type": "application/json"})


def connection_refused_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> Iterator[None]:
    for name in (
        "MOLLIE_CONFIG",
        "MOLLIE_CONFIG_FILE",
        "MOLLIE_PROFILE",
        "MOLLIE_API_TOKEN",
        "MOLLIE_ORG_TOKEN",
        "MOLLIE_API_KEY",
        "MOLLIE_BASE_URL",
        "MOLLIE_TESTMODE",
        "MOLLIE_REQUEST_TIMEOUT_SECONDS",
        "MOLLIE_TIMEOUT",
        "MOLLIE_VERIFY_SSL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    yield


@pytest.fixture()
def calls() -> list[httpx.Request]:
    return []


@pytest.fixture()
def mock_http(calls: list[httpx.Request]) -> Callable[[Handler], httpx.AsyncClient]:
    """Build an AsyncClient whose requests are served by ``handler`` and recorded in ``calls``."""

    def build(handler: Handler) -> httpx.AsyncClient:
        def record(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(record))

    return build
