from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime

import httpx
import pytest

from conftest import (
    BASE_URL,
    ORGANIZATION,
    PARTNER_STATUS,
    TOKEN,
    config,
    connection_refused_handler,
    invalid_json_handler,
)
from mollie_sdk import AsyncMollieClient, BaseURLError, DecodeError, MollieClient, RequestError, connect
from mollie_sdk.models import Organization, OrganizationPartnerStatus, PartnerType

MockHTTP = Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]


@pytest.mark.asyncio
async def test_get_organization_by_id(mock_http: MockHTTP, calls: list[httpx.Request]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.url.path == "/v2/organizations/org_12345678"
        assert request.headers["Authorization"] == f"Bearer {TOKEN}"
        assert request.headers["Accept"] == "application/json"
        return httpx.Response(200, json=ORGANIZATION)

    async with mock_http(handler) as http_client:
        client = AsyncMollieClient(config=config(), http_client=http_client)
        org = await client.organizations.get("org_12345678")
        await client.aclose()

    assert len(calls) == 1
    assert org.id == "org_12345678"
    assert org.address is not None
    assert org.address.city == "Amsterdam"
    assert org.links is not None
    assert org.links.dashboard is not None
    assert org.links.dashboard.href == "https://mollie.com/dashboard/org_12345678"
    assert org.links.payments is None


@pytest.mark.asyncio
async def test_get_current_organization(mock_http: MockHTTP) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v2/organizations/me"
        return httpx.Response(200, json=ORGANIZATION)

    async with mock_http(handler) as http_client:
        client = AsyncMollieClient(config=config(), http_client=http_client)
        org = await client.organizations.get_current()
        await client.aclose()

    assert org.name == "Mollie B.V."
    assert org.vatRegulation == "dutch"


@pytest.mark.asyncio
async def test_get_partner_status(mock_http: MockHTTP) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.url.path == "/v2/organizations/me/partner"
        return httpx.Response(200, json=PARTNER_STATUS)

    async with mock_http(handler) as http_client:
        client = AsyncMollieClient(config=config(), http_client=http_client)
        status = await client.organizations.get_partner_status()
        await client.aclose()

    assert status.partnerType == PartnerType.OAUTH
    assert status.partnerType == "oauth"
    assert status.userAgentTokens is not None
    assert len(status.userAgentTokens) == len(PARTNER_STATUS["userAgentTokens"])
    assert status.userAgentTokens[0].token == "unique-token"
    assert status.userAgentTokens[0].endsAt is None
    assert status.userAgentTokens[1].endsAt == datetime(2018, 3, 20, 13, 13, 37, tzinfo=UTC)
    assert status.isCommissionPartner is True
    assert status.partnerContractUpdateAvailable is True
    assert status.links is not None
    assert status.links.signuplink is not None


def test_partner_status_accepts_legacy_contract_update_key() -> None:
    status = OrganizationPartnerStatus.model_validate({"partnerContractUpdate_available": True})
    assert status.partnerContractUpdateAvailable is True
    assert status.to_api() == {"partnerContractUpdateAvailable": True}


def test_organization_round_trip_keeps_populated_fields() -> None:
    org = Organization.model_validate(ORGANIZATION)
    encoded = org.to_api()

    assert encoded == ORGANIZATION
    assert Organization.model_validate(encoded) == org


def test_partner_status_round_trip_omits_absent_fields() -> None:
    payload = {"partnerType": "useragent", "userAgentTokens": [{"token": "t1"}]}
    status = OrganizationPartnerStatus.model_validate(payload)

    assert status.partnerType is PartnerType.USER_AGENT
    assert status.to_api() == payload


@pytest.mark.asyncio
async def test_bad_base_url_raises_before_any_request(mock_http: MockHTTP, calls: list[httpx.Request]) -> None:
    async with mock_http(lambda request: httpx.Response(200, json=ORGANIZATION)) as http_client:
        client = AsyncMollieClient(config=config(url=BASE_URL.rstrip("/")), http_client=http_client)
        with pytest.raises(BaseURLError):
            await client.organizations.get("org_12345678")
        with pytest.raises(BaseURLError):
            await client.organizations.get_current()
        with pytest.raises(BaseURLError):
            await client.organizations.get_partner_status()
        await client.aclose()

    assert calls == []


@pytest.mark.asyncio
async def test_transport_failure_raises_request_error(mock_http: MockHTTP) -> None:
    async with mock_http(connection_refused_handler) as http_client:
        client = AsyncMollieClient(config=config(), http_client=http_client)
        with pytest.raises(RequestError, match="connection refused"):
            await client.organizations.get("org_12345678")
        with pytest.raises(RequestError):
            await client.organizations.get_current()
        with pytest.raises(RequestError):
            await client.organizations.get_partner_status()
        await client.aclose()


@pytest.mark.asyncio
async def test_invalid_json_raises_decode_error(mock_http: MockHTTP) -> None:
    async with mock_http(invalid_json_handler) as http_client:
        client = AsyncMollieClient(config=config(), http_client=http_client)
        for call in (
            lambda: client.organizations.get("org_12345678"),
            client.organizations.get_current,
            client.organizations.get_partner_status,
        ):
            with pytest.raises(DecodeError, match="Expecting property name"):
                await call()
        await client.aclose()


@pytest.mark.asyncio
async def test_mismatched_shape_raises_decode_error(mock_http: MockHTTP) -> None:
    async with mock_http(lambda request: httpx.Response(200, json={"partnerType": "reseller"})) as http_client:
        client = AsyncMollieClient(config=config(), http_client=http_client)
        with pytest.raises(DecodeError, match="OrganizationPartnerStatus"):
            await client.organizations.get_partner_status()
        await client.aclose()


def test_partner_status_round_trip_keeps_every_field() -> None:
    status = OrganizationPartnerStatus.model_validate(PARTNER_STATUS)
    again = OrganizationPartnerStatus.model_validate(status.to_api())

    assert again.model_dump() == status.model_dump()
    assert again.partnerContractSignedAt == datetime(2018, 3, 20, 13, 13, 37, tzinfo=UTC)
    assert again.userAgentTokens is not None
    assert [token.endsAt for token in again.userAgentTokens] == [
        None,
        datetime(2018, 3, 20, 13, 13, 37, tzinfo=UTC),
    ]
    assert again.links is not None
    assert again.links.signuplink is not None
    assert again.links.signuplink.href == "https://www.mollie.com/dashboard/signup/myCode?lang=en"


@pytest.mark.asyncio
async def test_connect_yields_async_client(mock_http: MockHTTP) -> None:
    async with mock_http(lambda request: httpx.Response(200, json=ORGANIZATION)) as http_client:
        async with connect(config=config(), http_client=http_client) as client:
            assert isinstance(client, AsyncMollieClient)
            org = await client.organizations.get_current()

    assert org.id == "org_12345678"


@pytest.mark.asyncio
async def test_connect_closes_owned_http_client_on_error() -> None:
    with pytest.raises(BaseURLError):
        async with connect(config=config(url="https://api.mollie.test")) as client:
            await client.organizations.get_current()

    assert client.transport._client.is_closed


@pytest.mark.asyncio
async def test_sync_client_exposes_async_services(mock_http: MockHTTP) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/partner"):
            return httpx.Response(200, json=PARTNER_STATUS)
        return httpx.Response(200, json=ORGANIZATION)

    async with mock_http(handler) as http_client:
        async with MollieClient(config=config(), http_client=http_client) as client:
            org = await client.aorganizations.get("org_12345678")
            status = await client.aorganizations.get_partner_status()
            with pytest.raises(RuntimeError, match="active event loop"):
                client.organizations.get_current()

    assert isinstance(org, Organization)
    assert status.partnerType is PartnerType.OAUTH


def test_sync_client_returns_typed_models(mock_http: MockHTTP, calls: list[httpx.Request]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/partner"):
            return httpx.Response(200, json=PARTNER_STATUS)
        return httpx.Response(200, json=ORGANIZATION)

    http_client = mock_http(handler)
    try:
        with MollieClient(config=config(), http_client=http_client) as client:
            by_id = client.organizations.get("org_12345678", timeout=2.0)
            current = client.organizations.get_current()
            status = client.organizations.get_partner_status()
    finally:
        asyncio.run(http_client.aclose())

    assert isinstance(by_id, Organization)
    assert current == by_id
    assert isinstance(status, OrganizationPartnerStatus)
    assert [request.url.path for request in calls] == [
        "/v2/organizations/org_12345678",
        "/v2/organizations/me",
        "/v2/organizations/me/partner",
    ]
    assert calls[0].extensions["timeout"]["read"] == 2.0

    with pytest.raises(RuntimeError, match="closed"):
        client.organizations.get_current()
