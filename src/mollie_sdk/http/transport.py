"""HTTP transport for Mollie API calls."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

import httpx

from mollie_sdk.auth import authorization_header, is_organization_token
from mollie_sdk.constants import USER_AGENT
from mollie_sdk.errors import APIError, BaseURLError, DecodeError, RequestError

logger = logging.getLogger(__name__)


def validate_base_url(base_url: str | None) -> httpx.URL:
    """Parse the base URL, raising ``BaseURLError`` when requests cannot be built from it.

    Relative API paths are joined onto the base URL, so its path must end
    with a slash or the last segment would be replaced.
    """

    if not base_url:
        raise BaseURLError(base_url)

    # httpx normalizes an empty path to "/", so inspect the raw string.
    parts = urlsplit(base_url)
    if parts.scheme not in {"http", "https"} or not parts.netloc or not parts.path.endswith("/"):
        raise BaseURLError(base_url)
    try:
        return httpx.URL(base_url)
    except httpx.InvalidURL as exc:
        raise BaseURLError(base_url) from exc


def _error_from_response(response: httpx.Response) -> APIError:
    body = response.text.strip() or None
    title = response.reason_phrase or "request failed"
    detail: str | None = None
    field: str | None = None
    documentation_url: str | None = None

    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        title = str(payload.get("title") or title)
        detail = payload.get("detail")
        field = payload.get("field")
        links = payload.get("_links")
        if isinstance(links, dict) and isinstance(links.get("documentation"), dict):
            documentation_url = links["documentation"].get("href")

    return APIError(
        status_code=response.status_code,
        title=title,
        detail=detail,
        field=field,
        documentation_url=documentation_url,
        body=body,
    )


class MollieTransport:
    """Async transport building authenticated requests and sending them once."""

    def __init__(
        self,
        *,
        base_url: str,
        api_token: str | None,
        timeout: float,
        verify_tls: bool,
        testmode: bool = False,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url
        self.testmode = testmode
        self._api_token = api_token
        self._owns_http_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            verify=verify_tls,
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._client.aclose()

    def _use_testmode(self) -> bool:
        return self.testmode and self._api_token is not None and is_organization_token(self._api_token)

    def build_request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str | int | float | bool] | None = None,
        json_data: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> httpx.Request:
        """Build a request against the base URL without performing any I/O."""

        base = validate_base_url(self.base_url)
        method_upper = method.upper()
        url = base.join(path.lstrip("/"))

        headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
        headers.update(authorization_header(self._api_token))

        params_dict = dict(params) if params else {}
        body = dict(json_data) if json_data is not None else None
        if self._use_testmode():
            if method_upper == "GET":
                params_dict["testmode"] = "true"
            else:
                body = {**(body or {}), "testmode": True}

        return self._client.build_request(
            method_upper,
            url,
            params=params_dict or None,
            json=body,
            headers=headers,
            timeout=httpx.Timeout(timeout) if timeout is not None else httpx.USE_CLIENT_DEFAULT,
        )

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send a prepared request once and translate failures into SDK errors."""

        logger.debug("mollie request %s %s", request.method, request.url)
        try:
            response = await self._client.send(request)
        except httpx.HTTPError as exc:
            raise RequestError(f"request failed: {exc}") from exc

        logger.debug("mollie response %s %s -> %s", request.method, request.url, response.status_code)
        if response.status_code >= 400:
            error = _error_from_response(response)
            logger.warning("mollie api error on %s %s: %s", request.method, request.url.path, error)
            raise error
        return response

    @staticmethod
    def decode_json(response: httpx.Response) -> dict[str, Any]:
        try:
            decoded = response.json()
        except ValueError as exc:
            raise DecodeError(f"response was not valid JSON: {exc}") from exc

        if not isinstance(decoded, dict):
            raise DecodeError("response payload must be a JSON object")
        return decoded

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str | int | float | bool] | None = None,
        json_data: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        request = self.build_request(method, path, params=params, json_data=json_data, timeout=timeout)
        response = await self.send(request)
        return self.decode_json(response)
