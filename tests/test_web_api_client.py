"""Tests for the httpx-based internal API client."""

import asyncio
from typing import Callable

import httpx
import pytest

from basicwebapp.auth import auth_decode_access_token
from basicwebapp.config import JwtConfiguration
from basicwebapp.domain import ApiPayloadError, InternalApiClientError, TenantNotFoundError
from basicwebapp.web import HttpxInternalApiClient

_JWT_CONFIGURATION = JwtConfiguration(secret="test-secret-value-0123456789")
_BASE_URL = "http://api.internal"

_CONTOSO_PAYLOAD = {
    "id": 1,
    "guid": "6f1c2a4e-1d3b-4c59-9a1e-2b7d3f4a5c01",
    "alias": "contoso",
    "name": "Contoso Ltd.",
    "created_at_utc": "2026-10-17T08:30:00+00:00",
}


def _run_with_client(handler: Callable[[httpx.Request], httpx.Response], call):
    """Run one client call against a mock transport inside a single event loop.

    Args:
        handler: Mock transport request handler.
        call: Coroutine function receiving the client.

    Returns:
        object: Value returned by `call`.

    Raises:
        Exception: Re-raises whatever the client call raises.
    """

    async def _run():
        client = HttpxInternalApiClient(_BASE_URL, _JWT_CONFIGURATION, transport=httpx.MockTransport(handler))
        try:
            return await call(client)
        finally:
            await client.api_close()

    return asyncio.run(_run())


def test_api_get_page_name_reads_nested_name_and_sends_bearer_token() -> None:
    """Read `page.name` from the response and send a token the API tier accepts.

    Returns:
        None: Assertions validate request and parsed value.

    Raises:
        AssertionError: Raised when path, token or value differ.
    """

    captured_requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        return httpx.Response(200, json={"page": {"name": "About"}})

    page_name = _run_with_client(handler, lambda client: client.api_get_page_name("About"))

    assert page_name == "About"
    request = captured_requests[0]
    assert request.url.path == "/api/pages/About"
    assert request.headers["Accept"] == "application/json"
    scheme, _, token = request.headers["Authorization"].partition(" ")
    assert scheme == "Bearer"
    assert auth_decode_access_token(_JWT_CONFIGURATION, token)["sub"] == "basicwebapp-web"


def test_api_get_page_name_wraps_transport_failure() -> None:
    """Translate connection failures into the API client error with chained cause."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(InternalApiClientError) as error_info:
        _run_with_client(handler, lambda client: client.api_get_page_name("About"))

    assert isinstance(error_info.value.__cause__, httpx.ConnectError)
    assert error_info.value.status_code is None


def test_api_get_page_name_rejects_server_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"detail": "boom"})

    with pytest.raises(InternalApiClientError) as error_info:
        _run_with_client(handler, lambda client: client.api_get_page_name("About"))

    assert error_info.value.status_code == 500


def test_api_get_page_name_rejects_malformed_payload() -> None:
    """Raise payload error when the nested page name is missing."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"name": "About"})

    with pytest.raises(ApiPayloadError):
        _run_with_client(handler, lambda client: client.api_get_page_name("About"))


def test_api_get_page_name_rejects_non_json_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>not json</html>")

    with pytest.raises(ApiPayloadError):
        _run_with_client(handler, lambda client: client.api_get_page_name("About"))


def test_api_check_live_status_reads_report_status_even_when_unavailable() -> None:
    """Return the report status carried by both 200 and 503 liveness responses."""

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/health/live"
        return httpx.Response(503, json={"status": "Unhealthy", "total_duration_ms": 0.0, "entries": {}})

    assert _run_with_client(handler, lambda client: client.api_check_live_status()) == "Unhealthy"


def test_api_list_tenants_maps_payload_to_records() -> None:
    """Map tenant list entries to domain records.

    Returns:
        None: Assertions validate mapped fields.

    Raises:
        AssertionError: Raised when mapped records differ.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"tenants": [_CONTOSO_PAYLOAD]})

    tenants = _run_with_client(handler, lambda client: client.api_list_tenants())

    assert len(tenants) == 1
    assert tenants[0].tenant_id == 1
    assert tenants[0].tenant_guid == "6f1c2a4e-1d3b-4c59-9a1e-2b7d3f4a5c01"
    assert tenants[0].alias == "contoso"
    assert tenants[0].created_at_utc is not None
    assert tenants[0].created_at_utc.year == 2026


def test_api_get_tenant_maps_not_found_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"status": "error", "message": "tenant not found"})

    with pytest.raises(TenantNotFoundError) as error_info:
        _run_with_client(handler, lambda client: client.api_get_tenant("missing"))

    assert error_info.value.alias == "missing"


def test_api_get_tenant_encodes_alias_path_segment() -> None:
    """Percent-encode aliases so they cannot escape the tenant path."""

    captured_paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured_paths.append(request.url.raw_path.decode("ascii"))
        return httpx.Response(200, json={"tenant": _CONTOSO_PAYLOAD})

    tenant = _run_with_client(handler, lambda client: client.api_get_tenant("a/b"))

    assert tenant.name == "Contoso Ltd."
    assert captured_paths == ["/api/tenants/a%2Fb"]


def test_api_get_tenant_rejects_blank_alias_without_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(TenantNotFoundError):
        _run_with_client(handler, lambda client: client.api_get_tenant("  "))


def test_client_rejects_blank_base_url() -> None:
    with pytest.raises(ValueError):
        HttpxInternalApiClient("   ", _JWT_CONFIGURATION)
