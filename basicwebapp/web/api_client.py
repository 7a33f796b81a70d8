"""Internal API client used by web-tier controllers to call the API tier."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Final, Protocol
from urllib.parse import quote

import httpx
from pydantic import AliasPath, BaseModel, Field, ValidationError

from basicwebapp.auth import auth_create_access_token
from basicwebapp.config import JwtConfiguration
from basicwebapp.domain import ApiPayloadError, InternalApiClientError, TenantNotFoundError, TenantRecord


class InternalApiClientPort(Protocol):
    """Port definition for web-tier calls into the API tier."""

    async def api_get_page_name(self, page_name: str) -> str:
        """Return the page name the API tier resolves for `page_name`.

        Raises:
            InternalApiClientError: Raised on transport or HTTP failure.
            ApiPayloadError: Raised when the response body is malformed.
        """

    async def api_check_live_status(self) -> str:
        """Return the API tier liveness report status.

        Raises:
            InternalApiClientError: Raised on transport failure.
            ApiPayloadError: Raised when the response body is malformed.
        """

    async def api_list_tenants(self) -> list[TenantRecord]:
        """Return all tenants.

        Raises:
            InternalApiClientError: Raised on transport or HTTP failure.
            ApiPayloadError: Raised when the response body is malformed.
        """

    async def api_get_tenant(self, alias: str) -> TenantRecord:
        """Return one tenant.

        Raises:
            TenantNotFoundError: Raised when the alias does not exist.
            InternalApiClientError: Raised on transport or HTTP failure.
            ApiPayloadError: Raised when the response body is malformed.
        """

    async def api_close(self) -> None:
        """Release client resources."""


class _PagePayload(BaseModel):
    page_name: str = Field(validation_alias=AliasPath("page", "name"), min_length=1)


class _LiveStatusPayload(BaseModel):
    status: str = Field(min_length=1)


class _TenantPayload(BaseModel):
    tenant_id: int = Field(validation_alias="id")
    tenant_guid: str = Field(validation_alias="guid")
    alias: str
    name: str
    created_at_utc: datetime | None = None

    def payload_to_record(self) -> TenantRecord:
        return TenantRecord(
            tenant_id=self.tenant_id,
            tenant_guid=self.tenant_guid,
            alias=self.alias,
            name=self.name,
            created_at_utc=self.created_at_utc,
        )


class _TenantEnvelope(BaseModel):
    tenant: _TenantPayload


class _TenantListEnvelope(BaseModel):
    tenants: list[_TenantPayload]


class HttpxInternalApiClient(InternalApiClientPort):
    """Async HTTP client for the API tier.

    One outbound request per call: no retries, no timeout override and no
    circuit breaking. Every request carries a freshly issued bearer token.
    """

    _USER_AGENT: Final[str] = "basicwebapp-web/1.0 (Python/httpx)"
    _TOKEN_SUBJECT: Final[str] = "basicwebapp-web"

    def __init__(
        self,
        base_url: str,
        jwt_configuration: JwtConfiguration,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize internal API client.

        Args:
            base_url: API tier base URL.
            jwt_configuration: JWT section used to issue bearer tokens.
            transport: Optional httpx transport override.

        Raises:
            ValueError: Raised when base_url is blank or jwt_configuration is None.
        """

        normalized_base_url = base_url.strip().rstrip("/")
        if not normalized_base_url:
            raise ValueError("base_url must not be blank")
        if jwt_configuration is None:
            raise ValueError("jwt_configuration must not be None")

        self._jwt_configuration = jwt_configuration
        self._client = httpx.AsyncClient(
            base_url=normalized_base_url,
            transport=transport,
            headers={"Accept": "application/json", "User-Agent": self._USER_AGENT},
        )

    async def api_get_page_name(self, page_name: str) -> str:
        """Return the page name the API tier resolves for `page_name`.

        Args:
            page_name: Requested page name.

        Returns:
            str: Value of `page.name` in the response body.

        Raises:
            ValueError: Raised when page_name is blank.
            InternalApiClientError: Raised on transport or HTTP failure.
            ApiPayloadError: Raised when the response body is malformed.
        """

        normalized_page_name = page_name.strip()
        if not normalized_page_name:
            raise ValueError("page_name must not be blank")

        response = await self._api_get(f"/api/pages/{quote(normalized_page_name, safe='')}")
        self._api_raise_for_status(response)
        return self._api_parse(response, _PagePayload).page_name

    async def api_check_live_status(self) -> str:
        """Return the report status of the API tier liveness endpoint.

        Returns:
            str: Report status, read from both 200 and 503 responses.

        Raises:
            InternalApiClientError: Raised on transport failure or any other HTTP status.
            ApiPayloadError: Raised when the response body is malformed.
        """

        response = await self._api_get("/health/live")
        # 503 still carries a report body with the unhealthy status.
        if response.status_code not in (httpx.codes.OK, httpx.codes.SERVICE_UNAVAILABLE):
            self._api_raise_for_status(response)
        return self._api_parse(response, _LiveStatusPayload).status

    async def api_list_tenants(self) -> list[TenantRecord]:
        """Return all tenants known to the API tier.

        Returns:
            list[TenantRecord]: Tenants in API order.

        Raises:
            InternalApiClientError: Raised on transport or HTTP failure.
            ApiPayloadError: Raised when the response body is malformed.
        """

        response = await self._api_get("/api/tenants")
        self._api_raise_for_status(response)
        envelope = self._api_parse(response, _TenantListEnvelope)
        return [tenant.payload_to_record() for tenant in envelope.tenants]

    async def api_get_tenant(self, alias: str) -> TenantRecord:
        """Return one tenant by alias.

        Args:
            alias: Tenant alias, sent as one percent-encoded path segment.

        Returns:
            TenantRecord: Matching tenant.

        Raises:
            TenantNotFoundError: Raised for a blank alias or an HTTP 404.
            InternalApiClientError: Raised on transport or other HTTP failure.
            ApiPayloadError: Raised when the response body is malformed.
        """

        normalized_alias = alias.strip()
        if not normalized_alias:
            raise TenantNotFoundError(alias)

        response = await self._api_get(f"/api/tenants/{quote(normalized_alias, safe='')}")
        if response.status_code == httpx.codes.NOT_FOUND:
            raise TenantNotFoundError(normalized_alias)
        self._api_raise_for_status(response)
        return self._api_parse(response, _TenantEnvelope).tenant.payload_to_record()

    async def api_close(self) -> None:
        """Close the owned httpx client."""

        await self._client.aclose()

    async def _api_get(self, path: str) -> httpx.Response:
        """Execute one authenticated GET against the API tier.

        Args:
            path: Request path relative to the base URL.

        Returns:
            httpx.Response: Raw response.

        Raises:
            InternalApiClientError: Raised for transport failures.
        """

        access_token = auth_create_access_token(self._jwt_configuration, subject=self._TOKEN_SUBJECT)
        try:
            return await self._client.get(path, headers={"Authorization": f"Bearer {access_token}"})
        except httpx.HTTPError as error:
            raise InternalApiClientError(f"API request failed: GET {path}: {error}") from error

    def _api_raise_for_status(self, response: httpx.Response) -> None:
        """Raise `InternalApiClientError` carrying the status code unless the response is 2xx."""

        if response.is_success:
            return
        raise InternalApiClientError(
            f"API returned HTTP {response.status_code} for GET {response.request.url.path}",
            status_code=response.status_code,
        )

    def _api_parse(self, response: httpx.Response, payload_model: type[BaseModel]) -> Any:
        try:
            return payload_model.model_validate(response.json())
        except (ValueError, ValidationError) as error:
            raise ApiPayloadError(
                f"unexpected API payload for GET {response.request.url.path}"
            ) from error
