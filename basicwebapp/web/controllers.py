"""Web-tier controller actions.

Each action calls the API tier through the internal API client and returns a
`ViewResult`. Client failures never escape an action: they are logged,
turned into an error toast and the page still renders.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import MutableMapping

from basicwebapp.domain import BasicWebAppError

from .api_client import InternalApiClientPort
from .constants import (
    API_LIVE_STATUS_UNKNOWN,
    VIEW_DATA_API_LIVE_STATUS,
    VIEW_DATA_PAGE_NAME_FROM_API,
    VIEW_DATA_TENANT,
    VIEW_DATA_TENANTS,
)
from .exception_processing import exception_process
from .view_models import web_map_tenant_view_model

RequestItems = MutableMapping[str, object]


@dataclass
class ViewResult:
    """Template selection and data produced by a controller action.

    Attributes:
        template_name: Jinja2 template file name.
        view_data: Values exposed to the template as `view_data`.
        status_code: HTTP status of the rendered page.
    """

    template_name: str
    view_data: dict[str, object] = field(default_factory=dict)
    status_code: int = 200


class _ApiController:
    def __init__(self, api_client: InternalApiClientPort, logger: logging.Logger | None = None):
        if api_client is None:
            raise ValueError("api_client must not be None")
        self._api_client = api_client
        self._logger = logger or logging.getLogger(f"{__name__}.{type(self).__name__}")


class HomeController:
    """Landing page."""

    async def controller_index(self, request_items: RequestItems) -> ViewResult:
        """Render the landing page; it needs no API data."""

        _ = request_items
        return ViewResult(template_name="home.html")


class AboutController(_ApiController):
    """About page showing the page name resolved by the API tier."""

    async def controller_index(self, request_items: RequestItems) -> ViewResult:
        """Render the About page.

        Args:
            request_items: Request-scoped item bag.

        Returns:
            ViewResult: `about.html` with `PageNameFromApi`, empty on client failure.
        """

        page_name = ""
        try:
            page_name = await self._api_client.api_get_page_name("About")
        except BasicWebAppError as error:
            exception_process(self._logger, request_items, error)

        return ViewResult(template_name="about.html", view_data={VIEW_DATA_PAGE_NAME_FROM_API: page_name})


class StatusController(_ApiController):
    """Status page showing the API tier liveness."""

    async def controller_index(self, request_items: RequestItems) -> ViewResult:
        """Render the Status page.

        Args:
            request_items: Request-scoped item bag.

        Returns:
            ViewResult: `status.html` with `ApiLiveStatus`, `Unknown` on client failure.
        """

        live_status = API_LIVE_STATUS_UNKNOWN
        try:
            live_status = await self._api_client.api_check_live_status()
        except BasicWebAppError as error:
            exception_process(self._logger, request_items, error)

        return ViewResult(template_name="status.html", view_data={VIEW_DATA_API_LIVE_STATUS: live_status})


class AdministrationController(_ApiController):
    """Tenant administration pages."""

    async def controller_index(self, request_items: RequestItems) -> ViewResult:
        """Render the tenant list.

        Args:
            request_items: Request-scoped item bag.

        Returns:
            ViewResult: `administration.html` with `Tenants` view models.
        """

        tenant_view_models = []
        try:
            tenants = await self._api_client.api_list_tenants()
            tenant_view_models = [web_map_tenant_view_model(tenant) for tenant in tenants]
        except BasicWebAppError as error:
            exception_process(self._logger, request_items, error)

        return ViewResult(template_name="administration.html", view_data={VIEW_DATA_TENANTS: tenant_view_models})

    async def controller_tenant(self, request_items: RequestItems, alias: str) -> ViewResult:
        """Render one tenant.

        Args:
            request_items: Request-scoped item bag.
            alias: Tenant alias from the route.

        Returns:
            ViewResult: `tenant.html` with `Tenant`, None when it cannot be loaded.
        """

        tenant_view_model = None
        try:
            tenant = await self._api_client.api_get_tenant(alias)
            tenant_view_model = web_map_tenant_view_model(tenant)
        except BasicWebAppError as error:
            exception_process(self._logger, request_items, error)

        return ViewResult(template_name="tenant.html", view_data={VIEW_DATA_TENANT: tenant_view_model})
