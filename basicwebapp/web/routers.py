"""Web page router composition rendering controller results with Jinja2."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .api_client import InternalApiClientPort
from .constants import TOASTR_MESSAGE_KEY, TOASTR_MESSAGE_TYPE_KEY
from .controllers import (
    AboutController,
    AdministrationController,
    HomeController,
    RequestItems,
    StatusController,
    ViewResult,
)


def web_request_items(request: Request) -> RequestItems:
    """Return the item bag scoped to the current request.

    Args:
        request: Incoming request.

    Returns:
        RequestItems: Mutable mapping stored on `request.state.items`.
    """

    request_items = getattr(request.state, "items", None)
    if request_items is None:
        request_items = {}
        request.state.items = request_items
    return request_items


def web_render_view(templates: Jinja2Templates, request: Request, view_result: ViewResult) -> HTMLResponse:
    """Render a controller result with the toast stored in the request item bag.

    Args:
        templates: Jinja2 template collection.
        request: Incoming request.
        view_result: Controller result.

    Returns:
        HTMLResponse: Rendered page.
    """

    request_items = web_request_items(request)
    return templates.TemplateResponse(
        request,
        view_result.template_name,
        {
            "view_data": view_result.view_data,
            "toastr_message_type": request_items.get(TOASTR_MESSAGE_TYPE_KEY),
            "toastr_message": request_items.get(TOASTR_MESSAGE_KEY),
        },
        status_code=view_result.status_code,
    )


def web_create_pages_router(api_client: InternalApiClientPort, templates: Jinja2Templates) -> APIRouter:
    """Create router for the server-rendered pages.

    Args:
        api_client: Internal API client shared by controllers.
        templates: Jinja2 template collection.

    Returns:
        APIRouter: Router exposing Home, About, Status and Administration pages.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if api_client is None:
        raise ValueError("api_client must not be None")
    if templates is None:
        raise ValueError("templates must not be None")

    home_controller = HomeController()
    about_controller = AboutController(api_client)
    status_controller = StatusController(api_client)
    administration_controller = AdministrationController(api_client)

    router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)

    @router.get("/")
    async def web_home_index(request: Request) -> HTMLResponse:
        view_result = await home_controller.controller_index(web_request_items(request))
        return web_render_view(templates, request, view_result)

    @router.get("/About")
    async def web_about_index(request: Request) -> HTMLResponse:
        view_result = await about_controller.controller_index(web_request_items(request))
        return web_render_view(templates, request, view_result)

    @router.get("/Status")
    async def web_status_index(request: Request) -> HTMLResponse:
        view_result = await status_controller.controller_index(web_request_items(request))
        return web_render_view(templates, request, view_result)

    @router.get("/Administration")
    async def web_administration_index(request: Request) -> HTMLResponse:
        view_result = await administration_controller.controller_index(web_request_items(request))
        return web_render_view(templates, request, view_result)

    @router.get("/Administration/Tenants/{alias}")
    async def web_administration_tenant(request: Request, alias: str) -> HTMLResponse:
        view_result = await administration_controller.controller_tenant(web_request_items(request), alias)
        return web_render_view(templates, request, view_result)

    return router
