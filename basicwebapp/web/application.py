"""FastAPI application factory for the web tier."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Final

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from basicwebapp.api.routers import api_create_health_router
from basicwebapp.config import WebSettings
from basicwebapp.health import HealthCheckService

from .api_client import InternalApiClientPort
from .routers import web_create_pages_router

TEMPLATES_PATH: Final[Path] = Path(__file__).resolve().parent / "templates"


def create_web_application(
    settings: WebSettings,
    health_service: HealthCheckService,
    api_client: InternalApiClientPort,
    templates_directory: Path = TEMPLATES_PATH,
) -> FastAPI:
    """Create the web tier FastAPI application.

    Args:
        settings: Validated web tier settings.
        health_service: Registry of tagged health checks.
        api_client: Internal API client, closed on application shutdown.
        templates_directory: Jinja2 template directory.

    Returns:
        FastAPI: Application serving HTML pages and health endpoints.

    Raises:
        ValueError: Raised when a router dependency is invalid.
    """

    @asynccontextmanager
    async def web_lifespan(_application: FastAPI) -> AsyncIterator[None]:
        yield
        await api_client.api_close()

    application = FastAPI(title="BasicWebApp", debug=settings.settings_is_development(), lifespan=web_lifespan)
    templates = Jinja2Templates(directory=str(templates_directory))

    application.include_router(api_create_health_router(health_service=health_service))
    application.include_router(web_create_pages_router(api_client=api_client, templates=templates))

    return application
