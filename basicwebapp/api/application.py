"""FastAPI application factory for the API tier."""

from fastapi import FastAPI

from basicwebapp.auth import auth_create_bearer_dependency
from basicwebapp.config import ApiSettings
from basicwebapp.db import TenantRepositoryPort
from basicwebapp.health import HealthCheckService

from .routers import api_create_health_router, api_create_pages_router, api_create_tenants_router


def create_api_application(
    settings: ApiSettings,
    health_service: HealthCheckService,
    tenant_repository: TenantRepositoryPort,
) -> FastAPI:
    """Create the API tier FastAPI application.

    Args:
        settings: Validated API tier settings.
        health_service: Registry of tagged health checks.
        tenant_repository: Tenant repository for tenant APIs.

    Returns:
        FastAPI: Application exposing health, page and tenant endpoints.

    Raises:
        ValueError: Raised when a router dependency is invalid.
    """

    application = FastAPI(title="BasicWebApp API", debug=settings.settings_is_development())
    require_bearer = auth_create_bearer_dependency(settings.jwt)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal foundation response for bootstrap verification.

        Returns:
            dict[str, str]: Service name, readiness marker and environment.
        """

        return {
            "service": "basicwebapp-api",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router(health_service=health_service))
    application.include_router(api_create_pages_router(require_bearer=require_bearer))
    application.include_router(
        api_create_tenants_router(tenant_repository=tenant_repository, require_bearer=require_bearer)
    )

    return application
