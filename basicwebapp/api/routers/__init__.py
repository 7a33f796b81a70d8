"""API router package for endpoint composition."""

from .health import HEALTH_ENDPOINT_PREDICATES, api_create_health_router
from .pages import api_create_pages_router
from .tenants import api_create_tenants_router

__all__ = [
    "HEALTH_ENDPOINT_PREDICATES",
    "api_create_health_router",
    "api_create_pages_router",
    "api_create_tenants_router",
]
