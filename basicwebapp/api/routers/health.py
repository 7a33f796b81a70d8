"""Health endpoint router composition over the tagged health-check registry."""

from typing import Callable, Final

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from basicwebapp.health import (
    DB_STATUS_CHECK_TAG,
    MEMORY_STATUS_CHECK_TAG,
    HealthCheckPredicate,
    HealthCheckService,
    HealthCheckStatus,
    health_predicate_all,
    health_predicate_has_tags,
    health_predicate_none,
)

HEALTH_ENDPOINT_PREDICATES: Final[tuple[tuple[str, str, HealthCheckPredicate], ...]] = (
    ("/health", "health_all", health_predicate_all),
    ("/health/database", "health_database", health_predicate_has_tags(DB_STATUS_CHECK_TAG)),
    ("/health/memory", "health_memory", health_predicate_has_tags(MEMORY_STATUS_CHECK_TAG)),
    (
        "/health/ready",
        "health_ready",
        health_predicate_has_tags(DB_STATUS_CHECK_TAG, MEMORY_STATUS_CHECK_TAG),
    ),
    # Liveness runs no checks: a response at all means the process is alive.
    ("/health/live", "health_live", health_predicate_none),
)


def api_create_health_router(health_service: HealthCheckService) -> APIRouter:
    """Create health-check router with one endpoint per tag predicate.

    Args:
        health_service: Registry of tagged health checks.

    Returns:
        APIRouter: Router exposing `/health` and its tagged sub-endpoints.

    Raises:
        ValueError: Raised when health_service is invalid.
    """

    if health_service is None:
        raise ValueError("health_service must not be None")

    router = APIRouter(tags=["health"])
    for path, route_name, predicate in HEALTH_ENDPOINT_PREDICATES:
        router.add_api_route(
            path,
            _api_build_health_endpoint(health_service=health_service, predicate=predicate),
            methods=["GET"],
            name=route_name,
        )
    return router


def _api_build_health_endpoint(
    health_service: HealthCheckService,
    predicate: HealthCheckPredicate,
) -> Callable[[], JSONResponse]:
    def api_health_status() -> JSONResponse:
        """Return the aggregated status of the checks matching this endpoint.

        Returns:
            JSONResponse: HTTP 200 for healthy or degraded, 503 for unhealthy.
        """

        report = health_service.health_run(predicate)
        status_code = (
            status.HTTP_503_SERVICE_UNAVAILABLE
            if report.status is HealthCheckStatus.UNHEALTHY
            else status.HTTP_200_OK
        )
        return JSONResponse(content=report.report_to_payload(), status_code=status_code)

    return api_health_status
