"""Health checks registered by both runtime tiers."""

from basicwebapp.db import DatabaseHealthPort

from .registry import (
    DB_STATUS_CHECK_TAG,
    MEMORY_STATUS_CHECK_TAG,
    HealthCheckResult,
    HealthCheckService,
)


def health_database_check(db_health_service: DatabaseHealthPort):
    """Build a database connectivity probe.

    Args:
        db_health_service: DB-layer health service interface.

    Returns:
        Callable[[], HealthCheckResult]: Probe returning healthy on connectivity.

    Raises:
        ValueError: Raised when db_health_service is None.
    """

    if db_health_service is None:
        raise ValueError("db_health_service must not be None")

    def _check() -> HealthCheckResult:
        try:
            db_health = db_health_service.db_check_health()
        except ConnectionError as error:
            return HealthCheckResult.unhealthy(
                description=f"{error} ({db_health_service.db_connection_label()})"
            )
        return HealthCheckResult.healthy(description=db_health.detail)

    return _check


def health_memory_check() -> HealthCheckResult:
    """Report the process memory check.

    Returns:
        HealthCheckResult: Always healthy.
    """

    return HealthCheckResult.healthy()


def health_create_service(db_health_service: DatabaseHealthPort) -> HealthCheckService:
    """Create the registry with the database and memory checks.

    Args:
        db_health_service: DB-layer health service interface.

    Returns:
        HealthCheckService: Registry shared by the health endpoints.
    """

    return (
        HealthCheckService()
        .health_add_check("Database", health_database_check(db_health_service), tags=[DB_STATUS_CHECK_TAG])
        .health_add_check("Memory", health_memory_check, tags=[MEMORY_STATUS_CHECK_TAG])
    )
