"""Health-check registry, tag predicates and the checks registered at startup."""

from .checks import health_create_service, health_database_check, health_memory_check
from .registry import (
    DB_STATUS_CHECK_TAG,
    MEMORY_STATUS_CHECK_TAG,
    HealthCheckPredicate,
    HealthCheckRegistration,
    HealthCheckResult,
    HealthCheckService,
    HealthCheckStatus,
    HealthReport,
    HealthReportEntry,
    health_predicate_all,
    health_predicate_has_tags,
    health_predicate_none,
)

__all__ = [
    "DB_STATUS_CHECK_TAG",
    "MEMORY_STATUS_CHECK_TAG",
    "HealthCheckPredicate",
    "HealthCheckRegistration",
    "HealthCheckResult",
    "HealthCheckService",
    "HealthCheckStatus",
    "HealthReport",
    "HealthReportEntry",
    "health_create_service",
    "health_database_check",
    "health_memory_check",
    "health_predicate_all",
    "health_predicate_has_tags",
    "health_predicate_none",
]
