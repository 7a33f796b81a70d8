"""Domain models and exceptions used across application layer boundaries."""

from .errors import (
    ApiPayloadError,
    BasicWebAppError,
    InternalApiClientError,
    JwtValidationError,
    MigrationRunError,
    TenantNotFoundError,
)
from .models import HealthStatus, TenantRecord

__all__ = [
    "ApiPayloadError",
    "BasicWebAppError",
    "HealthStatus",
    "InternalApiClientError",
    "JwtValidationError",
    "MigrationRunError",
    "TenantNotFoundError",
    "TenantRecord",
]
