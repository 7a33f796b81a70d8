"""Project-native typed exceptions shared by the API and web tiers."""

from __future__ import annotations


class BasicWebAppError(Exception):
    """Base exception for failures the web tier can present to a user."""


class InternalApiClientError(BasicWebAppError, ConnectionError):
    """Communication failure between the web tier and the API tier.

    Attributes:
        status_code: Optional HTTP status returned by the API tier.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TenantNotFoundError(BasicWebAppError, LookupError):
    """Requested tenant alias does not exist.

    Attributes:
        alias: Tenant alias that was looked up.
    """

    def __init__(self, alias: str):
        super().__init__(f"tenant not found: alias={alias}")
        self.alias = alias


class ApiPayloadError(BasicWebAppError, ValueError):
    """API tier response body did not match the expected contract."""


class JwtValidationError(BasicWebAppError, PermissionError):
    """Bearer token is missing, malformed, expired or signed for another audience."""


class MigrationRunError(RuntimeError):
    """Schema migrations failed; the process must not start serving traffic.

    Attributes:
        branch_label: Alembic branch that was being upgraded.
    """

    def __init__(self, message: str, branch_label: str):
        super().__init__(message)
        self.branch_label = branch_label
