"""Typed interfaces for database-layer services.

All SQL and ORM access must remain in the db package and its submodules.
"""

from typing import Protocol

from basicwebapp.domain import HealthStatus, TenantRecord


class DatabaseHealthPort(Protocol):
    """Port definition for database connectivity verification."""

    def db_connection_label(self) -> str:
        """Return a stable label for the active database connection target.

        Returns:
            str: Database target label for diagnostics.

        Raises:
            RuntimeError: Raised when connection metadata is unavailable.
        """

    def db_check_health(self) -> HealthStatus:
        """Check database connectivity and return deterministic health payload.

        Returns:
            HealthStatus: Database health status payload.

        Raises:
            ConnectionError: Raised when database cannot be reached.
        """


class TenantRepositoryPort(Protocol):
    """Port definition for tenant read access."""

    def db_tenant_list(self) -> list[TenantRecord]:
        """Return all tenants ordered by alias.

        Returns:
            list[TenantRecord]: Tenant records.

        Raises:
            RuntimeError: Raised when the query fails.
        """

    def db_tenant_get_by_alias(self, alias: str) -> TenantRecord | None:
        """Return one tenant by alias.

        Args:
            alias: Tenant alias.

        Returns:
            TenantRecord | None: Tenant record or None when missing.

        Raises:
            ValueError: Raised when alias is blank.
            RuntimeError: Raised when the query fails.
        """
