"""Tests for API health endpoint behavior.

These tests validate deterministic response behavior of every tagged health
endpoint for healthy and database-unavailable states.
"""

from fastapi.testclient import TestClient

from basicwebapp.api.application import create_api_application
from basicwebapp.config import ApiSettings, JwtConfiguration
from basicwebapp.domain import HealthStatus
from basicwebapp.health import health_create_service


class _HealthyDatabaseService:
    """Test double that simulates a healthy database target."""

    def db_connection_label(self) -> str:
        """Return deterministic target label.

        Returns:
            str: Health target label.

        Raises:
            RuntimeError: Never raised by this test double.
        """

        return "BaseWebAppContext@postgresql://test"

    def db_check_health(self) -> HealthStatus:
        """Return healthy database result.

        Returns:
            HealthStatus: Healthy DB response.

        Raises:
            ConnectionError: Never raised by this test double.
        """

        return HealthStatus(status="ok", detail="postgresql connectivity verified")


class _FailingDatabaseService:
    """Test double that simulates a database connectivity failure."""

    def db_connection_label(self) -> str:
        """Return deterministic target label.

        Returns:
            str: Health target label.

        Raises:
            RuntimeError: Never raised by this test double.
        """

        return "BaseWebAppContext@postgresql://test"

    def db_check_health(self) -> HealthStatus:
        """Raise deterministic connection error.

        Returns:
            HealthStatus: This method does not return.

        Raises:
            ConnectionError: Always raised by this test double.
        """

        raise ConnectionError("BaseWebAppContext connectivity check failed")


class _TenantRepositoryStub:
    """Minimal repository stub for API factory dependency injection."""

    def db_tenant_list(self) -> list[object]:
        return []

    def db_tenant_get_by_alias(self, _alias: str) -> None:
        return None


def _build_settings() -> ApiSettings:
    """Create test settings object.

    Returns:
        ApiSettings: Deterministic test settings for API creation.

    Raises:
        ValueError: Raised by ApiSettings when values are invalid.
    """

    return ApiSettings(
        environment_name="test",
        jwt=JwtConfiguration(secret="test-secret-value-0123456789"),
    )


def _build_client(db_health_service: object) -> TestClient:
    application = create_api_application(
        _build_settings(),
        health_create_service(db_health_service),
        _TenantRepositoryStub(),
    )
    return TestClient(application)


def test_api_health_returns_success_when_database_is_available() -> None:
    """Return HTTP 200 and a healthy report with both checks when the DB is up.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = _build_client(_HealthyDatabaseService())

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "Healthy"
    assert set(response.json()["entries"]) == {"Database", "Memory"}
    assert response.json()["entries"]["Database"]["tags"] == ["db-status-check"]


def test_api_health_returns_service_unavailable_when_database_is_down() -> None:
    """Return HTTP 503 and an unhealthy report when the DB check fails.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = _build_client(_FailingDatabaseService())

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "Unhealthy"
    assert response.json()["entries"]["Database"]["status"] == "Unhealthy"
    assert response.json()["entries"]["Memory"]["status"] == "Healthy"
    assert "connectivity check failed" in response.json()["entries"]["Database"]["description"]


def test_api_health_database_endpoint_only_runs_database_check() -> None:
    """Filter `/health/database` to checks tagged `db-status-check`."""

    healthy_response = _build_client(_HealthyDatabaseService()).get("/health/database")
    failing_response = _build_client(_FailingDatabaseService()).get("/health/database")

    assert healthy_response.status_code == 200
    assert list(healthy_response.json()["entries"]) == ["Database"]
    assert failing_response.status_code == 503
    assert failing_response.json()["status"] == "Unhealthy"


def test_api_health_memory_endpoint_ignores_database_failure() -> None:
    """Keep `/health/memory` healthy while the database is down."""

    response = _build_client(_FailingDatabaseService()).get("/health/memory")

    assert response.status_code == 200
    assert response.json()["status"] == "Healthy"
    assert list(response.json()["entries"]) == ["Memory"]


def test_api_health_ready_endpoint_requires_checks_with_both_tags() -> None:
    """Match no registered check on `/health/ready`, so the empty report is healthy.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when ready predicate selects single-tag checks.
    """

    response = _build_client(_FailingDatabaseService()).get("/health/ready")

    assert response.status_code == 200
    assert response.json()["status"] == "Healthy"
    assert response.json()["entries"] == {}


def test_api_health_live_endpoint_runs_no_checks() -> None:
    """Report `/health/live` healthy with zero evaluated checks even when the DB is down."""

    response = _build_client(_FailingDatabaseService()).get("/health/live")

    assert response.status_code == 200
    assert response.json()["status"] == "Healthy"
    assert response.json()["entries"] == {}


def test_api_foundation_index_reports_environment() -> None:
    """Return service identity and environment on the root endpoint."""

    response = _build_client(_HealthyDatabaseService()).get("/")

    assert response.status_code == 200
    assert response.json() == {"service": "basicwebapp-api", "status": "ready", "environment": "test"}
