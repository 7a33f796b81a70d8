"""Application bootstrap wiring for startup validation, migrations and dependency assembly."""

import logging

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from basicwebapp.api import create_api_application
from basicwebapp.config import (
    ApiSettings,
    TierSettings,
    WebSettings,
    config_load_api_settings,
    config_load_web_settings,
)
from basicwebapp.db import (
    AlembicMigrationRunner,
    MigrationRunResult,
    SQLAlchemyDatabaseHealthService,
    SQLAlchemyTenantService,
    db_create_engine,
)
from basicwebapp.health import HealthCheckService, health_create_service
from basicwebapp.web import HttpxInternalApiClient, create_web_application

logger = logging.getLogger(__name__)


def bootstrap_run_migrations(settings: TierSettings) -> tuple[MigrationRunResult, ...]:
    """Apply schema migrations, plus seed data in development.

    Args:
        settings: Validated tier settings.

    Returns:
        tuple[MigrationRunResult, ...]: One result per upgraded branch.

    Raises:
        MigrationRunError: Raised when migrations fail; startup must stop.
    """

    runner = AlembicMigrationRunner(database_url=settings.database.connection_string)
    return runner.migration_run(include_dev_seed=settings.settings_is_development())


def bootstrap_create_health_service(settings: TierSettings, engine: Engine) -> HealthCheckService:
    """Build the tagged health-check registry for one tier's database.

    Args:
        settings: Validated tier settings.
        engine: Engine bound to the tier database.

    Returns:
        HealthCheckService: Registry with database and memory checks.
    """

    db_health_service = SQLAlchemyDatabaseHealthService(engine=engine, context_name=settings.database.context_name)
    return health_create_service(db_health_service=db_health_service)


def bootstrap_create_api_application(settings: ApiSettings | None = None) -> FastAPI:
    """Assemble the API tier after validating configuration and migrating the database.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized API application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        MigrationRunError: Raised when database migrations fail.
    """

    resolved_settings = settings or config_load_api_settings()
    bootstrap_run_migrations(resolved_settings)

    engine = db_create_engine(resolved_settings.database)
    application = create_api_application(
        settings=resolved_settings,
        health_service=bootstrap_create_health_service(resolved_settings, engine),
        tenant_repository=SQLAlchemyTenantService(engine=engine),
    )
    logger.info("WebAPI initialised (environment=%s).", resolved_settings.environment_name)
    return application


def bootstrap_create_web_application(settings: WebSettings | None = None) -> FastAPI:
    """Assemble the web tier after validating configuration and migrating the database.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized web application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        MigrationRunError: Raised when database migrations fail.
    """

    resolved_settings = settings or config_load_web_settings()
    bootstrap_run_migrations(resolved_settings)

    engine = db_create_engine(resolved_settings.database)
    application = create_web_application(
        settings=resolved_settings,
        health_service=bootstrap_create_health_service(resolved_settings, engine),
        api_client=HttpxInternalApiClient(
            base_url=resolved_settings.api_base_url,
            jwt_configuration=resolved_settings.jwt,
        ),
    )
    logger.info(
        "WebApp initialised (environment=%s, api=%s).",
        resolved_settings.environment_name,
        resolved_settings.api_base_url,
    )
    return application
