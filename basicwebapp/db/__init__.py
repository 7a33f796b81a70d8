"""Database layer package for all SQL, persistence and migration boundaries."""

from .health import SQLAlchemyDatabaseHealthService
from .interfaces import DatabaseHealthPort, TenantRepositoryPort
from .migration_runner import (
	SCHEMA_BRANCH_LABEL,
	SEED_DEV_DATA_BRANCH_LABEL,
	AlembicMigrationRunner,
	MigrationRunResult,
)
from .session import db_create_engine
from .tenant import SQLAlchemyTenantService

__all__ = [
	"AlembicMigrationRunner",
	"DatabaseHealthPort",
	"MigrationRunResult",
	"SCHEMA_BRANCH_LABEL",
	"SEED_DEV_DATA_BRANCH_LABEL",
	"SQLAlchemyDatabaseHealthService",
	"SQLAlchemyTenantService",
	"TenantRepositoryPort",
	"db_create_engine",
]
