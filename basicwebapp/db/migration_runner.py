"""Startup schema migration runner over the in-package Alembic revisions.

Revisions live in `basicwebapp/db/migrations/versions` and are split into two
branches: `schema` holds real migrations applied in every environment, and
`seed_dev_data` holds development seed data applied only in development.
Alembic's `alembic_version` table is the applied-revisions ledger, so running
the same branch twice applies nothing the second time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from alembic.script.revision import RevisionError
from alembic.util import CommandError
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from basicwebapp.domain import MigrationRunError

logger = logging.getLogger(__name__)

MIGRATIONS_PATH: Final[Path] = Path(__file__).resolve().parent / "migrations"
SCHEMA_BRANCH_LABEL: Final[str] = "schema"
SEED_DEV_DATA_BRANCH_LABEL: Final[str] = "seed_dev_data"


@dataclass(frozen=True)
class MigrationRunResult:
    """Outcome of one branch upgrade.

    Attributes:
        branch_label: Upgraded Alembic branch.
        applied_revisions: Revisions applied by this run, in apply order.
    """

    branch_label: str
    applied_revisions: tuple[str, ...]


class AlembicMigrationRunner:
    """Apply in-package Alembic revisions to one database."""

    def __init__(self, database_url: str):
        """Initialize migration runner.

        Args:
            database_url: SQLAlchemy URL of the target database.

        Raises:
            ValueError: Raised when the database URL is blank.
        """

        normalized_database_url = database_url.strip()
        if not normalized_database_url:
            raise ValueError("database_url must not be blank")
        self._database_url = normalized_database_url

    def migration_build_config(self) -> Config:
        """Build an Alembic config pointing at the in-package revisions.

        Returns:
            Config: Alembic config carrying the target URL in `attributes`.
        """

        config = Config()
        config.set_main_option("script_location", str(MIGRATIONS_PATH))
        config.attributes["database_url"] = self._database_url
        return config

    def migration_ensure_database(self) -> bool:
        """Create the target database when it does not exist yet.

        SQLite databases are created on first connect and need no action.

        Returns:
            bool: True when a database was created.

        Raises:
            MigrationRunError: Raised when the backend has no automatic creation
                support or the existence check fails.
        """

        url = make_url(self._database_url)
        backend_name = url.get_backend_name()
        if backend_name == "sqlite":
            return False
        if backend_name != "postgresql":
            logger.error("Automatic database creation is not supported for backend %s.", backend_name)
            raise MigrationRunError(
                f"automatic database creation is not supported for backend: {backend_name}",
                SCHEMA_BRANCH_LABEL,
            )
        database_name = url.database
        if not database_name:
            raise MigrationRunError("database_url must name a database", SCHEMA_BRANCH_LABEL)

        admin_engine = create_engine(url.set(database="postgres"), isolation_level="AUTOCOMMIT", poolclass=NullPool)
        try:
            with admin_engine.connect() as connection:
                existing_row = connection.execute(
                    text("SELECT 1 FROM pg_database WHERE datname = :database_name"),
                    {"database_name": database_name},
                ).first()
                if existing_row is not None:
                    return False
                quoted_name = connection.dialect.identifier_preparer.quote(database_name)
                connection.execute(text(f"CREATE DATABASE {quoted_name}"))
        except SQLAlchemyError as error:
            logger.error("Database existence check failed: %s", error)
            raise MigrationRunError("failed to ensure database exists", SCHEMA_BRANCH_LABEL) from error
        finally:
            admin_engine.dispose()

        logger.info("Database %s created.", database_name)
        return True

    def migration_pending_revisions(self, branch_label: str) -> list[str]:
        """Return revisions of a branch not yet recorded in the ledger.

        Args:
            branch_label: Alembic branch label.

        Returns:
            list[str]: Pending revision identifiers in apply order.

        Raises:
            MigrationRunError: Raised when the ledger cannot be read or the
                branch is unknown.
        """

        script_directory = ScriptDirectory.from_config(self.migration_build_config())
        engine = create_engine(self._database_url, poolclass=NullPool)
        try:
            with engine.connect() as connection:
                current_heads = MigrationContext.configure(connection).get_current_heads()
        except SQLAlchemyError as error:
            raise MigrationRunError("failed to read applied revisions", branch_label) from error
        finally:
            engine.dispose()

        try:
            applied_revisions = set()
            if current_heads:
                applied_revisions = {
                    revision.revision for revision in script_directory.iterate_revisions(current_heads, "base")
                }
            branch_revisions = list(script_directory.iterate_revisions(f"{branch_label}@head", "base"))
        except (CommandError, RevisionError) as error:
            raise MigrationRunError(f"unknown migration branch: {branch_label}", branch_label) from error

        return [
            revision.revision
            for revision in reversed(branch_revisions)
            if revision.revision not in applied_revisions
        ]

    def migration_upgrade_branch(self, branch_label: str) -> MigrationRunResult:
        """Apply every pending revision of one branch, one transaction each.

        The first failing revision stops the run; revisions before it stay
        applied.

        Args:
            branch_label: Alembic branch label.

        Returns:
            MigrationRunResult: Revisions applied by this call.

        Raises:
            MigrationRunError: Raised when any revision fails.
        """

        pending_revisions = self.migration_pending_revisions(branch_label)
        try:
            command.upgrade(self.migration_build_config(), f"{branch_label}@head")
        except (CommandError, RevisionError, SQLAlchemyError) as error:
            logger.error("Database migrations run failure on branch %s: %s", branch_label, error)
            raise MigrationRunError(f"database migrations run failure on branch {branch_label}", branch_label) from error
        return MigrationRunResult(branch_label=branch_label, applied_revisions=tuple(pending_revisions))

    def migration_run(self, include_dev_seed: bool) -> tuple[MigrationRunResult, ...]:
        """Ensure the database exists and apply schema, then optional seed revisions.

        Args:
            include_dev_seed: Whether to apply the development seed branch.

        Returns:
            tuple[MigrationRunResult, ...]: One result per upgraded branch.

        Raises:
            MigrationRunError: Raised when any step fails.
        """

        self.migration_ensure_database()

        results = [self.migration_upgrade_branch(SCHEMA_BRANCH_LABEL)]
        logger.info("Database migrations run success. Applied %d revision(s).", len(results[0].applied_revisions))

        if include_dev_seed:
            seed_result = self.migration_upgrade_branch(SEED_DEV_DATA_BRANCH_LABEL)
            results.append(seed_result)
            logger.info(
                "Database migrations (development environment) run success. Applied %d revision(s).",
                len(seed_result.applied_revisions),
            )
        return tuple(results)
