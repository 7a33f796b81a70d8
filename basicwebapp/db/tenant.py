"""Database service for tenant reads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from basicwebapp.domain import TenantRecord

from .interfaces import TenantRepositoryPort

_TENANT_COLUMNS = "tenant_id, tenant_guid, alias, name, created_at_utc"


class SQLAlchemyTenantService(TenantRepositoryPort):
    """SQLAlchemy-backed tenant repository using portable SQL."""

    def __init__(self, engine: Engine):
        """Initialize tenant repository.

        Args:
            engine: SQLAlchemy engine used for all queries.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_tenant_list(self) -> list[TenantRecord]:
        """Return all tenants ordered by alias.

        Returns:
            list[TenantRecord]: Tenant records.

        Raises:
            RuntimeError: Raised when the query fails.
        """

        try:
            with self._engine.connect() as connection:
                rows = connection.execute(
                    text(f"SELECT {_TENANT_COLUMNS} FROM tenant ORDER BY alias")
                ).mappings().all()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to list tenants") from error
        return [self._db_map_tenant_row(row) for row in rows]

    def db_tenant_get_by_alias(self, alias: str) -> TenantRecord | None:
        """Return one tenant by alias.

        Args:
            alias: Tenant alias; matched case-insensitively.

        Returns:
            TenantRecord | None: Tenant record or None when missing.

        Raises:
            ValueError: Raised when alias is blank.
            RuntimeError: Raised when the query fails.
        """

        normalized_alias = alias.strip().lower()
        if not normalized_alias:
            raise ValueError("alias must not be blank")

        try:
            with self._engine.connect() as connection:
                row = connection.execute(
                    text(f"SELECT {_TENANT_COLUMNS} FROM tenant WHERE alias = :alias"),
                    {"alias": normalized_alias},
                ).mappings().first()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to read tenant") from error
        if row is None:
            return None
        return self._db_map_tenant_row(row)

    def _db_map_tenant_row(self, row: Any) -> TenantRecord:
        return TenantRecord(
            tenant_id=int(row["tenant_id"]),
            tenant_guid=str(row["tenant_guid"]),
            alias=str(row["alias"]),
            name=str(row["name"]),
            created_at_utc=self._db_coerce_timestamp(row["created_at_utc"]),
        )

    def _db_coerce_timestamp(self, value: Any) -> datetime | None:
        # SQLite returns CURRENT_TIMESTAMP values as text.
        if value is None or isinstance(value, datetime):
            return value
        return datetime.fromisoformat(str(value))
