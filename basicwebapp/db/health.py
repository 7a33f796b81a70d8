"""Database health service implementations for connectivity checks."""

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from basicwebapp.domain import HealthStatus

from .interfaces import DatabaseHealthPort


class SQLAlchemyDatabaseHealthService(DatabaseHealthPort):
    """Database health service backed by SQLAlchemy engine connectivity checks."""

    def __init__(self, engine: Engine, context_name: str = "BaseWebAppContext"):
        """Initialize database health service.

        Args:
            engine: SQLAlchemy engine used for connectivity checks.
            context_name: Database context label reported in diagnostics.

        Raises:
            ValueError: Raised when engine is None or context name is blank.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        if not context_name.strip():
            raise ValueError("context_name must not be blank")
        self._engine = engine
        self._context_name = context_name.strip()

    def db_connection_label(self) -> str:
        """Return the context name and password-masked target URL.

        Returns:
            str: Diagnostic label such as `BaseWebAppContext@postgresql://...`.
        """

        return f"{self._context_name}@{self._engine.url.render_as_string(hide_password=True)}"

    def db_check_health(self) -> HealthStatus:
        """Verify database connectivity using a deterministic lightweight query.

        Returns:
            HealthStatus: Health payload with status and diagnostic detail.

        Raises:
            ConnectionError: Raised when connectivity check fails.
        """

        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as error:
            raise ConnectionError(f"{self._context_name} connectivity check failed") from error
        return HealthStatus(status="ok", detail=f"{self._engine.dialect.name} connectivity verified")
