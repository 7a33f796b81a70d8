"""Database engine utilities.

This module centralizes database connectivity primitives to enforce the db-layer
boundary for all SQLAlchemy usage.
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url

from basicwebapp.config import DatabaseConfiguration


def db_create_engine(database_configuration: DatabaseConfiguration) -> Engine:
    """Create the SQLAlchemy engine for one tier's database context.

    Args:
        database_configuration: Bound database configuration section.

    Returns:
        Engine: Configured SQLAlchemy engine.

    Raises:
        ValueError: Raised when the configuration is missing.
    """

    if database_configuration is None:
        raise ValueError("database_configuration must not be None")

    url = make_url(database_configuration.connection_string)
    if url.get_backend_name() == "sqlite":
        # Request handlers run in a threadpool; share the file connection across threads.
        return create_engine(url, pool_pre_ping=True, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)
