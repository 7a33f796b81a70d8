"""Process-wide logging configuration for both runtime tiers."""

from logging.config import dictConfig

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def config_configure_logging(log_level: str = "INFO") -> None:
    """Configure root and uvicorn loggers with one console handler.

    Args:
        log_level: Root logging level name.

    Returns:
        None: Logging is configured as a side effect.

    Raises:
        ValueError: Raised by `dictConfig` when the level name is invalid.
    """

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {"format": LOG_FORMAT},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "console",
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {"level": log_level, "handlers": ["console"]},
            "loggers": {
                "uvicorn": {"level": log_level, "handlers": ["console"], "propagate": False},
                "alembic": {"level": "INFO", "handlers": ["console"], "propagate": False},
            },
        }
    )
