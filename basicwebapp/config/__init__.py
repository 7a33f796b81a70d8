"""Configuration package for runtime settings, logging and startup validation."""

from .logging_setup import config_configure_logging
from .settings import (
    ApiSettings,
    DatabaseConfiguration,
    JwtConfiguration,
    SettingsLoadError,
    TierSettings,
    WebSettings,
    config_load_api_settings,
    config_load_web_settings,
)

__all__ = [
    "ApiSettings",
    "DatabaseConfiguration",
    "JwtConfiguration",
    "SettingsLoadError",
    "TierSettings",
    "WebSettings",
    "config_configure_logging",
    "config_load_api_settings",
    "config_load_web_settings",
]
