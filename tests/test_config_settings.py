"""Tests for tier settings loading and validation."""

import pytest

from basicwebapp.config import (
    ApiSettings,
    JwtConfiguration,
    SettingsLoadError,
    WebSettings,
    config_load_api_settings,
    config_load_web_settings,
)
from basicwebapp.config.settings import DEFAULT_DATABASE_URL


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run every test away from any developer `.env` file and tier variables."""

    monkeypatch.chdir(tmp_path)
    for variable_name in (
        "API_JWT__SECRET",
        "API_DATABASE__CONNECTION_STRING",
        "API_ENVIRONMENT_NAME",
        "API_LOG_LEVEL",
        "WEB_JWT__SECRET",
        "WEB_API_BASE_URL",
        "WEB_ENVIRONMENT_NAME",
    ):
        monkeypatch.delenv(variable_name, raising=False)


def test_config_load_api_settings_reads_nested_sections(monkeypatch: pytest.MonkeyPatch) -> None:
    """Bind nested database and JWT sections from `API_`-prefixed variables.

    Args:
        monkeypatch: Pytest environment patching fixture.

    Returns:
        None: Assertions validate bound values.

    Raises:
        AssertionError: Raised when nested values are not bound.
    """

    monkeypatch.setenv("API_JWT__SECRET", "api-secret-value-0123456789")
    monkeypatch.setenv("API_DATABASE__CONNECTION_STRING", "sqlite:///./api.db")
    monkeypatch.setenv("API_LOG_LEVEL", "debug")

    settings = config_load_api_settings()

    assert settings.jwt.secret == "api-secret-value-0123456789"
    assert settings.jwt.algorithm == "HS256"
    assert settings.database.connection_string == "sqlite:///./api.db"
    assert settings.database.context_name == "BaseWebAppContext"
    assert settings.log_level == "DEBUG"
    assert settings.application_port == 8000


def test_config_load_api_settings_ignores_web_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEB_JWT__SECRET", "web-secret-value-0123456789")

    with pytest.raises(SettingsLoadError):
        config_load_api_settings()


def test_config_load_web_settings_reads_dotenv_file(tmp_path) -> None:
    """Read `WEB_` variables from `.env` in the working directory."""

    (tmp_path / ".env").write_text(
        "WEB_JWT__SECRET=web-secret-value-0123456789\nWEB_API_BASE_URL=https://api.example.test/\n",
        encoding="utf-8",
    )

    settings = config_load_web_settings()

    assert settings.api_base_url == "https://api.example.test"
    assert settings.application_port == 8080
    assert settings.database.connection_string == DEFAULT_DATABASE_URL


def test_config_load_web_settings_rejects_non_http_api_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEB_JWT__SECRET", "web-secret-value-0123456789")
    monkeypatch.setenv("WEB_API_BASE_URL", "ftp://api.example.test")

    with pytest.raises(SettingsLoadError):
        config_load_web_settings()


@pytest.mark.parametrize("secret", ["short", "                    "])
def test_jwt_configuration_rejects_weak_secret(secret: str) -> None:
    with pytest.raises(ValueError):
        JwtConfiguration(secret=secret)


def test_api_settings_rejects_unknown_log_level() -> None:
    with pytest.raises(ValueError):
        ApiSettings(log_level="verbose", jwt=JwtConfiguration(secret="api-secret-value-0123456789"))


@pytest.mark.parametrize(
    ("environment_name", "expected"),
    [("development", True), (" Development ", True), ("production", False), ("test", False)],
)
def test_settings_is_development(environment_name: str, expected: bool) -> None:
    settings = WebSettings(environment_name=environment_name, jwt=JwtConfiguration(secret="web-secret-value-0123456789"))

    assert settings.settings_is_development() is expected
