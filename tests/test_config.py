"""Tests for Settings."""

from pathlib import Path

import pytest

from international_business.config import Environment, LogLevel, Settings, get_settings

_ENV_VARS = (
    "IB_RATES_FILE",
    "IB_TRANSACTIONS_FILE",
    "IB_LOG_LEVEL",
    "IB_LOG_FORMAT",
    "IB_ENVIRONMENT",
    "IB_DEBUG",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for configuration loading."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.rates_file == Path("data/rates.json")
        assert settings.transactions_file == Path("data/transactions.json")
        assert settings.log_level == LogLevel.INFO
        assert settings.environment == Environment.DEVELOPMENT

    def test_environment_variables_override_defaults(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("IB_RATES_FILE", str(tmp_path / "r.json"))
        monkeypatch.setenv("IB_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("IB_ENVIRONMENT", "staging")

        settings = Settings(_env_file=None)

        assert settings.rates_file == tmp_path / "r.json"
        assert settings.log_level == LogLevel.DEBUG
        assert settings.environment == Environment.STAGING

    def test_get_settings_is_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestEnvironmentDefaults:
    """Tests for values derived from the environment."""

    def test_development_uses_console_logs_and_debug(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.log_format == "console"
        assert settings.debug is True

    def test_production_uses_json_logs_without_debug(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("IB_ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.log_format == "json"
        assert settings.debug is False

    def test_explicit_values_win_over_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("IB_ENVIRONMENT", "production")
        monkeypatch.setenv("IB_LOG_FORMAT", "console")
        monkeypatch.setenv("IB_DEBUG", "true")

        settings = Settings(_env_file=None)

        assert settings.log_format == "console"
        assert settings.debug is True

    def test_keyword_arguments_resolve_the_same_way(self) -> None:
        settings = Settings(_env_file=None, environment=Environment.PRODUCTION)
        assert settings.log_format == "json"
