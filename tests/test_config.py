"""Tests for environment-backed settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from grafana_sdk.config import Settings, get_settings

if TYPE_CHECKING:
    import pytest

_ENV_VARS = (
    "APP_NAME",
    "APP_ENV",
    "DEBUG",
    "LOG_LEVEL",
    "GRAFANA_URL",
    "GRAFANA_AUTH",
    "GRAFANA_ORG_ID",
    "GRAFANA_TIMEOUT",
    "GRAFANA_MAX_RETRIES",
)


def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _clean_env(monkeypatch)
        settings = Settings(_env_file=None)
        assert settings.app_name == "grafana-sdk"
        assert settings.grafana_url == "http://localhost:3000"
        assert settings.grafana_auth is None
        assert settings.grafana_org_id == 0
        assert settings.request_timeout == 30
        assert settings.max_retries == 0
        assert settings.debug is False

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _clean_env(monkeypatch)
        monkeypatch.setenv("GRAFANA_URL", "https://grafana.example.com")
        monkeypatch.setenv("GRAFANA_AUTH", "admin:admin")
        monkeypatch.setenv("GRAFANA_ORG_ID", "4")
        monkeypatch.setenv("GRAFANA_TIMEOUT", "2.5")
        monkeypatch.setenv("GRAFANA_MAX_RETRIES", "3")
        monkeypatch.setenv("DEBUG", "true")

        settings = Settings(_env_file=None)

        assert settings.grafana_url == "https://grafana.example.com"
        assert settings.grafana_auth == "admin:admin"
        assert settings.grafana_org_id == 4
        assert settings.request_timeout == 2.5
        assert settings.max_retries == 3
        assert settings.debug is True

    def test_keyword_arguments(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _clean_env(monkeypatch)
        settings = Settings(_env_file=None, grafana_org_id=9)
        assert settings.grafana_org_id == 9


class TestGetSettings:
    """Test the cached accessor."""

    def test_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
