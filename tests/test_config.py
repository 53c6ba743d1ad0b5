"""Tests for settings loading and logging configuration."""

from __future__ import annotations

import logging

import pytest

from datewise.config import Settings, configure_logging, load_settings

_VARS = ("DATEWISE_TIMEZONE", "TZ", "DATEWISE_LOCALE", "DATEWISE_LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch also undoes values load_dotenv writes
    for name in _VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self, clean_env) -> None:
        settings = load_settings(env_file=None)
        assert settings == Settings(
            default_timezone="UTC", default_locale="en-US", log_level="INFO"
        )

    def test_environment(self, clean_env) -> None:
        clean_env.setenv("DATEWISE_TIMEZONE", "Asia/Tokyo")
        clean_env.setenv("DATEWISE_LOCALE", "ja-JP")
        clean_env.setenv("DATEWISE_LOG_LEVEL", "debug")
        settings = load_settings(env_file=None)
        assert settings.default_timezone == "Asia/Tokyo"
        assert settings.default_locale == "ja-JP"
        assert settings.log_level == "DEBUG"

    def test_tz_fallback(self, clean_env) -> None:
        clean_env.setenv("TZ", "Europe/London")
        assert load_settings(env_file=None).default_timezone == "Europe/London"

    def test_datewise_timezone_wins_over_tz(self, clean_env) -> None:
        clean_env.setenv("TZ", "Europe/London")
        clean_env.setenv("DATEWISE_TIMEZONE", "Asia/Tokyo")
        assert load_settings(env_file=None).default_timezone == "Asia/Tokyo"

    def test_dotenv_file(self, clean_env, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("DATEWISE_TIMEZONE=America/New_York\nDATEWISE_LOCALE=ja\n")
        settings = load_settings(env_file=str(env_file))
        assert settings.default_timezone == "America/New_York"
        assert settings.default_locale == "ja"

    def test_environment_wins_over_dotenv(self, clean_env, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("DATEWISE_LOCALE=ja\n")
        clean_env.setenv("DATEWISE_LOCALE", "en-GB")
        assert load_settings(env_file=str(env_file)).default_locale == "en-GB"

    def test_missing_dotenv_file_ignored(self, clean_env, tmp_path) -> None:
        settings = load_settings(env_file=str(tmp_path / "missing.env"))
        assert settings.default_timezone == "UTC"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_applies_level(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(Settings(log_level="DEBUG"))
        assert calls[0]["level"] == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(Settings(log_level="CHATTY"))
        assert calls[0]["level"] == logging.INFO
