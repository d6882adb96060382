"""Tests for settings and logging configuration."""

import logging

from notion_pages.config import Settings
from notion_pages.logging_config import LOGGING_CONFIG, configure_logging


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("STRICT_META_DATES", raising=False)
    settings = Settings(_env_file=None)
    assert settings.strict_meta_dates is False
    assert settings.log_level == "INFO"
    assert settings.port == 8080


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("NOTION_API_KEY", "secret")
    monkeypatch.setenv("STRICT_META_DATES", "true")
    settings = Settings(_env_file=None)
    assert settings.notion_api_key == "secret"
    assert settings.strict_meta_dates is True


def test_configure_logging_level():
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG
    # the module-level config is left as declared
    assert LOGGING_CONFIG["root"]["level"] == "INFO"
    configure_logging("INFO")
