"""Tests for environment settings."""
import importlib

import pytest

from finledger.core import config


@pytest.fixture
def reload_config(monkeypatch):
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: None)
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_settings_read_from_environment(monkeypatch, reload_config):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SQL_ECHO", "yes")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, ,https://b.example")
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15")

    settings = reload_config()

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.SQL_ECHO is True
    assert settings.CORS_ORIGINS == ["https://a.example", "https://b.example"]
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 15


def test_settings_expose_only_what_the_app_reads(reload_config):
    settings = reload_config()

    assert not hasattr(settings, "APP_ENV")
    assert settings.DEFAULT_INVESTMENT_CATEGORY_NAME
