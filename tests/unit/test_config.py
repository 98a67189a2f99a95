import logging

import pytest
from pydantic import ValidationError

from ontax.config import Settings, get_settings
from ontax.core.breakdown import BreakdownField


def test_settings_defaults(monkeypatch):
    for key in ("ONTAX_DEFAULT_FIELD", "ONTAX_LOG_LEVEL", "ONTAX_FILE_LOGGING"):
        monkeypatch.delenv(key, raising=False)
    settings = Settings()
    assert settings.default_field is BreakdownField.TOTAL_TAX
    assert settings.log_level == "INFO"
    assert settings.log_level_value == logging.INFO
    assert settings.file_logging is False


def test_env_parsing(monkeypatch):
    monkeypatch.setenv("ONTAX_DEFAULT_FIELD", "Net_Pay")
    monkeypatch.setenv("ONTAX_LOG_LEVEL", "debug")
    monkeypatch.setenv("ONTAX_FILE_LOGGING", "yes")
    get_settings.cache_clear()
    settings = get_settings()
    assert settings.default_field is BreakdownField.NET_PAY
    assert settings.log_level == "DEBUG"
    assert settings.file_logging is True
    get_settings.cache_clear()


def test_invalid_default_field_rejected(monkeypatch):
    monkeypatch.setenv("ONTAX_DEFAULT_FIELD", "gross")
    with pytest.raises(ValidationError, match="ONTAX_DEFAULT_FIELD"):
        Settings()


def test_invalid_log_level_rejected(monkeypatch):
    monkeypatch.setenv("ONTAX_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError, match="ONTAX_LOG_LEVEL"):
        Settings()


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.log_level = "DEBUG"
