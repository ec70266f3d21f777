"""Settings — defaults, environment overrides and log format validation."""

import pytest
from pydantic import ValidationError

from reflect_api.config import Settings


def test_defaults(monkeypatch):
    for var in ("ENABLE_FAULT_HOOKS", "LOG_FORMAT", "PORT"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.service_name == "reflect-api-py"
    assert settings.enable_fault_hooks is True
    assert settings.log_format == "json"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ENABLE_FAULT_HOOKS", "false")
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.enable_fault_hooks is False


def test_log_format_is_normalized():
    assert Settings(_env_file=None, log_format="TEXT").log_format == "text"


def test_log_format_rejects_unknown_values():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")
