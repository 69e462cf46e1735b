"""
Process settings tests.
"""

from __future__ import annotations

import logging

import pytest
import structlog
from pydantic import ValidationError

from flowtimer.infra.logging import configure_logging
from flowtimer.infra.settings import Settings


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_FORMAT", "ENV", "FLOWTIMER_CONFIG", "FLOWTIMER_TICK_INTERVAL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.config_path is None
    assert settings.tick_interval == 1.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("FLOWTIMER_CONFIG", "/etc/flowtimer/schedule.yaml")
    monkeypatch.setenv("FLOWTIMER_TICK_INTERVAL", "0.5")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.config_path == "/etc/flowtimer/schedule.yaml"
    assert settings.tick_interval == 0.5


def test_negative_tick_interval_rejected(monkeypatch):
    monkeypatch.setenv("FLOWTIMER_TICK_INTERVAL", "-1")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_env_file_is_read(tmp_path, monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("ENV=test\n", encoding="utf-8")
    assert Settings(_env_file=str(env_file)).env == "test"


def test_configure_logging_installs_single_root_handler():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        configure_logging(level="debug", fmt="console")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
    finally:
        root.handlers = handlers
        root.setLevel(level)
        structlog.reset_defaults()
