import logging

import pytest

from chunk_planner.config.logging import configure_logging
from chunk_planner.config.settings import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEFAULT_OVERRIDE_PROFILE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.app_name == "chunk-planner"
    assert settings.log_level == "INFO"
    assert settings.default_override_profile == ""


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DEFAULT_OVERRIDE_PROFILE", "compact")
    settings = Settings(_env_file=None)
    assert settings.log_level == "debug"
    assert settings.default_override_profile == "compact"


def test_settings_carry_no_server_address(monkeypatch: pytest.MonkeyPatch) -> None:
    # the listen address is passed to uvicorn, not read from settings
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9000")
    settings = Settings(_env_file=None)
    assert set(Settings.model_fields) == {"app_name", "environment", "log_level", "default_override_profile"}
    assert "host" not in settings.model_dump()


def test_configure_logging_sets_level() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("DEBUG")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        configure_logging("not-a-level")
        assert root.level == logging.INFO
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
