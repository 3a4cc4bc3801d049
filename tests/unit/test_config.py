import importlib
import logging

import pytest


def reload_config():
    import usersvc.config as config
    return importlib.reload(config)


def test_defaults(monkeypatch):
    for name in ("USERSVC_HOST", "USERSVC_PORT", "USERSVC_LOG_LEVEL", "USERSVC_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
    settings = reload_config().settings
    assert settings.HOST == "127.0.0.1"
    assert settings.PORT == 8080
    assert settings.LOG_LEVEL == "INFO"
    assert settings.BASE_URL == "http://localhost:8080"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("USERSVC_PORT", "9090")
    monkeypatch.setenv("USERSVC_LOG_LEVEL", " debug ")
    settings = reload_config().settings
    assert settings.PORT == 9090
    assert settings.LOG_LEVEL == "DEBUG"


def test_invalid_port_falls_back(monkeypatch):
    monkeypatch.setenv("USERSVC_PORT", "eighty")
    assert reload_config().settings.PORT == 8080


@pytest.mark.parametrize("level", ["VERBOSE", "", "level 5"])
def test_unknown_log_level_falls_back_to_info(monkeypatch, level):
    monkeypatch.setenv("USERSVC_LOG_LEVEL", level)
    assert reload_config().settings.LOG_LEVEL == "INFO"


def test_app_builds_with_unknown_log_level(monkeypatch):
    monkeypatch.setenv("USERSVC_LOG_LEVEL", "VERBOSE")
    config = reload_config()
    import main

    monkeypatch.setattr(main, "settings", config.settings)
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    app = main.create_app()
    assert app.state.store_handle.current.by_username("sally") is not None
