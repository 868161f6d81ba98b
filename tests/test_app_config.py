# tests/test_app_config.py
from __future__ import annotations

import json
import logging
import logging.config

import pytest

from utils import app_config
from utils.logging_config import build_logging_config, configure_logging


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    monkeypatch.setattr(app_config, "CONFIG_DIR", tmp_path / "cfg")
    monkeypatch.setattr(app_config, "CONFIG_FILE", tmp_path / "cfg" / "config.json")
    monkeypatch.delenv("SPENDINGTRACKER_API_URL", raising=False)
    return tmp_path / "cfg"


def test_missing_config_is_empty(config_home):
    assert app_config.load_config() == {}


def test_corrupt_config_is_empty(config_home):
    config_home.mkdir()
    (config_home / "config.json").write_text("{not json", encoding="utf-8")
    assert app_config.load_config() == {}


def test_settings_defaults(config_home):
    settings = app_config.get_settings()
    assert settings["api_base_url"] == "http://localhost:8080"
    assert settings["spending_prefix"] == "/api/spending"
    assert settings["dashboard_prefix"] == "/api/dashboard"
    assert settings["timeout"] is None


def test_settings_file_then_env_override(config_home, monkeypatch):
    config_home.mkdir()
    (config_home / "config.json").write_text(
        json.dumps({"spending_prefix": "", "api_base_url": "http://from-file"}), encoding="utf-8"
    )
    assert app_config.get_settings()["spending_prefix"] == ""
    assert app_config.get_settings()["api_base_url"] == "http://from-file"

    monkeypatch.setenv("SPENDINGTRACKER_API_URL", "http://from-env")
    assert app_config.get_settings()["api_base_url"] == "http://from-env"


# ----------------------- logging -----------------------


def test_logging_config_without_file_handler():
    cfg = build_logging_config("WARNING", log_dir=None)
    assert list(cfg["handlers"]) == ["console"]
    assert cfg["handlers"]["console"]["level"] == "WARNING"
    assert cfg["loggers"][""]["handlers"] == ["console"]


def test_configure_logging_writes_to_log_dir(tmp_path):
    log_dir = tmp_path / "logs"
    configure_logging("INFO", log_dir=log_dir)
    logging.getLogger("spending.test").debug("hello file")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "hello file" in (log_dir / "app.log").read_text(encoding="utf-8")
    logging.config.dictConfig(build_logging_config("INFO", log_dir=None))
