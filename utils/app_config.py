"""Bootstrap configuration. Zero imports from services, state or ui.

Stores the API location and display preferences that must be known before the
first request is made. Config lives in ~/.spendingtracker/config.json.
"""
import json
import os
from pathlib import Path

from utils.constants import (
    API_URL_ENV_VAR,
    DEFAULT_API_BASE_URL,
    DEFAULT_DASHBOARD_PREFIX,
    DEFAULT_SPENDING_PREFIX,
)

CONFIG_DIR = Path.home() / ".spendingtracker"
CONFIG_FILE = CONFIG_DIR / "config.json"
LOG_DIR = CONFIG_DIR / "logs"

DEFAULTS = {
    "api_base_url": DEFAULT_API_BASE_URL,
    "spending_prefix": DEFAULT_SPENDING_PREFIX,
    "dashboard_prefix": DEFAULT_DASHBOARD_PREFIX,
    "timeout": None,
    "date_format": "MM/DD/YYYY",
    "appearance_mode": "system",
    "log_level": "INFO",
}


def load_config() -> dict:
    """Returns {} on missing or corrupt file; never raises."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def get_settings() -> dict:
    """Defaults overlaid with the config file, then the environment."""
    settings = dict(DEFAULTS)
    settings.update(load_config())
    env_url = os.environ.get(API_URL_ENV_VAR)
    if env_url:
        settings["api_base_url"] = env_url
    return settings
