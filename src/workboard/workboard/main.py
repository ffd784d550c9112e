from __future__ import annotations

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .logging_config import configure_logging, get_logger

_SETTING_NAMES = ("DATA_DIR", "HISTORY_PAGE_SIZE", "ANALYTICS_DAYS", "LOG_LEVEL", "DEBUG")


def load_settings() -> dict:
    """Read the settings module picked by APP_ENV (after loading .env)."""
    load_dotenv(override=False)
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    out = {name: getattr(settings, name) for name in _SETTING_NAMES if hasattr(settings, name)}
    out["SETTINGS_MODULE"] = settings_module
    return out


def create_container() -> Container:
    settings = load_settings()
    configure_logging(level=settings.get("LOG_LEVEL", "INFO"))

    get_logger("main").debug(
        "settings=%s data_dir=%s page_size=%s",
        settings["SETTINGS_MODULE"], settings.get("DATA_DIR"), settings.get("HISTORY_PAGE_SIZE"),
    )
    return build_container(settings=settings)
