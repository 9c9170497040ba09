"""
Environment-driven configuration.
One class per deployment profile; get_config() picks it from APP_ENV.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class BaseConfig:
    def __init__(self) -> None:
        # Read at instantiation so tests and run.py can set env vars first.
        self.SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-change-me")

        # Catalog
        self.CATALOG_PATH: str = os.getenv("CATALOG_PATH", str(BASE_DIR / "data" / "products.json"))
        self.RELOAD_ON_START: bool = _env_bool("RELOAD_ON_START", "true")

        # Admin reload endpoint; empty token leaves it open (local dev only)
        self.ADMIN_TOKEN: str = os.getenv("ADMIN_TOKEN", "")

        # CORS for /api/*
        self.CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "*")

        # Search paging / fallback sizes
        self.SEARCH_DEFAULT_LIMIT: int = _env_int("SEARCH_DEFAULT_LIMIT", 12)
        self.SEARCH_MAX_LIMIT: int = _env_int("SEARCH_MAX_LIMIT", 50)
        self.SEARCH_FEATURED_LIMIT: int = _env_int("SEARCH_FEATURED_LIMIT", 24)

        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        self.DEBUG: bool = False
        self.TESTING: bool = False


class DevelopmentConfig(BaseConfig):
    def __init__(self) -> None:
        super().__init__()
        self.DEBUG = True


class ProductionConfig(BaseConfig):
    def __init__(self) -> None:
        super().__init__()
        if self.SECRET_KEY == "dev-secret-change-me":
            logging.getLogger(__name__).warning("CONFIG_WARNING | SECRET_KEY is the development default")


class TestingConfig(BaseConfig):
    def __init__(self) -> None:
        super().__init__()
        self.TESTING = True
        self.RELOAD_ON_START = False


_MAPPING = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "test": TestingConfig,
}


def get_config(env: str | None = None) -> BaseConfig:
    """Get configuration instance directly - no complex manager."""
    env = (env or os.getenv("APP_ENV", os.getenv("FLASK_ENV", "development"))).lower()
    config_class = _MAPPING.get(env, DevelopmentConfig)
    cfg = config_class()

    log = logging.getLogger(__name__)
    if not hasattr(get_config, "_logged_startup"):
        log.info(f"CONFIG_STARTUP | env={env} | config_class={config_class.__name__}")
        log.info(f"CATALOG_CONFIG | path={cfg.CATALOG_PATH} | reload_on_start={cfg.RELOAD_ON_START}")
        log.info(
            f"SEARCH_CONFIG | default_limit={cfg.SEARCH_DEFAULT_LIMIT} | max_limit={cfg.SEARCH_MAX_LIMIT} | "
            f"featured_limit={cfg.SEARCH_FEATURED_LIMIT}"
        )
        get_config._logged_startup = True

    return cfg
