"""
Luminous Shop Application Factory
=================================

- catalog store (immutable snapshots, atomic reload)
- in-memory catalog search (luminous_shop.search)
- routes auto-registered from luminous_shop.routes
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from flask import Flask
from flask_cors import CORS

from .catalog import CatalogStore
from .config import BaseConfig, get_config

log = logging.getLogger(__name__)

__version__ = "1.0.0"


def create_app(config_name: Optional[str] = None, *, store: Optional[CatalogStore] = None) -> Flask:
    """
    INITIALIZATION ORDER:
    1. Config
    2. Catalog store (loaded from CATALOG_PATH unless one is passed in)
    3. Register routes
    4. Error handlers

    Args:
        config_name: 'development', 'production' or 'testing'; defaults to APP_ENV
        store: pre-built CatalogStore (tests inject one with an in-memory snapshot)
    """
    cfg: BaseConfig = get_config(config_name)

    app = Flask(__name__)
    app.config.from_object(cfg)

    origins_env = (cfg.CORS_ALLOW_ORIGINS or "*").strip()
    allowed_origins = [o.strip() for o in origins_env.split(",") if o.strip()] or ["*"]
    CORS(
        app,
        resources={r"/api/*": {
            "origins": allowed_origins,
            "methods": ["GET", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization"],
        }},
        supports_credentials=False,
    )

    # ────────────────────────────────────────────────────────
    # STEP 1: Catalog store
    # ────────────────────────────────────────────────────────
    if store is None:
        store = CatalogStore(cfg.CATALOG_PATH)
        if cfg.RELOAD_ON_START and not store.try_reload():
            log.warning(f"INIT_CATALOG_EMPTY | path={cfg.CATALOG_PATH} | serving empty catalog until reload")
    app.extensions["catalog_store"] = store
    log.info(f"INIT_CATALOG | products={len(store.current_snapshot())}")

    # ────────────────────────────────────────────────────────
    # STEP 2: Register Routes
    # ────────────────────────────────────────────────────────
    from .routes import register_routes
    blueprints = register_routes(app)
    log.info(f"REGISTER_ROUTES_SUCCESS | blueprints={blueprints}")

    # ────────────────────────────────────────────────────────
    # STEP 3: Error Handlers
    # ────────────────────────────────────────────────────────
    @app.errorhandler(500)
    def handle_internal_error(error):
        log.error(f"INTERNAL_ERROR | error={error}", exc_info=True)
        return {
            "success": False,
            "error": {"code": "INTERNAL_ERROR", "message": str(error) if app.debug else "Internal server error"},
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }, 500

    @app.errorhandler(404)
    def handle_not_found(error):
        return {
            "success": False,
            "error": {"code": "NOT_FOUND", "message": "Endpoint not found"},
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }, 404

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        return {
            "success": False,
            "error": {"code": "METHOD_NOT_ALLOWED", "message": str(error)},
        }, 405

    log.info(f"APP_INIT_COMPLETE | config={type(cfg).__name__} | version={__version__}")
    return app
