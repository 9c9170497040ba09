# luminous_shop/routes/__init__.py
"""
Blueprint auto-registration.

Put any flask.Blueprint in `luminous_shop/routes/<name>.py`
with the variable name **bp** and it will be discovered &
registered when `register_routes(app)` is called.

The app factory (luminous_shop.__init__.py) stores the shared
`catalog_store` in `app.extensions` so the individual route
modules can reach it via `current_store()`.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from types import ModuleType
from typing import List

from flask import Blueprint, Flask, current_app

from ..catalog import CatalogStore

log = logging.getLogger(__name__)


def current_store() -> CatalogStore:
    return current_app.extensions["catalog_store"]


def register_routes(app: Flask) -> List[str]:
    registered: List[str] = []
    for _, name, _ in pkgutil.iter_modules(__path__):
        module: ModuleType = importlib.import_module(f"{__name__}.{name}")
        bp: Blueprint | None = getattr(module, "bp", None)
        if isinstance(bp, Blueprint):
            app.register_blueprint(bp)
            registered.append(bp.name)
            log.info(f"REGISTER_ROUTES_SUCCESS | blueprint={bp.name}")
    return registered
