# luminous_shop/routes/catalog_admin.py
"""
POST /admin/reload-products

Re-reads the catalog file and atomically publishes the new snapshot. When
the file is broken the previous snapshot keeps serving and the call fails
with 500. Protected by a bearer token when ADMIN_TOKEN is configured.
"""

from __future__ import annotations

import hmac
import logging
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from ..catalog import CatalogLoadError
from . import current_store

log = logging.getLogger(__name__)
bp = Blueprint("catalog_admin", __name__)


def _authorized() -> bool:
    token = current_app.config.get("ADMIN_TOKEN") or ""
    if not token:
        return True
    header = request.headers.get("Authorization", "")
    supplied = header[len("Bearer "):] if header.startswith("Bearer ") else ""
    return hmac.compare_digest(supplied.encode(), token.encode())


@bp.post("/admin/reload-products")
def reload_products() -> tuple[Dict[str, Any], int]:
    if not _authorized():
        log.warning(f"CATALOG_RELOAD_DENIED | remote={request.remote_addr}")
        return jsonify({"ok": False, "error": "unauthorized"}), 401

    store = current_store()
    try:
        snapshot = store.reload()
    except CatalogLoadError as exc:
        return jsonify({
            "ok": False,
            "error": str(exc),
            "count": len(store.current_snapshot()),
        }), 500

    return jsonify({"ok": True, "count": len(snapshot), "source": snapshot.source}), 200
