# luminous_shop/routes/health.py
"""
Simple readiness/liveness probe.

Reports how many products the live snapshot holds. An empty catalog is
still "healthy" (the service answers queries) but flagged as degraded.
"""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, jsonify

from . import current_store

bp = Blueprint("health", __name__)


@bp.get("/health")
def health_check() -> tuple[Dict[str, Any], int]:
    snapshot = current_store().current_snapshot()
    return jsonify({
        "status": "healthy" if len(snapshot) else "degraded",
        "service": "luminous-shop",
        "products": len(snapshot),
        "catalog_source": snapshot.source,
        "loaded_at": snapshot.loaded_at.isoformat(),
    }), 200
