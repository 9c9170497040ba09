# luminous_shop/routes/product_search.py
"""
Product Search API - in-memory catalog query for the storefront grid

    GET /api/products?q=purple+shampoo+under+$20&category=Hair / Shampoo&offset=0&limit=12
    GET /api/products/<product_id>

Tolerant by design: bad pagination is clamped, bad price filters are
ignored, and a non-empty catalog always yields a non-empty result set
(see `meta.mode` / `meta.fallback`).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from flask import Blueprint, current_app, jsonify, request

from ..models import SearchFilters
from ..search import search
from ..utils.helpers import dollars_to_cents
from . import current_store

log = logging.getLogger(__name__)
bp = Blueprint("product_search", __name__)


# ============================================================================
# Request Parsing
# ============================================================================

def _parse_cents(args: Mapping[str, Any], cents_key: str, dollars_key: str,
                 warnings: List[str]) -> Optional[int]:
    key = cents_key
    raw_cents = args.get(cents_key)
    if raw_cents not in (None, ""):
        try:
            value = int(float(raw_cents))
        except (TypeError, ValueError, OverflowError):
            warnings.append(f"'{cents_key}' ignored: not a number")
            return None
    else:
        key = dollars_key
        raw_dollars = args.get(dollars_key)
        if raw_dollars in (None, ""):
            return None
        value = dollars_to_cents(raw_dollars)
        if value is None:
            warnings.append(f"'{dollars_key}' ignored: not a number")
            return None

    if value < 0:
        warnings.append(f"'{key}' ignored: negative")
        return None
    return value


def _parse_request(args: Mapping[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    """
    Normalize query args. Never rejects; returns (params, warnings).
    """
    warnings: List[str] = []

    query = args.get("q") or args.get("query") or ""
    category = (args.get("category") or "").strip() or None
    min_cents = _parse_cents(args, "min_cents", "min_price", warnings)
    max_cents = _parse_cents(args, "max_cents", "max_price", warnings)

    if min_cents is not None and max_cents is not None and min_cents > max_cents:
        warnings.append("'min' greater than 'max'; bounds swapped")
        min_cents, max_cents = max_cents, min_cents

    params = {
        "query": str(query).strip(),
        "filters": SearchFilters(category=category, min_cents=min_cents, max_cents=max_cents),
        "offset": args.get("offset"),
        "limit": args.get("limit"),
    }
    return params, warnings


# ============================================================================
# API Endpoints
# ============================================================================

@bp.get("/api/products")
def product_search() -> tuple[Dict[str, Any], int]:
    try:
        params, warnings = _parse_request(request.args)
        cfg = current_app.config

        snapshot = current_store().current_snapshot()
        result = search(
            snapshot,
            params["query"],
            params["filters"],
            offset=params["offset"],
            limit=params["limit"],
            featured_limit=cfg.get("SEARCH_FEATURED_LIMIT", 24),
            default_limit=cfg.get("SEARCH_DEFAULT_LIMIT", 12),
            max_limit=cfg.get("SEARCH_MAX_LIMIT", 50),
        )

        log.info(
            f"PRODUCT_QUERY | q='{params['query']}' | filters={params['filters'].to_dict()} | "
            f"mode={result.mode.value} | total={result.total} | returned={result.count}"
        )
        if warnings:
            log.warning(f"PRODUCT_QUERY_WARNINGS | warnings={warnings}")

        body = result.to_dict()
        body["success"] = True
        body["meta"]["query"] = params["query"]
        body["meta"]["filters_applied"] = params["filters"].to_dict()
        if warnings:
            body["meta"]["warnings"] = warnings
        if result.fallback:
            body["meta"]["note"] = "No exact matches; showing closest items"
        return jsonify(body), 200

    except Exception as exc:
        log.error(f"PRODUCT_QUERY_ERROR | error={exc}", exc_info=True)
        return jsonify({
            "success": False,
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred while processing your request",
            },
        }), 500


@bp.get("/api/products/<product_id>")
def product_detail(product_id: str) -> tuple[Dict[str, Any], int]:
    product = current_store().current_snapshot().get(product_id)
    if product is None:
        return jsonify({
            "success": False,
            "error": {"code": "NOT_FOUND", "message": f"No product with id '{product_id}'"},
        }), 404
    return jsonify({"success": True, "item": product.to_dict()}), 200
