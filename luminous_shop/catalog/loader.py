# luminous_shop/catalog/loader.py
"""
Catalog loader: JSON file -> normalized, immutable CatalogSnapshot.

All shape tolerance lives here. Product files in the wild carry prices as
integer cents, dollar floats or "$12.99" strings, tags as lists or
delimited strings, and names under several keys. Everything is resolved once
at load time so the query path only sees ProductRecord.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..models import PLACEHOLDER_IMAGE, PLACEHOLDER_TEXT, ProductRecord
from ..utils.helpers import dollars_to_cents, slugify, split_list
from .snapshot import CatalogSnapshot

log = logging.getLogger(__name__)

_CENTS_KEYS = ("price_cents", "priceCents", "cents")
_DOLLAR_KEYS = ("price", "unit_price", "amount")


class CatalogLoadError(RuntimeError):
    """Catalog file missing, unreadable or not a product list."""


def _first(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None and value != "":
            return value
    return None


def _text(raw: Mapping[str, Any], *keys: str, default: str = "") -> str:
    value = _first(raw, *keys)
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _price_cents(raw: Mapping[str, Any]) -> int:
    cents = _first(raw, *_CENTS_KEYS)
    if cents is not None:
        try:
            value = round(float(cents))
        except (TypeError, ValueError, OverflowError):
            value = None
        if value is not None:
            return max(0, int(value))

    value = dollars_to_cents(_first(raw, *_DOLLAR_KEYS))
    return max(0, value) if value is not None else 0


def _image(raw: Mapping[str, Any]) -> str:
    image = _first(raw, "image", "imageUrl", "image_url")
    if image is None:
        images = raw.get("images")
        if isinstance(images, list) and images:
            image = images[0]
    if image is None:
        image = raw.get("photo")
    text = str(image).strip() if image is not None else ""
    return text or PLACEHOLDER_IMAGE


def _ingredients(raw: Mapping[str, Any]) -> List[str]:
    if raw.get("ingredients") is not None:
        return split_list(raw.get("ingredients"))
    traits = raw.get("traits")
    if isinstance(traits, Mapping):
        return split_list(traits.get("ingredients"))
    return []


def normalize_product(raw: Any, index: int = 0) -> Optional[ProductRecord]:
    """Map one raw catalog entry to a ProductRecord; None when it has no name."""
    if not isinstance(raw, Mapping):
        return None

    name = _text(raw, "name", "title", "product")
    if not name:
        return None

    brand = _text(raw, "brand", "vendor", "maker", default=PLACEHOLDER_TEXT)
    product_id = _text(raw, "id", "sku", "handle")
    if not product_id:
        base = slugify(name if brand == PLACEHOLDER_TEXT else f"{brand} {name}")
        product_id = base or f"prod_{index}"

    tags = raw.get("tags")
    if tags is None:
        tags = raw.get("keywords")

    return ProductRecord(
        id=product_id,
        name=name,
        brand=brand,
        category=_text(raw, "category", "type", default=PLACEHOLDER_TEXT),
        price_cents=_price_cents(raw),
        image=_image(raw),
        description=_text(raw, "description", "shortDescription", "subtitle"),
        usage=_text(raw, "usage", "howToUse"),
        tags=tuple(split_list(tags)),
        benefits=tuple(split_list(raw.get("benefits"))),
        ingredients=tuple(_ingredients(raw)),
    )


def _dedupe_id(product_id: str, seen: set[str]) -> str:
    candidate, n = product_id, 1
    while candidate in seen:
        candidate = f"{product_id}-{n}"
        n += 1
    seen.add(candidate)
    return candidate


def build_snapshot(raw_items: Iterable[Any], source: str = "<memory>") -> CatalogSnapshot:
    products: List[ProductRecord] = []
    seen: set[str] = set()
    dropped = 0
    renamed = 0

    for i, raw in enumerate(raw_items):
        record = normalize_product(raw, i)
        if record is None:
            dropped += 1
            continue
        unique_id = _dedupe_id(record.id, seen)
        if unique_id != record.id:
            renamed += 1
            record = replace(record, id=unique_id)
        products.append(record)

    if dropped or renamed:
        log.warning(f"CATALOG_NORMALIZE | source={source} | dropped={dropped} | renamed_ids={renamed}")

    return CatalogSnapshot(products=tuple(products), source=source)


def _extract_items(payload: Any) -> List[Any]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ("items", "products"):
            if isinstance(payload.get(key), list):
                return payload[key]
    raise CatalogLoadError("catalog JSON must be an array or an object with an 'items'/'products' array")


def load_catalog_file(path: Union[str, Path]) -> CatalogSnapshot:
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogLoadError(f"catalog file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(f"catalog file unreadable: {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"catalog file is not valid JSON: {path}: {e}") from e

    snapshot = build_snapshot(_extract_items(payload), source=str(path))
    log.info(f"CATALOG_LOADED | source={path} | count={len(snapshot)}")
    return snapshot
