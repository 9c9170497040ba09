from __future__ import annotations

import json
from typing import List

import pytest

from luminous_shop import create_app
from luminous_shop.catalog import CatalogStore, build_snapshot
from luminous_shop.models import ProductRecord


@pytest.fixture()
def scenario_catalog() -> List[ProductRecord]:
    return [
        ProductRecord(id="a", name="Purple Toning Shampoo", category="Hair / Shampoo", price_cents=1800),
        ProductRecord(id="b", name="Vitamin C Serum", category="Skin / Serum", price_cents=2900),
    ]


RAW_PRODUCTS = [
    {"id": "shampoo-1", "name": "Purple Toning Shampoo", "brand": "Lumière", "category": "Hair / Shampoo",
     "priceCents": 1800, "tags": ["blonde"]},
    {"id": "shampoo-2", "name": "Clarifying Wash", "brand": "Salon Basics", "category": "Hair / Shampoo",
     "price": "$24.00"},
    {"id": "mask-1", "name": "Bond Repair Mask", "brand": "Lumière", "category": "Hair / Repair",
     "price": 32, "ingredients": "keratin; argan oil"},
    {"id": "serum-1", "name": "Vitamin C Serum", "brand": "Glow Lab", "category": "Skin / Serum",
     "price_cents": 2900},
    {"id": "comb-1", "name": "Wide Tooth Comb", "category": "Tools / Accessory", "priceCents": 600},
]


@pytest.fixture()
def catalog_file(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(RAW_PRODUCTS), encoding="utf-8")
    return path


@pytest.fixture()
def app(catalog_file, monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "")
    store = CatalogStore(catalog_file)
    store.reload()
    app = create_app("testing", store=store)
    return app


@pytest.fixture()
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture()
def empty_client(tmp_path):
    store = CatalogStore(tmp_path / "missing.json", snapshot=build_snapshot([]))
    app = create_app("testing", store=store)
    with app.test_client() as c:
        yield c
