# luminous_shop/catalog/__init__.py
"""
Catalog loading and the live snapshot holder.

The query engine never reads files; it is handed the snapshot returned by
the `CatalogStore` the app factory keeps in `app.extensions`.
"""

from __future__ import annotations

from .loader import CatalogLoadError, build_snapshot, load_catalog_file, normalize_product  # noqa: F401
from .snapshot import CatalogSnapshot  # noqa: F401
from .store import CatalogStore  # noqa: F401

__all__ = [
    "CatalogLoadError",
    "CatalogSnapshot",
    "CatalogStore",
    "build_snapshot",
    "load_catalog_file",
    "normalize_product",
]
