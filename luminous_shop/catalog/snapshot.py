# luminous_shop/catalog/snapshot.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterator, Optional, Tuple

from ..models import ProductRecord


@dataclass(frozen=True)
class CatalogSnapshot:
    """Immutable, point-in-time ordered sequence of products."""
    products: Tuple[ProductRecord, ...] = ()
    source: str = "<memory>"
    loaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    _by_id: Dict[str, ProductRecord] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "products", tuple(self.products))
        object.__setattr__(self, "_by_id", {p.id: p for p in self.products})

    def __len__(self) -> int:
        return len(self.products)

    def __iter__(self) -> Iterator[ProductRecord]:
        return iter(self.products)

    def get(self, product_id: str) -> Optional[ProductRecord]:
        return self._by_id.get(product_id)
