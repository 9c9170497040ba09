"""
Dataclass models for the catalog and query results.

Records are frozen: a catalog snapshot is shared read-only between
concurrent requests and is replaced wholesale on reload.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .enums import MatchMode
from .utils.helpers import format_cents

PLACEHOLDER_TEXT = "—"
PLACEHOLDER_IMAGE = "/images/placeholder.jpg"


@dataclass(frozen=True)
class ProductRecord:
    id: str
    name: str
    price_cents: int = 0
    brand: str = PLACEHOLDER_TEXT
    category: str = PLACEHOLDER_TEXT
    image: str = PLACEHOLDER_IMAGE
    description: str = ""
    usage: str = ""
    tags: Tuple[str, ...] = ()
    benefits: Tuple[str, ...] = ()
    ingredients: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("product id must be non-empty")
        if not self.name or not self.name.strip():
            raise ValueError(f"product {self.id!r} has an empty name")
        if self.price_cents < 0:
            raise ValueError(f"product {self.id!r} has a negative price")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "category": self.category,
            "priceCents": self.price_cents,
            "price": format_cents(self.price_cents),
            "image": self.image,
            "description": self.description,
            "usage": self.usage,
            "tags": list(self.tags),
            "benefits": list(self.benefits),
            "ingredients": list(self.ingredients),
        }


@dataclass(frozen=True)
class SearchFilters:
    """Caller-supplied hard constraints, independent of the query text."""
    category: Optional[str] = None
    min_cents: Optional[int] = None
    max_cents: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in (
            ("category", self.category),
            ("min_cents", self.min_cents),
            ("max_cents", self.max_cents),
        ) if v is not None}


@dataclass(frozen=True)
class ParsedQuery:
    tokens: Tuple[str, ...] = ()
    price_ceiling_cents: Optional[int] = None


@dataclass(frozen=True)
class ResultSet:
    total: int
    items: Tuple[ProductRecord, ...]
    mode: MatchMode
    offset: int
    limit: int
    price_ceiling_cents: Optional[int] = None
    tokens: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def fallback(self) -> bool:
        return self.mode in (MatchMode.FUZZY, MatchMode.FEATURED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "count": self.count,
            "offset": self.offset,
            "limit": self.limit,
            "items": [p.to_dict() for p in self.items],
            "meta": {
                "mode": self.mode.value,
                "fallback": self.fallback,
                "price_ceiling_cents": self.price_ceiling_cents,
                "tokens": list(self.tokens),
            },
        }
