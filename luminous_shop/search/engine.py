# luminous_shop/search/engine.py
"""
Catalog Query Engine
====================

search(catalog, query, filters, offset, limit) -> ResultSet

Pipeline:
1. Parse the inline price ceiling, tokenize the rest, expand synonyms
2. Score every record
3. Structured filters (category, price range) are hard exclusions
4. The inline price ceiling is a hard exclusion
5. Strict pass: score > 0 (or uniform score for an empty query)
6. Fallback when the strict pass is empty:
   a. fuzzy    - text matches with the inline price ceiling relaxed
   b. featured - first FEATURED_LIMIT records in catalog order
7. Sort by score desc, then case-folded name, then id
8. Clamp and apply offset / limit

Only an empty catalog yields an empty result. Pure: no I/O, no mutation.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..enums import MatchMode
from ..models import ProductRecord, ResultSet, SearchFilters
from ..scoring_config import DEFAULT_LIMIT, FEATURED_LIMIT, MAX_LIMIT, MIN_LIMIT
from ..utils.helpers import price_within
from .scorer import build_term_groups, score_record
from .tokenizer import parse_query

log = logging.getLogger(__name__)

Scored = Tuple[float, ProductRecord]


def _coerce_int(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default


def clamp_pagination(offset: Any, limit: Any, *, default_limit: int = DEFAULT_LIMIT,
                     max_limit: int = MAX_LIMIT) -> Tuple[int, int]:
    """Tolerant pagination: bad values fall back to defaults, never raise."""
    max_limit = max(MIN_LIMIT, max_limit)
    default_limit = min(max(MIN_LIMIT, default_limit), max_limit)
    off = max(0, _coerce_int(offset, 0))
    lim = min(max(MIN_LIMIT, _coerce_int(limit, default_limit)), max_limit)
    return off, lim


def _passes_filters(record: ProductRecord, filters: SearchFilters) -> bool:
    if filters.category:
        if record.category.strip().lower() != filters.category.strip().lower():
            return False
    return price_within(record.price_cents, filters.min_cents, filters.max_cents)


def _rank(scored: Iterable[Scored]) -> List[Scored]:
    return sorted(scored, key=lambda sp: (-sp[0], sp[1].name.casefold(), sp[1].id))


def search(
    catalog: Iterable[ProductRecord],
    query: Optional[str] = "",
    filters: Optional[SearchFilters] = None,
    offset: Any = 0,
    limit: Any = DEFAULT_LIMIT,
    *,
    featured_limit: int = FEATURED_LIMIT,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> ResultSet:
    records: Sequence[ProductRecord] = tuple(catalog)
    filters = filters or SearchFilters()
    off, lim = clamp_pagination(offset, limit, default_limit=default_limit, max_limit=max_limit)

    parsed = parse_query(query if isinstance(query, str) else "")
    ceiling = parsed.price_ceiling_cents

    if not records:
        return ResultSet(total=0, items=(), mode=MatchMode.EMPTY, offset=off, limit=lim,
                         price_ceiling_cents=ceiling, tokens=parsed.tokens)

    groups = build_term_groups(parsed.tokens)
    pool: List[Scored] = [
        (score_record(p, groups), p) for p in records if _passes_filters(p, filters)
    ]

    # Empty query: every score is uniform (> 0), so one cutoff serves both cases.
    matched = [sp for sp in pool if sp[0] > 0]
    strict = [sp for sp in matched if ceiling is None or sp[1].price_cents <= ceiling]

    if strict:
        mode, survivors = MatchMode.EXACT, strict
    elif matched:
        mode, survivors = MatchMode.FUZZY, matched
    else:
        base = pool or [(0.0, p) for p in records]
        mode, survivors = MatchMode.FEATURED, base[:max(1, featured_limit)]

    ranked = _rank(survivors)
    page = tuple(p for _, p in ranked[off:off + lim])

    log.debug(
        f"CATALOG_QUERY | tokens={list(parsed.tokens)} | ceiling={ceiling} | "
        f"filters={filters.to_dict()} | mode={mode.value} | total={len(ranked)} | returned={len(page)}"
    )

    return ResultSet(
        total=len(ranked),
        items=page,
        mode=mode,
        offset=off,
        limit=lim,
        price_ceiling_cents=ceiling,
        tokens=parsed.tokens,
    )
