# luminous_shop/search/scorer.py
"""
Field-weighted substring scoring.

Each query token contributes one *term group* (the token plus its
synonyms). A group adds the highest weight among the fields that contain any
of its terms; group contributions are summed, so matching more distinct
query tokens beats matching one token in many fields.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Sequence, Tuple

from ..models import ProductRecord
from ..scoring_config import FIELD_WEIGHTS, UNIFORM_SCORE
from .synonyms import expand

TermGroup = FrozenSet[str]


def field_texts(record: ProductRecord) -> Dict[str, str]:
    """Lowercased searchable fields, keyed in FIELD_WEIGHTS order."""
    raw = {
        "name": record.name,
        "brand": record.brand,
        "category": record.category,
        "description": record.description,
        "usage": record.usage,
        "tags": " ".join(record.tags),
        "benefits": " ".join(record.benefits),
        "ingredients": " ".join(record.ingredients),
    }
    return {f: (raw.get(f) or "").lower() for f in FIELD_WEIGHTS}


def haystack(record: ProductRecord) -> str:
    return " ".join(t for t in field_texts(record).values() if t)


def build_term_groups(tokens: Iterable[str]) -> Tuple[TermGroup, ...]:
    return tuple(g for g in (expand(t) for t in tokens) if g)


def _group_score(fields: Dict[str, str], group: TermGroup) -> float:
    best = 0.0
    for name, text in fields.items():
        weight = FIELD_WEIGHTS[name]
        if weight > best and text and any(term in text for term in group):
            best = weight
    return best


def score_record(record: ProductRecord, term_groups: Sequence[TermGroup]) -> float:
    """Relevance >= 0; UNIFORM_SCORE for every record when there are no groups."""
    if not term_groups:
        return UNIFORM_SCORE
    fields = field_texts(record)
    return sum(_group_score(fields, g) for g in term_groups)
