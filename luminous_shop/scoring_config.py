# luminous_shop/scoring_config.py
"""
Field-Weighted Relevance Configuration
──────────────────────────────────────
Weights applied when a query term is found in a product field, plus the
pagination and fallback sizes used by the query engine.
"""

from typing import Dict, Tuple

# Order matters: it is also the order fields are concatenated into the haystack.
FIELD_WEIGHTS: Dict[str, float] = {
    "name": 2.0,
    "brand": 1.0,
    "category": 3.0,
    "description": 0.5,
    "usage": 0.5,
    "tags": 0.5,
    "benefits": 0.5,
    "ingredients": 0.5,
}

FREE_TEXT_FIELDS: Tuple[str, ...] = ("description", "usage", "tags", "benefits", "ingredients")

# Score every record gets when the query carries no search terms.
UNIFORM_SCORE = 1.0

# Pagination
DEFAULT_LIMIT = 12
MIN_LIMIT = 1
MAX_LIMIT = 50

# Size of the "featured" slice returned when nothing matches.
FEATURED_LIMIT = 24


def _check_monotonic() -> None:
    free_text = max(FIELD_WEIGHTS[f] for f in FREE_TEXT_FIELDS)
    if not (FIELD_WEIGHTS["category"] >= FIELD_WEIGHTS["name"] >= FIELD_WEIGHTS["brand"] >= free_text):
        raise ValueError("FIELD_WEIGHTS must satisfy category >= name >= brand >= free-text fields")


_check_monotonic()

__all__ = [
    "FIELD_WEIGHTS",
    "FREE_TEXT_FIELDS",
    "UNIFORM_SCORE",
    "DEFAULT_LIMIT",
    "MIN_LIMIT",
    "MAX_LIMIT",
    "FEATURED_LIMIT",
]
