# luminous_shop/search/__init__.py
"""
In-memory catalog search: tokenizer, price-ceiling parser, synonym
expansion, field-weighted scoring and the query engine that composes them.
"""

from .engine import clamp_pagination, search  # noqa: F401
from .price_parser import parse_price_ceiling  # noqa: F401
from .scorer import build_term_groups, haystack, score_record  # noqa: F401
from .synonyms import expand, expand_all  # noqa: F401
from .tokenizer import parse_query, tokenize  # noqa: F401

__all__ = [
    "search",
    "clamp_pagination",
    "parse_price_ceiling",
    "parse_query",
    "tokenize",
    "expand",
    "expand_all",
    "build_term_groups",
    "haystack",
    "score_record",
]
