# luminous_shop/search/tokenizer.py
from __future__ import annotations

import re
from typing import List

from ..models import ParsedQuery
from ..utils.helpers import unique
from .price_parser import parse_price_ceiling

# Alphanumeric runs (unicode aware, underscore excluded); a hyphen between two
# runs keeps compounds like "anti-aging" or "leave-in" in one token.
_TOKEN = re.compile(r"[^\W_]+(?:-[^\W_]+)*")


def tokenize(text: str) -> List[str]:
    """Lowercased, de-duplicated search tokens in first-seen order."""
    if not text or not text.strip():
        return []
    return unique(_TOKEN.findall(text.lower()))


def parse_query(text: str) -> ParsedQuery:
    """Pull out the inline price ceiling, then tokenize what is left."""
    ceiling, remaining = parse_price_ceiling(text or "")
    return ParsedQuery(tokens=tuple(tokenize(remaining)), price_ceiling_cents=ceiling)
