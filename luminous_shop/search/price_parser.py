# luminous_shop/search/price_parser.py
"""
Inline price-ceiling detection.

Recognizes "under $25", "less than 30", "below 9.99", "max 15", "< 20",
"<= 20" and "≤ 20". Only the first constraint in the text is honored, but
every matched span is removed so its digits never reach the tokenizer.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from ..utils.helpers import dollars_to_cents

# Symbol triggers first so "<=" is not read as "<" followed by "=20".
_PRICE_CEILING = re.compile(
    r"(?:<=|≤|<|\b(?:under|less\s+than|below|max)\b)"
    r"\s*\$?\s*(\d+(?:\.\d+)?)",
    re.IGNORECASE,
)


def parse_price_ceiling(text: str) -> Tuple[Optional[int], str]:
    """
    Return (ceiling_cents, remaining_text).

    ceiling_cents is None when the text has no constraint.
    """
    if not text:
        return None, ""

    first = _PRICE_CEILING.search(text)
    if first is None:
        return None, text

    ceiling = dollars_to_cents(first.group(1))
    remaining = _PRICE_CEILING.sub(" ", text)
    return ceiling, remaining
