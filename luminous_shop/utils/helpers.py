"""
Utility helpers
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional

_MONEY_RGX = re.compile(r"^\s*\$?\s*(-?\d[\d,]*(?:\.\d+)?)\s*$")
_SLUG_RGX = re.compile(r"[^a-z0-9]+")
_LIST_SPLIT = re.compile(r"[,;|]")


def dollars_to_cents(raw: Any) -> Optional[int]:
    """'$12.99' / 12.99 / '12' -> 1299 / 1299 / 1200. None when unparseable."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        text = repr(raw)
    else:
        match = _MONEY_RGX.match(str(raw))
        if not match:
            return None
        text = match.group(1).replace(",", "")
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_cents(cents: int, symbol: str = "$") -> str:
    sign = "-" if cents < 0 else ""
    whole, frac = divmod(abs(int(cents)), 100)
    return f"{sign}{symbol}{whole:,}.{frac:02d}"


def price_within(price_cents: int, low: Optional[int], high: Optional[int]) -> bool:
    if low is not None and price_cents < low:
        return False
    if high is not None and price_cents > high:
        return False
    return True


def split_list(raw: Any) -> List[str]:
    """Accept a list or a ',', ';' or '|' separated string; drop blanks."""
    if raw is None:
        return []
    if isinstance(raw, str):
        parts: Iterable[Any] = _LIST_SPLIT.split(raw)
    elif isinstance(raw, (list, tuple)):
        parts = raw
    else:
        parts = [raw]
    return [str(p).strip() for p in parts if p is not None and str(p).strip()]


def slugify(text: str, max_len: int = 80) -> str:
    return _SLUG_RGX.sub("-", (text or "").lower()).strip("-")[:max_len]


def unique(seq: Iterable[Any]) -> List[Any]:
    seen: set[Any] = set()
    out: List[Any] = []
    for x in seq:
        if x not in seen:
            seen.add(x)
            out.append(x)
    return out
