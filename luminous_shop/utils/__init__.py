# luminous_shop/utils/__init__.py
"""
Expose helpers at package-level for convenience:

    from luminous_shop.utils import format_cents
"""

from .helpers import (  # noqa: F401
    dollars_to_cents,
    format_cents,
    price_within,
    slugify,
    split_list,
    unique,
)

__all__ = [
    "dollars_to_cents",
    "format_cents",
    "price_within",
    "slugify",
    "split_list",
    "unique",
]
