# luminous_shop/enums.py
from enum import Enum


class MatchMode(str, Enum):
    """How a result set was produced."""
    EXACT = "exact"          # strict pass matched
    FUZZY = "fuzzy"          # text matched but the inline price ceiling was relaxed
    FEATURED = "featured"    # nothing matched; stable slice of the catalog
    EMPTY = "empty"          # catalog has no products
