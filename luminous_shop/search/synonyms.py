# luminous_shop/search/synonyms.py
"""
Domain synonym table for salon / beauty catalog search.

Groups are merged into closed equivalence classes when the module is
imported: any member of a class expands to the whole class, so expanding
an already-expanded set never grows it.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Set

# canonical token -> alternates (alternates may be multi-word phrases; they are
# matched as substrings of the product haystack)
SYNONYM_GROUPS: Dict[str, List[str]] = {
    # ─────────────────────────────────
    # HAIR
    # ─────────────────────────────────
    "shampoo": ["cleanser", "clarifying"],
    "conditioner": ["detangler", "detangling", "leave-in"],
    "mask": ["masque", "deep treatment", "bond repair"],
    "spray": ["mist", "hairspray", "spritz"],
    "purple": ["violet", "toning"],
    "red": ["copper", "auburn"],

    # ─────────────────────────────────
    # SKIN
    # ─────────────────────────────────
    "serum": ["ampoule", "essence", "concentrate"],
    "sensitive": ["gentle", "hypoallergenic", "fragrance-free", "soothing"],
    "anti-aging": ["antiaging", "anti aging", "wrinkle", "fine line", "retinol", "peptide", "collagen"],
    "hydrating": ["hydrate", "hydration", "hyaluronic", "ceramide"],
    "k-beauty": ["kbeauty", "korean", "cica", "centella", "snail"],

    # ─────────────────────────────────
    # NAILS & TOOLS
    # ─────────────────────────────────
    "nail": ["nails", "cuticle", "polish", "gel"],
    "accessories": ["accessory", "tool", "brush", "comb", "clip", "mirror", "roller", "gua sha"],
}


def _build_index(groups: Dict[str, List[str]]) -> Dict[str, FrozenSet[str]]:
    """Map every term to its closed class, merging groups that share a term."""
    classes: List[Set[str]] = []
    for canonical, alternates in groups.items():
        members = {t.strip().lower() for t in [canonical, *alternates] if t.strip()}
        overlapping = [c for c in classes if c & members]
        for c in overlapping:
            members |= c
            classes.remove(c)
        classes.append(members)

    index: Dict[str, FrozenSet[str]] = {}
    for members in classes:
        frozen = frozenset(members)
        for term in frozen:
            index[term] = frozen
    return index


_INDEX: Dict[str, FrozenSet[str]] = _build_index(SYNONYM_GROUPS)


def expand(token: str) -> FrozenSet[str]:
    """Token plus its synonyms; unknown tokens expand to themselves."""
    term = (token or "").strip().lower()
    if not term:
        return frozenset()
    return _INDEX.get(term, frozenset((term,)))


def expand_all(tokens: Iterable[str]) -> FrozenSet[str]:
    out: Set[str] = set()
    for token in tokens:
        out |= expand(token)
    return frozenset(out)


def known_terms() -> FrozenSet[str]:
    return frozenset(_INDEX)
