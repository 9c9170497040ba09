from __future__ import annotations

from luminous_shop.search.synonyms import SYNONYM_GROUPS, expand, expand_all, known_terms


def test_shampoo_expansion():
    assert {"shampoo", "cleanser", "clarifying"} <= expand("shampoo")


def test_purple_expansion():
    assert expand("purple") == frozenset({"purple", "violet", "toning"})


def test_unknown_token_is_singleton():
    assert expand("moisturizer") == frozenset({"moisturizer"})


def test_expansion_is_case_insensitive():
    assert expand("Shampoo") == expand("shampoo")


def test_member_expands_to_same_class():
    assert expand("violet") == expand("purple")


def test_expanding_twice_is_idempotent():
    once = expand("shampoo")
    assert expand_all(once) == once
    assert expand_all(expand_all(once)) == once


def test_closure_holds_for_every_term():
    for term in known_terms():
        cls = expand(term)
        assert expand_all(cls) == cls


def test_documented_keys_present():
    for key in ("shampoo", "conditioner", "serum", "mask", "spray", "purple",
                "red", "sensitive", "accessories", "anti-aging"):
        assert key in SYNONYM_GROUPS
        assert key in expand(key)


def test_empty_token():
    assert expand("") == frozenset()
    assert expand_all([]) == frozenset()
