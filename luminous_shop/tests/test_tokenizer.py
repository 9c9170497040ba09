from __future__ import annotations

from luminous_shop.search.tokenizer import parse_query, tokenize


def test_lowercases_and_splits_on_punctuation():
    assert tokenize("Purple, SHAMPOO!! for/blonde") == ["purple", "shampoo", "for", "blonde"]


def test_empty_and_whitespace():
    assert tokenize("") == []
    assert tokenize("   \t\n") == []
    assert tokenize("?!...") == []


def test_deduplicates_in_first_seen_order():
    assert tokenize("mask Mask MASK serum") == ["mask", "serum"]


def test_hyphenated_compound_kept():
    assert tokenize("anti-aging cream -- leave-in") == ["anti-aging", "cream", "leave-in"]


def test_unicode_letters():
    assert tokenize("Crème brûlée") == ["crème", "brûlée"]


def test_blue_shampoo_under_20():
    parsed = parse_query("blue shampoo under $20")
    assert parsed.tokens == ("blue", "shampoo")
    assert parsed.price_ceiling_cents == 2000
    assert "20" not in parsed.tokens


def test_parse_query_without_ceiling():
    parsed = parse_query("Vitamin C")
    assert parsed.tokens == ("vitamin", "c")
    assert parsed.price_ceiling_cents is None
