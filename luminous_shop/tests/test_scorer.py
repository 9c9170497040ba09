from __future__ import annotations

import pytest

from luminous_shop.models import ProductRecord
from luminous_shop.scoring_config import FIELD_WEIGHTS, UNIFORM_SCORE
from luminous_shop.search.scorer import build_term_groups, haystack, score_record


def _rec(**kw) -> ProductRecord:
    base = {"id": "x", "name": "Plain Item"}
    base.update(kw)
    return ProductRecord(**base)


def test_empty_groups_score_uniform():
    assert score_record(_rec(), ()) == UNIFORM_SCORE


def test_no_match_scores_zero():
    assert score_record(_rec(), build_term_groups(["moisturizer"])) == 0.0


def test_category_match_beats_description_match():
    groups = build_term_groups(["repair"])
    in_category = _rec(id="c", category="Hair / Repair")
    in_description = _rec(id="d", description="Helps repair damaged ends.")
    assert score_record(in_category, groups) > score_record(in_description, groups)


@pytest.mark.parametrize(
    "field_kw,weight_key",
    [
        ({"category": "Hair / Gloss"}, "category"),
        ({"name": "Gloss Drops"}, "name"),
        ({"brand": "Gloss Co"}, "brand"),
        ({"description": "adds gloss"}, "description"),
        ({"tags": ("gloss",)}, "tags"),
    ],
)
def test_single_field_weights(field_kw, weight_key):
    record = _rec(**field_kw)
    assert score_record(record, build_term_groups(["gloss"])) == FIELD_WEIGHTS[weight_key]


def test_token_counts_once_at_its_best_field():
    record = _rec(name="Gloss Drops", category="Hair / Gloss", description="gloss gloss gloss",
                  tags=("gloss",))
    assert score_record(record, build_term_groups(["gloss"])) == FIELD_WEIGHTS["category"]


def test_scores_sum_across_tokens():
    record = _rec(name="Argan Gloss Drops")
    assert score_record(record, build_term_groups(["argan", "gloss"])) == 2 * FIELD_WEIGHTS["name"]


def test_synonym_hit_counts():
    record = _rec(name="Violet Rinse")
    assert score_record(record, build_term_groups(["purple"])) == FIELD_WEIGHTS["name"]


def test_haystack_contains_all_fields_lowercased():
    record = _rec(name="Bond Mask", brand="Lumière", category="Hair / Repair", usage="Weekly",
                  benefits=("Strength",), ingredients=("Keratin",))
    text = haystack(record)
    for part in ("bond mask", "lumière", "hair / repair", "weekly", "strength", "keratin"):
        assert part in text


def test_weights_are_monotonic():
    free_text = max(FIELD_WEIGHTS[f] for f in ("description", "usage", "tags", "benefits", "ingredients"))
    assert FIELD_WEIGHTS["category"] >= FIELD_WEIGHTS["name"] >= FIELD_WEIGHTS["brand"] >= free_text
