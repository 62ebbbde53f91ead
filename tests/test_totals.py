"""Tests for merging entries into day totals."""

import pytest

from nutrition_engine.domain.breakdown import NutritionBreakdown
from nutrition_engine.services.totals import merge_entries
from tests.conftest import make_entry


def test_legacy_estimates_only_touch_calories() -> None:
    merged = merge_entries(
        [make_entry(estimated_calories=400), make_entry(estimated_calories=350)]
    )

    assert merged.totals.calories == 750
    assert merged.totals.protein_grams == 0
    assert merged.totals.carbohydrate_grams == 0
    assert merged.totals.fat_grams == 0
    assert merged.totals.fiber_grams == 0
    assert merged.totals.sodium_milligrams == 0


def test_breakdown_takes_precedence_over_legacy_estimate() -> None:
    entry = make_entry(
        nutrition={"totals": {"calories": 520, "proteinGrams": 32}},
        estimated_calories=900,
    )

    merged = merge_entries([entry])

    assert merged.totals.calories == 520
    assert merged.totals.protein_grams == 32


def test_absent_fields_count_as_zero_when_summing() -> None:
    merged = merge_entries(
        [
            make_entry(nutrition={"totals": {"fiberGrams": 6}}),
            make_entry(nutrition={"totals": {"sodiumMilligrams": 800}}),
            make_entry(estimated_calories=200),
        ]
    )

    assert merged.totals.fiber_grams == 6
    assert merged.totals.sodium_milligrams == 800
    assert merged.totals.calories == 200


def test_breakdown_keeps_absent_fields_unset() -> None:
    breakdown = NutritionBreakdown.model_validate({"totals": {"calories": 100}})

    assert breakdown.totals.protein_grams is None


def test_empty_entries_yield_zero_totals() -> None:
    merged = merge_entries([])

    assert merged.totals.calories == 0
    assert merged.confidence is None
    assert merged.has_confidence_data is False
    assert merged.notes == ()
    assert merged.vegetable_servings == 0
    assert merged.fruit_servings == 0


def test_confidence_none_without_data() -> None:
    merged = merge_entries(
        [
            make_entry(nutrition={"totals": {"calories": 300}}),
            make_entry(nutrition={"totals": {"calories": 200}, "confidence": {}}),
        ]
    )

    assert merged.confidence is None
    assert merged.has_confidence_data is False


def test_confidence_merges_by_maximum() -> None:
    merged = merge_entries(
        [
            make_entry(nutrition={"confidence": {"overall": 0.4}}),
            make_entry(nutrition={"confidence": {"overall": 0.9, "calories": 0.7}}),
        ]
    )

    assert merged.has_confidence_data is True
    assert merged.confidence is not None
    assert merged.confidence.overall == 0.9
    assert merged.confidence.calories == 0.7
    assert merged.confidence.protein == 0


def test_confidence_is_not_averaged() -> None:
    merged = merge_entries(
        [
            make_entry(nutrition={"confidence": {"addedSugar": 0.9}}),
            make_entry(nutrition={"confidence": {"addedSugar": 0.5}}),
            make_entry(nutrition={"confidence": {"addedSugar": 0.1}}),
        ]
    )

    assert merged.confidence is not None
    assert merged.confidence.added_sugar == 0.9


def test_notes_concatenate_in_entry_order() -> None:
    merged = merge_entries(
        [
            make_entry(nutrition={"notes": ["Sauce estimated", "Oil unknown"]}),
            make_entry(estimated_calories=100),
            make_entry(nutrition={"notes": ["Sauce estimated"]}),
        ]
    )

    assert merged.notes == ("Sauce estimated", "Oil unknown", "Sauce estimated")


def test_produce_servings_from_tagged_items() -> None:
    entry = make_entry(
        nutrition={
            "items": [
                {
                    "name": "Roasted carrots",
                    "portion": {"unit": "g", "quantity": 150},
                    "tags": ["vegetables"],
                },
                {"name": "Spinach", "tags": ["leafy_greens"]},
                {
                    "name": "Blueberries",
                    "portion": {"unit": "g", "quantity": 10},
                    "tags": ["fruit"],
                },
                {"name": "Rice", "portion": {"quantity": 200}, "tags": ["grains"]},
                {"name": "Sauce"},
            ]
        }
    )

    merged = merge_entries([entry])

    assert merged.vegetable_servings == pytest.approx(2.5)
    assert merged.fruit_servings == pytest.approx(0.25)


def test_item_with_both_tags_counts_for_each() -> None:
    entry = make_entry(
        nutrition={"items": [{"name": "Tomato", "tags": ["vegetables", "fruit"]}]}
    )

    merged = merge_entries([entry])

    assert merged.vegetable_servings == 1
    assert merged.fruit_servings == 1


def test_legacy_entries_never_add_servings() -> None:
    merged = merge_entries([make_entry(estimated_calories=250, summary="apple")])

    assert merged.fruit_servings == 0


def test_empty_breakdown_suppresses_legacy_estimate() -> None:
    merged = merge_entries(
        [make_entry(nutrition=NutritionBreakdown.empty(), estimated_calories=400)]
    )

    assert merged.totals.calories == 0
