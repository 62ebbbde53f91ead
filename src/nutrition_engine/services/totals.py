"""Merge logged meals into day-level nutrient totals."""

from collections.abc import Iterable
from dataclasses import dataclass

from nutrition_engine.domain.breakdown import (
    BreakdownConfidence,
    BreakdownItem,
    NutrientTotals,
)
from nutrition_engine.domain.entries import FoodLogEntry

VEGETABLE_TAGS = frozenset({"vegetables", "leafy_greens"})
FRUIT_TAGS = frozenset({"fruit"})

_GRAMS_PER_SERVING = 100
_MIN_SERVING = 0.25


@dataclass(frozen=True)
class MergedNutrition:
    """Day-level sums produced from a set of log entries."""

    totals: NutrientTotals
    confidence: BreakdownConfidence | None
    notes: tuple[str, ...]
    vegetable_servings: float
    fruit_servings: float
    has_confidence_data: bool


def merge_entries(entries: Iterable[FoodLogEntry]) -> MergedNutrition:
    """Sum nutrients, confidence, notes and produce servings across entries.

    Entries with a breakdown contribute every totals field, absent fields
    counting as zero. Entries without one contribute their legacy calorie
    estimate only.

    Confidence is merged with an element-wise maximum, not an average: the
    day reports the best confidence any meal had for each nutrient. Keep it
    that way unless the product decision changes.
    """
    totals = NutrientTotals.zero()
    merged_confidence = BreakdownConfidence()
    has_confidence_data = False
    notes: list[str] = []
    vegetable_servings = 0.0
    fruit_servings = 0.0

    for entry in entries:
        nutrition = entry.nutrition
        if nutrition is not None:
            totals = totals.plus(nutrition.totals)
            if nutrition.confidence is not None:
                if nutrition.confidence.has_data():
                    has_confidence_data = True
                merged_confidence = _max_confidence(
                    merged_confidence, nutrition.confidence
                )
            notes.extend(nutrition.notes or ())
            vegetable_servings += _servings(nutrition.items, VEGETABLE_TAGS)
            fruit_servings += _servings(nutrition.items, FRUIT_TAGS)
        elif entry.estimated_calories is not None:
            totals = totals.plus(NutrientTotals(calories=entry.estimated_calories))

    return MergedNutrition(
        totals=totals,
        confidence=merged_confidence if has_confidence_data else None,
        notes=tuple(notes),
        vegetable_servings=vegetable_servings,
        fruit_servings=fruit_servings,
        has_confidence_data=has_confidence_data,
    )


def _max_confidence(
    current: BreakdownConfidence, other: BreakdownConfidence
) -> BreakdownConfidence:
    return BreakdownConfidence(
        **{
            name: max(getattr(current, name) or 0.0, getattr(other, name) or 0.0)
            for name in BreakdownConfidence.model_fields
        }
    )


def _servings(items: Iterable[BreakdownItem], tags: frozenset[str]) -> float:
    """Count produce servings for items carrying any of the given tags."""
    total = 0.0
    for item in items:
        if not item.tags or tags.isdisjoint(item.tags):
            continue
        quantity = item.portion.quantity if item.portion else None
        if quantity is not None:
            total += max(quantity / _GRAMS_PER_SERVING, _MIN_SERVING)
        else:
            total += 1
    return total
