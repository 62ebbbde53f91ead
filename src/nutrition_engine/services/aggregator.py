"""Assemble the daily nutrition summary from logged meals."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from nutrition_engine.domain.entries import FoodLogEntry
from nutrition_engine.domain.summary import (
    DailyNutritionSummary,
    DietQualityScore,
    Highlight,
    MacroProgress,
    NutrientReading,
)
from nutrition_engine.domain.targets import NutritionTargets
from nutrition_engine.services.diet_quality import DietQualityCalculator, ProduceIntake
from nutrition_engine.services.status import classify_limit, classify_target
from nutrition_engine.services.totals import merge_entries

MAX_HIGHLIGHTS = 2

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NutritionAggregator:
    """Turn a day's log entries into a ``DailyNutritionSummary``.

    The caller decides which entries belong to the day; the aggregator only
    reads its arguments and returns a fresh summary.
    """

    targets: NutritionTargets
    calculator: DietQualityCalculator = field(default_factory=DietQualityCalculator)
    debug: bool = False

    def summarize(self, entries: Iterable[FoodLogEntry]) -> DailyNutritionSummary:
        """Compute the daily summary for the given entries."""
        entries = list(entries)
        targets = self.targets
        merged = merge_entries(entries)
        totals = merged.totals
        fiber = totals.fiber_grams or 0.0
        added_sugar = totals.added_sugar_grams or 0.0
        sodium = totals.sodium_milligrams or 0.0

        calorie_progress = MacroProgress(
            label="Calories",
            consumed=totals.calories or 0.0,
            target=targets.calorie_goal,
            unit="kcal",
        )
        protein_progress = MacroProgress(
            label="Protein",
            consumed=totals.protein_grams or 0.0,
            target=targets.protein_target_grams,
            unit="g",
        )
        carb_progress = MacroProgress(
            label="Carbs",
            consumed=totals.carbohydrate_grams or 0.0,
            target=targets.carbohydrate_target_grams,
            unit="g",
        )
        fat_progress = MacroProgress(
            label="Fat",
            consumed=totals.fat_grams or 0.0,
            target=targets.fat_target_grams,
            unit="g",
        )

        diet_quality = self.calculator.score(
            macros=(protein_progress, carb_progress, fat_progress),
            fiber=fiber,
            fiber_target=targets.fiber_goal_grams,
            added_sugar=added_sugar,
            added_sugar_limit=targets.added_sugar_limit_grams,
            sodium=sodium,
            sodium_limit=targets.sodium_limit_milligrams,
            produce=ProduceIntake(
                vegetable_servings=merged.vegetable_servings,
                vegetable_target=targets.vegetable_servings_target,
                fruit_servings=merged.fruit_servings,
                fruit_target=targets.fruit_servings_target,
            ),
        )

        if self.debug:
            _logger.info(
                "Daily summary: entries=%s calories=%s score=%s grade=%s",
                len(entries),
                calorie_progress.consumed,
                diet_quality.total,
                diet_quality.grade,
            )

        return DailyNutritionSummary(
            calorie_macro=calorie_progress,
            protein_macro=protein_progress,
            carbohydrate_macro=carb_progress,
            fat_macro=fat_progress,
            fiber_status=NutrientReading(
                status=classify_target(fiber, targets.fiber_goal_grams),
                consumed=fiber,
                target=targets.fiber_goal_grams,
            ),
            added_sugar_status=NutrientReading(
                status=classify_limit(added_sugar, targets.added_sugar_limit_grams),
                consumed=added_sugar,
                target=targets.added_sugar_limit_grams,
            ),
            sodium_status=NutrientReading(
                status=classify_limit(sodium, targets.sodium_limit_milligrams),
                consumed=sodium,
                target=targets.sodium_limit_milligrams,
            ),
            vegetable_servings=merged.vegetable_servings,
            fruit_servings=merged.fruit_servings,
            vegetable_target=targets.vegetable_servings_target,
            fruit_target=targets.fruit_servings_target,
            confidence=merged.confidence,
            diet_quality=diet_quality,
            notes=merged.notes,
            highlights=highlight_messages(diet_quality),
        )


def highlight_messages(score: DietQualityScore) -> tuple[Highlight, ...]:
    """Return highlights for the lowest-scoring components, lowest first."""
    ranked = sorted(score.components, key=lambda component: component.score)
    return tuple(
        Highlight(title=component.name, detail=component.message)
        for component in ranked[:MAX_HIGHLIGHTS]
    )
