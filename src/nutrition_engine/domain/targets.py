"""Daily nutrition targets derived from a calorie goal."""

import math
from dataclasses import dataclass, field

from nutrition_engine.domain.errors import InvalidTargetsError

# Physiological energy densities, kcal per gram.
PROTEIN_KCAL_PER_GRAM = 4
CARBOHYDRATE_KCAL_PER_GRAM = 4
FAT_KCAL_PER_GRAM = 9

DEFAULT_SODIUM_LIMIT_MG = 2300.0
DEFAULT_VEGETABLE_SERVINGS = 2.5
DEFAULT_FRUIT_SERVINGS = 2.0
MIN_FIBER_GOAL_GRAMS = 20.0
FIBER_GRAMS_PER_1000_KCAL = 14.0
ADDED_SUGAR_CALORIE_SHARE = 0.10


@dataclass(frozen=True)
class MacroDistribution:
    """Share of daily calories per macronutrient (0-1 each)."""

    carbohydrates: float = 0.50
    protein: float = 0.25
    fat: float = 0.25


@dataclass(frozen=True)
class NutritionTargets:
    """Calorie goal plus the nutrient targets and limits derived from it."""

    calorie_goal: float
    fiber_goal_grams: float
    added_sugar_limit_grams: float
    macros: MacroDistribution = field(default_factory=MacroDistribution)
    sodium_limit_milligrams: float = DEFAULT_SODIUM_LIMIT_MG
    vegetable_servings_target: float = DEFAULT_VEGETABLE_SERVINGS
    fruit_servings_target: float = DEFAULT_FRUIT_SERVINGS

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        calorie_goal: float,
        macros: MacroDistribution | None = None,
        fiber_goal_grams: float | None = None,
        added_sugar_limit_grams: float | None = None,
        sodium_limit_milligrams: float = DEFAULT_SODIUM_LIMIT_MG,
        vegetable_servings_target: float = DEFAULT_VEGETABLE_SERVINGS,
        fruit_servings_target: float = DEFAULT_FRUIT_SERVINGS,
    ) -> "NutritionTargets":
        """Build targets, filling fiber and added sugar from the calorie goal.

        Fiber defaults to 14 g per 1000 kcal with a 20 g floor. Added sugar is
        capped at 10% of calories at 4 kcal/g.
        """
        if not math.isfinite(calorie_goal) or calorie_goal <= 0:
            raise InvalidTargetsError(
                f"calorie goal must be a positive number, got {calorie_goal!r}"
            )
        if fiber_goal_grams is None:
            fiber_goal_grams = max(
                MIN_FIBER_GOAL_GRAMS, calorie_goal / 1000 * FIBER_GRAMS_PER_1000_KCAL
            )
        if added_sugar_limit_grams is None:
            added_sugar_limit_grams = (
                calorie_goal * ADDED_SUGAR_CALORIE_SHARE
            ) / CARBOHYDRATE_KCAL_PER_GRAM
        return cls(
            calorie_goal=calorie_goal,
            fiber_goal_grams=fiber_goal_grams,
            added_sugar_limit_grams=added_sugar_limit_grams,
            macros=macros or MacroDistribution(),
            sodium_limit_milligrams=sodium_limit_milligrams,
            vegetable_servings_target=vegetable_servings_target,
            fruit_servings_target=fruit_servings_target,
        )

    @property
    def protein_target_grams(self) -> float:
        return self.calorie_goal * self.macros.protein / PROTEIN_KCAL_PER_GRAM

    @property
    def carbohydrate_target_grams(self) -> float:
        return (
            self.calorie_goal * self.macros.carbohydrates / CARBOHYDRATE_KCAL_PER_GRAM
        )

    @property
    def fat_target_grams(self) -> float:
        return self.calorie_goal * self.macros.fat / FAT_KCAL_PER_GRAM
