"""Diet quality scoring from a day's macro, nutrient and produce intake."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from nutrition_engine.domain.summary import (
    DietQualityComponent,
    DietQualityScore,
    MacroProgress,
)

MACRO_BALANCE = "Macro Balance"
FIBER = "Fiber"
ADDED_SUGAR = "Added Sugar"
SODIUM = "Sodium"
PRODUCE = "Produce"


class ComponentWeights:
    """Weights of the diet quality components.

    The five scored components sum to 0.90, so the best achievable total is
    90. ``WHOLE_FOOD`` has no scored component attached and is not part of the
    total; do not renormalise the others to compensate.
    """

    MACROS = 0.4
    FIBER = 0.15
    SUGAR = 0.15
    SODIUM = 0.1
    PRODUCE = 0.1
    WHOLE_FOOD = 0.1


ON_TRACK_MESSAGE = "On track—keep it up!"
ALMOST_THERE_MESSAGE = "Almost there—focus on consistency."

FOCUS_MESSAGES = {
    MACRO_BALANCE: "Balance your macros using protein, carbs, and healthy fats.",
    FIBER: "Add more fiber-rich foods like vegetables, beans, or whole grains.",
    ADDED_SUGAR: "Limit sweets and sugary drinks to stay within guidelines.",
    SODIUM: "Reduce salty or processed foods to keep sodium in check.",
    PRODUCE: "Aim for at least five servings of fruits and vegetables.",
}

_ON_TRACK_SCORE = 0.9
_ALMOST_THERE_SCORE = 0.7
_PRODUCE_RATIO_CAP = 1.2

_GRADE_THRESHOLDS = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)


@dataclass(frozen=True)
class ProduceIntake:
    """Vegetable and fruit servings with their daily targets."""

    vegetable_servings: float
    vegetable_target: float
    fruit_servings: float
    fruit_target: float


@dataclass(frozen=True)
class DietQualityCalculator:
    """Combine five component scores into a weighted 0-100 total."""

    def score(  # noqa: PLR0913
        self,
        *,
        macros: Sequence[MacroProgress],
        fiber: float,
        fiber_target: float,
        added_sugar: float,
        added_sugar_limit: float,
        sodium: float,
        sodium_limit: float,
        produce: ProduceIntake,
    ) -> DietQualityScore:
        """Score a day of intake.

        ``macros`` holds the protein, carbohydrate and fat progress records.
        """
        macro_score = _average_normalized([macro.progress for macro in macros])
        fiber_score = capped_score(fiber, fiber_target)
        sugar_score = inverse_score(added_sugar, added_sugar_limit)
        sodium_score = inverse_score(sodium, sodium_limit)
        produce_score = _average_normalized(
            [
                min(
                    produce.vegetable_servings / max(produce.vegetable_target, 1),
                    _PRODUCE_RATIO_CAP,
                ),
                min(
                    produce.fruit_servings / max(produce.fruit_target, 1),
                    _PRODUCE_RATIO_CAP,
                ),
            ]
        )

        components = (
            _component(MACRO_BALANCE, macro_score, ComponentWeights.MACROS),
            _component(FIBER, fiber_score, ComponentWeights.FIBER),
            _component(ADDED_SUGAR, sugar_score, ComponentWeights.SUGAR),
            _component(SODIUM, sodium_score, ComponentWeights.SODIUM),
            _component(PRODUCE, produce_score, ComponentWeights.PRODUCE),
        )

        weighted_total = sum(
            component.score * component.weight for component in components
        )
        total = _round_half_up(max(min(weighted_total * 100, 100), 0))
        # min() keeps the first of equal scores.
        opportunity = min(components, key=lambda component: component.score)

        return DietQualityScore(
            total=total,
            grade=letter_grade(total),
            components=components,
            top_opportunity=opportunity.message,
        )


def normalized_score(ratio: float) -> float:
    """Score a progress ratio, full credit between 0.8 and 1.2 inclusive."""
    if not math.isfinite(ratio) or ratio == 0:
        return 0.0
    if ratio < 0.8:  # noqa: PLR2004
        return ratio * 1.1
    if ratio > 1.2:  # noqa: PLR2004
        return max(0.0, 1.4 - ratio)
    return 1.0


def capped_score(consumed: float, target: float) -> float:
    """Score progress towards a goal with no penalty for exceeding it."""
    if target <= 0:
        return 0.0
    ratio = consumed / target
    if not math.isfinite(ratio):
        return 0.0
    if ratio >= 1:
        return 1.0
    return max(0.0, ratio)


def inverse_score(consumed: float, limit: float) -> float:
    """Score intake against a ceiling, penalising only the overage."""
    if limit <= 0:
        return 1.0
    ratio = consumed / limit
    if not math.isfinite(ratio):
        return 0.0
    if ratio <= 1:
        return 1.0
    return max(0.0, 1.2 - ratio)


def letter_grade(total: int) -> str:
    """Return the letter grade for a 0-100 total."""
    for threshold, grade in _GRADE_THRESHOLDS:
        if total >= threshold:
            return grade
    return "E"


def component_message(score: float, focus: str) -> str:
    if score >= _ON_TRACK_SCORE:
        return ON_TRACK_MESSAGE
    if score >= _ALMOST_THERE_SCORE:
        return ALMOST_THERE_MESSAGE
    return focus


def _component(name: str, score: float, weight: float) -> DietQualityComponent:
    return DietQualityComponent(
        name=name,
        score=score,
        weight=weight,
        message=component_message(score, FOCUS_MESSAGES[name]),
    )


def _average_normalized(ratios: Sequence[float]) -> float:
    if not ratios:
        return 0.0
    return sum(normalized_score(ratio) for ratio in ratios) / len(ratios)


def _round_half_up(value: float) -> int:
    """Round a non-negative value with halves going up."""
    return math.floor(value + 0.5)
