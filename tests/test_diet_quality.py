"""Tests for the diet quality calculator."""

import pytest

from nutrition_engine.domain.summary import MacroProgress
from nutrition_engine.services.diet_quality import (
    ALMOST_THERE_MESSAGE,
    FOCUS_MESSAGES,
    MACRO_BALANCE,
    ON_TRACK_MESSAGE,
    ComponentWeights,
    DietQualityCalculator,
    ProduceIntake,
    capped_score,
    component_message,
    inverse_score,
    letter_grade,
    normalized_score,
)


def _macros(protein: float, carbs: float, fat: float) -> tuple[MacroProgress, ...]:
    return (
        MacroProgress(label="Protein", consumed=protein, target=125, unit="g"),
        MacroProgress(label="Carbs", consumed=carbs, target=250, unit="g"),
        MacroProgress(label="Fat", consumed=fat, target=50, unit="g"),
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, 0.0),
        (0.5, 0.55),
        (0.8, 1.0),
        (1.0, 1.0),
        (1.2, 1.0),
        (1.3, 0.1),
        (2.0, 0.0),
    ],
)
def test_normalized_score(value: float, expected: float) -> None:
    assert normalized_score(value) == pytest.approx(expected)


def test_capped_score_has_no_penalty_for_excess() -> None:
    assert capped_score(10, 0) == 0
    assert capped_score(14, 28) == pytest.approx(0.5)
    assert capped_score(60, 28) == 1


def test_inverse_score_penalises_only_overage() -> None:
    assert inverse_score(100, 0) == 1
    assert inverse_score(30, 30) == 1
    assert inverse_score(33, 30) == pytest.approx(0.1)
    assert inverse_score(40, 30) == 0


@pytest.mark.parametrize(
    ("total", "grade"),
    [
        (100, "A"),
        (90, "A"),
        (89, "B"),
        (80, "B"),
        (79, "C"),
        (70, "C"),
        (60, "D"),
        (59, "E"),
        (0, "E"),
    ],
)
def test_letter_grade(total: int, grade: str) -> None:
    assert letter_grade(total) == grade


def test_component_message_thresholds() -> None:
    assert component_message(0.9, "focus") == ON_TRACK_MESSAGE
    assert component_message(0.7, "focus") == ALMOST_THERE_MESSAGE
    assert component_message(0.69, "focus") == "focus"


def test_scored_weights_sum_below_one() -> None:
    weights = [
        ComponentWeights.MACROS,
        ComponentWeights.FIBER,
        ComponentWeights.SUGAR,
        ComponentWeights.SODIUM,
        ComponentWeights.PRODUCE,
    ]

    assert sum(weights) == pytest.approx(0.9)
    assert ComponentWeights.WHOLE_FOOD == 0.1


def test_perfect_day_caps_at_ninety() -> None:
    score = DietQualityCalculator().score(
        macros=_macros(125, 250, 50),
        fiber=30,
        fiber_target=28,
        added_sugar=10,
        added_sugar_limit=50,
        sodium=1500,
        sodium_limit=2300,
        produce=ProduceIntake(
            vegetable_servings=3,
            vegetable_target=2.5,
            fruit_servings=2,
            fruit_target=2,
        ),
    )

    assert [component.score for component in score.components] == [1, 1, 1, 1, 1]
    assert score.total == 90
    assert score.grade == "A"
    assert score.top_opportunity == ON_TRACK_MESSAGE


def test_zero_intake_scores_limits_only() -> None:
    score = DietQualityCalculator().score(
        macros=_macros(0, 0, 0),
        fiber=0,
        fiber_target=28,
        added_sugar=0,
        added_sugar_limit=50,
        sodium=0,
        sodium_limit=2300,
        produce=ProduceIntake(
            vegetable_servings=0,
            vegetable_target=2.5,
            fruit_servings=0,
            fruit_target=2,
        ),
    )

    assert [component.name for component in score.components] == [
        "Macro Balance",
        "Fiber",
        "Added Sugar",
        "Sodium",
        "Produce",
    ]
    assert [component.score for component in score.components] == [0, 0, 1, 1, 0]
    assert score.total == 25
    assert score.grade == "E"
    assert score.top_opportunity == FOCUS_MESSAGES[MACRO_BALANCE]


def test_half_point_total_rounds_up() -> None:
    score = DietQualityCalculator().score(
        macros=_macros(0, 0, 0),
        fiber=2.8,
        fiber_target=28,
        added_sugar=0,
        added_sugar_limit=50,
        sodium=0,
        sodium_limit=2300,
        produce=ProduceIntake(
            vegetable_servings=0,
            vegetable_target=2.5,
            fruit_servings=0,
            fruit_target=2,
        ),
    )

    weighted = sum(
        component.score * component.weight for component in score.components
    )
    assert weighted * 100 == pytest.approx(26.5)
    assert score.total == 27
    assert score.grade == "E"


def test_produce_ratio_is_capped_before_normalizing() -> None:
    score = DietQualityCalculator().score(
        macros=_macros(125, 250, 50),
        fiber=30,
        fiber_target=28,
        added_sugar=0,
        added_sugar_limit=50,
        sodium=0,
        sodium_limit=2300,
        produce=ProduceIntake(
            vegetable_servings=10,
            vegetable_target=2.5,
            fruit_servings=10,
            fruit_target=2,
        ),
    )

    produce = score.components[-1]
    assert produce.name == "Produce"
    assert produce.score == 1


def test_produce_target_below_one_uses_one() -> None:
    score = DietQualityCalculator().score(
        macros=_macros(125, 250, 50),
        fiber=30,
        fiber_target=28,
        added_sugar=0,
        added_sugar_limit=50,
        sodium=0,
        sodium_limit=2300,
        produce=ProduceIntake(
            vegetable_servings=0.5,
            vegetable_target=0,
            fruit_servings=1,
            fruit_target=0.5,
        ),
    )

    assert score.components[-1].score == pytest.approx((0.55 + 1) / 2)
