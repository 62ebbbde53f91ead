"""Classify consumed amounts against targets and limits."""

import math

from nutrition_engine.domain.summary import NutrientStatus

DEFAULT_LOWER_BOUND = 0.9
DEFAULT_UPPER_BOUND = 1.1
# Limits have no tolerance above 100%.
LIMIT_UPPER_BOUND = 1.0


def ratio(consumed: float, target: float) -> float:
    """Return consumed / target, or 0 for a non-positive target."""
    if target <= 0:
        return 0.0
    value = consumed / target
    if not math.isfinite(value):
        return 0.0
    return value


def classify(
    value: float,
    lower_bound: float = DEFAULT_LOWER_BOUND,
    upper_bound: float = DEFAULT_UPPER_BOUND,
) -> NutrientStatus:
    """Map a consumed/target ratio to a nutrient status."""
    if not math.isfinite(value):
        value = 0.0
    if value < lower_bound:
        return NutrientStatus.INADEQUATE
    if value > upper_bound:
        return NutrientStatus.EXCESSIVE
    return NutrientStatus.ON_TRACK


def classify_target(consumed: float, target: float) -> NutrientStatus:
    """Classify a nutrient that has a goal to reach."""
    return classify(ratio(consumed, target))


def classify_limit(consumed: float, limit: float) -> NutrientStatus:
    """Classify a nutrient that has a ceiling; any overage is excessive."""
    return classify(ratio(consumed, limit), upper_bound=LIMIT_UPPER_BOUND)
