"""Application configuration."""

import math
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_engine.domain.errors import InvalidTargetsError
from nutrition_engine.domain.targets import MacroDistribution, NutritionTargets

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_MACRO_PARTS = 3
_PERCENT = 100
_PERCENT_TOLERANCE = 1.0
_FRACTION_TOLERANCE = 0.01


class Settings(BaseSettings):
    """Engine settings loaded from ``NUTRITION_*`` environment variables."""

    default_calorie_goal: float = 2000
    macro_split: str | None = None
    fiber_goal_grams: float | None = None
    added_sugar_limit_grams: float | None = None
    sodium_limit_milligrams: float = 2300
    vegetable_servings_target: float = 2.5
    fruit_servings_target: float = 2
    default_timezone: str = "UTC"
    health_index_ttl_seconds: int = 86400
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="NUTRITION_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_macro_split(raw: str | None) -> MacroDistribution | None:
    """Parse a carbs/protein/fat split such as ``50/25/25`` or ``0.5,0.25,0.25``."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if not cleaned:
        return None
    chunks = [chunk.strip() for chunk in cleaned.replace(",", "/").split("/")]
    if len(chunks) != _MACRO_PARTS:
        raise InvalidTargetsError(f"macro split needs three parts, got {raw!r}")
    try:
        values = [float(chunk) for chunk in chunks]
    except ValueError as exc:
        raise InvalidTargetsError(f"macro split is not numeric: {raw!r}") from exc
    if any(value < 0 for value in values):
        raise InvalidTargetsError(f"macro split cannot be negative: {raw!r}")
    total = sum(values)
    if math.isclose(total, _PERCENT, abs_tol=_PERCENT_TOLERANCE):
        values = [value / _PERCENT for value in values]
    elif not math.isclose(total, 1, abs_tol=_FRACTION_TOLERANCE):
        raise InvalidTargetsError(
            f"macro split must add up to 100 percent or 1.0, got {raw!r}"
        )
    carbohydrates, protein, fat = values
    return MacroDistribution(carbohydrates=carbohydrates, protein=protein, fat=fat)


def targets_from_settings(
    settings: Settings, calorie_goal: float | None = None
) -> NutritionTargets:
    """Build nutrition targets from settings, optionally overriding the goal."""
    return NutritionTargets.create(
        calorie_goal=(
            settings.default_calorie_goal if calorie_goal is None else calorie_goal
        ),
        macros=parse_macro_split(settings.macro_split),
        fiber_goal_grams=settings.fiber_goal_grams,
        added_sugar_limit_grams=settings.added_sugar_limit_grams,
        sodium_limit_milligrams=settings.sodium_limit_milligrams,
        vegetable_servings_target=settings.vegetable_servings_target,
        fruit_servings_target=settings.fruit_servings_target,
    )
