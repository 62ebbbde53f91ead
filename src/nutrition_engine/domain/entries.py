"""Domain models for logged meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from nutrition_engine.domain.breakdown import NutritionBreakdown


@dataclass(frozen=True)
class FoodLogEntry:
    """A logged meal as supplied by the food log store."""

    id: UUID
    logged_at: datetime
    summary: str
    estimated_calories: int | None = None
    nutrition: NutritionBreakdown | None = None
    meal_type: str | None = None
