"""Pydantic models and serialisers for the HTTP surface."""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from nutrition_engine.domain.breakdown import NutritionBreakdown
from nutrition_engine.domain.entries import FoodLogEntry
from nutrition_engine.domain.health import FoodHealthAssessment
from nutrition_engine.domain.summary import (
    DailyNutritionSummary,
    MacroProgress,
    NutrientReading,
)


class FoodLogEntryPayload(BaseModel):
    """Logged meal payload."""

    id: UUID = Field(default_factory=uuid4)
    logged_at: datetime
    summary: str
    estimated_calories: int | None = Field(default=None, ge=0)
    nutrition: NutritionBreakdown | None = None
    meal_type: str | None = None

    def to_entry(self) -> FoodLogEntry:
        return FoodLogEntry(
            id=self.id,
            logged_at=self.logged_at,
            summary=self.summary,
            estimated_calories=self.estimated_calories,
            nutrition=self.nutrition,
            meal_type=self.meal_type,
        )


class DailySummaryRequest(BaseModel):
    """Request body for a daily summary."""

    calorie_goal: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    macro_split: str | None = None
    entries: list[FoodLogEntryPayload] = Field(default_factory=list)


class HealthIndexRequest(BaseModel):
    """Request body for a meal health assessment."""

    summary: str = Field(min_length=1)


def summary_to_dict(summary: DailyNutritionSummary) -> dict[str, object]:
    """Serialise a daily summary to JSON-compatible data."""
    quality = summary.diet_quality
    return {
        "calories": _macro_to_dict(summary.calorie_macro),
        "protein": _macro_to_dict(summary.protein_macro),
        "carbohydrates": _macro_to_dict(summary.carbohydrate_macro),
        "fat": _macro_to_dict(summary.fat_macro),
        "fiber": _reading_to_dict(summary.fiber_status, "target"),
        "added_sugar": _reading_to_dict(summary.added_sugar_status, "limit"),
        "sodium": _reading_to_dict(summary.sodium_status, "limit"),
        "produce": {
            "vegetable_servings": summary.vegetable_servings,
            "vegetable_target": summary.vegetable_target,
            "fruit_servings": summary.fruit_servings,
            "fruit_target": summary.fruit_target,
        },
        "confidence": (
            summary.confidence.model_dump() if summary.confidence else None
        ),
        "diet_quality": {
            "total": quality.total,
            "grade": quality.grade,
            "top_opportunity": quality.top_opportunity,
            "components": [
                {
                    "name": component.name,
                    "score": component.score,
                    "weight": component.weight,
                    "message": component.message,
                }
                for component in quality.components
            ],
        },
        "notes": list(summary.notes),
        "highlights": [
            {"title": highlight.title, "detail": highlight.detail}
            for highlight in summary.highlights
        ],
    }


def assessment_to_dict(assessment: FoodHealthAssessment) -> dict[str, object]:
    """Serialise a health assessment to JSON-compatible data."""
    return {
        "score": assessment.score,
        "level": assessment.level,
        "tags": list(assessment.tags),
        "highlights": list(assessment.highlights),
    }


def _macro_to_dict(macro: MacroProgress) -> dict[str, object]:
    return {
        "label": macro.label,
        "consumed": macro.consumed,
        "target": macro.target,
        "unit": macro.unit,
        "progress": macro.progress,
    }


def _reading_to_dict(reading: NutrientReading, target_key: str) -> dict[str, object]:
    return {
        "status": reading.status.value,
        "consumed": reading.consumed,
        target_key: reading.target,
    }
