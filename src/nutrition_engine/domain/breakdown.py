"""Structured nutrient breakdown attached to a logged meal.

The breakdown is produced upstream by a meal analyser and arrives as camelCase
JSON. Every nutrient value is optional: a missing field means the analyser had
no estimate, which is not the same as zero intake.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    allow_inf_nan=False,
)


class NutrientTotals(BaseModel):
    """Nutrient amounts for a meal or an item within it."""

    model_config = _MODEL_CONFIG

    calories: float | None = None
    protein_grams: float | None = None
    carbohydrate_grams: float | None = None
    fat_grams: float | None = None
    fiber_grams: float | None = None
    added_sugar_grams: float | None = None
    sodium_milligrams: float | None = None
    saturated_fat_grams: float | None = None
    unsaturated_fat_grams: float | None = None

    @classmethod
    def zero(cls) -> "NutrientTotals":
        """Return totals with every field present and set to zero."""
        return cls(**dict.fromkeys(cls.model_fields, 0.0))

    def plus(self, other: "NutrientTotals") -> "NutrientTotals":
        """Return the field-wise sum, counting absent values as zero."""
        return NutrientTotals(
            **{
                name: (getattr(self, name) or 0.0) + (getattr(other, name) or 0.0)
                for name in NutrientTotals.model_fields
            }
        )


class Portion(BaseModel):
    """Portion description for a breakdown item."""

    model_config = _MODEL_CONFIG

    unit: str | None = None
    quantity: float | None = None
    text: str | None = None


class BreakdownItem(BaseModel):
    """Single food component of a meal."""

    model_config = _MODEL_CONFIG

    name: str
    description: str | None = None
    portion: Portion | None = None
    totals: NutrientTotals = Field(default_factory=NutrientTotals)
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    tags: tuple[str, ...] | None = None


class BreakdownConfidence(BaseModel):
    """Analyser confidence (0-1) per nutrient."""

    model_config = _MODEL_CONFIG

    overall: float | None = Field(default=None, ge=0.0, le=1.0)
    calories: float | None = Field(default=None, ge=0.0, le=1.0)
    protein: float | None = Field(default=None, ge=0.0, le=1.0)
    carbohydrates: float | None = Field(default=None, ge=0.0, le=1.0)
    fat: float | None = Field(default=None, ge=0.0, le=1.0)
    fiber: float | None = Field(default=None, ge=0.0, le=1.0)
    added_sugar: float | None = Field(default=None, ge=0.0, le=1.0)
    sodium: float | None = Field(default=None, ge=0.0, le=1.0)

    def has_data(self) -> bool:
        """Return True when at least one field carries a value."""
        return any(
            getattr(self, name) is not None
            for name in BreakdownConfidence.model_fields
        )


class NutritionBreakdown(BaseModel):
    """Nutrient totals, items, confidence and notes for one meal."""

    model_config = _MODEL_CONFIG

    totals: NutrientTotals = Field(default_factory=NutrientTotals)
    items: tuple[BreakdownItem, ...] = ()
    confidence: BreakdownConfidence | None = None
    notes: tuple[str, ...] | None = None

    @classmethod
    def empty(cls) -> "NutritionBreakdown":
        return cls()
