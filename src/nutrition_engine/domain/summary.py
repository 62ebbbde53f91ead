"""Domain models for the consolidated daily nutrition summary."""

from dataclasses import dataclass
from enum import Enum

from nutrition_engine.domain.breakdown import BreakdownConfidence


@dataclass(frozen=True)
class MacroProgress:
    """Consumed amount against a target for one macro."""

    label: str
    consumed: float
    target: float
    unit: str

    @property
    def progress(self) -> float:
        if self.target <= 0:
            return 0.0
        return self.consumed / self.target


class NutrientStatus(str, Enum):
    """Qualitative adequacy of a nutrient."""

    INADEQUATE = "inadequate"
    ON_TRACK = "on_track"
    EXCESSIVE = "excessive"


@dataclass(frozen=True)
class NutrientReading:
    """Status of a nutrient together with the values it was derived from.

    For limits (added sugar, sodium) ``target`` holds the limit.
    """

    status: NutrientStatus
    consumed: float
    target: float


@dataclass(frozen=True)
class Highlight:
    """Short message pointing at a diet quality component."""

    title: str
    detail: str


@dataclass(frozen=True)
class DietQualityComponent:
    """Single weighted sub-score of the diet quality score."""

    name: str
    score: float
    weight: float
    message: str


@dataclass(frozen=True)
class DietQualityScore:
    """Weighted 0-100 diet quality score with letter grade."""

    total: int
    grade: str
    components: tuple[DietQualityComponent, ...]
    top_opportunity: str


@dataclass(frozen=True)
class DailyNutritionSummary:
    """Everything computed for a day of logged meals."""

    calorie_macro: MacroProgress
    protein_macro: MacroProgress
    carbohydrate_macro: MacroProgress
    fat_macro: MacroProgress
    fiber_status: NutrientReading
    added_sugar_status: NutrientReading
    sodium_status: NutrientReading
    vegetable_servings: float
    fruit_servings: float
    vegetable_target: float
    fruit_target: float
    confidence: BreakdownConfidence | None
    diet_quality: DietQualityScore
    notes: tuple[str, ...]
    highlights: tuple[Highlight, ...]
