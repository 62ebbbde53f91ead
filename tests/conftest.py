"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from nutrition_engine.config import Settings
from nutrition_engine.containers import AppContainer, build_container
from nutrition_engine.domain.breakdown import NutritionBreakdown
from nutrition_engine.domain.entries import FoodLogEntry
from nutrition_engine.domain.targets import NutritionTargets
from nutrition_engine.services.daily import FoodLogRepository


def make_entry(
    nutrition: NutritionBreakdown | dict[str, object] | None = None,
    estimated_calories: int | None = None,
    logged_at: datetime | None = None,
    summary: str = "meal",
) -> FoodLogEntry:
    """Build a log entry, validating dict breakdowns like upstream JSON."""
    if isinstance(nutrition, dict):
        nutrition = NutritionBreakdown.model_validate(nutrition)
    return FoodLogEntry(
        id=uuid4(),
        logged_at=logged_at or datetime(2026, 3, 10, 12, 0, tzinfo=UTC),
        summary=summary,
        estimated_calories=estimated_calories,
        nutrition=nutrition,
    )


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    entries: list[FoodLogEntry] = field(default_factory=list)
    queries: list[tuple[datetime, datetime]] = field(default_factory=list)

    def list_entries(self, start: datetime, end: datetime) -> list[FoodLogEntry]:
        self.queries.append((start, end))
        return [entry for entry in self.entries if start <= entry.logged_at < end]


@pytest.fixture
def settings() -> Settings:
    return Settings(default_calorie_goal=2000, default_timezone="UTC")


@pytest.fixture
def targets() -> NutritionTargets:
    return NutritionTargets.create(calorie_goal=2000)


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def container(
    settings: Settings, food_log_repository: InMemoryFoodLogRepository
) -> AppContainer:
    return build_container(settings, food_log_repository)
