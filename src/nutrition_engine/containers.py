"""Dependency container wiring for the engine."""

from dataclasses import dataclass

from nutrition_engine.config import Settings, targets_from_settings
from nutrition_engine.services.aggregator import NutritionAggregator
from nutrition_engine.services.cache import InMemoryCache
from nutrition_engine.services.daily import DailySummaryService, FoodLogRepository
from nutrition_engine.services.health_index import FoodHealthIndexer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    aggregator: NutritionAggregator
    health_indexer: FoodHealthIndexer
    daily_summary_service: DailySummaryService | None = None


def build_container(
    settings: Settings | None = None,
    food_log_repository: FoodLogRepository | None = None,
) -> AppContainer:
    """Create the default dependency container.

    The daily summary service is only wired when a food log store is supplied.
    """
    resolved_settings = settings or Settings()
    aggregator = NutritionAggregator(
        targets=targets_from_settings(resolved_settings),
        debug=resolved_settings.debug,
    )
    health_indexer = FoodHealthIndexer(
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.health_index_ttl_seconds,
        debug=resolved_settings.debug,
    )
    daily_summary_service = None
    if food_log_repository is not None:
        daily_summary_service = DailySummaryService(
            repository=food_log_repository, settings=resolved_settings
        )
    return AppContainer(
        settings=resolved_settings,
        aggregator=aggregator,
        health_indexer=health_indexer,
        daily_summary_service=daily_summary_service,
    )
