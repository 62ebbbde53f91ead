"""Daily summaries for a user's local calendar day."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo

from nutrition_engine.config import Settings, targets_from_settings
from nutrition_engine.domain.entries import FoodLogEntry
from nutrition_engine.domain.summary import DailyNutritionSummary
from nutrition_engine.domain.targets import NutritionTargets
from nutrition_engine.services.aggregator import NutritionAggregator


class FoodLogRepository(Protocol):
    """Read interface for logged meals."""

    def list_entries(self, start: datetime, end: datetime) -> list[FoodLogEntry]:
        """Return entries logged within ``[start, end)`` (UTC)."""


@dataclass
class DailySummaryService:
    """Fetch a day's entries and summarise them."""

    repository: FoodLogRepository
    settings: Settings

    def summarize_day(
        self,
        day: date,
        timezone_name: str | None = None,
        targets: NutritionTargets | None = None,
    ) -> DailyNutritionSummary:
        """Return the summary for ``day`` in the given timezone."""
        tz = ZoneInfo(timezone_name or self.settings.default_timezone)
        start = datetime.combine(day, time.min, tzinfo=tz)
        end = start + timedelta(days=1)
        entries = self.repository.list_entries(
            start.astimezone(UTC), end.astimezone(UTC)
        )
        day_entries = [
            entry for entry in entries if _local_date(entry.logged_at, tz) == day
        ]
        aggregator = NutritionAggregator(
            targets=targets or targets_from_settings(self.settings),
            debug=self.settings.debug,
        )
        return aggregator.summarize(day_entries)

    def summarize_today(
        self,
        timezone_name: str | None = None,
        targets: NutritionTargets | None = None,
        now: datetime | None = None,
    ) -> DailyNutritionSummary:
        """Return the summary for the current day in the given timezone."""
        tz = ZoneInfo(timezone_name or self.settings.default_timezone)
        current = now.astimezone(tz) if now else datetime.now(tz=tz)
        return self.summarize_day(current.date(), tz.key, targets)


def _local_date(moment: datetime, tz: ZoneInfo) -> date:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(tz).date()
