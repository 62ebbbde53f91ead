"""FastAPI application factory."""

import logging
from dataclasses import replace
from zoneinfo import ZoneInfoNotFoundError

from fastapi import FastAPI, HTTPException, Request, status

from nutrition_engine.api.schemas import (
    DailySummaryRequest,
    HealthIndexRequest,
    assessment_to_dict,
    summary_to_dict,
)
from nutrition_engine.app_logging import configure_logging
from nutrition_engine.config import parse_macro_split, targets_from_settings
from nutrition_engine.containers import AppContainer
from nutrition_engine.domain.errors import InvalidTargetsError
from nutrition_engine.services.aggregator import NutritionAggregator


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/summaries/daily")
    async def daily_summary(
        body: DailySummaryRequest, request: Request
    ) -> dict[str, object]:
        """Summarise the posted entries against the requested targets."""
        state_container: AppContainer = request.app.state.container
        try:
            aggregator = _aggregator_for(state_container, body)
        except InvalidTargetsError as exc:
            logger.warning("Rejected daily summary targets: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        summary = aggregator.summarize(entry.to_entry() for entry in body.entries)
        return summary_to_dict(summary)

    @app.post("/health-index")
    async def health_index(
        body: HealthIndexRequest, request: Request
    ) -> dict[str, object]:
        """Return the heuristic health assessment for a meal summary."""
        state_container: AppContainer = request.app.state.container
        assessment = state_container.health_indexer.assess(body.summary)
        return assessment_to_dict(assessment)

    @app.get("/summaries/today")
    async def today_summary(
        request: Request, timezone: str | None = None
    ) -> dict[str, object]:
        """Summarise the stored entries for the current local day."""
        state_container: AppContainer = request.app.state.container
        service = state_container.daily_summary_service
        if service is None:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Food log storage is not configured",
            )
        try:
            summary = service.summarize_today(timezone_name=timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            logger.warning("Rejected timezone %r: %s", timezone, exc)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown timezone: {timezone}",
            ) from exc
        return summary_to_dict(summary)

    return app


def _aggregator_for(
    container: AppContainer, body: DailySummaryRequest
) -> NutritionAggregator:
    """Return the default aggregator, or one built for overridden targets."""
    if body.calorie_goal is None and body.macro_split is None:
        return container.aggregator
    targets = targets_from_settings(container.settings, body.calorie_goal)
    macros = parse_macro_split(body.macro_split)
    if macros is not None:
        targets = replace(targets, macros=macros)
    return NutritionAggregator(targets=targets, debug=container.aggregator.debug)
