"""Domain models for the per-meal health index."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodHealthAssessment:
    """Heuristic health rating of a meal description."""

    score: int
    level: str
    tags: tuple[str, ...]
    highlights: tuple[str, ...]
