"""Keyword-based health index for meal descriptions."""

import logging
from dataclasses import dataclass

from nutrition_engine.domain.health import FoodHealthAssessment
from nutrition_engine.services.cache import Cache

_logger = logging.getLogger(__name__)

WHOLE_FOODS = ("salad", "bowl", "homemade", "fresh", "roasted", "steamed")
VEGETABLES = (
    "broccoli",
    "spinach",
    "kale",
    "carrot",
    "lettuce",
    "greens",
    "pepper",
    "cabbage",
)
LEAN_PROTEINS = (
    "chicken",
    "turkey",
    "salmon",
    "tuna",
    "cod",
    "tofu",
    "tempeh",
    "lentil",
    "beans",
)
WHOLE_GRAINS = ("quinoa", "brown rice", "oats", "whole wheat", "farro", "barley")
FRUITS = (
    "apple",
    "banana",
    "berries",
    "orange",
    "grape",
    "melon",
    "pear",
    "peach",
    "mango",
)
ULTRA_PROCESSED = (
    "chips",
    "fries",
    "candy",
    "soda",
    "fast food",
    "burger",
    "pizza",
    "donut",
)
SUGARY = (
    "sugary",
    "sweet",
    "caramel",
    "syrup",
    "frosting",
    "dessert",
    "milkshake",
    "sweetened",
)
FRIED = ("fried", "crispy", "tempura", "deep-fried")
HIGH_SODIUM = ("soy sauce", "ramen", "instant", "canned", "processed meats")
SATURATED_FAT = ("butter", "cream", "cheese", "bacon", "sausage", "lard")

# (tag, keywords, weight, highlight) in highlight order.
_POSITIVES = (
    ("whole_foods", WHOLE_FOODS, 0.15, "Whole-food ingredients"),
    ("lean_protein", LEAN_PROTEINS, 0.12, "Lean protein source"),
    ("whole_grain", WHOLE_GRAINS, 0.1, "Whole-grain base"),
    ("fruit", FRUITS, 0.08, "Fruit serving"),
    ("vegetables", VEGETABLES, 0.12, "Vegetable serving"),
)
_NEGATIVES = (
    ("ultra_processed", ULTRA_PROCESSED, 0.18, "Ultra-processed item"),
    ("added_sugar", SUGARY, 0.16, "Added sugar"),
    ("fried", FRIED, 0.12, "Fried preparation"),
    ("high_sodium", HIGH_SODIUM, 0.1, "Likely high sodium"),
    ("saturated_fat", SATURATED_FAT, 0.08, "High saturated fat"),
)

_LEVELS = (
    (80, "excellent"),
    (65, "good"),
    (50, "fair"),
)
MAX_HIGHLIGHTS = 3


@dataclass(frozen=True)
class FoodHealthAnalyzer:
    """Rate a free-text meal summary by the foods it mentions."""

    summary: str

    def compute(self) -> FoodHealthAssessment:
        """Return the heuristic assessment for the summary."""
        lowered = self.summary.lower()
        tags: set[str] = set()
        highlights: list[str] = []

        positive_score = 0.0
        for tag, keywords, weight, highlight in _POSITIVES:
            if _contains_any(lowered, keywords):
                positive_score += weight
                tags.add(tag)
                highlights.append(highlight)

        negative_score = 0.0
        for tag, keywords, weight, highlight in _NEGATIVES:
            if _contains_any(lowered, keywords):
                negative_score += weight
                tags.add(tag)
                highlights.append(highlight)

        balance = max(-1.0, min(1.0, positive_score - negative_score))
        score = max(0, min(100, int((balance + 1) / 2 * 100)))

        return FoodHealthAssessment(
            score=score,
            level=health_level(score),
            tags=tuple(sorted(tags)),
            highlights=tuple(highlights[:MAX_HIGHLIGHTS]),
        )


@dataclass
class FoodHealthIndexer:
    """Memoise health assessments by meal summary text."""

    cache: Cache
    ttl_seconds: int = 86400
    debug: bool = False

    def assess(self, summary: str) -> FoodHealthAssessment:
        """Return the assessment for a summary, computing it on a cache miss."""
        cache_key = f"health:{summary}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodHealthAssessment):
            return cached

        assessment = FoodHealthAnalyzer(summary).compute()
        self.cache.set(cache_key, assessment, ttl_seconds=self.ttl_seconds)
        if self.debug:
            _logger.info(
                "Health index computed: score=%s level=%s",
                assessment.score,
                assessment.level,
            )
        return assessment


def health_level(score: int) -> str:
    """Return the qualitative level for a 0-100 health score."""
    for threshold, level in _LEVELS:
        if score >= threshold:
            return level
    return "poor"


def _contains_any(text: str, terms: tuple[str, ...]) -> bool:
    return any(term in text for term in terms)
