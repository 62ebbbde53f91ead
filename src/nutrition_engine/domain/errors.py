"""Errors raised by the nutrition engine."""


class NutritionEngineError(Exception):
    """Base class for nutrition engine errors."""


class InvalidTargetsError(NutritionEngineError, ValueError):
    """Raised when nutrition targets cannot be built from the given values."""
