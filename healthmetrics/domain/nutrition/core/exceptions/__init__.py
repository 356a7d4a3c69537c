"""Domain exceptions for the nutrition context."""

from .domain_errors import InvalidNutrientDataError, NutritionDomainError

__all__ = [
    "NutritionDomainError",
    "InvalidNutrientDataError",
]
