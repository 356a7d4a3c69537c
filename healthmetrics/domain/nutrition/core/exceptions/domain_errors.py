"""Domain exceptions for the nutrition context."""

from ....shared.errors import DomainError


class NutritionDomainError(DomainError):
    """Base exception for nutrition domain errors."""

    pass


class InvalidNutrientDataError(NutritionDomainError, ValueError):
    """Raised when nutrient data cannot be scaled or combined.

    Examples:
    - Negative portion ratio
    - Non-finite portion ratio
    """

    pass
