"""Nutrition context: nutrient profiles, portion scaling and totals."""

from .aggregation import aggregate, calculate_nutrients, scale
from .core.exceptions import InvalidNutrientDataError, NutritionDomainError
from .core.value_objects import Macros, NutrientProfile, PortionedItem

__all__ = [
    "Macros",
    "NutrientProfile",
    "PortionedItem",
    "scale",
    "aggregate",
    "calculate_nutrients",
    "NutritionDomainError",
    "InvalidNutrientDataError",
]
