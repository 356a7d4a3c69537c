"""Value objects for the nutrition context."""

from .nutrient_profile import MACRO_FIELDS, Macros, NutrientProfile
from .portioned_item import PortionedItem

__all__ = [
    "MACRO_FIELDS",
    "Macros",
    "NutrientProfile",
    "PortionedItem",
]
