"""
Nutrient profile models.

Calorie, macro and micronutrient values for a food, meal or day.
Every field is optional: an absent value means "unknown", never zero.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MACRO_FIELDS = ("protein", "carbs", "fat")


class Macros(BaseModel):
    """
    Macronutrients in grams.

    Example:
        >>> Macros(protein=31.0, fat=3.6).carbs is None
        True
    """

    model_config = ConfigDict(frozen=True)

    protein: Optional[float] = Field(None, ge=0, description="Protein in g")
    carbs: Optional[float] = Field(None, ge=0, description="Carbohydrates in g")
    fat: Optional[float] = Field(None, ge=0, description="Total fat in g")

    def is_empty(self) -> bool:
        """True when no macro is known."""
        return all(getattr(self, name) is None for name in MACRO_FIELDS)


class NutrientProfile(BaseModel):
    """
    Nutrient profile for a food item, meal or daily total.

    Attributes:
        calories: Energy in kcal
        macros: Protein/carbs/fat in grams
        micros: Micronutrients by name (fiber, sodium, vitamin_c, ...)

    Example:
        >>> profile = NutrientProfile.model_validate(
        ...     {"calories": 165, "macros": {"protein": 31.0, "fat": 3.6}}
        ... )
        >>> profile.macros.protein
        31.0
    """

    model_config = ConfigDict(frozen=True)

    calories: Optional[float] = Field(None, ge=0, description="Energy in kcal")
    macros: Optional[Macros] = None
    micros: Optional[dict[str, float]] = None

    @field_validator("micros")
    @classmethod
    def micros_non_negative(cls, v: Optional[dict[str, float]]) -> Optional[dict[str, float]]:
        """Ensure every micronutrient amount is non-negative."""
        if v is None:
            return v
        for name, amount in v.items():
            if amount is not None and amount < 0:
                raise ValueError(f"Micronutrient {name} cannot be negative, got {amount}")
        return v

    def is_empty(self) -> bool:
        """True when nothing about the item is known."""
        return (
            self.calories is None
            and (self.macros is None or self.macros.is_empty())
            and not self.micros
        )

    def calories_from_macros(self) -> Optional[float]:
        """
        Calculate calories from macronutrients using the 4-4-9 rule.

        Returns:
            Calories from macros, or None if any macro is unknown
        """
        if self.macros is None:
            return None
        protein, carbs, fat = self.macros.protein, self.macros.carbs, self.macros.fat
        if protein is None or carbs is None or fat is None:
            return None
        return protein * 4 + carbs * 4 + fat * 9
