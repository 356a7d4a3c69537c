"""FuelRecommendations and WeightGoal value objects."""

from dataclasses import dataclass
from typing import Any, Optional

from .macro_split import MacroSplit


@dataclass(frozen=True)
class WeightGoal:
    """Body weight target extracted from the user's goals.

    Attributes:
        target_weight_kg: Target body weight in kilograms
        is_weight_loss: True when the target is below current weight
    """

    target_weight_kg: float
    is_weight_loss: bool


@dataclass(frozen=True)
class FuelRecommendations:
    """Daily nutrition recommendations.

    All fields are None when the profile lacks the data required to
    compute them (progressively filled profiles).

    Attributes:
        bmr: Basal Metabolic Rate (kcal/day)
        tdee: Total Daily Energy Expenditure (kcal/day)
        calorie_target: Goal-adjusted target (kcal/day)
        macros: Protein/carbs/fat targets in whole grams
    """

    bmr: Optional[int] = None
    tdee: Optional[int] = None
    calorie_target: Optional[int] = None
    macros: Optional[MacroSplit] = None

    @classmethod
    def empty(cls) -> "FuelRecommendations":
        return cls()

    def is_empty(self) -> bool:
        return self.bmr is None and self.tdee is None and self.calorie_target is None and self.macros is None

    def to_dict(self) -> dict[str, Any]:
        """Plain representation; an empty recommendation is ``{}``."""
        if self.is_empty():
            return {}
        data: dict[str, Any] = {
            "bmr": self.bmr,
            "tdee": self.tdee,
            "calorieTarget": self.calorie_target,
        }
        if self.macros is not None:
            data["macros"] = {
                "protein": self.macros.protein_g,
                "carbs": self.macros.carbs_g,
                "fat": self.macros.fat_g,
            }
        return data
