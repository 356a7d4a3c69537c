"""Calculator ports - interfaces for BMR/TDEE/target/macro calculations."""

from abc import ABC, abstractmethod
from typing import Optional

from ....shared.anthropometric_profile import Sex
from ..value_objects.activity_level import ActivityLevel
from ..value_objects.bmr import BMR
from ..value_objects.macro_split import MacroSplit
from ..value_objects.tdee import TDEE


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate using Mifflin-St Jeor formula.
    """

    @abstractmethod
    def calculate(self, weight_kg: float, height_cm: float, age_years: int, sex: Sex) -> BMR:
        """Calculate BMR from body stats.

        Args:
            weight_kg: Body weight in kilograms
            height_cm: Height in centimeters
            age_years: Age in whole years
            sex: Biological sex

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: Optional[ActivityLevel]) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass


class ICalorieTargetCalculator(ABC):
    """Port for goal-adjusted daily calorie target."""

    @abstractmethod
    def calculate(
        self,
        tdee: TDEE,
        bmr: BMR,
        current_weight_kg: float,
        target_weight_kg: Optional[float] = None,
        is_weight_loss: Optional[bool] = None,
    ) -> float:
        """Calculate daily calorie target in kcal."""
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient distribution calculation.

    Calculates protein/carbs/fat split from body weight and calorie target.
    """

    @abstractmethod
    def calculate(
        self,
        weight_kg: float,
        calorie_target: float,
        has_composition_goal: bool = False,
    ) -> MacroSplit:
        """Calculate macro distribution.

        Args:
            weight_kg: Body weight in kg
            calorie_target: Daily calorie target
            has_composition_goal: User pursues a body composition goal

        Returns:
            MacroSplit: Protein/carbs/fat in grams
        """
        pass
