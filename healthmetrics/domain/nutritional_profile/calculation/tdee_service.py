"""TDEEService - Total Daily Energy Expenditure calculation."""

from typing import Optional, Union

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = BMR × PAL

    PAL Multipliers:
        - Sedentary: 1.2
        - Lightly active: 1.375
        - Moderately active: 1.55
        - Very active: 1.725
        - Extra active: 1.9

    Unknown or missing activity levels count as sedentary.
    """

    def calculate(self, bmr: BMR, activity_level: Optional[Union[ActivityLevel, str]]) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Example:
            >>> TDEEService().calculate(BMR(1780.0), ActivityLevel.MODERATELY_ACTIVE).value
            2759.0
        """
        level = ActivityLevel.parse(activity_level)
        return TDEE(value=bmr.value * level.pal_multiplier())
