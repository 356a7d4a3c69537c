"""CalorieTargetService - goal-adjusted daily calorie target."""

from typing import Optional

from ..core.ports.calculators import ICalorieTargetCalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE

# Sustainable rate of change (~0.75 lb/week)
WEEKLY_RATE_KG = 0.34
KCAL_PER_KG = 7700
# Gaps below this count as maintenance
MAINTENANCE_TOLERANCE_KG = 0.5
# Deficit never drops the target below BMR × this floor
BMR_FLOOR_FACTOR = 1.1


class CalorieTargetService(ICalorieTargetCalculator):
    """Adjust TDEE towards a body weight goal.

    Strategy:
        - No goal, or goal within 0.5 kg of current weight: TDEE
        - Loss: TDEE - daily delta, never below BMR × 1.1
        - Gain: TDEE + daily delta

    The daily delta is 0.34 kg/week × 7700 kcal/kg ÷ 7 ≈ 374 kcal.
    """

    def daily_delta(self) -> float:
        """Daily calorie surplus/deficit for the weekly rate."""
        return WEEKLY_RATE_KG * KCAL_PER_KG / 7

    def calculate(
        self,
        tdee: TDEE,
        bmr: BMR,
        current_weight_kg: float,
        target_weight_kg: Optional[float] = None,
        is_weight_loss: Optional[bool] = None,
    ) -> float:
        """Calculate daily calorie target.

        Args:
            tdee: Total daily energy expenditure
            bmr: Basal metabolic rate, used for the deficit floor
            current_weight_kg: Current body weight
            target_weight_kg: Goal body weight, None without a weight goal
            is_weight_loss: Direction of the goal; derived from the weights
                when None

        Returns:
            float: Target kcal/day (unrounded)

        Example:
            >>> service = CalorieTargetService()
            >>> round(service.calculate(TDEE(2500.0), BMR(1700.0), 90.0, 80.0))
            2126
        """
        if target_weight_kg is None:
            return tdee.value
        if abs(target_weight_kg - current_weight_kg) < MAINTENANCE_TOLERANCE_KG:
            return tdee.value

        if is_weight_loss is None:
            is_weight_loss = target_weight_kg < current_weight_kg

        delta = self.daily_delta()
        if is_weight_loss:
            return max(tdee.value - delta, bmr.value * BMR_FLOOR_FACTOR)
        return tdee.value + delta
