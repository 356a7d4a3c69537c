"""BMRService - Basal Metabolic Rate calculation."""

from ...shared.anthropometric_profile import Sex
from ..core.exceptions.domain_errors import InvalidUserDataError
from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.bmr import BMR


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, weight_kg: float, height_cm: float, age_years: int, sex: Sex) -> BMR:
        """Calculate BMR from body stats.

        Raises:
            InvalidUserDataError: If inputs are out of range or the
                formula result is not positive

        Example:
            >>> BMRService().calculate(80.0, 180.0, 30, Sex.MALE).value
            1780.0
        """
        if weight_kg <= 0:
            raise InvalidUserDataError(f"Weight must be positive, got {weight_kg}")
        if height_cm <= 0:
            raise InvalidUserDataError(f"Height must be positive, got {height_cm}")
        if age_years < 0:
            raise InvalidUserDataError(f"Age must be non-negative, got {age_years}")

        base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years

        if Sex.parse(sex) is Sex.MALE:
            bmr_value = base + 5
        else:
            bmr_value = base - 161

        return BMR(value=bmr_value)
